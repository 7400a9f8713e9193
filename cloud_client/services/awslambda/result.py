"""Response values of the Lambda API."""

from typing import List, Optional

from pydantic import Field

from ...application.domain import Response
from ...application.exceptions import MalformedResponse
from ...application.result import Result, ValueObject


class InvocationResponse(Result):
    """
    The outcome of an invocation.

    Apart from the payload, everything here comes from the status line and
    response headers rather than from a JSON body.
    """

    status_code: Optional[int] = Field(default=None, alias="StatusCode")
    function_error: Optional[str] = Field(default=None, alias="FunctionError")
    log_result: Optional[str] = Field(default=None, alias="LogResult")
    payload: Optional[str] = Field(default=None, alias="Payload")
    executed_version: Optional[str] = Field(
        default=None, alias="ExecutedVersion"
    )

    @classmethod
    def from_response(cls, response: Response):
        try:
            payload = response.body.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedResponse(f"Invocation payload is not UTF-8: {e}") from e

        return cls.hydrate({
            "StatusCode": response.status_code,
            "FunctionError": response.header("x-amz-function-error"),
            "LogResult": response.header("x-amz-log-result"),
            "Payload": payload,
            "ExecutedVersion": response.header("x-amz-executed-version"),
        })


class FunctionConfiguration(ValueObject):
    """Details about a function's configuration."""

    function_name: Optional[str] = Field(default=None, alias="FunctionName")
    function_arn: Optional[str] = Field(default=None, alias="FunctionArn")
    runtime: Optional[str] = Field(default=None, alias="Runtime")
    role: Optional[str] = Field(default=None, alias="Role")
    handler: Optional[str] = Field(default=None, alias="Handler")
    code_size: Optional[int] = Field(default=None, alias="CodeSize")
    description: Optional[str] = Field(default=None, alias="Description")
    timeout: Optional[int] = Field(default=None, alias="Timeout")
    memory_size: Optional[int] = Field(default=None, alias="MemorySize")
    # Lambda reports this as an ISO-8601 string, not an epoch number.
    last_modified: Optional[str] = Field(default=None, alias="LastModified")
    version: Optional[str] = Field(default=None, alias="Version")
    state: Optional[str] = Field(default=None, alias="State")
    state_reason: Optional[str] = Field(default=None, alias="StateReason")
    architectures: Optional[List[str]] = Field(
        default=None, alias="Architectures"
    )


class ListFunctionsResponse(Result):
    functions: Optional[List[FunctionConfiguration]] = Field(
        default=None, alias="Functions"
    )
    next_marker: Optional[str] = Field(default=None, alias="NextMarker")
