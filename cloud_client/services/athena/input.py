"""Request inputs of the Athena API (awsJson 1.1 protocol)."""

from typing import Annotated, ClassVar, Dict, List, Optional

from pydantic import Field

from ...application.input import Input, Required
from .value_objects import QueryExecutionContext, ResultConfiguration


def _headers(operation: str) -> Dict[str, str]:
    return {
        "Content-Type": "application/x-amz-json-1.1",
        "X-Amz-Target": f"AmazonAthena.{operation}",
        "Accept": "application/json",
    }


class StartQueryExecutionInput(Input):
    """
    Runs the SQL query statement in ``QueryString``.

    ``ClientRequestToken`` makes the call idempotent; it is sent only when the
    caller sets it, so serializing the same input twice yields the same
    request.
    """

    HEADERS: ClassVar[Dict[str, str]] = _headers("StartQueryExecution")

    query_string: Annotated[Optional[str], Required()] = Field(
        default=None, alias="QueryString"
    )
    client_request_token: Optional[str] = Field(
        default=None, alias="ClientRequestToken"
    )
    query_execution_context: Optional[QueryExecutionContext] = Field(
        default=None, alias="QueryExecutionContext"
    )
    result_configuration: Optional[ResultConfiguration] = Field(
        default=None, alias="ResultConfiguration"
    )
    work_group: Optional[str] = Field(default=None, alias="WorkGroup")
    execution_parameters: Optional[List[str]] = Field(
        default=None, alias="ExecutionParameters"
    )


class GetQueryExecutionInput(Input):
    HEADERS: ClassVar[Dict[str, str]] = _headers("GetQueryExecution")

    query_execution_id: Annotated[Optional[str], Required()] = Field(
        default=None, alias="QueryExecutionId"
    )


class GetSessionStatusRequest(Input):
    HEADERS: ClassVar[Dict[str, str]] = _headers("GetSessionStatus")

    session_id: Annotated[Optional[str], Required()] = Field(
        default=None, alias="SessionId"
    )
