"""Request inputs of the Lambda API (REST-JSON protocol)."""

from typing import Annotated, ClassVar, Dict, Optional, Union

from pydantic import Field

from ...application.input import (
    Header,
    Input,
    OneOf,
    Payload,
    Query,
    Required,
    Uri,
)
from .enums import FunctionVersion, InvocationType, LogType

_HEADERS = {"Content-Type": "application/json"}


class InvocationRequest(Input):
    """
    Invokes a function, synchronously or asynchronously.

    The invocation type and log type travel as headers, the qualifier as a
    query parameter and the payload as the raw request body. ``ClientContext``
    must already be base64-encoded.
    """

    URI: ClassVar[str] = "/2015-03-31/functions/{FunctionName}/invocations"
    HEADERS: ClassVar[Dict[str, str]] = _HEADERS
    BODY: ClassVar[Optional[str]] = "raw"

    function_name: Annotated[
        Optional[str], Required(), Uri("FunctionName")
    ] = Field(default=None, alias="FunctionName")
    invocation_type: Annotated[
        Optional[str], OneOf(InvocationType), Header("X-Amz-Invocation-Type")
    ] = Field(default=None, alias="InvocationType")
    log_type: Annotated[
        Optional[str], OneOf(LogType), Header("X-Amz-Log-Type")
    ] = Field(default=None, alias="LogType")
    client_context: Annotated[
        Optional[str], Header("X-Amz-Client-Context")
    ] = Field(default=None, alias="ClientContext")
    payload: Annotated[Optional[Union[str, bytes]], Payload()] = Field(
        default=None, alias="Payload"
    )
    qualifier: Annotated[Optional[str], Query("Qualifier")] = Field(
        default=None, alias="Qualifier"
    )


class ListFunctionsRequest(Input):
    """Lists one page of functions; follow ``NextMarker`` for the next."""

    METHOD: ClassVar[str] = "GET"
    URI: ClassVar[str] = "/2015-03-31/functions/"
    HEADERS: ClassVar[Dict[str, str]] = _HEADERS
    BODY: ClassVar[Optional[str]] = None

    master_region: Annotated[Optional[str], Query("MasterRegion")] = Field(
        default=None, alias="MasterRegion"
    )
    function_version: Annotated[
        Optional[str], OneOf(FunctionVersion), Query("FunctionVersion")
    ] = Field(default=None, alias="FunctionVersion")
    marker: Annotated[Optional[str], Query("Marker")] = Field(
        default=None, alias="Marker"
    )
    max_items: Annotated[Optional[int], Query("MaxItems")] = Field(
        default=None, alias="MaxItems"
    )
