"""Typed faults of the Athena API."""

from typing import Any, Dict, Optional

from ...application.domain import Response
from ...application.exceptions import ClientException, ServerException


class InternalServerException(ServerException):
    """Indicates a platform issue, which may be due to a transient condition or outage."""


class InvalidRequestException(ClientException):
    """
    Indicates that something is wrong with the input to the request, for
    example a required parameter is missing or out of range.
    """

    athena_error_code: Optional[str] = None

    def _populate_result(self, data: Dict[str, Any], response: Response):
        code = data.get("AthenaErrorCode")
        self.athena_error_code = None if code is None else str(code)


class TooManyRequestsException(ClientException):
    """Indicates that the request was throttled."""

    reason: Optional[str] = None

    def _populate_result(self, data: Dict[str, Any], response: Response):
        self.reason = None if data.get("Reason") is None else str(data["Reason"])


class ResourceNotFoundException(ClientException):
    """A resource, such as a workgroup, was not found."""

    resource_name: Optional[str] = None

    def _populate_result(self, data: Dict[str, Any], response: Response):
        name = data.get("ResourceName")
        self.resource_name = None if name is None else str(name)


ERROR_TABLE = {
    "InternalServerException": InternalServerException,
    "InvalidRequestException": InvalidRequestException,
    "TooManyRequestsException": TooManyRequestsException,
    "ResourceNotFoundException": ResourceNotFoundException,
}
