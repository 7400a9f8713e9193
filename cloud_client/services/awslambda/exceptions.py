"""
Typed faults of the Lambda API.

Lambda reports the error code in the ``x-amzn-ErrorType`` header and echoes
a ``Type`` field in the JSON body, which every fault below exposes as
``type``.
"""

from typing import Any, Dict, Optional

from ...application.domain import Response
from ...application.exceptions import ClientException, ServerException


class _LambdaFault:
    """Populates the ``Type`` diagnostic shared by all Lambda faults."""

    type: Optional[str] = None

    def _populate_result(self, data: Dict[str, Any], response: Response):
        self.type = None if data.get("Type") is None else str(data["Type"])


# --- Server faults ---

class KMSDisabledException(_LambdaFault, ServerException):
    """
    Lambda couldn't decrypt the environment variables because the KMS key
    used is disabled. Check the function's KMS key settings.
    """


class KMSAccessDeniedException(_LambdaFault, ServerException):
    """Lambda couldn't decrypt the environment variables because KMS access was denied."""


class KMSNotFoundException(_LambdaFault, ServerException):
    """Lambda couldn't decrypt the environment variables because the KMS key wasn't found."""


class ServiceException(_LambdaFault, ServerException):
    """The Lambda service encountered an internal error."""


# --- Client faults ---

class ResourceNotFoundException(_LambdaFault, ClientException):
    """The resource specified in the request doesn't exist."""


class InvalidParameterValueException(_LambdaFault, ClientException):
    """One of the parameters in the request is not valid."""


class InvalidRequestContentException(_LambdaFault, ClientException):
    """The request body could not be parsed as JSON."""


class RequestTooLargeException(_LambdaFault, ClientException):
    """The request payload exceeded the invocation payload limit."""


class TooManyRequestsException(_LambdaFault, ClientException):
    """The request throughput limit was exceeded."""

    retry_after_seconds: Optional[str] = None
    reason: Optional[str] = None

    def _populate_result(self, data: Dict[str, Any], response: Response):
        super()._populate_result(data, response)
        self.retry_after_seconds = response.header("retry-after")
        self.reason = None if data.get("Reason") is None else str(data["Reason"])


ERROR_TABLE = {
    "KMSDisabledException": KMSDisabledException,
    "KMSAccessDeniedException": KMSAccessDeniedException,
    "KMSNotFoundException": KMSNotFoundException,
    "ServiceException": ServiceException,
    "ResourceNotFoundException": ResourceNotFoundException,
    "InvalidParameterValueException": InvalidParameterValueException,
    "InvalidRequestContentException": InvalidRequestContentException,
    "RequestTooLargeException": RequestTooLargeException,
    "TooManyRequestsException": TooManyRequestsException,
}
