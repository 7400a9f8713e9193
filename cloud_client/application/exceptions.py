"""
Core exceptions for the cloud client.

This module defines a hierarchy of custom exceptions that separates local
validation faults (raised while building a request, before anything reaches
the network) from faults reported by a remote service.
"""

from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from .domain import Response


class CloudClientError(Exception):
    """Base exception for all client-specific errors."""
    pass


# --- Configuration Errors ---

class ConfigurationError(CloudClientError):
    """Raised for errors related to client configuration."""
    pass


# --- Validation Errors ---

class InvalidArgument(CloudClientError, ValueError):
    """Raised when an input object cannot be turned into a request."""
    pass


class MissingRequiredField(InvalidArgument):
    """Raised when a required field is unset at serialization time."""

    def __init__(self, field: str, owner: str):
        self.field = field
        self.owner = owner
        super().__init__(
            f'Missing parameter "{field}" for "{owner}". '
            f"The value cannot be null."
        )

    def __reduce__(self):
        return self.__class__, (self.field, self.owner)


class InvalidEnumValue(InvalidArgument):
    """Raised when a field holds a value outside its closed value set."""

    def __init__(self, field: str, value: Any, enum_type: str, owner: str):
        self.field = field
        self.value = value
        self.enum_type = enum_type
        self.owner = owner
        super().__init__(
            f'Invalid parameter "{field}" for "{owner}". '
            f'The value "{value}" is not a valid "{enum_type}".'
        )

    def __reduce__(self):
        return self.__class__, (self.field, self.value, self.enum_type, self.owner)


# --- Infrastructure Errors ---

class InfrastructureError(CloudClientError):
    """Base class for errors related to the network or the remote service."""
    pass


class TransportError(InfrastructureError):
    """Raised when the HTTP exchange itself fails."""
    pass


class MalformedResponse(InfrastructureError):
    """Raised when a response cannot be hydrated into its result type."""
    pass


class HttpException(InfrastructureError):
    """
    A fault reported by the remote service.

    Instances are built once from the failed response and never mutated
    afterwards. Subclasses pull their extra diagnostic fields out of the
    decoded error body by overriding ``_populate_result``.
    """

    def __init__(self, response: "Response", code: Optional[str] = None):
        self.response = response
        self.status_code = response.status_code
        self.code = code
        self.request_id = response.header("x-amzn-requestid")

        data = _error_body(response)
        message = data.get("message", data.get("Message"))
        self.message = None if message is None else str(message)

        self._populate_result(data, response)

        super().__init__(
            f"HTTP {self.status_code} returned.\n\n"
            f"Code:    {self.code}\n"
            f"Message: {self.message}"
        )

    def _populate_result(self, data: Dict[str, Any], response: "Response"):
        """Hook for service-specific diagnostic fields."""
        pass

    def __reduce__(self):
        return self.__class__, (self.response, self.code)


class RedirectionException(HttpException):
    """Raised for 3xx responses."""
    pass


class ClientException(HttpException):
    """Raised for 4xx responses."""
    pass


class ServerException(HttpException):
    """Raised for 5xx responses."""
    pass


def _error_body(response: "Response") -> Dict[str, Any]:
    """Decode an error body, tolerating empty or non-JSON payloads."""
    try:
        return response.to_array(throw_on_error=False)
    except MalformedResponse:
        return {}


def status_exception_class(status_code: int) -> type:
    """Pick the generic exception type for an HTTP status family."""
    if status_code < 400:
        return RedirectionException
    if status_code < 500:
        return ClientException
    return ServerException
