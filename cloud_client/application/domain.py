"""
This module defines the transport-level descriptors the client works with.

A ``Request`` is what an input object produces; a ``Response`` is what the
transport hands back. Both are plain, technology-agnostic value objects. The
``Transport`` port is the only seam to the network.
"""

import dataclasses
import json
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from .exceptions import MalformedResponse, status_exception_class


# --- Descriptors ---

@dataclasses.dataclass(frozen=True)
class Request:
    """A fully serialized HTTP request for one API operation."""

    method: str
    uri: str
    query: Dict[str, str] = dataclasses.field(default_factory=dict)
    headers: Dict[str, str] = dataclasses.field(default_factory=dict)
    body: bytes = b""


@dataclasses.dataclass(frozen=True)
class Response:
    """A raw HTTP response as returned by the transport."""

    status_code: int
    headers: Dict[str, str] = dataclasses.field(default_factory=dict)
    body: bytes = b""

    def __post_init__(self):
        lowered = {name.lower(): value for name, value in self.headers.items()}
        object.__setattr__(self, "headers", lowered)

    def header(self, name: str) -> Optional[str]:
        """Case-insensitive header lookup."""
        return self.headers.get(name.lower())

    def to_array(self, throw_on_error: bool = True) -> Dict[str, Any]:
        """
        Decode the JSON body into a mapping.

        Args:
            throw_on_error: Raise the generic status-class exception when the
                response is not a success.

        Returns:
            The decoded body; an empty body decodes to an empty mapping.

        Raises:
            HttpException: If ``throw_on_error`` is set and status >= 300.
            MalformedResponse: If the body is not a JSON object.
        """

        if throw_on_error and self.status_code >= 300:
            raise status_exception_class(self.status_code)(self)

        if not self.body.strip():
            return {}

        try:
            data = json.loads(self.body)
        except ValueError as e:
            raise MalformedResponse(f"Response body is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise MalformedResponse(
                f"Expected a JSON object, got {type(data).__name__}"
            )

        return data


# --- Ports (Interfaces) ---

class Transport(ABC):
    """A port for anything able to execute a request descriptor."""

    @abstractmethod
    async def execute(self, endpoint: str, request: Request) -> Response:
        """Sends the request to the endpoint and returns the raw response."""
        pass
