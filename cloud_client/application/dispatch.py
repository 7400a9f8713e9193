"""
Selection of the exception raised for a failed response.

Each service owns a static table mapping the error codes it documents to
exception types. The dispatcher reads the discriminator from wherever the
service protocol puts it and falls back to a generic exception classified by
HTTP status family when the code is unknown.
"""

import logging
from enum import Enum
from typing import Mapping, Optional, Type

from .domain import Response
from .exceptions import HttpException, MalformedResponse, status_exception_class

logger = logging.getLogger(__name__)


class Protocol(str, Enum):
    """Wire protocols that carry error codes differently."""

    JSON = "json"
    REST_JSON = "rest-json"


_BODY_KEYS = {
    Protocol.JSON: ("__type", "code"),
    Protocol.REST_JSON: ("code", "Code", "__type", "Type"),
}


def normalize_code(raw: str) -> str:
    """Strip the namespace prefix and the documentation suffix from a code.

    ``com.amazonaws.sqs#QueueDoesNotExist`` and
    ``KMSDisabledException:http://internal.amazon.com/`` both reduce to the
    bare code.
    """

    code = raw.strip().split(":", 1)[0]
    if "#" in code:
        code = code.rsplit("#", 1)[1]
    return code


def extract_code(protocol: Protocol, response: Response) -> Optional[str]:
    """Find the error discriminator in a failed response, if any."""

    if protocol is Protocol.JSON:
        query_error = response.header("x-amzn-query-error")
        if query_error:
            return normalize_code(query_error.split(";", 1)[0])

    if protocol is Protocol.REST_JSON:
        error_type = response.header("x-amzn-errortype")
        if error_type:
            return normalize_code(error_type)

    try:
        data = response.to_array(throw_on_error=False)
    except MalformedResponse:
        data = {}

    for key in _BODY_KEYS[protocol]:
        value = data.get(key)
        if isinstance(value, str) and value:
            return normalize_code(value)

    error_type = response.header("x-amzn-errortype")
    if error_type:
        return normalize_code(error_type)

    return None


class ErrorDispatcher:
    """Maps a failed response onto exactly one exception instance."""

    def __init__(
        self,
        protocol: Protocol,
        exceptions: Mapping[str, Type[HttpException]],
    ):
        self.protocol = protocol
        self.exceptions = dict(exceptions)

    def build(self, response: Response) -> HttpException:
        """
        Construct the exception for a failed response.

        Args:
            response: A response with a status of 300 or above.

        Returns:
            The service-specific exception when the discriminator is known,
            otherwise the generic redirection/client/server exception.
        """

        code = extract_code(self.protocol, response)
        exception_class = self.exceptions.get(code) if code else None

        if exception_class is None:
            logger.debug(
                f"No specific exception for code {code!r}, "
                f"falling back to HTTP {response.status_code} family."
            )
            exception_class = status_exception_class(response.status_code)

        return exception_class(response, code)
