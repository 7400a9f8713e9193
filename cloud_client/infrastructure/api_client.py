"""Shared plumbing of the per-service API clients."""

import logging
from typing import Any, ClassVar, Dict, Optional, Tuple, Type

from ..application.dispatch import ErrorDispatcher
from ..application.domain import Request, Transport
from ..application.exceptions import ConfigurationError, InvalidArgument
from ..application.input import Input
from ..application.result import Result


class ServiceClient:
    """
    A client for one service.

    Subclasses set ``SERVICE``, the error ``DISPATCHER`` and the
    ``OPERATIONS`` table mapping an operation name to the client method that
    runs it and the input type it accepts.
    """

    SERVICE: ClassVar[str]
    DISPATCHER: ClassVar[ErrorDispatcher]
    OPERATIONS: ClassVar[Dict[str, Tuple[str, Type[Input]]]] = {}

    def __init__(self, transport: Transport, endpoint: str, region: str):
        """
        Initializes the service client.

        Args:
            transport: The port used to execute requests.
            endpoint: Endpoint URL, optionally containing a ``{region}``
                placeholder.
            region: Region used when an input carries no ``@region``.

        Raises:
            ConfigurationError: If the endpoint or region is missing or
                appears to be a placeholder.
        """

        if not endpoint or "YOUR_" in endpoint.upper():
            raise ConfigurationError(
                f"Endpoint for {self.__class__.__name__} is missing or is a "
                f"placeholder. Please check your config files."
            )
        if not region:
            raise ConfigurationError(
                f"Region for {self.__class__.__name__} is missing. "
                f"Please check your config files."
            )

        self.transport = transport
        self.endpoint = endpoint
        self.region = region
        self.logger = logging.getLogger(self.__class__.__name__)

    def endpoint_for(self, region: Optional[str] = None) -> str:
        """Resolve the endpoint for an explicit region or the default one."""
        return self.endpoint.format(region=region or self.region)

    @classmethod
    def build_request(cls, operation: str, fields: Any) -> Request:
        """Serialize the input of an operation without sending it."""
        _, input_class = cls._lookup(operation)
        return input_class.create(fields).request()

    @classmethod
    def _lookup(cls, operation: str) -> Tuple[str, Type[Input]]:
        try:
            return cls.OPERATIONS[operation]
        except KeyError:
            raise InvalidArgument(
                f'Unknown operation "{operation}" for {cls.SERVICE}. '
                f"Known operations: {', '.join(sorted(cls.OPERATIONS))}"
            ) from None

    async def call(self, operation: str, fields: Any) -> Result:
        """Run an operation by name, e.g. ``CreateQueue``."""
        method_name, _ = self._lookup(operation)
        return await getattr(self, method_name)(fields)

    async def _call(self, input: Input, result_class: Type[Result]) -> Result:
        """
        Orchestrates serializing, sending and decoding one operation.

        Args:
            input: The operation input; serialized before anything is sent.
            result_class: The result type hydrated from a success.

        Returns:
            The hydrated result.

        Raises:
            InvalidArgument: If the input cannot be serialized.
            HttpException: The typed fault for a failed response.
            MalformedResponse: If a success cannot be hydrated.
        """

        request = input.request()
        endpoint = self.endpoint_for(input.region)
        self.logger.info(
            f"Calling {input.__class__.__name__} on {endpoint}..."
        )

        response = await self.transport.execute(endpoint, request)

        if response.status_code >= 300:
            exception = self.DISPATCHER.build(response)
            self.logger.warning(
                f"{input.__class__.__name__} failed with "
                f"{type(exception).__name__} (HTTP {response.status_code})."
            )
            raise exception

        return result_class.from_response(response)
