"""Base class for async HTTP clients."""

import logging
import httpx

from ..application.exceptions import ConfigurationError


class BaseClient:
    """A base client that handles an async client and timeout configuration."""

    def __init__(self, client: httpx.AsyncClient, timeout: float):
        """
        Initializes the base client.

        Args:
            client: An instance of httpx.AsyncClient.
            timeout: Seconds allowed for a single exchange.

        Raises:
            ConfigurationError: If the timeout is missing or not positive.
        """

        if timeout is None or timeout <= 0:
            raise ConfigurationError(
                f"Timeout for {self.__class__.__name__} must be a positive "
                f"number of seconds, got {timeout!r}. Please check your "
                f"config files."
            )

        self.client = client
        self.timeout = timeout
        self.logger = logging.getLogger(self.__class__.__name__)
