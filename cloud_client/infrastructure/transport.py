"""HTTP implementation of the Transport port."""

import httpx

from ..application.domain import Request, Response, Transport
from ..application.exceptions import TransportError

from .base_client import BaseClient


class HttpTransport(BaseClient, Transport):
    """A transport that executes request descriptors with httpx."""

    async def execute(self, endpoint: str, request: Request) -> Response:
        """
        Sends one request and hands back the raw response.

        The status code is not interpreted here; turning a failure into a
        typed exception is the caller's job.

        Raises:
            TransportError: If the exchange fails before a response arrives.
        """

        url = endpoint.rstrip("/") + request.uri
        self.logger.debug(f"{request.method} {url}")

        try:
            response = await self.client.request(
                request.method,
                url,
                params=request.query,
                headers=request.headers,
                content=request.body,
                timeout=self.timeout,
            )
        except httpx.TransportError as e:
            raise TransportError(
                f"{request.method} {url} failed: {type(e).__name__}: {e}"
            ) from e

        return Response(
            status_code=response.status_code,
            headers=dict(response.headers.items()),
            body=response.content,
        )
