"""
Pytest configuration for the cloud client tests.

The network is replaced by an httpx MockTransport; every request the client
sends is recorded so tests can inspect what went over the wire.
"""
import httpx
import pytest

from cloud_client.infrastructure.transport import HttpTransport


@pytest.fixture
def sent_requests():
    """Requests captured by the mock transport, in order."""
    return []


@pytest.fixture
def make_client(sent_requests):
    """
    Build a service client whose transport answers with ``handler``.

    ``handler`` receives the ``httpx.Request`` and returns an
    ``httpx.Response``.
    """

    def _make(client_class, handler, endpoint, region="us-east-1"):
        def _record(request):
            sent_requests.append(request)
            return handler(request)

        http_client = httpx.AsyncClient(transport=httpx.MockTransport(_record))
        transport = HttpTransport(http_client, timeout=5)
        return client_class(transport, endpoint=endpoint, region=region)

    return _make
