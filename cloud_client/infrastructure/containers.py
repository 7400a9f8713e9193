"""
Dependency Injection container for the cloud client.

This container uses the `dependency-injector` library to wire together the
shared HTTP transport and the per-service clients, based on the Dynaconf
settings.
"""

from dependency_injector import containers, providers
import httpx

from ..services.athena.client import AthenaClient
from ..services.awslambda.client import LambdaClient
from ..services.sqs.client import SqsClient
from ..settings import settings

from .transport import HttpTransport


class Container(containers.DeclarativeContainer):
    """DI container for wiring the client components."""

    config = providers.Object(settings)

    http_client = providers.Singleton(httpx.AsyncClient)

    transport = providers.Singleton(
        HttpTransport,
        client=http_client,
        timeout=config.provided.client.timeout,
    )

    sqs = providers.Factory(
        SqsClient,
        transport=transport,
        endpoint=config.provided.client.endpoints.sqs,
        region=config.provided.client.region,
    )

    awslambda = providers.Factory(
        LambdaClient,
        transport=transport,
        endpoint=config.provided.client.endpoints["lambda"],
        region=config.provided.client.region,
    )

    athena = providers.Factory(
        AthenaClient,
        transport=transport,
        endpoint=config.provided.client.endpoints.athena,
        region=config.provided.client.region,
    )

    clients = providers.Dict({
        "sqs": sqs,
        "lambda": awslambda,
        "athena": athena,
    })
