"""
Entry point for the cloud client.
"""

import argparse
import asyncio
import json
import logging
import sys

from .application.domain import Request
from .application.exceptions import CloudClientError
from .infrastructure.containers import Container

logger = logging.getLogger(__name__)

SERVICES = ("sqs", "lambda", "athena")


def setup_logging(level: str):
    """Applies basic logging configuration."""
    logging.basicConfig(level=level)


def _describe(request: Request) -> dict:
    return {
        "method": request.method,
        "uri": request.uri,
        "query": request.query,
        "headers": request.headers,
        "body": request.body.decode("utf-8", errors="replace"),
    }


async def run_application(args: argparse.Namespace) -> int:
    """Wires the client through the DI container and runs one operation."""

    container = Container()
    setup_logging(level=container.config().logging.level)

    try:
        fields = json.loads(args.input)
    except ValueError as e:
        logger.error(f"--input is not valid JSON: {e}")
        return 1

    client = None
    try:
        client = container.clients()[args.service]
        if args.dry_run:
            request = client.build_request(args.operation, fields)
            print(json.dumps(_describe(request), indent=2))
        else:
            result = await client.call(args.operation, fields)
            print(json.dumps(
                result.model_dump(by_alias=True, mode="json", exclude_none=True),
                indent=2,
            ))
    except CloudClientError as e:
        logger.error(f"An application error occurred: {e}")
        return 1
    finally:
        if client is not None:
            await client.transport.client.aclose()

    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Cloud API client")

    parser.add_argument(
        "--service",
        required=True,
        choices=SERVICES,
        help="The service to call.",
    )

    parser.add_argument(
        "--operation",
        required=True,
        help="The operation name, e.g. CreateQueue or Invoke.",
    )

    parser.add_argument(
        "--input",
        default="{}",
        help="Operation fields as a JSON object keyed by wire names.",
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the serialized request instead of sending it.",
    )

    return parser


def main(argv=None) -> int:
    cli_args = build_parser().parse_args(argv)
    return asyncio.run(run_application(cli_args))


if __name__ == "__main__":
    sys.exit(main())
