"""Tests for the command line entry point."""

import json

import pytest

from cloud_client.__main__ import main
from cloud_client.settings import settings


def test_dry_run_prints_the_request(capsys):
    exit_code = main([
        "--service", "sqs",
        "--operation", "CreateQueue",
        "--input", '{"QueueName": "orders.fifo", "Attributes": {}}',
        "--dry-run",
    ])

    assert exit_code == 0
    printed = json.loads(capsys.readouterr().out)
    assert printed["method"] == "POST"
    assert printed["headers"]["X-Amz-Target"] == "AmazonSQS.CreateQueue"
    assert printed["body"] == '{"QueueName":"orders.fifo","Attributes":{}}'


def test_dry_run_reports_validation_errors():
    exit_code = main([
        "--service", "lambda",
        "--operation", "Invoke",
        "--input", '{"InvocationType": "Event"}',
        "--dry-run",
    ])

    assert exit_code == 1


def test_invalid_input_json():
    exit_code = main([
        "--service", "athena",
        "--operation", "GetSessionStatus",
        "--input", "{not json",
        "--dry-run",
    ])

    assert exit_code == 1


@pytest.fixture
def empty_region(monkeypatch):
    """Blank out the configured region through the environment."""
    monkeypatch.setenv("CLOUD_CLIENT_CLIENT__REGION", "")
    settings.reload()
    yield
    monkeypatch.undo()
    settings.reload()


def test_configuration_error_exits_with_failure(empty_region):
    exit_code = main([
        "--service", "sqs",
        "--operation", "CreateQueue",
        "--input", '{"QueueName": "q"}',
        "--dry-run",
    ])

    assert exit_code == 1
