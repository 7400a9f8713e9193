"""Tests for the Athena inputs, nested shapes and timestamp hydration."""

import json
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from cloud_client.application.exceptions import (
    InvalidEnumValue,
    MalformedResponse,
    MissingRequiredField,
)
from cloud_client.services.athena.enums import (
    QueryExecutionState,
    SessionState,
    StatementType,
)
from cloud_client.services.athena.input import (
    GetQueryExecutionInput,
    GetSessionStatusRequest,
    StartQueryExecutionInput,
)
from cloud_client.services.athena.result import (
    GetQueryExecutionOutput,
    GetSessionStatusResponse,
)
from cloud_client.services.athena.value_objects import QueryExecutionContext


class TestStartQueryExecutionInput:

    def test_nested_shapes_serialize_recursively(self):
        request = StartQueryExecutionInput.create({
            "QueryString": "SELECT 1",
            "QueryExecutionContext": {"Database": "sales"},
            "ResultConfiguration": {
                "OutputLocation": "s3://results/",
                "EncryptionConfiguration": {
                    "EncryptionOption": "SSE_KMS",
                    "KmsKey": "alias/athena",
                },
            },
            "WorkGroup": "primary",
            "ExecutionParameters": ["'2024-01-01'"],
        }).request()

        assert request.headers["X-Amz-Target"] == "AmazonAthena.StartQueryExecution"
        assert request.headers["Content-Type"] == "application/x-amz-json-1.1"
        assert json.loads(request.body) == {
            "QueryString": "SELECT 1",
            "QueryExecutionContext": {"Database": "sales"},
            "ResultConfiguration": {
                "OutputLocation": "s3://results/",
                "EncryptionConfiguration": {
                    "EncryptionOption": "SSE_KMS",
                    "KmsKey": "alias/athena",
                },
            },
            "WorkGroup": "primary",
            "ExecutionParameters": ["'2024-01-01'"],
        }

    def test_client_request_token_is_only_sent_when_set(self):
        request = StartQueryExecutionInput.create(
            {"QueryString": "SELECT 1"}
        ).request()

        assert request.body == b'{"QueryString":"SELECT 1"}'

    def test_nested_required_field(self):
        input = StartQueryExecutionInput.create({
            "QueryString": "SELECT 1",
            "ResultConfiguration": {"EncryptionConfiguration": {"KmsKey": "k"}},
        })

        with pytest.raises(MissingRequiredField) as exc_info:
            input.request()

        assert exc_info.value.field == "EncryptionOption"
        assert exc_info.value.owner == "EncryptionConfiguration"

    def test_nested_enum_field(self):
        input = StartQueryExecutionInput.create({
            "QueryString": "SELECT 1",
            "ResultConfiguration": {
                "EncryptionConfiguration": {"EncryptionOption": "AES"},
            },
        })

        with pytest.raises(InvalidEnumValue) as exc_info:
            input.request()

        assert exc_info.value.enum_type == "EncryptionOption"

    def test_nested_shape_instance_is_accepted(self):
        input = StartQueryExecutionInput(
            query_string="SELECT 1",
            query_execution_context=QueryExecutionContext(catalog="AwsDataCatalog"),
        )

        assert json.loads(input.request().body)["QueryExecutionContext"] == {
            "Catalog": "AwsDataCatalog"
        }

    def test_empty_nested_shape_is_an_empty_object(self):
        request = StartQueryExecutionInput.create(
            {"QueryString": "SELECT 1", "QueryExecutionContext": {}}
        ).request()

        assert request.body == b'{"QueryString":"SELECT 1","QueryExecutionContext":{}}'


def test_get_query_execution_requires_id():
    with pytest.raises(MissingRequiredField):
        GetQueryExecutionInput().request()


def test_get_session_status_request():
    request = GetSessionStatusRequest.create({"SessionId": "s-1"}).request()

    assert request.headers["X-Amz-Target"] == "AmazonAthena.GetSessionStatus"
    assert request.body == b'{"SessionId":"s-1"}'


class TestGetSessionStatusResponse:

    def test_hydrates_timestamps(self):
        result = GetSessionStatusResponse.hydrate({
            "SessionId": "s-1",
            "Status": {
                "StartDateTime": 1700000000,
                "LastModifiedDateTime": 1700000060.5,
                "State": "IDLE",
                "StateChangeReason": "waiting",
                "Unexpected": "ignored",
            },
            "AlsoUnexpected": 1,
        })

        assert result.session_id == "s-1"
        assert result.status.start_date_time == datetime(
            2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc
        )
        assert result.status.last_modified_date_time == datetime(
            2023, 11, 14, 22, 14, 20, 500000, tzinfo=timezone.utc
        )
        assert result.status.end_date_time is None
        assert result.status.idle_since_date_time is None
        assert result.status.state == "IDLE"
        assert SessionState.exists(result.status.state)

    def test_missing_status_is_unset(self):
        result = GetSessionStatusResponse.hydrate({"SessionId": "s-1"})

        assert result.status is None

    def test_malformed_timestamp(self):
        with pytest.raises(MalformedResponse):
            GetSessionStatusResponse.hydrate(
                {"Status": {"StartDateTime": "not-a-date"}}
            )

    def test_results_are_immutable(self):
        result = GetSessionStatusResponse.hydrate({"SessionId": "s-1"})

        with pytest.raises(ValidationError):
            result.session_id = "other"

    def test_accessors_do_not_depend_on_read_order(self):
        raw = {"SessionId": "s-1", "Status": {"State": "BUSY"}}
        first = GetSessionStatusResponse.hydrate(raw)
        second = GetSessionStatusResponse.hydrate(raw)

        forward = (first.session_id, first.status.state)
        backward = (second.status.state, second.session_id)[::-1]

        assert forward == backward == ("s-1", "BUSY")
        assert first == second


def test_query_execution_hydration():
    result = GetQueryExecutionOutput.hydrate({
        "QueryExecution": {
            "QueryExecutionId": "q-1",
            "StatementType": "DML",
            "Status": {
                "State": "SUCCEEDED",
                "SubmissionDateTime": 1700000000,
                "CompletionDateTime": 1700000002,
            },
        }
    })

    status = result.query_execution.status
    assert status.state == "SUCCEEDED"
    assert QueryExecutionState.exists(status.state)
    assert StatementType.exists(result.query_execution.statement_type)
    assert not StatementType.exists("SELECT")
    assert (status.completion_date_time - status.submission_date_time).seconds == 2
