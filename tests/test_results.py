"""
Tests for result hydration as a whole.

A result dumped under its wire names and hydrated again must come back
field-for-field equal, including timestamps, nested values and lists of
nested values.
"""

import pytest

from cloud_client.services.athena.result import (
    GetQueryExecutionOutput,
    GetSessionStatusResponse,
    StartQueryExecutionOutput,
)
from cloud_client.services.awslambda.result import ListFunctionsResponse
from cloud_client.services.sqs.result import (
    CreateQueueResult,
    GetQueueAttributesResult,
)


@pytest.mark.parametrize(
    "result_class, raw",
    [
        (
            GetSessionStatusResponse,
            {
                "SessionId": "s-1",
                "Status": {
                    "StartDateTime": 1700000000,
                    "LastModifiedDateTime": 1700000060.25,
                    "IdleSinceDateTime": 1700000100,
                    "State": "IDLE",
                    "StateChangeReason": "waiting for calculations",
                },
            },
        ),
        (
            GetQueryExecutionOutput,
            {
                "QueryExecution": {
                    "QueryExecutionId": "q-1",
                    "Query": "SELECT 1",
                    "StatementType": "DML",
                    "WorkGroup": "primary",
                    "Status": {
                        "State": "SUCCEEDED",
                        "SubmissionDateTime": 1700000000,
                        "CompletionDateTime": 1700000002,
                    },
                },
            },
        ),
        (
            ListFunctionsResponse,
            {
                "Functions": [
                    {
                        "FunctionName": "f",
                        "Runtime": "python3.12",
                        "MemorySize": 128,
                        "Timeout": 3,
                        "State": "Active",
                        "Architectures": ["arm64"],
                    },
                    {"FunctionName": "g"},
                ],
                "NextMarker": "m",
            },
        ),
        (
            GetQueueAttributesResult,
            {"Attributes": {"QueueArn": "arn:aws:sqs:us-east-1:1:q", "DelaySeconds": "0"}},
        ),
        (CreateQueueResult, {"QueueUrl": "https://sqs.us-east-1.amazonaws.com/1/q"}),
        (StartQueryExecutionOutput, {"QueryExecutionId": "q-1"}),
    ],
)
def test_dumped_result_hydrates_back_to_an_equal_result(result_class, raw):
    result = result_class.hydrate(raw)

    dumped = result.model_dump(by_alias=True, mode="json", exclude_none=True)

    assert result_class.hydrate(dumped) == result


def test_empty_result_hydrates_back_to_an_equal_result():
    result = GetSessionStatusResponse.hydrate({})

    dumped = result.model_dump(by_alias=True, mode="json", exclude_none=True)

    assert dumped == {}
    assert GetSessionStatusResponse.hydrate(dumped) == result
