"""
Structured values nested in Athena requests and responses.

Request-side shapes validate their own required and enum members when the
enclosing input is serialized. Response-side values are immutable and carry
timestamps as timezone-aware ``datetime`` objects; Athena sends them as epoch
seconds.
"""

from datetime import datetime
from typing import Annotated, Optional

from pydantic import Field

from ...application.input import OneOf, Required, Shape
from ...application.result import ValueObject
from .enums import EncryptionOption


# --- Request shapes ---

class QueryExecutionContext(Shape):
    """The database and data catalog a query runs in."""

    database: Optional[str] = Field(default=None, alias="Database")
    catalog: Optional[str] = Field(default=None, alias="Catalog")


class EncryptionConfiguration(Shape):
    encryption_option: Annotated[
        Optional[str], Required(), OneOf(EncryptionOption)
    ] = Field(default=None, alias="EncryptionOption")
    kms_key: Optional[str] = Field(default=None, alias="KmsKey")


class ResultConfiguration(Shape):
    """Where query results are written and how they are encrypted."""

    output_location: Optional[str] = Field(default=None, alias="OutputLocation")
    encryption_configuration: Optional[EncryptionConfiguration] = Field(
        default=None, alias="EncryptionConfiguration"
    )
    expected_bucket_owner: Optional[str] = Field(
        default=None, alias="ExpectedBucketOwner"
    )


# --- Response values ---

class SessionStatus(ValueObject):
    """
    Contains information about the status of a session.

    ``idle_since_date_time`` is unset when the session is not currently idle.
    ``state`` holds a ``SessionState`` value.
    """

    start_date_time: Optional[datetime] = Field(
        default=None, alias="StartDateTime"
    )
    last_modified_date_time: Optional[datetime] = Field(
        default=None, alias="LastModifiedDateTime"
    )
    end_date_time: Optional[datetime] = Field(default=None, alias="EndDateTime")
    idle_since_date_time: Optional[datetime] = Field(
        default=None, alias="IdleSinceDateTime"
    )
    state: Optional[str] = Field(default=None, alias="State")
    state_change_reason: Optional[str] = Field(
        default=None, alias="StateChangeReason"
    )


class QueryExecutionStatus(ValueObject):
    state: Optional[str] = Field(default=None, alias="State")
    state_change_reason: Optional[str] = Field(
        default=None, alias="StateChangeReason"
    )
    submission_date_time: Optional[datetime] = Field(
        default=None, alias="SubmissionDateTime"
    )
    completion_date_time: Optional[datetime] = Field(
        default=None, alias="CompletionDateTime"
    )


class QueryExecution(ValueObject):
    query_execution_id: Optional[str] = Field(
        default=None, alias="QueryExecutionId"
    )
    query: Optional[str] = Field(default=None, alias="Query")
    statement_type: Optional[str] = Field(default=None, alias="StatementType")
    work_group: Optional[str] = Field(default=None, alias="WorkGroup")
    status: Optional[QueryExecutionStatus] = Field(default=None, alias="Status")
