"""Closed value sets of the Athena API."""

from ...application.enums import ClosedEnum


class SessionState(ClosedEnum):
    BUSY = "BUSY"
    CREATED = "CREATED"
    CREATING = "CREATING"
    DEGRADED = "DEGRADED"
    FAILED = "FAILED"
    IDLE = "IDLE"
    TERMINATED = "TERMINATED"
    TERMINATING = "TERMINATING"


class QueryExecutionState(ClosedEnum):
    CANCELLED = "CANCELLED"
    FAILED = "FAILED"
    QUEUED = "QUEUED"
    RUNNING = "RUNNING"
    SUCCEEDED = "SUCCEEDED"


class EncryptionOption(ClosedEnum):
    CSE_KMS = "CSE_KMS"
    SSE_KMS = "SSE_KMS"
    SSE_S3 = "SSE_S3"


class StatementType(ClosedEnum):
    DDL = "DDL"
    DML = "DML"
    UTILITY = "UTILITY"
