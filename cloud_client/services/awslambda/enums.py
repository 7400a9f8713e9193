"""Closed value sets of the Lambda API."""

from ...application.enums import ClosedEnum


class InvocationType(ClosedEnum):
    DRY_RUN = "DryRun"
    EVENT = "Event"
    REQUEST_RESPONSE = "RequestResponse"


class LogType(ClosedEnum):
    NONE = "None"
    TAIL = "Tail"


class FunctionVersion(ClosedEnum):
    ALL = "ALL"


class State(ClosedEnum):
    ACTIVE = "Active"
    FAILED = "Failed"
    INACTIVE = "Inactive"
    PENDING = "Pending"
