"""Response values of the Athena API."""

from typing import Optional

from pydantic import Field

from ...application.result import Result
from .value_objects import QueryExecution, SessionStatus


class StartQueryExecutionOutput(Result):
    query_execution_id: Optional[str] = Field(
        default=None, alias="QueryExecutionId"
    )


class GetQueryExecutionOutput(Result):
    query_execution: Optional[QueryExecution] = Field(
        default=None, alias="QueryExecution"
    )


class GetSessionStatusResponse(Result):
    session_id: Optional[str] = Field(default=None, alias="SessionId")
    status: Optional[SessionStatus] = Field(default=None, alias="Status")
