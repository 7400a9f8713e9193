"""Client for the Athena API."""

from ...application.dispatch import ErrorDispatcher, Protocol
from ...infrastructure.api_client import ServiceClient
from .exceptions import ERROR_TABLE
from .input import GetQueryExecutionInput, GetSessionStatusRequest, StartQueryExecutionInput
from .result import GetQueryExecutionOutput, GetSessionStatusResponse, StartQueryExecutionOutput


class AthenaClient(ServiceClient):
    SERVICE = "athena"
    DISPATCHER = ErrorDispatcher(Protocol.JSON, ERROR_TABLE)
    OPERATIONS = {
        "StartQueryExecution": ("start_query_execution", StartQueryExecutionInput),
        "GetQueryExecution": ("get_query_execution", GetQueryExecutionInput),
        "GetSessionStatus": ("get_session_status", GetSessionStatusRequest),
    }

    async def start_query_execution(self, input) -> StartQueryExecutionOutput:
        """
        Runs the SQL query statement contained in ``QueryString``.

        Raises:
            InternalServerException
            InvalidRequestException
            TooManyRequestsException
        """
        return await self._call(
            StartQueryExecutionInput.create(input), StartQueryExecutionOutput
        )

    async def get_query_execution(self, input) -> GetQueryExecutionOutput:
        return await self._call(
            GetQueryExecutionInput.create(input), GetQueryExecutionOutput
        )

    async def get_session_status(self, input) -> GetSessionStatusResponse:
        """
        Gets the current status of a session.

        Raises:
            InternalServerException
            InvalidRequestException
            ResourceNotFoundException
        """
        return await self._call(
            GetSessionStatusRequest.create(input), GetSessionStatusResponse
        )
