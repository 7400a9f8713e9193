"""Client for the Lambda API."""

from ...application.dispatch import ErrorDispatcher, Protocol
from ...infrastructure.api_client import ServiceClient
from .exceptions import ERROR_TABLE
from .input import InvocationRequest, ListFunctionsRequest
from .result import InvocationResponse, ListFunctionsResponse


class LambdaClient(ServiceClient):
    SERVICE = "lambda"
    DISPATCHER = ErrorDispatcher(Protocol.REST_JSON, ERROR_TABLE)
    OPERATIONS = {
        "Invoke": ("invoke", InvocationRequest),
        "ListFunctions": ("list_functions", ListFunctionsRequest),
    }

    async def invoke(self, input) -> InvocationResponse:
        """
        Invokes a function.

        A function error is not a fault of the call: it is reported through
        ``InvocationResponse.function_error`` with a 200 status.

        Raises:
            ResourceNotFoundException
            InvalidRequestContentException
            RequestTooLargeException
            TooManyRequestsException
            KMSDisabledException
            KMSAccessDeniedException
            KMSNotFoundException
            ServiceException
        """
        return await self._call(InvocationRequest.create(input), InvocationResponse)

    async def list_functions(self, input=None) -> ListFunctionsResponse:
        """Returns one page of functions."""
        return await self._call(
            ListFunctionsRequest.create(input), ListFunctionsResponse
        )
