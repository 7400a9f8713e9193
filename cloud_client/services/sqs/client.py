"""Client for the SQS API."""

from ...application.dispatch import ErrorDispatcher, Protocol
from ...infrastructure.api_client import ServiceClient
from .exceptions import ERROR_TABLE
from .input import CreateQueueRequest, GetQueueAttributesRequest, GetQueueUrlRequest
from .result import CreateQueueResult, GetQueueAttributesResult, GetQueueUrlResult


class SqsClient(ServiceClient):
    SERVICE = "sqs"
    DISPATCHER = ErrorDispatcher(Protocol.JSON, ERROR_TABLE)
    OPERATIONS = {
        "CreateQueue": ("create_queue", CreateQueueRequest),
        "GetQueueUrl": ("get_queue_url", GetQueueUrlRequest),
        "GetQueueAttributes": ("get_queue_attributes", GetQueueAttributesRequest),
    }

    async def create_queue(self, input) -> CreateQueueResult:
        """
        Creates a new standard or FIFO queue.

        Raises:
            QueueDeletedRecentlyException
            QueueNameExistsException
            InvalidAttributeNameException
            InvalidAttributeValueException
            RequestThrottledException
        """
        return await self._call(CreateQueueRequest.create(input), CreateQueueResult)

    async def get_queue_url(self, input) -> GetQueueUrlResult:
        """
        Returns the URL of an existing queue.

        Raises:
            QueueDoesNotExistException
            RequestThrottledException
        """
        return await self._call(GetQueueUrlRequest.create(input), GetQueueUrlResult)

    async def get_queue_attributes(self, input) -> GetQueueAttributesResult:
        return await self._call(
            GetQueueAttributesRequest.create(input), GetQueueAttributesResult
        )
