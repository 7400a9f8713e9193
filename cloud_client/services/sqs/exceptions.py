"""
Typed faults of the SQS API.

SQS answers over the JSON protocol with a namespaced ``__type`` and, for
clients of the older query protocol, an ``x-amzn-query-error`` header holding
the legacy code. Both spellings map to the same exception.
"""

from ...application.exceptions import ClientException


class QueueDoesNotExistException(ClientException):
    """The specified queue doesn't exist."""


class QueueNameExistsException(ClientException):
    """A queue with this name already exists with different attributes."""


class QueueDeletedRecentlyException(ClientException):
    """A queue with this name was deleted less than 60 seconds ago."""


class InvalidAttributeNameException(ClientException):
    """The specified attribute doesn't exist."""


class InvalidAttributeValueException(ClientException):
    """A queue attribute value is invalid."""


class RequestThrottledException(ClientException):
    """The request was denied due to request throttling."""


ERROR_TABLE = {
    "QueueDoesNotExist": QueueDoesNotExistException,
    "AWS.SimpleQueueService.NonExistentQueue": QueueDoesNotExistException,
    "QueueNameExists": QueueNameExistsException,
    "QueueAlreadyExists": QueueNameExistsException,
    "QueueDeletedRecently": QueueDeletedRecentlyException,
    "AWS.SimpleQueueService.QueueDeletedRecently": QueueDeletedRecentlyException,
    "InvalidAttributeName": InvalidAttributeNameException,
    "InvalidAttributeValue": InvalidAttributeValueException,
    "RequestThrottled": RequestThrottledException,
}
