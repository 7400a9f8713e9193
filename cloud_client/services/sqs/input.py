"""Request inputs of the SQS API (awsJson 1.0 protocol)."""

from typing import Annotated, ClassVar, Dict, List, Optional

from pydantic import Field

from ...application.input import Input, KeysOneOf, OneOf, Required
from .enums import QueueAttributeName


def _headers(operation: str) -> Dict[str, str]:
    return {
        "Content-Type": "application/x-amz-json-1.0",
        "X-Amz-Target": f"AmazonSQS.{operation}",
        "Accept": "application/json",
    }


class CreateQueueRequest(Input):
    """
    Creates a new standard or FIFO queue.

    ``QueueName`` may hold up to 80 alphanumeric characters, hyphens and
    underscores; a FIFO queue name must end with ``.fifo``. ``Attributes``
    keys are limited to ``QueueAttributeName`` members.
    """

    HEADERS: ClassVar[Dict[str, str]] = _headers("CreateQueue")

    queue_name: Annotated[Optional[str], Required()] = Field(
        default=None, alias="QueueName"
    )
    attributes: Annotated[
        Optional[Dict[str, str]], KeysOneOf(QueueAttributeName)
    ] = Field(default=None, alias="Attributes")
    tags: Optional[Dict[str, str]] = Field(default=None, alias="tags")


class GetQueueUrlRequest(Input):
    """Returns the URL of an existing queue."""

    HEADERS: ClassVar[Dict[str, str]] = _headers("GetQueueUrl")

    queue_name: Annotated[Optional[str], Required()] = Field(
        default=None, alias="QueueName"
    )
    queue_owner_aws_account_id: Optional[str] = Field(
        default=None, alias="QueueOwnerAWSAccountId"
    )


class GetQueueAttributesRequest(Input):
    HEADERS: ClassVar[Dict[str, str]] = _headers("GetQueueAttributes")

    queue_url: Annotated[Optional[str], Required()] = Field(
        default=None, alias="QueueUrl"
    )
    attribute_names: Annotated[
        Optional[List[str]], OneOf(QueueAttributeName)
    ] = Field(default=None, alias="AttributeNames")
