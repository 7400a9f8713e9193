"""Response values of the SQS API."""

from typing import Dict, Optional

from pydantic import Field

from ...application.result import Result


class CreateQueueResult(Result):
    queue_url: Optional[str] = Field(default=None, alias="QueueUrl")


class GetQueueUrlResult(Result):
    queue_url: Optional[str] = Field(default=None, alias="QueueUrl")


class GetQueueAttributesResult(Result):
    """Attribute values keyed by ``QueueAttributeName``, all as strings."""

    attributes: Optional[Dict[str, str]] = Field(
        default=None, alias="Attributes"
    )
