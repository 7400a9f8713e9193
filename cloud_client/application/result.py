"""
Base classes for response values.

Results are immutable pydantic models keyed by their wire names. They are
built in one shot from an already decoded response, so reading a field never
depends on which field was read first.
"""

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, ValidationError

from .domain import Response
from .exceptions import MalformedResponse


class ValueObject(BaseModel):
    """A structured value nested inside a response."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    @classmethod
    def hydrate(cls, raw: Mapping[str, Any]):
        """
        Build an instance from a decoded response mapping.

        Unknown keys are ignored and missing keys leave the field unset.

        Raises:
            MalformedResponse: If a value cannot be converted to its field
                type, e.g. an unparseable timestamp.
        """

        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            raise MalformedResponse(
                f'Cannot hydrate "{cls.__name__}": {e}'
            ) from e


class Result(ValueObject):
    """The response value of one API operation."""

    @classmethod
    def from_response(cls, response: Response):
        """Hydrate from the JSON body of a successful response."""
        return cls.hydrate(response.to_array())
