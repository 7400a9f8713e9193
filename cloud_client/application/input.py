"""
Base classes for request inputs.

Input fields are declared as pydantic fields carrying their wire name as an
alias. Extra ``Annotated`` markers tell the serializer whether a field is
required, which closed value set it belongs to, and where it lives on the
wire (header, query string, URI path, raw payload or JSON body).

Required fields and enum membership are checked when ``request()`` runs, not
when the object is built, so a partially filled input is a valid
intermediate state.
"""

import dataclasses
import json
from typing import Any, ClassVar, Dict, Iterator, List, Optional, Set, Tuple, Type
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.fields import FieldInfo

from .domain import Request
from .enums import ClosedEnum
from .exceptions import InvalidArgument, InvalidEnumValue, MissingRequiredField


# --- Field markers ---

@dataclasses.dataclass(frozen=True)
class Required:
    """The field must be set before the request can be serialized."""


@dataclasses.dataclass(frozen=True)
class OneOf:
    """The value, or each item of a list value, must belong to ``enum``."""

    enum: Type[ClosedEnum]


@dataclasses.dataclass(frozen=True)
class KeysOneOf:
    """Each key of a mapping value must belong to ``enum``."""

    enum: Type[ClosedEnum]


@dataclasses.dataclass(frozen=True)
class Header:
    name: str


@dataclasses.dataclass(frozen=True)
class Query:
    name: str


@dataclasses.dataclass(frozen=True)
class Uri:
    name: str


@dataclasses.dataclass(frozen=True)
class Payload:
    """The field is sent as the raw request body."""


_LOCATIONS = (Header, Query, Uri, Payload)


def _marker(field: FieldInfo, kind):
    for item in field.metadata:
        if isinstance(item, kind):
            return item
    return None


def _to_string(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, ClosedEnum):
        return value.value
    return str(value)


def _nested_shapes(value: Any) -> Iterator["Shape"]:
    if isinstance(value, Shape):
        yield value
    elif isinstance(value, (list, tuple)):
        for item in value:
            yield from _nested_shapes(item)
    elif isinstance(value, dict):
        for item in value.values():
            yield from _nested_shapes(item)


def json_body(payload: Dict[str, Any]) -> bytes:
    """Encode a payload compactly; an empty payload is still a JSON object."""
    if not payload:
        return b"{}"
    return json.dumps(payload, separators=(",", ":")).encode("utf-8")


class Shape(BaseModel):
    """A structured value that serializes into a JSON document."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="forbid",
        validate_assignment=True,
    )

    @classmethod
    def create(cls, input=None):
        """Build an instance from wire-keyed fields; instances pass through."""
        if isinstance(input, cls):
            return input
        try:
            return cls.model_validate(input or {})
        except ValidationError as e:
            raise InvalidArgument(
                f'Invalid input for "{cls.__name__}": {e}'
            ) from e

    def _members(self) -> List[Tuple[str, FieldInfo, Any]]:
        """
        Return (field name, field, value) for every set member.

        Required and enum checks run here, for this shape and every shape
        nested inside it.
        """

        owner = self.__class__.__name__
        members = []
        for name, field in self.__class__.model_fields.items():
            if name == "region":
                continue
            wire_name = field.alias or name
            value = getattr(self, name)

            if value is None:
                if _marker(field, Required) is not None:
                    raise MissingRequiredField(wire_name, owner)
                continue

            one_of = _marker(field, OneOf)
            if one_of is not None:
                items = value if isinstance(value, (list, tuple)) else [value]
                for item in items:
                    if not one_of.enum.exists(item):
                        raise InvalidEnumValue(
                            wire_name, item, one_of.enum.__name__, owner
                        )

            keys_one_of = _marker(field, KeysOneOf)
            if keys_one_of is not None:
                for key in value:
                    if not keys_one_of.enum.exists(key):
                        raise InvalidEnumValue(
                            wire_name, key, keys_one_of.enum.__name__, owner
                        )

            for nested in _nested_shapes(value):
                nested._members()

            members.append((name, field, value))
        return members

    def _dump(self, names: Set[str]) -> Dict[str, Any]:
        if not names:
            return {}
        return self.model_dump(
            include=names, by_alias=True, exclude_none=True, mode="json"
        )

    def request_body(self) -> Dict[str, Any]:
        """
        Assemble the JSON document for the body-bound members.

        Absent members are omitted, empty mappings and lists are kept as
        ``{}`` and ``[]``, nested shapes serialize recursively.
        """

        return self._dump({
            name for name, field, _ in self._members()
            if _marker(field, _LOCATIONS) is None
        })


class Input(Shape):
    """
    The request input of one API operation.

    Subclasses declare the HTTP method, the URI template, the protocol
    headers and how the body is encoded: ``"json"`` for a JSON document
    built from the body-bound members, ``"raw"`` for the ``Payload``
    member, ``None`` for no body at all.
    """

    METHOD: ClassVar[str] = "POST"
    URI: ClassVar[str] = "/"
    HEADERS: ClassVar[Dict[str, str]] = {}
    BODY: ClassVar[Optional[str]] = "json"

    region: Optional[str] = Field(default=None, alias="@region")

    def request(self) -> Request:
        """
        Serialize the current field values into a request descriptor.

        Returns:
            The method, URI, query, headers and body for this operation.

        Raises:
            MissingRequiredField: If a required field is unset.
            InvalidEnumValue: If a field is outside its closed value set.
        """

        headers = dict(self.HEADERS)
        query = {}
        uri_params = {}
        raw_payload = None
        body_names = set()

        for name, field, value in self._members():
            location = _marker(field, _LOCATIONS)
            if isinstance(location, Header):
                headers[location.name] = _to_string(value)
            elif isinstance(location, Query):
                query[location.name] = _to_string(value)
            elif isinstance(location, Uri):
                uri_params[location.name] = quote(_to_string(value), safe="")
            elif isinstance(location, Payload):
                raw_payload = value
            else:
                body_names.add(name)

        if self.BODY == "json":
            body = json_body(self._dump(body_names))
        elif self.BODY == "raw":
            if raw_payload is None:
                body = b""
            elif isinstance(raw_payload, bytes):
                body = raw_payload
            else:
                body = raw_payload.encode("utf-8")
        else:
            body = b""

        return Request(
            method=self.METHOD,
            uri=self.URI.format(**uri_params),
            query=query,
            headers=headers,
            body=body,
        )
