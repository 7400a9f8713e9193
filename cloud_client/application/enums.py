"""Base type for the closed value sets fixed by the service contracts."""

from enum import Enum


class ClosedEnum(str, Enum):
    """A string enum whose members are the only values the service accepts."""

    @classmethod
    def exists(cls, value) -> bool:
        """Tell whether ``value`` is a member of the set."""
        return isinstance(value, str) and value in cls._value2member_map_

    def __str__(self) -> str:
        return self.value
