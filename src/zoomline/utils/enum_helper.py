"""Enum conversion utilities"""

import re
from enum import Enum
from typing import TypeVar, Type, Optional, List

E = TypeVar("E", bound=Enum)

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


class EnumHelper:
    """
    Utility class for working with Enums:
    - Convert enum members to strings (with case options)
    - Parse strings back to enum members (case-insensitive, camelCase aware)
    - List all member names
    """

    @staticmethod
    def to_string(enum_value: E, lowercase: bool = False) -> str:
        """
        Convert Enum member to string (its name).

        Args:
            enum_value: Enum member
            lowercase: Return lowercase string (for config or tags)
        """
        if not isinstance(enum_value, Enum):
            raise TypeError(f"Expected Enum, got {type(enum_value).__name__}")
        name = enum_value.name
        return name.lower() if lowercase else name

    @staticmethod
    def normalize(name: str) -> str:
        """
        Normalize an external spelling to an Enum member name.

        "followPointer", "follow-pointer" and "FOLLOW_POINTER" all map to
        "FOLLOW_POINTER".
        """
        name = _CAMEL_BOUNDARY.sub("_", name.strip())
        return name.replace("-", "_").replace(" ", "_").upper()

    @staticmethod
    def from_string(enum_class: Type[E], name: str, default: Optional[E] = None) -> E:
        """
        Parse string to Enum member.

        Args:
            enum_class: Enum class to parse into
            name: Member name in any supported spelling
            default: Return value if not found (None = raise)

        Returns:
            Enum member or default if provided
        """
        if not issubclass(enum_class, Enum):
            raise TypeError(f"{enum_class} is not an Enum class")

        key = EnumHelper.normalize(name)
        for member in enum_class:
            if member.name == key:
                return member

        if default is not None:
            return default
        raise ValueError(f"Invalid {enum_class.__name__} name: {name}")

    @staticmethod
    def list_names(enum_class: Type[E], lowercase: bool = False) -> List[str]:
        """List all Enum member names."""
        if not issubclass(enum_class, Enum):
            raise TypeError(f"{enum_class} is not an Enum class")

        if lowercase:
            return [member.name.lower() for member in enum_class]
        return [member.name for member in enum_class]
