"""
Domain Enums

Enumerations for categorical build data. These replace magic strings
and provide type safety.
"""

from enum import Enum


class UseType(Enum):
    """
    Intended use of a build.

    Values are the display strings stored in the build table, so a
    persisted record round-trips through ``UseType(record.use_type)``.
    """
    TRACK = "Track"
    STREET = "Street"
    DIRT = "Dirt"

    @classmethod
    def default(cls) -> "UseType":
        return cls.TRACK

    @classmethod
    def from_value(cls, value: "UseType | str") -> "UseType":
        """
        Coerce a UseType or its display string (case-insensitive).

        Raises:
            ValueError: If the string names no use type.
        """
        if isinstance(value, cls):
            return value
        for member in cls:
            if member.value.lower() == str(value).strip().lower():
                return member
        raise ValueError(
            f"Unknown use type {value!r}. Expected one of {[m.value for m in cls]}"
        )

    @property
    def display_name(self) -> str:
        return self.value
