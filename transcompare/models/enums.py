"""Enums for translation comparison."""

from enum import Enum


class Status(str, Enum):
    """Completeness status of a key across languages.

    ``UNCLASSIFIED`` serializes as the empty string: it is used when no
    primary language is selected, or when no language holds the key.
    """

    TRANSLATED = "translated"
    INCOMPLETE = "incomplete"
    ERROR = "error"
    UNCLASSIFIED = ""


class StatusFilter(str, Enum):
    """Status filter accepted by the search layer."""

    ALL = "all"
    TRANSLATED = "translated"
    INCOMPLETE = "incomplete"
    ERROR = "error"


class EmptyContainerPolicy(str, Enum):
    """How ``flatten`` treats empty objects and arrays."""

    DROP = "drop"  # empty containers contribute no entry
    KEEP = "keep"  # empty containers are recorded as ``{}`` / ``[]`` leaves


class Missing(Enum):
    """Marker for a key that a language does not define."""

    MISSING = "MISSING"

    def __repr__(self) -> str:
        """Return the marker name."""
        return "MISSING"

    def __bool__(self) -> bool:
        """Missing values are falsy."""
        return False


MISSING = Missing.MISSING
