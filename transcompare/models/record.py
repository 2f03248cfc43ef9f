"""Record model: one row per key path."""

from dataclasses import dataclass, field
from typing import Any

from transcompare.constants import ABSENT_TEXT
from transcompare.models.enums import MISSING, Status


def is_absent(value: Any, treat_empty_as_missing: bool = True) -> bool:
    """Check if a looked-up value counts as absent.

    Args:
        value: Value from a record, possibly ``MISSING``
        treat_empty_as_missing: Whether an explicit empty string is absent too

    """
    if value is MISSING:
        return True
    return treat_empty_as_missing and isinstance(value, str) and value == ABSENT_TEXT


@dataclass
class Record:
    """Values contributed by each language for one key path.

    Attributes:
        key: Key path, e.g. ``menu.items[0].label``
        values: Language identifier -> leaf value, or ``MISSING``
        status: Completeness status (``UNCLASSIFIED`` until classified)

    """

    key: str
    values: dict[str, Any] = field(default_factory=dict)
    status: Status = Status.UNCLASSIFIED

    def value_for(self, language: str) -> Any:
        """Get the value for a language, ``MISSING`` if it has none."""
        return self.values.get(language, MISSING)

    def present_languages(self, treat_empty_as_missing: bool = True) -> list[str]:
        """List languages that define a non-absent value."""
        return [
            language
            for language, value in self.values.items()
            if not is_absent(value, treat_empty_as_missing)
        ]

    def missing_languages(self, treat_empty_as_missing: bool = True) -> list[str]:
        """List languages whose value is absent."""
        return [
            language
            for language, value in self.values.items()
            if is_absent(value, treat_empty_as_missing)
        ]

    def to_dict(self) -> dict[str, Any]:
        """Convert to the flat row representation.

        Missing values are written as the empty string.
        """
        return {
            "key": self.key,
            "values": {
                language: ABSENT_TEXT if value is MISSING else value
                for language, value in self.values.items()
            },
            "missing": [language for language, value in self.values.items() if value is MISSING],
            "status": self.status.value,
        }
