"""Comparison session: the language set and the primary language."""

import uuid
from dataclasses import dataclass, field
from typing import Any

from transcompare.engine.aggregator import aggregate
from transcompare.engine.classifier import classify_records, count_statuses
from transcompare.exceptions import UnknownLanguageError
from transcompare.models.enums import Status
from transcompare.models.record import Record


@dataclass
class LanguageEntry:
    """One language folder.

    Attributes:
        id: 1-based position in the language set
        name: Language identifier (the folder name)
        content: Flattened translation document
        error: Load error message, empty if loading succeeded

    """

    id: int
    name: str
    content: dict[str, Any] = field(default_factory=dict)
    error: str = ""

    @property
    def has_error(self) -> bool:
        """Check if the language failed to load."""
        return bool(self.error)


@dataclass
class ComparisonSession:
    """Explicit context for one comparison.

    Records are never stored: every accessor recomputes them from the
    language set, so a session can be queried repeatedly and changed
    (new primary language) without any stale state.
    """

    root: str = ""
    languages: dict[str, LanguageEntry] = field(default_factory=dict)
    primary_language: str | None = None
    treat_empty_as_missing: bool = True
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @property
    def language_names(self) -> list[str]:
        """Language identifiers in set order."""
        return list(self.languages)

    def add_language(self, entry: LanguageEntry) -> None:
        """Add a language to the set.

        The first language that loaded without error becomes the primary
        language unless one is already set.
        """
        self.languages[entry.name] = entry
        if not self.primary_language and not entry.has_error:
            self.primary_language = entry.name

    def set_primary_language(self, language: str | None) -> None:
        """Select the reference language, or clear it with ``None``.

        Raises:
            UnknownLanguageError: If the language is not in the set

        """
        if language is not None and language not in self.languages:
            raise UnknownLanguageError(language)
        self.primary_language = language

    def flat_maps(self) -> dict[str, dict[str, Any]]:
        """Flattened content per language (empty for failed languages)."""
        return {name: entry.content for name, entry in self.languages.items()}

    def key_universe(self) -> list[str]:
        """All key paths across languages, in first-seen order."""
        keys, _ = aggregate(self.flat_maps())
        return keys

    def records(self) -> list[Record]:
        """Build and classify records for every key, in key universe order."""
        keys, table = aggregate(self.flat_maps())
        return classify_records(
            [table[key] for key in keys],
            self.language_names,
            self.primary_language,
            treat_empty_as_missing=self.treat_empty_as_missing,
        )

    def get_record(self, key: str) -> Record | None:
        """Get the classified record for a key path."""
        for record in self.records():
            if record.key == key:
                return record
        return None

    def counts(self) -> dict[Status, int]:
        """Count records per status."""
        return count_statuses(self.records())
