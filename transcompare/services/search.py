"""Fuzzy search and status filtering over classified records."""

from collections.abc import Iterable, Sequence
from difflib import SequenceMatcher
from typing import Any

from transcompare.config import settings
from transcompare.models.enums import MISSING, StatusFilter
from transcompare.models.record import Record


def match_score(query: str, text: str) -> float:
    """Score how well ``query`` matches somewhere inside ``text``.

    Case-insensitive approximate substring match: the query is compared
    with every window of ``text`` of the same length.

    Returns:
        0.0 for an exact substring match up to 1.0 for no resemblance

    """
    query = query.lower()
    text = text.lower()
    if not query:
        return 0.0
    if query in text:
        return 0.0
    if len(text) <= len(query):
        return 1.0 - SequenceMatcher(None, query, text).ratio()

    matcher = SequenceMatcher(None, b=query)
    best = 0.0
    for start in range(len(text) - len(query) + 1):
        matcher.set_seq1(text[start : start + len(query)])
        best = max(best, matcher.ratio())
    return 1.0 - best


def _as_text(value: Any) -> str | None:
    if value is MISSING:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    return str(value)


class MatchEngine:
    """Search records by key path and by any language's value.

    Attributes:
        records: Classified records, in display order
        languages: Language identifiers whose values are searched
        threshold: Highest score that still counts as a match

    """

    def __init__(
        self,
        records: Sequence[Record],
        languages: Sequence[str],
        threshold: float | None = None,
    ) -> None:
        """Index the records for searching."""
        self.records = list(records)
        self.languages = list(languages)
        self.threshold = settings.search_threshold if threshold is None else threshold

    def _fields(self, record: Record) -> list[str]:
        fields = [record.key]
        for language in self.languages:
            text = _as_text(record.value_for(language))
            if text:
                fields.append(text)
        return fields

    def score(self, record: Record, query: str) -> float:
        """Best score of the query against the record's key and values."""
        return min(match_score(query, field) for field in self._fields(record))

    def search(self, query: str) -> list[Record]:
        """Find records matching the query, best match first.

        An empty query returns every record in its original order.
        """
        if not query:
            return list(self.records)

        scored = [
            (self.score(record, query), position, record)
            for position, record in enumerate(self.records)
        ]
        matches = [item for item in scored if item[0] <= self.threshold]
        matches.sort(key=lambda item: (item[0], item[1]))
        return [record for _, _, record in matches]

    def find(self, query: str, status: StatusFilter | str = StatusFilter.ALL) -> list[Record]:
        """Search, then keep only records with the given status."""
        return filter_by_status(self.search(query), status)


def filter_by_status(records: Iterable[Record], status: StatusFilter | str) -> list[Record]:
    """Keep records whose status matches the filter (``all`` keeps everything)."""
    status = StatusFilter(status)
    if status is StatusFilter.ALL:
        return list(records)
    return [record for record in records if record.status.value == status.value]
