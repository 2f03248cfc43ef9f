"""Completeness classification of records against a primary language."""

import dataclasses
from collections.abc import Iterable, Sequence

from transcompare.models.enums import Status
from transcompare.models.record import Record, is_absent


def classify(
    record: Record,
    languages: Sequence[str],
    primary_language: str | None,
    treat_empty_as_missing: bool = True,
) -> Status:
    """Compute the status of one record.

    Rules, in order:
        - no primary language: unclassified
        - every language has a value: translated
        - the primary has a value, another language does not: incomplete
        - the primary lacks a value, another language has one: error
        - no language has a value: unclassified

    Args:
        record: Record to classify
        languages: All known language identifiers
        primary_language: Reference language, or None if not selected
        treat_empty_as_missing: Whether ``""`` counts as absent

    """
    if not primary_language:
        return Status.UNCLASSIFIED

    total = len(languages)
    present = sum(
        1
        for language in languages
        if not is_absent(record.value_for(language), treat_empty_as_missing)
    )
    primary_present = not is_absent(record.value_for(primary_language), treat_empty_as_missing)

    if present == total:
        return Status.TRANSLATED
    if primary_present:
        return Status.INCOMPLETE
    if present > 0:
        return Status.ERROR
    return Status.UNCLASSIFIED


def classify_records(
    records: Iterable[Record],
    languages: Sequence[str],
    primary_language: str | None,
    treat_empty_as_missing: bool = True,
) -> list[Record]:
    """Return copies of the records with their status filled in."""
    return [
        dataclasses.replace(
            record,
            status=classify(record, languages, primary_language, treat_empty_as_missing),
        )
        for record in records
    ]


def count_statuses(records: Iterable[Record]) -> dict[Status, int]:
    """Count records per status (every status is present, possibly 0)."""
    counts = dict.fromkeys(Status, 0)
    for record in records:
        counts[record.status] += 1
    return counts
