"""Merge per-language flat maps into one key universe and record table."""

from collections.abc import Mapping
from typing import Any

from transcompare.models.enums import MISSING
from transcompare.models.record import Record


def build_key_universe(flat_maps: Mapping[str, Mapping[str, Any]]) -> list[str]:
    """Collect every key path, in first-seen order across languages.

    Languages are visited in iteration order, and each language's keys in
    its own order; duplicates keep their first position.
    """
    universe: dict[str, None] = {}
    for flat in flat_maps.values():
        for key in flat:
            universe.setdefault(key, None)
    return list(universe)


def aggregate(
    flat_maps: Mapping[str, Mapping[str, Any]],
) -> tuple[list[str], dict[str, Record]]:
    """Build the key universe and one unclassified record per key.

    Args:
        flat_maps: Language identifier -> flattened document

    Returns:
        Tuple of (key universe, key -> record). Every record holds an entry
        for every language, ``MISSING`` where the language lacks the key.

    """
    keys = build_key_universe(flat_maps)
    table = {
        key: Record(
            key=key,
            values={language: flat.get(key, MISSING) for language, flat in flat_maps.items()},
        )
        for key in keys
    }
    return keys, table
