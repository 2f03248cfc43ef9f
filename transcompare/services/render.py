"""Per-language views of a single record."""

from typing import Any

from transcompare.engine.path_codec import lookup_path, unflatten
from transcompare.models.enums import MISSING
from transcompare.models.record import Record, is_absent


def render_subtree(record: Record, language: str, treat_empty_as_missing: bool = True) -> Any:
    """Rebuild the minimal nested tree holding the record's value.

    Returns:
        ``unflatten({key: value})``, or None if the language lacks the key

    """
    value = record.value_for(language)
    if is_absent(value, treat_empty_as_missing):
        return None
    return unflatten({record.key: value})


def to_display(value: Any) -> Any:
    """Convert a nested value into display form.

    Strings and numbers become text, arrays become lists and objects become
    ``{child: display}`` mappings. Booleans and null have no display form.
    """
    if isinstance(value, bool) or value is None or value is MISSING:
        return None
    if isinstance(value, str | int | float):
        return str(value)
    if isinstance(value, list):
        return [to_display(item) for item in value]
    if isinstance(value, dict):
        return {key: to_display(child) for key, child in value.items()}
    return None


def render_display(record: Record, language: str, treat_empty_as_missing: bool = True) -> Any:
    """Display form of a record's value for one language, None if missing."""
    subtree = render_subtree(record, language, treat_empty_as_missing)
    if subtree is None:
        return None
    return to_display(lookup_path(subtree, record.key))
