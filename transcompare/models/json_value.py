"""Tagged representation of JSON values.

Traversal code dispatches on these classes instead of probing plain Python
objects. ``to_json_value`` and ``from_json_value`` convert between the tagged
form and the ``dict`` / ``list`` / scalar data produced by :mod:`json`.
"""

from dataclasses import dataclass, field
from typing import Any

Scalar = str | int | float | bool | None


@dataclass(frozen=True)
class JsonScalar:
    """A string, number, boolean or null leaf."""

    value: Scalar


@dataclass(frozen=True)
class JsonObject:
    """A mapping of field name to value, in insertion order."""

    fields: dict[str, "JsonValue"] = field(default_factory=dict)

    def is_empty(self) -> bool:
        """Check if the object has no fields."""
        return not self.fields


@dataclass(frozen=True)
class JsonArray:
    """An ordered sequence of values."""

    items: list["JsonValue"] = field(default_factory=list)

    def is_empty(self) -> bool:
        """Check if the array has no items."""
        return not self.items


JsonValue = JsonScalar | JsonObject | JsonArray


def to_json_value(data: Any) -> JsonValue:
    """Convert plain JSON data into its tagged representation.

    Args:
        data: Value as returned by ``json.load``

    Returns:
        Tagged JSON value

    Raises:
        TypeError: If ``data`` contains something JSON cannot express

    """
    if isinstance(data, JsonScalar | JsonObject | JsonArray):
        return data
    if isinstance(data, dict):
        return JsonObject({str(key): to_json_value(value) for key, value in data.items()})
    if isinstance(data, list | tuple):
        return JsonArray([to_json_value(item) for item in data])
    if data is None or isinstance(data, str | int | float | bool):
        return JsonScalar(data)
    msg = f"Not a JSON value: {type(data).__name__}"
    raise TypeError(msg)


def from_json_value(value: JsonValue) -> Any:
    """Convert a tagged JSON value back into plain Python data."""
    if isinstance(value, JsonObject):
        return {key: from_json_value(child) for key, child in value.fields.items()}
    if isinstance(value, JsonArray):
        return [from_json_value(item) for item in value.items]
    return value.value
