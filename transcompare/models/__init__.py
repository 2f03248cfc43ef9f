"""Domain models for translation comparison."""

from transcompare.models.enums import MISSING, EmptyContainerPolicy, Missing, Status, StatusFilter
from transcompare.models.json_value import (
    JsonArray,
    JsonObject,
    JsonScalar,
    JsonValue,
    from_json_value,
    to_json_value,
)
from transcompare.models.record import Record, is_absent

__all__ = [
    "MISSING",
    "EmptyContainerPolicy",
    "JsonArray",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "Missing",
    "Record",
    "Status",
    "StatusFilter",
    "from_json_value",
    "is_absent",
    "to_json_value",
]
