"""Flattening, aggregation and classification of translation trees."""

from transcompare.engine.aggregator import aggregate, build_key_universe
from transcompare.engine.classifier import classify, classify_records, count_statuses
from transcompare.engine.path_codec import (
    flatten,
    join_key_path,
    lookup_path,
    split_key_path,
    unflatten,
)

__all__ = [
    "aggregate",
    "build_key_universe",
    "classify",
    "classify_records",
    "count_statuses",
    "flatten",
    "join_key_path",
    "lookup_path",
    "split_key_path",
    "unflatten",
]
