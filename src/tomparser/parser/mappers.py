"""Mappings from raw BIM tokens to closed enums. Every mapper is total."""

from __future__ import annotations

from typing import Any

from tomparser.models.tabular import (
    CrossFilteringBehavior,
    DataType,
    DataView,
    PartitionSourceType,
    RelationshipCardinality,
)
from tomparser.parser.nodes import get, is_truthy

DATA_TYPE_MAP: dict[str, DataType] = {
    "Int64": DataType.INT64,
    "Int32": DataType.INT64,
    "Double": DataType.DOUBLE,
    "Single": DataType.DOUBLE,
    "Boolean": DataType.BOOLEAN,
    "String": DataType.STRING,
    "DateTime": DataType.DATETIME,
    "DateTimeOffset": DataType.DATETIME,
    "Decimal": DataType.DECIMAL,
    "Binary": DataType.BINARY,
    "Table": DataType.TABLE,
    "Variant": DataType.VARIANT,
}

_CARDINALITY_MAP: dict[tuple[Any, Any], RelationshipCardinality] = {
    ("1", "1"): RelationshipCardinality.ONE_TO_ONE,
    ("1", "*"): RelationshipCardinality.ONE_TO_MANY,
    ("*", "1"): RelationshipCardinality.MANY_TO_ONE,
}

_CROSS_FILTER_MAP: dict[str, CrossFilteringBehavior] = {
    "Both": CrossFilteringBehavior.BOTH_DIRECTIONS,
    "OneDirection": CrossFilteringBehavior.ONE_DIRECTION,
}


def map_data_type(token: Any) -> DataType:
    if not isinstance(token, str):
        return DataType.UNKNOWN
    return DATA_TYPE_MAP.get(token, DataType.UNKNOWN)


def map_partition_source_type(source: Any) -> PartitionSourceType:
    """Classify a partition ``source`` object.

    ``type: "m"`` is checked first because M partitions also carry an
    ``expression``.
    """
    if not is_truthy(source):
        return PartitionSourceType.NONE
    if get(source, "type") == "m":
        return PartitionSourceType.M
    if is_truthy(get(source, "expression")):
        return PartitionSourceType.CALCULATED
    if is_truthy(get(source, "query")):
        return PartitionSourceType.QUERY
    return PartitionSourceType.NONE


def map_cardinality(from_cardinality: Any, to_cardinality: Any) -> RelationshipCardinality:
    """Map ``fromCardinality``/``toCardinality`` tokens; unrecognised pairs fall back to 1:*."""
    try:
        return _CARDINALITY_MAP[(from_cardinality, to_cardinality)]
    except (KeyError, TypeError):
        return RelationshipCardinality.ONE_TO_MANY


def map_cross_filtering_behavior(direction: Any) -> CrossFilteringBehavior:
    if not isinstance(direction, str):
        return CrossFilteringBehavior.NONE
    return _CROSS_FILTER_MAP.get(direction, CrossFilteringBehavior.NONE)


def map_data_view(token: Any) -> DataView:
    return DataView.SAMPLE if token == "Sample" else DataView.FULL
