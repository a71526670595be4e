"""Normalisers turning raw BIM JSON nodes into typed tabular model entities.

Each ``normalize_*`` function accepts an arbitrary JSON node and always
returns an entity: missing or malformed optional fields fall back to
defaults. The only exception is ``strict_data_types``, which is opt-in.
"""

from __future__ import annotations

from typing import Any

from tomparser.models.errors import ErrorCode, TomParserError
from tomparser.models.options import ParseOptions
from tomparser.models.tabular import (
    Annotation,
    Column,
    Culture,
    DataModelSchema,
    DataType,
    Measure,
    Partition,
    Relationship,
    Table,
)
from tomparser.parser.mappers import (
    map_cardinality,
    map_cross_filtering_behavior,
    map_data_type,
    map_data_view,
    map_partition_source_type,
)
from tomparser.parser.nodes import (
    as_list,
    get,
    get_flag,
    get_int,
    get_text,
    get_truthy_text,
    is_truthy,
)


def _visible(items: Any, include_hidden: bool) -> list[Any]:
    """Drop items flagged ``isHidden`` unless hidden objects are included."""
    return [
        item
        for item in as_list(items)
        if include_hidden or not is_truthy(get(item, "isHidden"))
    ]


# -- annotations & cultures --------------------------------------------------


def normalize_annotations(raw: Any) -> list[Annotation]:
    return [
        Annotation(name=get_text(item, "name", ""), value=get_text(item, "value", ""))
        for item in as_list(raw)
    ]


def normalize_culture(raw: Any, include_annotations: bool) -> Culture:
    return Culture(
        name=get_text(raw, "name"),
        annotations=normalize_annotations(get(raw, "annotations")) if include_annotations else None,
    )


def normalize_schema(raw_model: Any, include_annotations: bool) -> DataModelSchema:
    """Document-level metadata. Annotations stay empty when excluded."""
    cultures = [
        normalize_culture(item, include_annotations) for item in as_list(get(raw_model, "cultures"))
    ]
    annotations: list[Annotation] = []
    if include_annotations:
        annotations = normalize_annotations(get(raw_model, "annotations"))
    return DataModelSchema(
        name=get_text(raw_model, "name", "Model"),
        compatibility_level=get_int(raw_model, "compatibilityLevel", 0),
        cultures=cultures,
        annotations=annotations,
    )


# -- table members -----------------------------------------------------------


def _column_expression(raw: Any) -> str | None:
    expression = get_truthy_text(raw, "expression")
    if expression is not None:
        return expression
    return get_truthy_text(get(raw, "calculatedColumn"), "expression")


def normalize_column(raw: Any, strict_data_types: bool = False) -> Column:
    token = get(raw, "dataType")
    data_type = map_data_type(token)
    if strict_data_types and data_type is DataType.UNKNOWN and token is not None:
        raise TomParserError(
            ErrorCode.UNKNOWN_DATA_TYPE,
            f"Column '{get_text(raw, 'name', 'Column')}' has unknown data type {token!r}",
        )
    return Column(
        name=get_text(raw, "name", "Column"),
        data_type=data_type,
        expression=_column_expression(raw),
        format_string=get_truthy_text(raw, "formatString"),
        summarization=get_truthy_text(raw, "summarizeBy"),
        is_hidden=get_flag(raw, "isHidden"),
        description=get_text(raw, "description"),
    )


def normalize_partition(raw: Any) -> Partition:
    source = get(raw, "source")
    expression = query = data_view = None
    if is_truthy(source):
        expression = get_truthy_text(source, "expression")
        query = get_truthy_text(source, "query")
        raw_view = get(source, "dataView")
        if is_truthy(raw_view):
            data_view = map_data_view(raw_view)
    return Partition(
        name=get_text(raw, "name", "Partition"),
        source_type=map_partition_source_type(source),
        expression=expression,
        query=query,
        data_view=data_view,
        description=get_text(raw, "description"),
    )


def normalize_measure(raw: Any) -> Measure:
    return Measure(
        name=get_text(raw, "name", "Measure"),
        expression=get_text(raw, "expression", ""),
        format_string=get_text(raw, "formatString"),
        display_folder=get_text(raw, "displayFolder"),
        is_hidden=get_flag(raw, "isHidden"),
        description=get_text(raw, "description"),
    )


# -- tables ------------------------------------------------------------------


def normalize_table(raw: Any, options: ParseOptions) -> Table:
    include_hidden = options.include_hidden_objects
    return Table(
        name=get_text(raw, "name", "Table"),
        description=get_text(raw, "description"),
        is_hidden=get_flag(raw, "isHidden"),
        columns=[
            normalize_column(item, options.strict_data_types)
            for item in _visible(get(raw, "columns"), include_hidden)
        ],
        partitions=[normalize_partition(item) for item in as_list(get(raw, "partitions"))],
        measures=[
            normalize_measure(item) for item in _visible(get(raw, "measures"), include_hidden)
        ],
    )


def normalize_tables(raw: Any, options: ParseOptions) -> list[Table]:
    """Normalise a ``tables`` array. Hidden tables are dropped before their children are visited."""
    visible = _visible(raw, options.include_hidden_objects)
    return [normalize_table(item, options) for item in visible]


# -- relationships -----------------------------------------------------------


def normalize_relationship(raw: Any) -> Relationship:
    is_active = get_flag(raw, "isActive")
    return Relationship(
        name=get_text(raw, "name"),
        from_table=get_text(raw, "fromTable", ""),
        from_column=get_text(raw, "fromColumn", ""),
        to_table=get_text(raw, "toTable", ""),
        to_column=get_text(raw, "toColumn", ""),
        cardinality=map_cardinality(get(raw, "fromCardinality"), get(raw, "toCardinality")),
        cross_filtering_behavior=map_cross_filtering_behavior(get(raw, "crossFilterDirection")),
        is_active=True if is_active is None else is_active,
        is_referential_integrity_enforced=get_flag(raw, "isReferentialIntegrityEnforced"),
    )
