"""Parse Power BI / Analysis Services tabular model (.bim) files into typed models."""

from __future__ import annotations

import os
from typing import Any

from tomparser.models import (
    Annotation,
    Column,
    CrossFilteringBehavior,
    Culture,
    DataModelSchema,
    DataType,
    DataView,
    ErrorCode,
    Measure,
    ParseOptions,
    Partition,
    PartitionSourceType,
    Relationship,
    RelationshipCardinality,
    Table,
    TabularModel,
    TomParserError,
)
from tomparser.parser import BimLoader, decode_bytes

__version__ = "0.3.0"


async def parse_model(
    source: str | os.PathLike[str], options: ParseOptions | None = None
) -> TabularModel:
    """Read and parse the ``.bim`` file at *source*."""
    return await BimLoader().load(source, options)


def parse_model_bytes(data: bytes, options: ParseOptions | None = None) -> TabularModel:
    """Parse raw ``.bim`` bytes (UTF-8 or UTF-16, with or without BOM)."""
    return BimLoader().load_bytes(data, options)


def parse_model_from_value(value: Any, options: ParseOptions | None = None) -> TabularModel:
    """Parse an already-deserialised BIM JSON document."""
    return BimLoader().load_value(value, options)


__all__ = [
    "Annotation",
    "BimLoader",
    "Column",
    "CrossFilteringBehavior",
    "Culture",
    "DataModelSchema",
    "DataType",
    "DataView",
    "ErrorCode",
    "Measure",
    "ParseOptions",
    "Partition",
    "PartitionSourceType",
    "Relationship",
    "RelationshipCardinality",
    "Table",
    "TabularModel",
    "TomParserError",
    "__version__",
    "decode_bytes",
    "parse_model",
    "parse_model_bytes",
    "parse_model_from_value",
]
