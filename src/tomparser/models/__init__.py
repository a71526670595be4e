"""Pydantic domain models for the tabular model parser."""

from tomparser.models.errors import ErrorCode, ErrorDetail, TomParserError
from tomparser.models.options import ParseOptions
from tomparser.models.tabular import (
    Annotation,
    Column,
    CrossFilteringBehavior,
    Culture,
    DataModelSchema,
    DataType,
    DataView,
    Measure,
    Partition,
    PartitionSourceType,
    Relationship,
    RelationshipCardinality,
    Table,
    TabularModel,
)

__all__ = [
    "Annotation",
    "Column",
    "CrossFilteringBehavior",
    "Culture",
    "DataModelSchema",
    "DataType",
    "DataView",
    "ErrorCode",
    "ErrorDetail",
    "Measure",
    "ParseOptions",
    "Partition",
    "PartitionSourceType",
    "Relationship",
    "RelationshipCardinality",
    "Table",
    "TabularModel",
    "TomParserError",
]
