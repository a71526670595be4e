"""Tabular model types: schema, tables, columns, partitions, measures, relationships."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field


class DataType(StrEnum):
    INT64 = "Int64"
    DOUBLE = "Double"
    BOOLEAN = "Boolean"
    STRING = "String"
    DATETIME = "DateTime"
    DECIMAL = "Decimal"
    BINARY = "Binary"
    TABLE = "Table"
    VARIANT = "Variant"
    UNKNOWN = "Unknown"


class PartitionSourceType(StrEnum):
    QUERY = "query"
    M = "m"
    CALCULATED = "calculated"
    NONE = "none"


class DataView(StrEnum):
    FULL = "full"
    SAMPLE = "sample"


class RelationshipCardinality(StrEnum):
    ONE_TO_ONE = "1:1"
    ONE_TO_MANY = "1:*"
    MANY_TO_ONE = "*:1"


class CrossFilteringBehavior(StrEnum):
    BOTH_DIRECTIONS = "bothDirections"
    ONE_DIRECTION = "oneDirection"
    NONE = "none"


class Annotation(BaseModel):
    """Free-form key/value metadata attached to the model or a culture."""

    name: str = ""
    value: str = ""

    model_config = {"populate_by_name": True, "frozen": True}


class Culture(BaseModel):
    """A localization entry. ``annotations`` is ``None`` when annotations are excluded."""

    name: str | None = None
    annotations: tuple[Annotation, ...] | None = None

    model_config = {"populate_by_name": True, "frozen": True}


class DataModelSchema(BaseModel):
    """Document-level metadata of a tabular model."""

    name: str = "Model"
    compatibility_level: int = Field(0, alias="compatibilityLevel")
    cultures: tuple[Culture, ...] = ()
    annotations: tuple[Annotation, ...] = ()

    model_config = {"populate_by_name": True, "frozen": True}


class Column(BaseModel):
    """A field of a table; ``expression`` is set for calculated columns."""

    name: str = "Column"
    data_type: DataType = Field(DataType.UNKNOWN, alias="dataType")
    expression: str | None = None
    format_string: str | None = Field(None, alias="formatString")
    summarization: str | None = None
    is_hidden: bool | None = Field(None, alias="isHidden")
    description: str | None = None

    model_config = {"populate_by_name": True, "frozen": True}


class Partition(BaseModel):
    """A data-loading unit of a table."""

    name: str = "Partition"
    source_type: PartitionSourceType = Field(PartitionSourceType.NONE, alias="sourceType")
    expression: str | None = None
    query: str | None = None
    data_view: DataView | None = Field(None, alias="dataView")
    description: str | None = None

    model_config = {"populate_by_name": True, "frozen": True}


class Measure(BaseModel):
    """A table-scoped aggregation formula."""

    name: str = "Measure"
    expression: str = ""
    format_string: str | None = Field(None, alias="formatString")
    display_folder: str | None = Field(None, alias="displayFolder")
    is_hidden: bool | None = Field(None, alias="isHidden")
    description: str | None = None

    model_config = {"populate_by_name": True, "frozen": True}


class Table(BaseModel):
    """A tabular entity with its columns, partitions and measures."""

    name: str = "Table"
    description: str | None = None
    is_hidden: bool | None = Field(None, alias="isHidden")
    columns: tuple[Column, ...] = ()
    partitions: tuple[Partition, ...] = ()
    measures: tuple[Measure, ...] = ()

    model_config = {"populate_by_name": True, "frozen": True}


class Relationship(BaseModel):
    """A link between two tables.

    Table and column names are stored exactly as written in the source
    document, whether or not they resolve to a parsed table.
    """

    name: str | None = None
    from_table: str = Field("", alias="fromTable")
    from_column: str = Field("", alias="fromColumn")
    to_table: str = Field("", alias="toTable")
    to_column: str = Field("", alias="toColumn")
    cardinality: RelationshipCardinality = RelationshipCardinality.ONE_TO_MANY
    cross_filtering_behavior: CrossFilteringBehavior = Field(
        CrossFilteringBehavior.NONE, alias="crossFilteringBehavior"
    )
    is_active: bool = Field(True, alias="isActive")
    is_referential_integrity_enforced: bool | None = Field(
        None, alias="isReferentialIntegrityEnforced"
    )

    model_config = {"populate_by_name": True, "frozen": True}


class TabularModel(BaseModel):
    """Root aggregate returned by the parser."""

    model: DataModelSchema = DataModelSchema()
    tables: tuple[Table, ...] = ()
    relationships: tuple[Relationship, ...] = ()

    model_config = {"populate_by_name": True, "frozen": True}

    def to_dict(self) -> dict:
        """Serialise with wire (camelCase) names, omitting absent optional fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
