"""Structured summaries of parsed tabular models."""

from __future__ import annotations

from collections import Counter
from dataclasses import asdict, dataclass, field

from tomparser.models.tabular import Relationship, Table, TabularModel
from tomparser.parser.assembler import build_table_index

# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


@dataclass
class TableInfo:
    """Summary of a table."""

    name: str
    hidden: bool
    columns: int
    calculated_columns: int
    measures: int
    partitions: int
    source_types: dict[str, int] = field(default_factory=dict)


@dataclass
class RelationshipInfo:
    """Summary of a relationship, with whether both ends resolve to a table."""

    name: str | None
    from_ref: str
    to_ref: str
    cardinality: str
    cross_filtering: str
    active: bool
    resolved: bool


@dataclass
class ModelDescription:
    """Structured summary of a parsed model."""

    name: str
    compatibility_level: int
    cultures: list[str]
    tables: list[TableInfo]
    relationships: list[RelationshipInfo]

    @property
    def unresolved_relationships(self) -> list[RelationshipInfo]:
        return [r for r in self.relationships if not r.resolved]

    def to_dict(self) -> dict:
        data = asdict(self)
        data["unresolved_relationships"] = len(self.unresolved_relationships)
        return data


# ---------------------------------------------------------------------------
# describe_model
# ---------------------------------------------------------------------------


def _column_ref(table: str, column: str) -> str:
    return f"{table}[{column}]"


def _relationship_info(rel: Relationship, index: dict[str, Table]) -> RelationshipInfo:
    return RelationshipInfo(
        name=rel.name,
        from_ref=_column_ref(rel.from_table, rel.from_column),
        to_ref=_column_ref(rel.to_table, rel.to_column),
        cardinality=rel.cardinality.value,
        cross_filtering=rel.cross_filtering_behavior.value,
        active=rel.is_active,
        resolved=rel.from_table.lower() in index and rel.to_table.lower() in index,
    )


def describe_model(model: TabularModel) -> ModelDescription:
    """Summarise *model*: per-table counts and relationship endpoints."""
    tables = [
        TableInfo(
            name=table.name,
            hidden=bool(table.is_hidden),
            columns=len(table.columns),
            calculated_columns=sum(1 for c in table.columns if c.expression),
            measures=len(table.measures),
            partitions=len(table.partitions),
            source_types=dict(Counter(p.source_type.value for p in table.partitions)),
        )
        for table in model.tables
    ]
    index = build_table_index(model.tables)
    return ModelDescription(
        name=model.model.name,
        compatibility_level=model.model.compatibility_level,
        cultures=[c.name for c in model.model.cultures if c.name is not None],
        tables=tables,
        relationships=[_relationship_info(rel, index) for rel in model.relationships],
    )
