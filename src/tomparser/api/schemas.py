"""API request/response Pydantic schemas."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from tomparser.models.options import ParseOptions


class HealthResponse(BaseModel):
    """Response body for GET /health."""

    status: str
    version: str


class ParseRequest(BaseModel):
    """Request body for POST /models/parse and /models/describe."""

    bim: Any = Field(description="Deserialised BIM document (must contain a 'model' object)")
    options: ParseOptions | None = None


class TableSummary(BaseModel):
    name: str
    hidden: bool
    columns: int
    calculated_columns: int
    measures: int
    partitions: int
    source_types: dict[str, int] = {}


class RelationshipSummary(BaseModel):
    name: str | None = None
    from_ref: str
    to_ref: str
    cardinality: str
    cross_filtering: str
    active: bool
    resolved: bool


class DescribeResponse(BaseModel):
    """Response body for POST /models/describe."""

    name: str
    compatibility_level: int
    cultures: list[str] = []
    tables: list[TableSummary] = []
    relationships: list[RelationshipSummary] = []
    unresolved_relationships: int = 0
