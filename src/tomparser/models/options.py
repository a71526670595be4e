"""Options controlling how a BIM document is normalised."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ParseOptions(BaseModel):
    """Normalisation options.

    The strict flags are off by default: unknown data types map to
    ``DataType.UNKNOWN`` and relationships to missing tables are kept.
    """

    include_annotations: bool = Field(True, alias="includeAnnotations")
    include_hidden_objects: bool = Field(True, alias="includeHiddenObjects")
    strict_relationships: bool = Field(False, alias="strictRelationships")
    strict_data_types: bool = Field(False, alias="strictDataTypes")

    model_config = {"populate_by_name": True, "frozen": True}
