"""Assembles a complete TabularModel from a deserialised BIM document."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from tomparser.models.errors import ErrorCode, TomParserError
from tomparser.models.options import ParseOptions
from tomparser.models.tabular import Relationship, Table, TabularModel
from tomparser.parser.nodes import as_list, get, is_truthy
from tomparser.parser.normalizer import (
    normalize_relationship,
    normalize_schema,
    normalize_tables,
)

logger = logging.getLogger(__name__)


def build_table_index(tables: Sequence[Table]) -> dict[str, Table]:
    """Index tables by lower-cased name. Later tables win on collisions."""
    return {table.name.lower(): table for table in tables}


class ModelAssembler:
    """Normalises a whole BIM document into a :class:`TabularModel`.

    Stateless; a single instance may be shared across calls and threads.
    """

    def assemble(self, document: Any, options: ParseOptions | None = None) -> TabularModel:
        """Build the model from the top-level BIM JSON value.

        Raises ``TomParserError(MISSING_REQUIRED_FIELD)`` if the document
        has no ``model`` object.
        """
        options = options or ParseOptions()
        raw_model = get(document, "model")
        if not is_truthy(raw_model):
            raise TomParserError(
                ErrorCode.MISSING_REQUIRED_FIELD,
                'BIM JSON is missing required "model" property',
            )

        schema = normalize_schema(raw_model, options.include_annotations)
        tables = normalize_tables(get(raw_model, "tables"), options)
        index = build_table_index(tables)
        relationships = self._resolve_relationships(
            get(raw_model, "relationships"), index, options.strict_relationships
        )

        logger.debug(
            "Assembled model '%s': %d tables, %d relationships",
            schema.name, len(tables), len(relationships),
        )
        return TabularModel(model=schema, tables=tables, relationships=relationships)

    def _resolve_relationships(
        self, raw: Any, index: dict[str, Table], strict: bool
    ) -> list[Relationship]:
        relationships: list[Relationship] = []
        for item in as_list(raw):
            relationship = normalize_relationship(item)
            missing = [
                name
                for name in (relationship.from_table, relationship.to_table)
                if name.lower() not in index
            ]
            if missing:
                message = (
                    f"Relationship '{relationship.name or '<unnamed>'}' references "
                    f"unknown table(s): {', '.join(repr(m) for m in missing)}"
                )
                if strict:
                    raise TomParserError(ErrorCode.MALFORMED_RELATIONSHIP, message)
                logger.warning(message)
            relationships.append(relationship)
        return relationships
