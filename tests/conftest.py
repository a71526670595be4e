"""Shared test fixtures for the tabular model parser."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from tomparser.models.tabular import TabularModel
from tomparser.parser.assembler import ModelAssembler
from tomparser.parser.loader import BimLoader

FIXTURES_DIR = Path(__file__).parent / "fixtures"
ADVENTURE_WORKS_BIM = FIXTURES_DIR / "adventure_works.bim"

MINIMAL_BIM: dict[str, Any] = {
    "model": {
        "name": "TestModel",
        "compatibilityLevel": 1500,
        "tables": [],
        "relationships": [],
    }
}

SCENARIO_BIM: dict[str, Any] = {
    "model": {
        "name": "S",
        "compatibilityLevel": 1500,
        "tables": [{"name": "T", "columns": [{"name": "C", "dataType": "Int64"}]}],
        "relationships": [],
    }
}


@pytest.fixture
def assembler() -> ModelAssembler:
    return ModelAssembler()


@pytest.fixture
def loader() -> BimLoader:
    return BimLoader()


@pytest.fixture
def adventure_works_raw() -> dict[str, Any]:
    """The Adventure Works fixture as a deserialised JSON document."""
    return json.loads(ADVENTURE_WORKS_BIM.read_text(encoding="utf-8"))


@pytest.fixture
def adventure_works(adventure_works_raw: dict[str, Any], assembler: ModelAssembler) -> TabularModel:
    return assembler.assemble(adventure_works_raw)
