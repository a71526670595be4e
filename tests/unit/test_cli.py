"""Tests for the tomparser command-line entry point."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from tomparser.cli import main
from tests.conftest import ADVENTURE_WORKS_BIM


class TestCli:
    def test_prints_model_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(ADVENTURE_WORKS_BIM)]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["model"]["compatibilityLevel"] == 1567
        assert [t["name"] for t in data["tables"]] == ["Customer", "Sales", "Date"]

    def test_exclude_hidden_and_annotations(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(ADVENTURE_WORKS_BIM), "--exclude-hidden", "--no-annotations"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert [t["name"] for t in data["tables"]] == ["Customer", "Sales"]
        assert data["model"]["annotations"] == []
        assert "annotations" not in data["model"]["cultures"][0]

    def test_describe(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(ADVENTURE_WORKS_BIM), "--describe"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["name"] == "AdventureWorks"
        assert data["unresolved_relationships"] == 0

    def test_strict_relationships_failure(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main([str(ADVENTURE_WORKS_BIM), "--exclude-hidden", "--strict-relationships"])
        assert code == 1
        assert capsys.readouterr().err.startswith("MALFORMED_RELATIONSHIP:")

    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(tmp_path / "nope.bim")]) == 1
        assert "FILE_NOT_FOUND" in capsys.readouterr().err
