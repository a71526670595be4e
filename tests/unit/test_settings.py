"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest

from tomparser.settings import Settings


class TestEffectivePort:
    def test_defaults_to_api_server_port(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("PORT", raising=False)
        assert Settings(api_server_port=8123).effective_port == 8123

    def test_port_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "9000")
        assert Settings(api_server_port=8123).effective_port == 9000
