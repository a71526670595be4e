"""Dependency injection for FastAPI: settings and loader."""

from __future__ import annotations

from fastapi import Request

from tomparser.parser.loader import BimLoader
from tomparser.settings import Settings

_loader = BimLoader()


def get_settings(request: Request) -> Settings:
    """FastAPI ``Depends`` provider for the app's Settings."""
    return request.app.state.settings


def get_loader() -> BimLoader:
    """FastAPI ``Depends`` provider for the shared (stateless) BimLoader."""
    return _loader
