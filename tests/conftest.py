"""Pytest configuration and fixtures for ItemReport tests.

Provides common fixtures for testing.
"""

from __future__ import annotations

import pytest

from itemreport.config import reset_config
from itemreport.models import LineItem, Role, Viewer

REPORT_ENV_VARS = (
    "LOG_LEVEL",
    "LOG_FORMAT",
    "REPORT_VISIBILITY_THRESHOLD",
    "REPORT_PRIORITY_THRESHOLD",
    "REPORT_ESCAPE_HTML",
)


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Isolate every test from the developer's environment and cached config."""
    for name in REPORT_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def standard_viewer() -> Viewer:
    """Non-admin viewer."""
    return Viewer(name="Ana", role=Role.STANDARD)


@pytest.fixture
def admin_viewer() -> Viewer:
    """Admin viewer."""
    return Viewer(name="Root", role=Role.ADMIN)


@pytest.fixture
def mixed_items() -> list[LineItem]:
    """Items on both sides of the visibility and priority thresholds."""
    return [
        LineItem(id=1, name="Cable", value=100),
        LineItem(id=2, name="Conduit", value=600),
        LineItem(id=3, name="Panel", value=500),
        LineItem(id=4, name="Transformer", value=1500),
        LineItem(id=5, name="Breaker", value=1000),
    ]
