"""Pytest configuration and shared fixtures."""
from __future__ import annotations

import pytest


@pytest.fixture
def canada_tree() -> dict:
    """Small hierarchical tree in the shape d3 expects."""
    return {
        "name": "Canada",
        "children": [
            {"name": "PEI", "children": [{"name": "Charlottetown"}]},
        ],
    }


@pytest.fixture
def provinces_tree() -> dict:
    return {
        "name": "Canada",
        "children": [
            {"name": "Newfoundland", "children": [{"name": "St. John's"}]},
            {"name": "Quebec", "children": [{"name": "Montreal"}, {"name": "Quebec City"}]},
            {"name": "Ontario", "children": [{"name": "Toronto"}, {"name": "Ottawa"}]},
            {"name": "British Columbia", "children": [{"name": "Victoria"}, {"name": "Vancouver"}]},
        ],
    }


@pytest.fixture(autouse=True)
def isolate_env(monkeypatch, tmp_path):
    """Avoid loading project .env in tests unless explicitly set."""
    for key in ("D3TREE_SCRIPT_SOURCE", "D3TREE_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr("src.config.config._project_root", lambda: tmp_path)
