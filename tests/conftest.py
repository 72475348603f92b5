"""
Pytest configuration and shared fixtures for confstack tests.

This module provides reusable fixtures and test utilities used across
the test suite.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from confstack.logging import SilentLogger, get_global_logger, set_global_logger


@pytest.fixture
def tmp_test_dir(tmp_path: Path) -> Path:
    """
    Provide a temporary directory for test artifacts.

    Automatically cleaned up after test completion.
    """
    return tmp_path


@pytest.fixture
def sample_defaults() -> dict[str, Any]:
    """Provide a sample default configuration tree."""
    return {
        "name": "app",
        "server": {"host": "localhost", "port": 8080},
        "plugins": ["core", "auth"],
        "paths": {"data": "./data", "logs": "../logs"},
    }


@pytest.fixture
def create_json_file(tmp_test_dir: Path):
    """
    Factory fixture for creating temporary JSON files.

    Usage:
        json_path = create_json_file("conf/base.json", {"key": "value"})
    """

    def _create(filename: str, data: Any) -> Path:
        path = tmp_test_dir / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            json.dump(data, f)
        return path

    return _create


@pytest.fixture(autouse=True)
def restore_global_logger():
    """Keep tests that swap the global logger from leaking into others."""
    previous = get_global_logger()
    set_global_logger(SilentLogger())
    yield
    set_global_logger(previous)
