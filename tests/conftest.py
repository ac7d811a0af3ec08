"""Shared pytest fixtures for the dotconfig test suite."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Any

import pytest


@pytest.fixture
def fixtures_dir() -> Path:
    """Returns the absolute path to the tests/fixtures/ directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def config_dir(tmp_path: Path, fixtures_dir: Path) -> Path:
    """Copies fixture files to a temp directory for test isolation."""
    dest = tmp_path / "config"
    shutil.copytree(fixtures_dir, dest, dirs_exist_ok=True)
    return dest


@pytest.fixture
def yaml_path(config_dir: Path) -> Path:
    return config_dir / "config.yaml"


@pytest.fixture
def json_path(config_dir: Path) -> Path:
    return config_dir / "config.json"


@pytest.fixture
def sample_tree() -> dict[str, Any]:
    """Returns a fresh copy of the document stored in the fixture files."""
    return {"config": {"foo": "bar", "bar": 5, "baz": True, "foobar": [1, 2, 3]}}
