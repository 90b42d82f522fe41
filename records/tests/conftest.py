"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

# Add repo root for imports when the package isn't installed
repo_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(repo_root))

import pytest


_RECORDS_ENV_VARS = (
    "RECORDS_INVENTORY_FILE",
    "RECORDS_STUDENTS_FILE",
    "RECORDS_REPORT_FILE",
)


@pytest.fixture(autouse=True)
def isolate_records_env(monkeypatch):
    """Keep the caller's RECORDS_* settings out of every test."""
    for name in _RECORDS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def mock_env_vars(monkeypatch, tmp_path):
    """Point file settings at a temporary directory."""
    inventory_file = tmp_path / "inventory.json"

    monkeypatch.setenv("RECORDS_INVENTORY_FILE", str(inventory_file))

    return {
        "inventory_file": inventory_file,
    }
