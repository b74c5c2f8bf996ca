"""Shared pytest configuration and fixtures for all tests."""

import json
import uuid
from pathlib import Path

import pytest

from docshim.api.storage.Storage import Storage
from docshim.api.storage.StorageConfig import StorageConfig

_MARKERS = {
    "unit": "fast tests with no external services",
    "integration": "tests that need a running MongoDB server",
    "storage": "storage facade and backends",
    "convert": "value coercion helpers",
    "config": "configuration loading",
    "server": "HTTP server bootstrap",
}


def pytest_configure(config):
    for name, description in _MARKERS.items():
        config.addinivalue_line("markers", f"{name}: {description}")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Configuration Helpers
# =============================================================================


def minimal_config_dict() -> dict:
    """Minimal valid docshim configuration dict for testing (in-memory backend)."""
    return {
        "storage": {
            "type": "mongomock",
            "database": "docshim_test",
            "data": {},
        },
        "server": {
            "host": "127.0.0.1",
            "port": 9091,
        },
    }


def mongomock_storage_config(database: str | None = None) -> StorageConfig:
    """StorageConfig for the shared in-memory backend.

    A unique database name keeps tests apart, since mongomock's client is shared.
    """
    return StorageConfig.model_validate(
        {"type": "mongomock", "database": database or f"docshim_test_{uuid.uuid4().hex}", "data": {}}
    )


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(name="minimal_config_dict")
def minimal_config_dict_fixture() -> dict:
    """Pytest fixture returning a copy of the minimal config dict."""
    return minimal_config_dict()


@pytest.fixture
def docshim_home(tmp_path: Path, monkeypatch, minimal_config_dict: dict) -> Path:
    """Set up DOCSHIM_HOME with a minimal config file.

    Returns:
        Path to the docshim home directory (tmp_path)
    """
    monkeypatch.setenv("DOCSHIM_HOME", str(tmp_path))
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps(minimal_config_dict))
    return tmp_path


@pytest.fixture
def storage_config() -> StorageConfig:
    return mongomock_storage_config()


@pytest.fixture
def storage(storage_config: StorageConfig):
    """Open Storage on a fresh in-memory database."""
    with Storage(storage_config) as opened:
        yield opened
