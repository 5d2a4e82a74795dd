"""Shared pytest configuration and fixtures for all tests."""

import json
import uuid
from pathlib import Path

import pytest

from qcat.api.database.Database import Database
from qcat.api.database.DatabaseConfig import DatabaseConfig
from qcat.api.database.SAMPLE_BOOKS import SAMPLE_BOOKS

_ENV_VARS = ("QCAT_HOME", "QCAT_MONGO_URI", "QCAT_DATABASE", "QCAT_COLLECTION")


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without external services")
    config.addinivalue_line("markers", "catalog: operation catalog tests")
    config.addinivalue_line("markers", "database: database layer tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Configuration Helpers
# =============================================================================


def minimal_config_dict() -> dict:
    """Minimal valid qcat configuration dict backed by mongomock.

    The shared mongomock client outlives each test, so every config gets its
    own database name.
    """
    return {
        "database": {
            "type": "mongomock",
            "database": f"qcat_test_{uuid.uuid4().hex[:12]}",
            "collection": "books",
            "data": {},
        },
        "log": {"level": "INFO"},
    }


@pytest.fixture(name="minimal_config_dict")
def minimal_config_dict_fixture() -> dict:
    return minimal_config_dict()


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def qcat_home(tmp_path: Path, monkeypatch, minimal_config_dict: dict) -> Path:
    """Set up QCAT_HOME with a minimal config file.

    Returns:
        Path to the qcat home directory (tmp_path)
    """
    monkeypatch.setenv("QCAT_HOME", str(tmp_path))
    (tmp_path / "config.json").write_text(json.dumps(minimal_config_dict))
    return tmp_path


@pytest.fixture
def database_config(minimal_config_dict: dict) -> DatabaseConfig:
    """An empty mongomock collection."""
    return DatabaseConfig(**minimal_config_dict["database"])


@pytest.fixture
def books(database_config: DatabaseConfig) -> DatabaseConfig:
    """A mongomock collection holding SAMPLE_BOOKS."""
    with Database(database_config) as database:
        database.insert_many([dict(book) for book in SAMPLE_BOOKS])
    return database_config


@pytest.fixture
def seeded_home(qcat_home: Path, minimal_config_dict: dict) -> Path:
    """QCAT_HOME whose configured collection holds SAMPLE_BOOKS."""
    with Database(DatabaseConfig(**minimal_config_dict["database"])) as database:
        database.insert_many([dict(book) for book in SAMPLE_BOOKS])
    return qcat_home


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result
