import json

import pytest

from qcat.api.database.cmd_reset import cmd_reset
from qcat.api.database.cmd_seed import cmd_seed
from qcat.api.database.Database import Database
from qcat.api.database.DatabaseConfig import DatabaseConfig
from qcat.api.database.SAMPLE_BOOKS import SAMPLE_BOOKS
from qcat.api.validate_output import validate_output
from tests.unit.conftest import run_cmd

pytestmark = pytest.mark.database


def _count(minimal_config_dict: dict) -> int:
    with Database(DatabaseConfig(**minimal_config_dict["database"])) as database:
        return database.count_documents()


class TestCmdSeed:
    def test_seed(self, qcat_home, minimal_config_dict):
        result = run_cmd(cmd_seed)

        assert result.success
        assert result.output["inserted_count"] == len(SAMPLE_BOOKS)
        assert result.output["deleted_count"] == 0
        assert _count(minimal_config_dict) == len(SAMPLE_BOOKS)
        validate_output(cmd_seed, result.output)

    def test_seed_twice_appends(self, qcat_home, minimal_config_dict):
        run_cmd(cmd_seed)
        run_cmd(cmd_seed)
        assert _count(minimal_config_dict) == 2 * len(SAMPLE_BOOKS)

    def test_seed_replace(self, qcat_home, minimal_config_dict):
        run_cmd(cmd_seed)
        result = run_cmd(cmd_seed, replace=True)

        assert result.output["deleted_count"] == len(SAMPLE_BOOKS)
        assert _count(minimal_config_dict) == len(SAMPLE_BOOKS)

    def test_sample_books_untouched(self, qcat_home):
        run_cmd(cmd_seed)
        assert all("_id" not in book for book in SAMPLE_BOOKS)

    def test_seed_invalid_config(self, qcat_home):
        (qcat_home / "config.json").write_text("{not json")
        result = run_cmd(cmd_seed)
        assert not result.success
        assert "Invalid JSON" in result.output["errors"][0]

    def test_seed_connection_failure(self, tmp_path, monkeypatch, fake_mongo):
        monkeypatch.setenv("QCAT_HOME", str(tmp_path))
        fake_mongo.fail_ping = True

        result = run_cmd(cmd_seed)

        assert not result.success
        assert result.output["database"] == "plp_bookstore"
        assert "Could not connect" in result.output["errors"][0]


    def test_seed_invalid_collection_name(self, tmp_path, monkeypatch, fake_mongo):
        monkeypatch.setenv("QCAT_HOME", str(tmp_path))
        monkeypatch.setenv("QCAT_COLLECTION", "books$")

        result = run_cmd(cmd_seed)

        assert not result.success
        assert "collection name" in result.output["errors"][0]
        assert fake_mongo.instances == []

    def test_seed_malformed_uri(self, tmp_path, monkeypatch):
        monkeypatch.setenv("QCAT_HOME", str(tmp_path))
        monkeypatch.setenv("QCAT_MONGO_URI", "mongodb://localhost:notaport")

        result = run_cmd(cmd_seed)

        assert not result.success
        assert "Invalid MongoDB settings" in result.output["errors"][0]


class TestCmdReset:
    def test_reset(self, seeded_home, minimal_config_dict):
        result = run_cmd(cmd_reset)

        assert result.success
        assert result.output["deleted_count"] == len(SAMPLE_BOOKS)
        assert _count(minimal_config_dict) == 0
        validate_output(cmd_reset, result.output)

    def test_reset_empty(self, qcat_home):
        result = run_cmd(cmd_reset)
        assert result.success
        assert result.output["deleted_count"] == 0

    def test_reset_invalid_config(self, qcat_home):
        (qcat_home / "config.json").write_text(json.dumps({"unknown": True}))
        result = run_cmd(cmd_reset)
        assert not result.success
        assert result.output["deleted_count"] == -1

    def test_reset_invalid_database_name(self, tmp_path, monkeypatch, fake_mongo):
        monkeypatch.setenv("QCAT_HOME", str(tmp_path))
        monkeypatch.setenv("QCAT_DATABASE", "plp bookstore")

        result = run_cmd(cmd_reset)

        assert not result.success
        assert "database name" in result.output["errors"][0]
        assert fake_mongo.instances == []
