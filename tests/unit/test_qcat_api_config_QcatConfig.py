import json

import pytest

from qcat.api.config.ArgumentError import ArgumentError
from qcat.api.config.cmd_show import cmd_show
from qcat.api.config.QcatConfig import QcatConfig
from qcat.api.validate_output import validate_output
from tests.unit.conftest import run_cmd


def _write(home, data) -> None:
    (home / "config.json").write_text(json.dumps(data) if not isinstance(data, str) else data)


class TestQcatConfigLoad:
    def test_defaults_without_file(self, tmp_path, monkeypatch):
        monkeypatch.setenv("QCAT_HOME", str(tmp_path))

        config = QcatConfig.load()

        assert config.database.type == "mongo"
        assert config.database.database == "plp_bookstore"
        assert config.database.collection == "books"
        assert config.database.data.uri == "mongodb://localhost:27017"
        assert config.log.level == "INFO"

    def test_file_values(self, qcat_home, minimal_config_dict):
        config = QcatConfig.load()
        assert config.database.type == "mongomock"
        assert config.database.database == minimal_config_dict["database"]["database"]

    def test_explicit_path(self, tmp_path):
        path = tmp_path / "other.json"
        path.write_text(json.dumps({"log": {"level": "DEBUG"}}))
        assert QcatConfig.load(path).log.level == "DEBUG"

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        monkeypatch.setenv("QCAT_HOME", str(tmp_path))
        _write(tmp_path, {"database": {"type": "mongo", "database": "shop", "data": {"uri": "mongodb://filehost"}}})
        monkeypatch.setenv("QCAT_MONGO_URI", "mongodb://envhost:27017")
        monkeypatch.setenv("QCAT_DATABASE", "plp_bookstore")
        monkeypatch.setenv("QCAT_COLLECTION", "novels")

        config = QcatConfig.load()

        assert config.database.data.uri == "mongodb://envhost:27017"
        assert config.database.database == "plp_bookstore"
        assert config.database.collection == "novels"

    def test_uri_override_ignored_for_mongomock(self, qcat_home, monkeypatch):
        monkeypatch.setenv("QCAT_MONGO_URI", "mongodb://envhost:27017")
        config = QcatConfig.load()
        assert config.database.type == "mongomock"

    def test_invalid_json(self, tmp_path, monkeypatch):
        monkeypatch.setenv("QCAT_HOME", str(tmp_path))
        _write(tmp_path, "{")
        with pytest.raises(ArgumentError, match="Invalid JSON"):
            QcatConfig.load()

    def test_not_an_object(self, tmp_path, monkeypatch):
        monkeypatch.setenv("QCAT_HOME", str(tmp_path))
        _write(tmp_path, [1, 2])
        with pytest.raises(ArgumentError, match="JSON object"):
            QcatConfig.load()

    @pytest.mark.parametrize(
        "data, field",
        [
            ({"log": {"level": "TRACE"}}, "log.level"),
            ({"database": {"data": {"uri": "http://localhost"}}}, "database"),
            ({"database": {"data": {"server_selection_timeout_ms": 0}}}, "database"),
            ({"metrics": {}}, "metrics"),
        ],
    )
    def test_validation_error_names_field(self, tmp_path, monkeypatch, data, field):
        monkeypatch.setenv("QCAT_HOME", str(tmp_path))
        _write(tmp_path, data)
        with pytest.raises(ArgumentError, match=f"Configuration validation error: {field}"):
            QcatConfig.load()

    def test_to_dict(self, qcat_home, minimal_config_dict):
        assert QcatConfig.load().to_dict() == minimal_config_dict


class TestCmdShow:
    def test_show(self, qcat_home, minimal_config_dict):
        result = run_cmd(cmd_show)

        assert result.success
        assert result.output["exists"] is True
        assert result.output["path"] == str((qcat_home / "config.json").resolve())
        assert result.output["config"] == minimal_config_dict
        validate_output(cmd_show, result.output)

    def test_show_defaults(self, tmp_path, monkeypatch):
        monkeypatch.setenv("QCAT_HOME", str(tmp_path))

        result = run_cmd(cmd_show)

        assert result.success
        assert result.output["exists"] is False
        assert result.output["config"]["database"]["database"] == "plp_bookstore"
        assert result.output["warnings"][0].startswith("No config file")

    def test_show_invalid(self, qcat_home):
        _write(qcat_home, {"log": {"level": "LOUD"}})
        result = run_cmd(cmd_show)
        assert not result.success
        assert result.output["config"] == {}
