"""Unit tests for docshim.api.config.DocshimConfig module."""

import json
from pathlib import Path

import pytest

from docshim.api.config.DocshimConfig import DocshimConfig
from docshim.api.storage.Storage import Storage

pytestmark = pytest.mark.config


class TestLoad:
    """Test DocshimConfig.load."""

    def test_load_from_home(self, docshim_home: Path):
        config = DocshimConfig.load()
        assert config.storage.type == "mongomock"
        assert config.storage.database == "docshim_test"
        assert config.server.port == 9091
        assert config.server.host == "127.0.0.1"

    def test_load_explicit_path(self, tmp_path: Path, minimal_config_dict: dict):
        path = tmp_path / "custom.json"
        path.write_text(json.dumps(minimal_config_dict))
        assert DocshimConfig.load(path).storage.database == "docshim_test"

    def test_load_missing_file(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("DOCSHIM_HOME", str(tmp_path))
        with pytest.raises(ValueError, match="Configuration file not found"):
            DocshimConfig.load()

    def test_load_invalid_json(self, docshim_home: Path):
        (docshim_home / "config.json").write_text("{not json")
        with pytest.raises(ValueError, match="Invalid JSON"):
            DocshimConfig.load()

    def test_load_validation_error_names_field(self, docshim_home: Path, minimal_config_dict: dict):
        minimal_config_dict["server"]["port"] = 70000
        (docshim_home / "config.json").write_text(json.dumps(minimal_config_dict))
        with pytest.raises(ValueError, match=r"Configuration validation error: server\.port"):
            DocshimConfig.load()

    def test_load_rejects_unknown_section(self, docshim_home: Path, minimal_config_dict: dict):
        minimal_config_dict["extra"] = {}
        (docshim_home / "config.json").write_text(json.dumps(minimal_config_dict))
        with pytest.raises(ValueError, match="extra"):
            DocshimConfig.load()

    def test_loaded_storage_config_opens_storage(self, docshim_home: Path):
        config = DocshimConfig.load()
        with Storage(config.storage) as storage:
            storage.health_check()


class TestSave:
    """Test DocshimConfig.save."""

    def test_save_round_trip(self, docshim_home: Path):
        config = DocshimConfig.load()
        config.server.port = 8080
        config.save()
        assert DocshimConfig.load().server.port == 8080
        assert not (docshim_home / "config.json.tmp").exists()

    def test_save_creates_parent(self, tmp_path: Path, minimal_config_dict: dict):
        path = tmp_path / "nested" / "config.json"
        DocshimConfig.model_validate(minimal_config_dict).save(path)
        assert json.loads(path.read_text()) == {
            "storage": {"type": "mongomock", "database": "docshim_test", "operation_timeout_secs": None, "data": {}},
            "server": {"host": "127.0.0.1", "port": 9091, "startup_timeout_secs": 10.0},
        }
