"""Unit tests for docshim.api.config.get_home_dir module."""

from pathlib import Path

import pytest

from docshim.api.config.get_config_path import get_config_path
from docshim.api.config.get_home_dir import get_home_dir

pytestmark = pytest.mark.config


class TestGetHomeDir:
    """Test get_home_dir function."""

    def test_default_when_env_unset(self, monkeypatch):
        monkeypatch.delenv("DOCSHIM_HOME", raising=False)
        monkeypatch.delenv("HOME", raising=False)
        home_dir = get_home_dir()
        assert isinstance(home_dir, Path)
        assert home_dir.name == ".docshim"

    def test_docshim_home_env(self, monkeypatch, tmp_path):
        custom = tmp_path / "custom"
        monkeypatch.setenv("DOCSHIM_HOME", str(custom))
        assert get_home_dir() == custom.resolve()

    def test_home_env(self, monkeypatch, tmp_path):
        monkeypatch.delenv("DOCSHIM_HOME", raising=False)
        monkeypatch.setenv("HOME", str(tmp_path))
        assert get_home_dir() == tmp_path / ".docshim"

    def test_docshim_home_takes_precedence(self, monkeypatch, tmp_path):
        monkeypatch.setenv("DOCSHIM_HOME", str(tmp_path / "a"))
        monkeypatch.setenv("HOME", str(tmp_path / "b"))
        assert get_home_dir() == (tmp_path / "a").resolve()

    def test_with_parts(self, monkeypatch, tmp_path):
        monkeypatch.setenv("DOCSHIM_HOME", str(tmp_path))
        assert get_home_dir("logs", "a.log") == tmp_path.resolve() / "logs" / "a.log"


def test_get_config_path(monkeypatch, tmp_path):
    monkeypatch.setenv("DOCSHIM_HOME", str(tmp_path))
    assert get_config_path() == tmp_path.resolve() / "config.json"
