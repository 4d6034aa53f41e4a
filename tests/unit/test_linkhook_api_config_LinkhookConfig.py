"""Unit tests for linkhook.api.config.LinkhookConfig."""

import json
from pathlib import Path

import pytest

from linkhook.api.config.ConfigurationError import ConfigurationError
from linkhook.api.config.LinkhookConfig import LinkhookConfig

pytestmark = pytest.mark.config


def test_home_dir_from_env(tmp_path):
    assert LinkhookConfig.get_home_dir() == (tmp_path / "home").resolve()
    assert LinkhookConfig.get_config_path() == (tmp_path / "home").resolve() / "config.json"


def test_home_dir_default(monkeypatch):
    monkeypatch.delenv("LINKHOOK_HOME")
    assert LinkhookConfig.get_home_dir() == Path.home() / ".linkhook"


def test_load(linkhook_home):
    config = LinkhookConfig.load()
    assert config.link.error_level == "ignore"
    assert config.log.level == "INFO"


def test_load_missing_file():
    with pytest.raises(ConfigurationError, match="not found"):
        LinkhookConfig.load()


def test_load_invalid_json(write_config):
    path = write_config({})
    path.write_text("{broken")
    with pytest.raises(ConfigurationError, match="Invalid JSON"):
        LinkhookConfig.load()


def test_load_not_object(write_config):
    path = write_config({})
    path.write_text("[]")
    with pytest.raises(ConfigurationError, match="JSON object"):
        LinkhookConfig.load()


def test_load_invalid_error_level_is_fatal(write_config):
    write_config({"link": {"errorLevel": "sometimes"}})
    with pytest.raises(ConfigurationError, match="link.errorLevel"):
        LinkhookConfig.load()


def test_load_sections_default(write_config):
    write_config({})
    config = LinkhookConfig.load()
    assert config.link.error_level == "ignore"
    assert config.link.highlight_broken is False


def test_load_unknown_section(write_config):
    write_config({"render": {}})
    with pytest.raises(ConfigurationError, match="render"):
        LinkhookConfig.load()


def test_save_round_trip(write_config):
    write_config({"link": {"error_level": "WARNING", "highlight_broken": True}})
    config = LinkhookConfig.load()
    config.save()
    saved = json.loads(LinkhookConfig.get_config_path().read_text())
    assert saved == {
        "link": {"error_level": "warning", "highlight_broken": True},
        "log": {"level": "INFO"},
    }
    assert not LinkhookConfig.get_config_path().with_suffix(".json.tmp").exists()


def test_save_creates_home():
    LinkhookConfig().save()
    assert LinkhookConfig.get_config_path().exists()
