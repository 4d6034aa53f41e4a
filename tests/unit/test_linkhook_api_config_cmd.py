"""Unit tests for linkhook.api.config commands."""

import pytest

from linkhook.api.config.cmd_show import cmd_show
from linkhook.api.config.cmd_version import cmd_version
from tests.conftest import run_cmd

pytestmark = pytest.mark.config


def test_show_lists_sections(linkhook_home):
    result = run_cmd(cmd_show)
    assert result.success is True
    assert result.output["content"] == {"sections": ["link", "log"]}
    assert result.output["config_path"].endswith("config.json")


def test_show_section(linkhook_home):
    result = run_cmd(cmd_show, "link")
    assert result.success is True
    assert result.output["content"] == {"error_level": "ignore", "highlight_broken": False}


def test_show_unknown_section(linkhook_home):
    result = run_cmd(cmd_show, "render")
    assert result.success is False
    assert result.output["errors"] == ["Unknown section: render"]


def test_show_without_config():
    result = run_cmd(cmd_show, "link")
    assert result.success is False
    assert "not found" in result.output["errors"][0]


def test_version():
    result = run_cmd(cmd_version)
    assert result.success is True
    assert result.output["version"]
