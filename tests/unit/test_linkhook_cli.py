"""Unit tests for the linkhook CLI entry point."""

import json

import pytest

from linkhook.cli import main

pytestmark = pytest.mark.cli


def test_resolve_json(linkhook_home, site_path, capsys):
    code = main(["--display", "json", "link", "resolve", "/docs/foo#install", "--site", str(site_path), "--page", "/docs/bar"])
    assert code == 0
    output = json.loads(capsys.readouterr().out)
    assert output["href"] == "/docs/foo/#install"
    assert output["kind"] == "page"


def test_resolve_error_level_exit_code(linkhook_home, site_path, capsys):
    code = main(
        [
            "--display",
            "json",
            "link",
            "resolve",
            "/docs/missing",
            "--site",
            str(site_path),
            "--page",
            "/docs/foo",
            "--error-level",
            "error",
        ]
    )
    assert code == 1
    output = json.loads(capsys.readouterr().out)
    assert output["errors"]


def test_resolve_yaml_highlight(linkhook_home, site_path, capsys):
    code = main(
        [
            "link",
            "resolve",
            "/docs/missing",
            "-s",
            str(site_path),
            "-p",
            "/docs/foo",
            "--error-level",
            "warning",
            "--highlight-broken",
            "--development",
        ]
    )
    assert code == 0
    out = capsys.readouterr().out
    assert "class: broken" in out


def test_config_show(linkhook_home, capsys):
    code = main(["-d", "json", "config", "show", "link"])
    assert code == 0
    assert json.loads(capsys.readouterr().out)["content"]["error_level"] == "ignore"


def test_invalid_display(capsys):
    assert main(["--display", "xml", "config"]) == 1


def test_missing_option_is_usage_error(capsys):
    assert main(["link", "resolve", "/docs/foo"]) == 2
    assert "Missing option" in capsys.readouterr().err


def test_resolve_without_config_file(site_path, capsys):
    code = main(["-d", "json", "link", "resolve", "/docs/foo", "-s", str(site_path), "-p", "/docs/bar", "--error-level", "warning"])
    assert code == 0
    assert json.loads(capsys.readouterr().out)["href"] == "/docs/foo/"


def test_display_defaults_to_yaml(linkhook_home, capsys):
    assert main(["config", "show", "link"]) == 0
    assert "error_level: ignore" in capsys.readouterr().out


def test_help_exits_cleanly(capsys):
    assert main(["--help"]) == 0
