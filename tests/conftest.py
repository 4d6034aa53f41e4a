"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest

from linkhook.api.config.LinkConfig import LinkConfig
from linkhook.api.link.CollectingDiagnosticSink import CollectingDiagnosticSink
from linkhook.api.link.DestinationResolver import DestinationResolver
from linkhook.api.site.Site import Site


def pytest_configure(config):
    for marker in ("unit", "smoke", "integration", "config", "link", "site", "cli"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/smoke/" in path_str:
            item.add_marker(pytest.mark.smoke)
        elif "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Configuration Helpers
# =============================================================================


def minimal_config_dict() -> dict:
    """Smallest complete configuration."""
    return {
        "link": {
            "error_level": "ignore",
            "highlight_broken": False,
        },
        "log": {
            "level": "INFO",
        },
    }


def site_dict() -> dict:
    """A small site exercising every lookup scope.

    /docs/foo is a leaf bundle, /docs/bar a regular page; both live in the
    /docs section. Resource names are reused across scopes so precedence is
    observable.
    """
    return {
        "pages": [
            {"path": "/", "rel_permalink": "/", "bundle_type": "branch"},
            {
                "path": "/docs",
                "rel_permalink": "/docs/",
                "bundle_type": "branch",
                "section": "/",
                "headings": ["overview"],
                "resources": [
                    {"path": "shared.png", "rel_permalink": "/docs/shared.png"},
                ],
            },
            {
                "path": "/docs/foo",
                "rel_permalink": "/docs/foo/",
                "bundle_type": "leaf",
                "section": "/docs",
                "headings": ["intro", "install", "setup", "setup"],
                "resources": [
                    {"path": "diagram.png", "rel_permalink": "/docs/foo/diagram.png"},
                ],
            },
            {
                "path": "/docs/bar",
                "rel_permalink": "/docs/bar/",
                "section": "/docs",
                "headings": ["usage"],
            },
            {"path": "/docs/guide", "rel_permalink": "/docs/guide/", "section": "/docs"},
        ],
        "resources": [
            {"path": "images/logo.png", "rel_permalink": "/images/logo.png"},
            {"path": "shared.png", "rel_permalink": "/global/shared.png"},
            {"path": "diagram.png", "rel_permalink": "/global/diagram.png"},
            {"path": "docs/guide", "rel_permalink": "/assets/docs/guide.txt"},
        ],
    }


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch) -> None:
    """Point LINKHOOK_HOME at an empty directory and clear the environment predicate."""
    monkeypatch.setenv("LINKHOOK_HOME", str(tmp_path / "home"))
    monkeypatch.delenv("LINKHOOK_ENVIRONMENT", raising=False)


@pytest.fixture(name="minimal_config_dict")
def minimal_config_dict_fixture() -> dict:
    return minimal_config_dict()


@pytest.fixture
def linkhook_home(tmp_path: Path, minimal_config_dict: dict) -> Path:
    """LINKHOOK_HOME with a minimal config file."""
    home = tmp_path / "home"
    home.mkdir(parents=True, exist_ok=True)
    (home / "config.json").write_text(json.dumps(minimal_config_dict))
    return home


@pytest.fixture
def write_config(tmp_path: Path):
    """Write a config dict into LINKHOOK_HOME."""

    def _write(config: dict) -> Path:
        home = tmp_path / "home"
        home.mkdir(parents=True, exist_ok=True)
        path = home / "config.json"
        path.write_text(json.dumps(config))
        return path

    return _write


@pytest.fixture
def site() -> Site:
    return Site.from_dict(site_dict())


@pytest.fixture
def site_path(tmp_path: Path) -> Path:
    path = tmp_path / "site.json"
    path.write_text(json.dumps(site_dict()), encoding="utf-8")
    return path


@pytest.fixture
def sink() -> CollectingDiagnosticSink:
    return CollectingDiagnosticSink()


@pytest.fixture
def resolver(site: Site, sink: CollectingDiagnosticSink) -> DestinationResolver:
    return DestinationResolver(site, site.resources, sink)


@pytest.fixture
def ignore_config() -> LinkConfig:
    return LinkConfig()


@pytest.fixture
def warning_config() -> LinkConfig:
    return LinkConfig(error_level="warning", highlight_broken=True)


@pytest.fixture
def error_config() -> LinkConfig:
    return LinkConfig(error_level="error")
