"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast isolated tests")
    config.addinivalue_line("markers", "integration: tests crossing the CLI boundary")


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


@pytest.fixture(autouse=True)
def wikilink_home(tmp_path, monkeypatch) -> Path:
    """Point WIKILINK_HOME at a temporary directory."""
    home = tmp_path / ".wikilink"
    home.mkdir()
    monkeypatch.setenv("WIKILINK_HOME", str(home))
    return home


def write_config(home: Path, config: dict) -> Path:
    """Write config.json into home and return its path."""
    path = home / "config.json"
    path.write_text(json.dumps(config))
    return path


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result
