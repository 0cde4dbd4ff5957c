"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest

from loclink.utils.configure_logging import reset_logging


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: unit tests")
    config.addinivalue_line("markers", "integration: integration tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Environment isolation
# =============================================================================


@pytest.fixture(autouse=True)
def loclink_home(tmp_path: Path, monkeypatch) -> Path:
    """Point LOCLINK_HOME at a fresh directory so no test touches ~/.loclink.

    Returns:
        Path to the loclink home directory (created lazily by the code under test)
    """
    home = tmp_path / "loclink_home"
    monkeypatch.setenv("LOCLINK_HOME", str(home))
    yield home
    reset_logging()


@pytest.fixture
def write_config(loclink_home: Path):
    """Write a config dict to the isolated home."""

    def _write(config: dict) -> Path:
        loclink_home.mkdir(parents=True, exist_ok=True)
        config_path = loclink_home / "config.json"
        config_path.write_text(json.dumps(config))
        return config_path

    return _write


# =============================================================================
# Command helpers
# =============================================================================


def _run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


@pytest.fixture
def run_cmd():
    return _run_cmd


# =============================================================================
# Project fixtures
# =============================================================================


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A project directory marked by .git with a small source file.

    Layout:
        proj/.git/
        proj/src/x.py   (five lines: "line 1" .. "line 5")
    """
    root = tmp_path / "proj"
    (root / ".git").mkdir(parents=True)
    source = root / "src" / "x.py"
    source.parent.mkdir()
    source.write_text("".join(f"line {n}\n" for n in range(1, 6)), encoding="utf-8")
    return root


@pytest.fixture
def project_root(project: Path) -> str:
    """Canonical form of the project root (absolute, trailing separator)."""
    return str(project) + "/"
