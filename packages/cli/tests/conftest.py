"""Shared fixtures for CLI tests."""

import pytest
import structlog
from typer.testing import CliRunner

from menu_kit_common import get_settings
from menu_kit_storage import dump_catalog, sample_catalog


@pytest.fixture
def cli_runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Run each test from an empty directory with fresh settings and logging.

    The empty working directory means ``./menu.json`` never exists unless a
    test creates it.
    """
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    for var in ("MENU_KIT_LOG_LEVEL", "MENU_KIT_LOG_FORMAT"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield workdir
    get_settings.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def sample_menu_file(tmp_path):
    """Sample catalog written in the canonical object shape."""
    path = tmp_path / "menu.json"
    path.write_text(dump_catalog(sample_catalog()), encoding="utf-8")
    return path
