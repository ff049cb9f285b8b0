"""Pytest configuration for the test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from config import get_config
from config.storage import ConfigurationStore
from tests.helpers import current_user
from valet.shared.filesystem import Filesystem


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep tests away from the real configuration root and sudo user."""
    monkeypatch.delenv("SUDO_USER", raising=False)
    monkeypatch.setenv("VALET_HOME_PATH", str(tmp_path / "env-home"))
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture(scope="function")
def valet_home(tmp_path) -> Path:
    """Return a configuration root that does not exist yet."""
    return tmp_path / "valet"


@pytest.fixture(scope="function")
def files() -> Filesystem:
    """Return a Filesystem instance."""
    return Filesystem()


@pytest.fixture(scope="function")
def store(files: Filesystem, valet_home: Path) -> ConfigurationStore:
    """Return a ConfigurationStore rooted in a temporary directory."""
    return ConfigurationStore(files, user=current_user, home=valet_home)


@pytest.fixture(scope="function")
def installed_store(store: ConfigurationStore) -> ConfigurationStore:
    """Return a ConfigurationStore that has been installed."""
    store.install()
    return store
