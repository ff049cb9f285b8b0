"""Test helpers and utilities."""

import json
import os
import pwd

from config.storage import ConfigurationStore


def current_user() -> str:
    """Return the login name of the test process."""
    return pwd.getpwuid(os.getuid()).pw_name


def read_config(store: ConfigurationStore) -> dict:
    """Read the raw configuration file of a store."""
    return json.loads(store.path.read_text())


def write_config(store: ConfigurationStore, data) -> None:
    """Write raw data to the configuration file of a store."""
    store.path.parent.mkdir(parents=True, exist_ok=True)
    store.path.write_text(json.dumps(data))
