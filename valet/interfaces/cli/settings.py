"""Settings management CLI commands."""

import json

import clicycle

from config.storage import ConfigurationStore
from valet.interfaces.cli.utils import handle_errors


def list_settings():
    """Show all current settings."""
    store = ConfigurationStore()

    with handle_errors():
        current = store.get_all()

    if not current:
        clicycle.warning("Valet is not installed, run 'valet install' first")
        return

    clicycle.header("Current Settings")
    for key, value in current.items():
        if key == "paths":
            continue
        clicycle.info(f"{key}: {_display(value)}")

    clicycle.section("Parked Paths")
    paths = current.get("paths", [])
    if not paths:
        clicycle.info("No paths parked")
    for path in paths:
        clicycle.list_item(path)


def get_value(key: str):
    """Get a setting value."""
    store = ConfigurationStore()

    with handle_errors():
        value = store.get(key)

    if value is None:
        clicycle.info(f"{key}: not set")
        return

    clicycle.info(f"{key}: {_display(value)}")


def set_value(key: str, value: str, as_json: bool = False):
    """Set a setting value."""
    store = ConfigurationStore()

    if as_json:
        try:
            parsed = json.loads(value)
        except json.JSONDecodeError as e:
            clicycle.error(f"Invalid JSON value: {e.msg}")
            return
    else:
        parsed = value

    with handle_errors():
        store.set(key, parsed)

    clicycle.success(f"Set {key}: {_display(parsed)}")


def _display(value) -> str:
    """Format a stored value for display."""
    if isinstance(value, str):
        return value
    return json.dumps(value)
