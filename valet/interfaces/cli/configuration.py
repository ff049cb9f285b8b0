"""Configuration management CLI commands."""

import click
import clicycle

from config.storage import ConfigurationStore
from valet.interfaces.cli.utils import absolute_path, handle_errors, pluralize


def install():
    """Create the configuration directory and base configuration."""
    store = ConfigurationStore()

    with handle_errors():
        store.install()

    clicycle.success(f"Valet configuration installed in {store.home}")


def uninstall(force: bool):
    """Remove the configuration directory."""
    store = ConfigurationStore()

    if not force and not clicycle.confirm(
        f"This will delete {store.home} and all parked paths. Continue?"
    ):
        clicycle.info("Uninstall cancelled")
        return

    with handle_errors():
        store.uninstall()

    clicycle.success("Valet configuration removed")


def park(path: str | None, prepend: bool):
    """Add a directory to the parked paths."""
    store = ConfigurationStore()
    path = absolute_path(path)

    with handle_errors():
        store.add_path(path, prepend=prepend)

    clicycle.success(f"Parked {path}")


def forget(path: str | None):
    """Remove a directory from the parked paths."""
    store = ConfigurationStore()
    path = absolute_path(path)

    with handle_errors():
        store.remove_path(path)

    clicycle.success(f"Forgot {path}")


def list_paths():
    """Show all parked paths."""
    store = ConfigurationStore()

    with handle_errors():
        paths = store.paths()

    clicycle.header("Parked Paths")

    if not paths:
        clicycle.info("No paths parked")
        return

    for path in paths:
        clicycle.list_item(path)


def prune():
    """Remove parked paths that no longer exist."""
    store = ConfigurationStore()

    with handle_errors():
        before = store.paths()
        store.prune()
        after = store.paths()

    removed = len(before) - len(after)
    clicycle.success(f"Pruned {pluralize(removed, 'path')}")


def domain(new_domain: str | None):
    """Show or change the local domain suffix."""
    store = ConfigurationStore()

    with handle_errors():
        if new_domain is None:
            clicycle.info(f"Domain: {store.get('domain', 'not set')}")
            return

        new_domain = new_domain.strip().lstrip(".")
        if not new_domain:
            clicycle.error("Domain cannot be empty")
            return

        store.set("domain", new_domain)

    clicycle.success(f"Domain set to .{new_domain}")


def port(new_port: str | None):
    """Show or change the HTTP port."""
    store = ConfigurationStore()

    with handle_errors():
        if new_port is None:
            clicycle.info(f"Port: {store.get('port', 'not set')}")
            return

        if not new_port.isdigit():
            clicycle.error(f"Invalid port: {new_port}")
            return

        store.set("port", new_port)

    clicycle.success(f"Port set to {new_port}")


def hostname(site_name: str):
    """Show the local hostname for a site."""
    store = ConfigurationStore()

    with handle_errors():
        click.echo(store.parse_domain(site_name))
