"""CLI commands implementation."""

import click
import clicycle

from valet import __version__
from valet.interfaces.cli import configuration, setup_verbose_logging
from valet.interfaces.cli.settings import get_value, list_settings, set_value

# Configure clicycle
clicycle.configure(app_name="valet")


@click.group()
@click.version_option(version=__version__, prog_name="valet")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def cli(verbose: bool):
    """Valet - manage the local development environment configuration."""
    if verbose:
        setup_verbose_logging()


@cli.command()
def install():
    """Create the configuration directory and default settings."""
    configuration.install()


@cli.command()
@click.option("--force", "-f", is_flag=True, help="Do not ask for confirmation")
def uninstall(force: bool):
    """Remove the configuration directory and everything in it."""
    configuration.uninstall(force)


@cli.command()
@click.argument("path", required=False, type=click.Path(file_okay=False))
@click.option("--prepend", "-p", is_flag=True, help="Give the path top priority")
def park(path: str | None, prepend: bool):
    """Register a directory whose children are served as sites."""
    configuration.park(path, prepend)


@cli.command()
@click.argument("path", required=False, type=click.Path(file_okay=False))
def forget(path: str | None):
    """Remove a directory from the parked paths."""
    configuration.forget(path)


@cli.command()
def paths():
    """List the parked paths."""
    configuration.list_paths()


@cli.command()
def prune():
    """Remove parked paths that no longer exist."""
    configuration.prune()


@cli.command()
@click.argument("new_domain", required=False)
def domain(new_domain: str | None):
    """Show or change the domain suffix used for sites."""
    configuration.domain(new_domain)


@cli.command()
@click.argument("new_port", required=False)
def port(new_port: str | None):
    """Show or change the HTTP port."""
    configuration.port(new_port)


@cli.command()
@click.argument("site_name")
def hostname(site_name: str):
    """Show the local hostname for a site name."""
    configuration.hostname(site_name)


@cli.group()
def settings():
    """View and modify raw configuration values."""
    pass


@settings.command(name="list")
def list_settings_command():
    """List all settings."""
    list_settings()


@settings.command(name="get")
@click.argument("setting_name")
def get_value_command(setting_name: str):
    """Get a specific setting value."""
    get_value(setting_name)


@settings.command(name="set")
@click.argument("setting_name")
@click.argument("setting_value")
@click.option("--json", "as_json", is_flag=True, help="Parse the value as JSON")
def set_value_command(setting_name: str, setting_value: str, as_json: bool):
    """Set a setting value."""
    set_value(setting_name, setting_value, as_json)
