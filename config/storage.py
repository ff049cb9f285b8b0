"""
JSON file based configuration storage.
Owns the configuration root: its layout, the config.json document and the
list of parked paths.
"""

import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from config.paths import get_stubs_dir, get_valet_home
from config.settings import ConfigurationDocument, base_document
from valet.errors import (
    ConfigurationNotInitializedError,
    MalformedConfigurationError,
    UninstallError,
)
from valet.shared.filesystem import Filesystem
from valet.shared.user import user as resolve_user

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"
SAMPLE_DRIVER_NAME = "SampleValetDriver.php"
ERROR_LOG_NAME = "nginx-error.log"


class ConfigurationStore:
    """Read, write and bootstrap the Valet configuration."""

    def __init__(
        self,
        files: Filesystem | None = None,
        user: Callable[[], str] = resolve_user,
        home: Path | None = None,
    ):
        """Initialize configuration storage.

        Args:
            files: Filesystem used for every disk access.
            user: Resolves the owner of created files and directories.
            home: Configuration root. If None, uses the configured location.
        """
        self.files = files or Filesystem()
        self.user = user
        self.home = Path(home) if home is not None else get_valet_home()

    def install(self) -> None:
        """Create the configuration root, its directories and the base config."""
        self._create_configuration_directory()
        self._create_drivers_directory()
        self._create_sites_directory()
        self._create_extensions_directory()
        self._create_log_directory()
        self._create_certificates_directory()
        self._write_base_configuration()

        self.files.chown(self.home, self.user(), recursive=True)
        logger.debug(f"Installed configuration in {self.home}")

    def uninstall(self) -> None:
        """Remove the configuration root and everything in it."""
        if not self.files.is_dir(self.home):
            return

        try:
            self.files.remove(self.home)
        except OSError as e:
            raise UninstallError(self.home, str(e)) from e
        logger.debug(f"Removed configuration in {self.home}")

    def add_path(self, path: str, prepend: bool = False) -> None:
        """Add a path to the parked paths.

        Appending a path that is already parked keeps its position, while
        prepending moves it to the front.
        """
        config = self._read()
        paths = [path, *config.paths] if prepend else [*config.paths, path]
        config.paths = list(dict.fromkeys(paths))
        self._write(config)
        logger.debug(f"Added path {path}")

    def remove_path(self, path: str) -> None:
        """Remove a path from the parked paths."""
        config = self._read()
        config.paths = [value for value in config.paths if value != path]
        self._write(config)
        logger.debug(f"Removed path {path}")

    def prune(self) -> None:
        """Remove parked paths that are no longer directories."""
        if not self.files.exists(self.path):
            return

        config = self._read()
        kept = [path for path in config.paths if self.files.is_dir(path)]
        for path in config.paths:
            if path not in kept:
                logger.info(f"Pruning missing path {path}")
        config.paths = kept
        self._write(config)

    def paths(self) -> list[str]:
        """Get the parked paths, or an empty list before install."""
        return list(self.get("paths", []))

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value."""
        if not self.files.exists(self.path):
            return default

        return self._read().value(key, default)

    def get_all(self) -> dict[str, Any]:
        """Get the whole configuration, or an empty dict before install."""
        if not self.files.exists(self.path):
            return {}

        return self._read().to_json()

    def set(self, key: str, value: Any) -> ConfigurationDocument:
        """Set a configuration value and return the updated configuration."""
        config = self._read()
        try:
            config.assign(key, value)
        except ValidationError as e:
            raise MalformedConfigurationError(self.path, f"invalid value for '{key}'") from e
        self._write(config)
        logger.debug(f"Set {key}")
        return config

    def parse_domain(self, site_name: str) -> str:
        """Get the fully qualified local hostname for a site name."""
        domain = self.get("domain", base_document().domain)
        if not site_name.endswith(f".{domain}"):
            return f"{site_name}.{domain}"
        return site_name

    @property
    def path(self) -> Path:
        """Get the configuration file path."""
        return self.home / CONFIG_FILE_NAME

    def _read(self) -> ConfigurationDocument:
        """Read the configuration file as JSON."""
        if not self.files.exists(self.path):
            raise ConfigurationNotInitializedError(self.path)

        try:
            data = json.loads(self.files.get(self.path))
        except json.JSONDecodeError as e:
            raise MalformedConfigurationError(self.path, e.msg) from e

        if not isinstance(data, dict):
            raise MalformedConfigurationError(self.path, "expected a JSON object")

        try:
            return ConfigurationDocument.model_validate(data)
        except ValidationError as e:
            raise MalformedConfigurationError(self.path, str(e.errors()[0]["msg"])) from e

    def _write(self, config: ConfigurationDocument) -> None:
        """Write the given configuration to disk."""
        self.files.put(
            self.path,
            json.dumps(config.to_json(), indent=4) + "\n",
            self.user(),
        )

    def _create_configuration_directory(self) -> None:
        self.files.ensure_dir_exists(self.home, self.user())

    def _create_drivers_directory(self) -> None:
        """Create the drivers directory, seeded with a sample driver."""
        drivers_directory = self.home / "Drivers"
        if self.files.is_dir(drivers_directory):
            return

        self.files.mkdir(drivers_directory, self.user())
        self.files.put(
            drivers_directory / SAMPLE_DRIVER_NAME,
            self.files.get(get_stubs_dir() / SAMPLE_DRIVER_NAME),
            self.user(),
        )

    def _create_sites_directory(self) -> None:
        self.files.ensure_dir_exists(self.home / "Sites", self.user())

    def _create_extensions_directory(self) -> None:
        self.files.ensure_dir_exists(self.home / "Extensions", self.user())

    def _create_log_directory(self) -> None:
        """Create the log directory with an empty nginx error log."""
        log_directory = self.home / "Log"
        self.files.ensure_dir_exists(log_directory, self.user())
        self.files.touch(log_directory / ERROR_LOG_NAME, self.user())

    def _create_certificates_directory(self) -> None:
        self.files.ensure_dir_exists(self.home / "Certificates", self.user())

    def _write_base_configuration(self) -> None:
        """Write the initial configuration unless one already exists."""
        if not self.files.exists(self.path):
            self._write(base_document())
