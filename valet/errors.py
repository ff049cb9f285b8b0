"""Exception classes for the Valet configuration manager."""

from __future__ import annotations

from pathlib import Path


class ValetError(Exception):
    """Base exception for all Valet errors."""


class ConfigurationError(ValetError):
    """Raised when the configuration document cannot be used."""

    def __init__(self: ConfigurationError, message: str, path: Path | None = None) -> None:
        self.message = message
        self.path = path
        super().__init__(f"{message}: {path}" if path else message)


class ConfigurationNotInitializedError(ConfigurationError):
    """Raised when the configuration document does not exist yet."""

    def __init__(self: ConfigurationNotInitializedError, path: Path) -> None:
        super().__init__("Configuration file not found, run 'valet install' first", path)


class MalformedConfigurationError(ConfigurationError):
    """Raised when the configuration document is not a valid JSON object."""

    def __init__(self: MalformedConfigurationError, path: Path, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Malformed configuration file ({reason})", path)


class UninstallError(ValetError):
    """Raised when the configuration directory cannot be removed."""

    def __init__(self: UninstallError, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to remove {path}: {reason}")
