"""
Centralized path management for the configuration root and bundled files.
"""

import os
from pathlib import Path

from config import get_config

CONFIG_DIR_NAME = "valet"


def get_valet_home() -> Path:
    """Get the configuration root directory."""
    home_path = get_config().home_path
    if home_path:
        return Path(home_path).expanduser()

    # Follow XDG Base Directory Specification
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config) / CONFIG_DIR_NAME
    return Path.home() / ".config" / CONFIG_DIR_NAME


def get_stubs_dir() -> Path:
    """Get the directory holding the bundled stub files."""
    return Path(__file__).parent.parent / "valet" / "stubs"


__all__ = ["CONFIG_DIR_NAME", "get_valet_home", "get_stubs_dir"]
