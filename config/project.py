"""
Provides access to project metadata from pyproject.toml.
"""

import tomllib
from dataclasses import dataclass
from functools import cache
from importlib import metadata
from pathlib import Path

PACKAGE_NAME = "valet"


@dataclass
class Project:
    """Container for project metadata."""

    name: str
    version: str


def get_project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent


@cache
def get_project() -> Project:
    """
    Get project metadata by parsing pyproject.toml.
    Falls back to the installed distribution metadata when the source tree
    is not available. The result is cached for performance.
    """
    pyproject_path = get_project_root() / "pyproject.toml"
    if not pyproject_path.exists():
        try:
            return Project(name=PACKAGE_NAME, version=metadata.version(PACKAGE_NAME))
        except metadata.PackageNotFoundError:
            return Project(name=PACKAGE_NAME, version="0.0.0")

    with pyproject_path.open("rb") as f:
        data = tomllib.load(f)

    project_data = data.get("project", {})
    project_name = project_data.get("name", PACKAGE_NAME)
    version = project_data.get("version", "0.0.0")

    return Project(name=project_name, version=version)
