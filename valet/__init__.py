"""Valet - local development environment manager."""

from config.project import get_project

__version__ = get_project().version
__author__ = "Valet Contributors"

# No package-level imports - use absolute imports instead
