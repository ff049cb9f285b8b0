"""Utility functions for the CLI."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import click

from valet.errors import ValetError


def pluralize(count: int, singular: str, plural: str | None = None) -> str:
    """Pluralize a word based on count."""
    if count == 1:
        return f"{count} {singular}"
    return f"{count} {plural or singular + 's'}"


def absolute_path(path: str | None) -> str:
    """Resolve a user supplied path, defaulting to the working directory."""
    return str(Path(path or Path.cwd()).expanduser().resolve())


@contextmanager
def handle_errors() -> Iterator[None]:
    """Turn Valet and filesystem errors into click errors."""
    try:
        yield
    except ValetError as e:
        raise click.ClickException(str(e)) from e
    except OSError as e:
        raise click.ClickException(f"{e.strerror or e}: {e.filename}") from e
