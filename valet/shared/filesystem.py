"""Ownership-aware filesystem primitives."""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from pathlib import Path

from valet.shared.user import user

logger = logging.getLogger(__name__)

DEFAULT_DIR_MODE = 0o755
DEFAULT_FILE_MODE = 0o644


class Filesystem:
    """Filesystem operations that hand created files to the resolved user."""

    def exists(self, path: Path) -> bool:
        """Check if a file or directory exists."""
        return Path(path).exists()

    def is_dir(self, path: Path) -> bool:
        """Check if the path is a directory."""
        return Path(path).is_dir()

    def remove(self, path: Path) -> None:
        """Remove a file, or a directory and everything below it."""
        path = Path(path)
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink()

    def mkdir(
        self, path: Path, owner: str | None = None, mode: int = DEFAULT_DIR_MODE
    ) -> None:
        """Create a directory, including missing parents."""
        path = Path(path)
        path.mkdir(mode=mode, parents=True)
        if owner:
            self.chown(path, owner)

    def ensure_dir_exists(
        self, path: Path, owner: str | None = None, mode: int = DEFAULT_DIR_MODE
    ) -> None:
        """Create a directory unless it already exists."""
        if not self.is_dir(path):
            self.mkdir(path, owner, mode)

    def mkdir_as_user(self, path: Path, mode: int = DEFAULT_DIR_MODE) -> None:
        """Create a directory owned by the resolved user."""
        self.mkdir(path, user(), mode)

    def get(self, path: Path) -> str:
        """Read the contents of a file."""
        return Path(path).read_text(encoding="utf-8")

    def put(self, path: Path, contents: str, owner: str | None = None) -> None:
        """Replace the contents of a file.

        The data goes to a temporary sibling first and is renamed over the
        target, so readers never see a half written file. Ownership is
        assigned on every exit path, including failed writes.
        """
        path = Path(path)
        mode = path.stat().st_mode & 0o777 if path.exists() else DEFAULT_FILE_MODE

        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.")
        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(contents)
            tmp_path.chmod(mode)
            tmp_path.replace(path)
        finally:
            if tmp_path.exists():
                tmp_path.unlink()
            if owner and path.exists():
                self.chown(path, owner)

    def put_as_user(self, path: Path, contents: str) -> None:
        """Write a file owned by the resolved user."""
        self.put(path, contents, user())

    def touch(self, path: Path, owner: str | None = None) -> None:
        """Create an empty file or update its modification time."""
        path = Path(path)
        path.touch()
        if owner:
            self.chown(path, owner)

    def chown(self, path: Path, owner: str, recursive: bool = False) -> None:
        """Change the owner of a path, optionally of everything below it."""
        path = Path(path)
        shutil.chown(path, user=owner)
        if recursive and path.is_dir() and not path.is_symlink():
            for root, dirs, files in os.walk(path):
                for name in dirs + files:
                    child = Path(root) / name
                    if not child.is_symlink():
                        shutil.chown(child, user=owner)
        logger.debug(f"Assigned {path} to {owner}")
