"""Tests for the filesystem primitives."""

from pathlib import Path
from unittest.mock import call, patch

import pytest

from valet.shared.filesystem import Filesystem


@pytest.fixture
def files():
    """Return a Filesystem instance."""
    return Filesystem()


class TestPut:
    """Test cases for writing files."""

    def test_put_writes_contents(self, files, tmp_path):
        """Test that a new file gets the contents and default mode."""
        target = tmp_path / "config.json"

        files.put(target, "{}\n")

        assert target.read_text() == "{}\n"
        assert target.stat().st_mode & 0o777 == 0o644

    def test_put_keeps_existing_mode(self, files, tmp_path):
        """Test that replacing a file keeps its permissions."""
        target = tmp_path / "config.json"
        target.write_text("old")
        target.chmod(0o600)

        files.put(target, "new")

        assert target.read_text() == "new"
        assert target.stat().st_mode & 0o777 == 0o600

    def test_put_leaves_no_temporary_files(self, files, tmp_path):
        """Test that only the target remains after a write."""
        files.put(tmp_path / "config.json", "{}")

        assert [p.name for p in tmp_path.iterdir()] == ["config.json"]

    def test_put_assigns_owner(self, files, tmp_path):
        """Test that the written file is handed to the owner."""
        target = tmp_path / "config.json"

        with patch.object(files, "chown") as mock_chown:
            files.put(target, "{}", "alice")

        mock_chown.assert_called_once_with(target, "alice")

    def test_put_assigns_owner_when_write_fails(self, files, tmp_path):
        """Test that ownership is re-assigned even if the rename fails."""
        target = tmp_path / "config.json"
        target.write_text("old")

        with (
            patch.object(files, "chown") as mock_chown,
            patch.object(Path, "replace", side_effect=OSError("disk full")),
            pytest.raises(OSError, match="disk full"),
        ):
            files.put(target, "new", "alice")

        mock_chown.assert_called_once_with(target, "alice")
        assert target.read_text() == "old"
        assert [p.name for p in tmp_path.iterdir()] == ["config.json"]

    def test_put_as_user_uses_resolved_user(self, files, tmp_path):
        """Test that put_as_user writes for the invoking user."""
        target = tmp_path / "config.json"

        with (
            patch("valet.shared.filesystem.user", return_value="alice"),
            patch.object(files, "chown") as mock_chown,
        ):
            files.put_as_user(target, "{}")

        mock_chown.assert_called_once_with(target, "alice")

    def test_put_into_missing_directory_fails(self, files, tmp_path):
        """Test that filesystem errors propagate unchanged."""
        with pytest.raises(FileNotFoundError):
            files.put(tmp_path / "missing" / "config.json", "{}")


class TestDirectories:
    """Test cases for directory handling."""

    def test_ensure_dir_exists_creates_directory(self, files, tmp_path):
        """Test that a missing directory is created with its parents."""
        target = tmp_path / "a" / "b"

        with patch.object(files, "chown") as mock_chown:
            files.ensure_dir_exists(target, "alice")

        assert target.is_dir()
        mock_chown.assert_called_once_with(target, "alice")

    def test_ensure_dir_exists_skips_existing(self, files, tmp_path):
        """Test that an existing directory is left alone."""
        with patch.object(files, "chown") as mock_chown:
            files.ensure_dir_exists(tmp_path, "alice")

        mock_chown.assert_not_called()

    def test_mkdir_as_user(self, files, tmp_path):
        """Test that mkdir_as_user assigns the resolved user."""
        target = tmp_path / "Drivers"

        with (
            patch("valet.shared.filesystem.user", return_value="alice"),
            patch.object(files, "chown") as mock_chown,
        ):
            files.mkdir_as_user(target)

        assert target.is_dir()
        mock_chown.assert_called_once_with(target, "alice")

    def test_remove_directory_tree(self, files, tmp_path):
        """Test that remove deletes nested content."""
        root = tmp_path / "valet"
        (root / "Log").mkdir(parents=True)
        (root / "Log" / "nginx-error.log").write_text("")

        files.remove(root)

        assert not root.exists()

    def test_remove_file(self, files, tmp_path):
        """Test that remove deletes a single file."""
        target = tmp_path / "config.json"
        target.write_text("{}")

        files.remove(target)

        assert not target.exists()

    def test_exists_and_is_dir(self, files, tmp_path):
        """Test existence checks."""
        a_file = tmp_path / "file.txt"
        a_file.write_text("")

        assert files.exists(a_file)
        assert not files.is_dir(a_file)
        assert files.is_dir(tmp_path)
        assert not files.exists(tmp_path / "missing")


class TestOwnership:
    """Test cases for touch and chown."""

    def test_touch_creates_file(self, files, tmp_path):
        """Test that touch creates an empty file."""
        target = tmp_path / "nginx-error.log"

        files.touch(target)

        assert target.read_text() == ""

    def test_chown_single_path(self, files, tmp_path):
        """Test that a non-recursive chown only touches the path itself."""
        (tmp_path / "child").write_text("")

        with patch("valet.shared.filesystem.shutil.chown") as mock_chown:
            files.chown(tmp_path, "alice")

        mock_chown.assert_called_once_with(tmp_path, user="alice")

    def test_chown_recursive(self, files, tmp_path):
        """Test that a recursive chown reaches nested files."""
        (tmp_path / "Log").mkdir()
        (tmp_path / "Log" / "nginx-error.log").write_text("")

        with patch("valet.shared.filesystem.shutil.chown") as mock_chown:
            files.chown(tmp_path, "alice", recursive=True)

        assert mock_chown.call_args_list[0] == call(tmp_path, user="alice")
        assert call(tmp_path / "Log", user="alice") in mock_chown.call_args_list
        assert (
            call(tmp_path / "Log" / "nginx-error.log", user="alice")
            in mock_chown.call_args_list
        )
