"""
Tests for the LocalFileSystemAdapter.
"""

import os
from unittest.mock import patch

import pytest

from fileshell.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from fileshell.entities.entry import Entry
from fileshell.exceptions import (
    AlreadyExistsError,
    DirectoryNotEmptyError,
    FileRepositoryError,
    NotADirectoryPathError,
    PathNotFoundError,
    UnreadablePathError,
)


class TestLocalFileSystemAdapter:
    """Test cases for the LocalFileSystemAdapter."""

    def test_list_entries_success(self, temp_directory, mock_logger):
        """Files and folders are listed."""
        adapter = LocalFileSystemAdapter(mock_logger)
        entries = adapter.list_entries(temp_directory)

        assert sorted(e.name for e in entries) == ["README", "subdir", "test1.txt", "test2.py"]
        assert all(isinstance(e, Entry) for e in entries)

    def test_list_entries_nonexistent_directory(self, mock_logger):
        adapter = LocalFileSystemAdapter(mock_logger)

        with pytest.raises(PathNotFoundError, match="Directory does not exist"):
            adapter.list_entries("/nonexistent/directory")

    def test_list_entries_with_file_path(self, temp_directory, mock_logger):
        test_file = os.path.join(temp_directory, "test1.txt")
        adapter = LocalFileSystemAdapter(mock_logger)

        with pytest.raises(NotADirectoryPathError, match="Path is not a directory"):
            adapter.list_entries(test_file)

    def test_list_entries_permission_denied(self, temp_directory, mock_logger):
        adapter = LocalFileSystemAdapter(mock_logger)

        with patch("os.listdir", side_effect=PermissionError("denied")):
            with pytest.raises(UnreadablePathError, match="Cannot read directory"):
                adapter.list_entries(temp_directory)

    def test_list_entries_other_os_error(self, temp_directory, mock_logger):
        adapter = LocalFileSystemAdapter(mock_logger)

        with patch("os.listdir", side_effect=OSError("I/O error")):
            with pytest.raises(FileRepositoryError, match="Failed to list"):
                adapter.list_entries(temp_directory)

    def test_create_entries_skips_unreadable(self, temp_directory, mock_logger):
        adapter = LocalFileSystemAdapter(mock_logger)
        paths = [
            os.path.join(temp_directory, "test1.txt"),
            os.path.join(temp_directory, "vanished.txt"),
        ]

        entries = adapter._create_entries(paths)

        assert [e.name for e in entries] == ["test1.txt"]
        mock_logger.warning.assert_called_once()

    def test_exists_and_is_dir(self, temp_directory, mock_logger):
        adapter = LocalFileSystemAdapter(mock_logger)

        assert adapter.exists(os.path.join(temp_directory, "test1.txt"))
        assert not adapter.exists(os.path.join(temp_directory, "missing"))
        assert adapter.is_dir(os.path.join(temp_directory, "subdir"))
        assert not adapter.is_dir(os.path.join(temp_directory, "test1.txt"))
        assert adapter.is_readable(temp_directory)

    def test_make_directories_creates_intermediates(self, temp_directory, mock_logger):
        adapter = LocalFileSystemAdapter(mock_logger)
        path = os.path.join(temp_directory, "a", "b", "c")

        assert adapter.make_directories(path) == path
        assert os.path.isdir(path)

    def test_make_directories_already_exists(self, temp_directory, mock_logger):
        adapter = LocalFileSystemAdapter(mock_logger)

        with pytest.raises(AlreadyExistsError, match="already exists"):
            adapter.make_directories(os.path.join(temp_directory, "subdir"))

    def test_make_directories_over_a_file(self, temp_directory, mock_logger):
        adapter = LocalFileSystemAdapter(mock_logger)

        with pytest.raises(AlreadyExistsError):
            adapter.make_directories(os.path.join(temp_directory, "test1.txt"))

    def test_make_directories_os_error(self, temp_directory, mock_logger):
        adapter = LocalFileSystemAdapter(mock_logger)

        with patch("os.makedirs", side_effect=PermissionError("denied")):
            with pytest.raises(FileRepositoryError, match="Failed to create directory"):
                adapter.make_directories(os.path.join(temp_directory, "new"))

    def test_remove_file(self, temp_directory, mock_logger):
        adapter = LocalFileSystemAdapter(mock_logger)
        path = os.path.join(temp_directory, "test1.txt")

        assert adapter.remove(path) == path
        assert not os.path.exists(path)

    def test_remove_empty_directory(self, temp_directory, mock_logger):
        adapter = LocalFileSystemAdapter(mock_logger)
        path = os.path.join(temp_directory, "empty")
        os.mkdir(path)

        adapter.remove(path)

        assert not os.path.exists(path)

    def test_remove_non_empty_directory_deletes_nothing(self, temp_directory, mock_logger):
        adapter = LocalFileSystemAdapter(mock_logger)
        path = os.path.join(temp_directory, "subdir")

        with pytest.raises(DirectoryNotEmptyError, match="not empty"):
            adapter.remove(path)

        assert os.path.isfile(os.path.join(path, "test3.md"))

    def test_remove_missing(self, temp_directory, mock_logger):
        adapter = LocalFileSystemAdapter(mock_logger)

        with pytest.raises(PathNotFoundError, match="No such file or directory"):
            adapter.remove(os.path.join(temp_directory, "missing"))

    def test_remove_os_error(self, temp_directory, mock_logger):
        adapter = LocalFileSystemAdapter(mock_logger)

        with patch("os.remove", side_effect=PermissionError("denied")):
            with pytest.raises(FileRepositoryError, match="Failed to remove"):
                adapter.remove(os.path.join(temp_directory, "test1.txt"))

    def test_copy_file_copies_bytes(self, temp_directory, mock_logger):
        adapter = LocalFileSystemAdapter(mock_logger)
        source = os.path.join(temp_directory, "test1.txt")
        destination = os.path.join(temp_directory, "subdir", "copy.txt")

        assert adapter.copy_file(source, destination) == destination
        with open(destination) as f:
            assert f.read() == "This is a test file."

    def test_copy_file_error(self, temp_directory, mock_logger):
        adapter = LocalFileSystemAdapter(mock_logger)
        source = os.path.join(temp_directory, "test1.txt")
        destination = os.path.join(temp_directory, "missing_dir", "copy.txt")

        with pytest.raises(FileRepositoryError, match="Failed to copy"):
            adapter.copy_file(source, destination)
