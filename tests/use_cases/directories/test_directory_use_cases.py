"""
Tests for the MakeDirectoryUseCase and RemoveEntryUseCase.
"""

import os
from unittest.mock import MagicMock

import pytest

from fileshell.exceptions import (
    AlreadyExistsError,
    DirectoryNotEmptyError,
    FileRepositoryError,
    PathNotFoundError,
)
from fileshell.ports.files.file_repository_port import FileRepositoryPort
from fileshell.use_cases.directories.make_directory import MakeDirectoryUseCase
from fileshell.use_cases.directories.remove_entry import RemoveEntryUseCase


class TestMakeDirectoryUseCase:
    def test_creates_relative_to_current_directory(self, dependency_container, temp_directory):
        use_case = dependency_container.get_make_directory_use_case()

        path = use_case.execute("new/inner", temp_directory)

        assert path == os.path.join(temp_directory, "new", "inner")
        assert os.path.isdir(path)

    def test_already_exists(self, dependency_container, temp_directory):
        use_case = dependency_container.get_make_directory_use_case()

        with pytest.raises(AlreadyExistsError):
            use_case.execute("subdir", temp_directory)

    def test_unexpected_error_is_wrapped(self, mock_logger):
        repository = MagicMock(spec=FileRepositoryPort)
        repository.make_directories.side_effect = RuntimeError("disk gone")

        with pytest.raises(FileRepositoryError, match="Failed to create directory /w/x: disk gone"):
            MakeDirectoryUseCase(repository, mock_logger).execute("x", "/w")
        mock_logger.error.assert_called_once()


class TestRemoveEntryUseCase:
    def test_removes_file(self, dependency_container, temp_directory):
        use_case = dependency_container.get_remove_entry_use_case()

        path = use_case.execute("test1.txt", temp_directory)

        assert path == os.path.join(temp_directory, "test1.txt")
        assert not os.path.exists(path)

    def test_non_empty_directory_is_kept(self, dependency_container, temp_directory):
        use_case = dependency_container.get_remove_entry_use_case()

        with pytest.raises(DirectoryNotEmptyError):
            use_case.execute("subdir", temp_directory)
        assert os.listdir(os.path.join(temp_directory, "subdir")) == ["test3.md"]

    def test_missing(self, dependency_container, temp_directory):
        use_case = dependency_container.get_remove_entry_use_case()

        with pytest.raises(PathNotFoundError):
            use_case.execute("ghost", temp_directory)

    def test_repository_errors_propagate(self, mock_logger):
        repository = MagicMock(spec=FileRepositoryPort)
        repository.remove.side_effect = PathNotFoundError("No such file or directory: /w/x")

        with pytest.raises(PathNotFoundError):
            RemoveEntryUseCase(repository, mock_logger).execute("x", "/w")
        mock_logger.error.assert_not_called()
