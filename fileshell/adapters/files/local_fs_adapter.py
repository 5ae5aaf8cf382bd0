"""
Local file system adapter implementation for file operations.
"""

import logging
import os
import shutil

from typing_extensions import override

from fileshell.entities.entry import Entry
from fileshell.exceptions import (
    AlreadyExistsError,
    DirectoryNotEmptyError,
    FileRepositoryError,
    NotADirectoryPathError,
    PathNotFoundError,
    UnreadablePathError,
)
from fileshell.ports.files.file_repository_port import FileRepositoryPort


class LocalFileSystemAdapter(FileRepositoryPort):
    """Local file system implementation of the file repository port."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    def _validate_directory(self, directory: str) -> None:
        """
        Validate that a directory exists and is indeed a directory.

        Args:
            directory: Path to the directory to validate

        Raises:
            PathNotFoundError: If directory does not exist
            NotADirectoryPathError: If path is not a directory
        """
        if not os.path.exists(directory):
            raise PathNotFoundError(f"Directory does not exist: {directory}", directory)

        if not os.path.isdir(directory):
            raise NotADirectoryPathError(f"Path is not a directory: {directory}", directory)

    def _create_entries(self, paths: list[str]) -> list[Entry]:
        """
        Create Entry entities from a list of paths, skipping unreadable ones.

        Args:
            paths: List of paths to convert to Entry entities

        Returns:
            List of Entry entities
        """
        entries: list[Entry] = []
        for path in paths:
            try:
                entries.append(Entry(path))
            except FileRepositoryError as e:
                # Log the error but continue with other entries
                self._logger.warning(f"Could not read entry {path}: {e}")
                continue

        return entries

    @override
    def list_entries(self, directory: str) -> list[Entry]:
        try:
            self._validate_directory(directory)

            paths = [os.path.join(directory, name) for name in os.listdir(directory)]
            return self._create_entries(paths)

        except FileRepositoryError:
            raise
        except PermissionError as e:
            raise UnreadablePathError(f"Cannot read directory {directory}: {e}", directory)
        except OSError as e:
            raise FileRepositoryError(f"Failed to list {directory}: {str(e)}", directory)

    @override
    def exists(self, path: str) -> bool:
        return os.path.lexists(path)

    @override
    def is_dir(self, path: str) -> bool:
        return os.path.isdir(path)

    @override
    def is_readable(self, path: str) -> bool:
        return os.access(path, os.R_OK)

    @override
    def make_directories(self, path: str) -> str:
        """
        Create a directory and all missing parents.

        Raises:
            AlreadyExistsError: If path already exists (as a directory or anything else)
            FileRepositoryError: If creation fails
        """
        try:
            os.makedirs(path)
        except FileExistsError:
            raise AlreadyExistsError(f"Directory already exists: {path}", path)
        except OSError as e:
            raise FileRepositoryError(f"Failed to create directory {path}: {str(e)}", path)
        self._logger.info(f"Created directory: {path}")
        return path

    @override
    def remove(self, path: str) -> str:
        """
        Delete a single file or an empty directory. Directories are never removed recursively.
        """
        if not os.path.lexists(path):
            raise PathNotFoundError(f"No such file or directory: {path}", path)

        try:
            if os.path.isdir(path) and not os.path.islink(path):
                if os.listdir(path):
                    raise DirectoryNotEmptyError(
                        f"Directory is not empty: {path} (rm only removes files and empty directories)",
                        path,
                    )
                os.rmdir(path)
            else:
                os.remove(path)
        except FileRepositoryError:
            raise
        except FileNotFoundError:
            # removed by someone else between the check and the call
            raise PathNotFoundError(f"No such file or directory: {path}", path)
        except OSError as e:
            raise FileRepositoryError(f"Failed to remove {path}: {str(e)}", path)

        self._logger.info(f"Removed: {path}")
        return path

    @override
    def copy_file(self, source: str, destination: str) -> str:
        try:
            shutil.copyfile(source, destination)
        except OSError as e:
            raise FileRepositoryError(
                f"Failed to copy {source} to {destination}: {str(e)}", destination
            )
        self._logger.info(f"Copied {source} -> {destination}")
        return destination
