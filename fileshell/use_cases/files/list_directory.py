"""
Use case for listing the contents of a directory.
"""

import logging
from typing import Optional

from fileshell.entities.entry import Entry
from fileshell.exceptions import BaseAppError, FileRepositoryError
from fileshell.ports.files.file_repository_port import FileRepositoryPort


def listing_order(entry: Entry) -> str:
    """Sort key of a listing: plain, case-sensitive name order."""
    return entry.name


class ListDirectoryUseCase:
    """Use case for listing files and folders in a directory."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_repository: Repository for file operations
            logger: Logger instance to use for logging
        """
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, directory: str) -> list[Entry]:
        """
        List everything directly inside a directory.

        Args:
            directory: Absolute path to the directory

        Returns:
            List of Entry entities sorted by name

        Raises:
            FileRepositoryError: If listing fails
        """
        try:
            self._logger.info(f"Listing directory: {directory}")
            entries = sorted(
                self._file_repository.list_entries(directory), key=listing_order
            )
        except BaseAppError:
            raise
        except Exception as e:
            self._logger.error(f"Error listing directory: {e}")
            raise FileRepositoryError(f"Failed to list {directory}: {str(e)}", directory)

        folders = sum(1 for entry in entries if entry.is_dir)
        self._logger.info(
            f"Found {len(entries)} entries ({folders} folders, {len(entries) - folders} files)"
        )
        return entries
