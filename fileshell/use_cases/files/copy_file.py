"""
Use case for copying a file into a directory without overwriting anything.
"""

import logging
import os
from dataclasses import dataclass
from typing import Iterator, Optional

from fileshell.exceptions import (
    BaseAppError,
    FileRepositoryError,
    SourceIsDirectoryError,
    SourceNotFoundError,
    SourceUnreadableError,
    TargetNotADirectoryError,
)
from fileshell.ports.files.file_repository_port import FileRepositoryPort
from fileshell.utils.paths import resolve_path


@dataclass(frozen=True)
class CopyResult:
    destination: str
    # set when the target directory did not exist and was created for this copy
    created_directory: Optional[str] = None


def candidate_names(file_name: str) -> Iterator[str]:
    """
    Yield destination names for a file: the name itself, then ``base_1.ext``, ``base_2.ext``, ...

    The name is split at its last dot; a name without a dot gets the suffix at the end.
    """
    yield file_name
    base, dot, extension = file_name.rpartition(".")
    if not dot:
        base, extension = file_name, ""
    else:
        extension = dot + extension
    n = 1
    while True:
        yield f"{base}_{n}{extension}"
        n += 1


class CopyFileUseCase:
    """Use case for copying a file into a target directory, renaming on collisions."""

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

    def _validate_source(self, source: str) -> None:
        if not self._file_repository.exists(source):
            raise SourceNotFoundError(f"Source file does not exist: {source}", source)
        if self._file_repository.is_dir(source):
            raise SourceIsDirectoryError(
                f"Source is a directory, not a file: {source}", source
            )
        if not self._file_repository.is_readable(source):
            raise SourceUnreadableError(f"Source file is not readable: {source}", source)

    def _ensure_target_directory(self, target_directory: str) -> Optional[str]:
        """Create the target directory when missing; return it if it was created."""
        if not self._file_repository.exists(target_directory):
            self._file_repository.make_directories(target_directory)
            self._logger.info(f"Created target directory: {target_directory}")
            return target_directory
        if not self._file_repository.is_dir(target_directory):
            raise TargetNotADirectoryError(
                f"Target is not a directory: {target_directory}", target_directory
            )
        return None

    def _free_destination(self, target_directory: str, file_name: str) -> str:
        candidates = (
            os.path.join(target_directory, name) for name in candidate_names(file_name)
        )
        return next(c for c in candidates if not self._file_repository.exists(c))

    def execute(
        self, source_arg: str, target_dir_arg: str, current_directory: str
    ) -> CopyResult:
        """
        Copy a file into a directory.

        Args:
            source_arg: Source file path, absolute or relative to current_directory
            target_dir_arg: Target directory path, absolute or relative to current_directory
            current_directory: Absolute path of the session's current directory

        Returns:
            CopyResult with the final destination path

        Raises:
            SourceNotFoundError, SourceIsDirectoryError, SourceUnreadableError:
                If the source cannot be copied
            TargetNotADirectoryError: If the target exists but is not a directory
            FileRepositoryError: If creating the target or copying fails
        """
        source = resolve_path(source_arg, current_directory)
        target_directory = resolve_path(target_dir_arg, current_directory)
        try:
            self._logger.info(f"Copying {source} into {target_directory}")
            self._validate_source(source)
            created = self._ensure_target_directory(target_directory)
            destination = self._free_destination(
                target_directory, os.path.basename(source)
            )
            self._file_repository.copy_file(source, destination)
            self._logger.info(f"Copied to {destination}")
            return CopyResult(destination=destination, created_directory=created)
        except BaseAppError:
            raise
        except Exception as e:
            self._logger.error(f"Error copying file: {e}")
            raise FileRepositoryError(
                f"Failed to copy {source} to {target_directory}: {str(e)}", source
            )
