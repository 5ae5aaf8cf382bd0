"""
Use case for changing the session's current directory.
"""

import logging
from typing import Optional

from fileshell.entities.session import Session
from fileshell.exceptions import (
    BaseAppError,
    BoundaryViolationError,
    FileRepositoryError,
    NotADirectoryPathError,
    PathNotFoundError,
    UnreadablePathError,
)
from fileshell.ports.files.file_repository_port import FileRepositoryPort
from fileshell.utils.paths import crosses_root, resolve_path


class ChangeDirectoryUseCase:
    """Use case for navigating to another directory on the same filesystem root."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, raw_path: str, session: Session) -> str:
        """
        Move the session to another directory.

        The session is only updated once every check has passed.

        Args:
            raw_path: Target path, absolute or relative to the current directory
            session: Session whose current directory changes

        Returns:
            The new current directory

        Raises:
            BoundaryViolationError: If the target is under another filesystem root
            PathNotFoundError: If the target does not exist
            NotADirectoryPathError: If the target is not a directory
            UnreadablePathError: If the target cannot be read
        """
        current = session.current_directory
        target = resolve_path(raw_path, current)
        try:
            self._logger.info(f"Changing directory from {current} to {target}")
            if crosses_root(target, current):
                raise BoundaryViolationError(
                    f"Cannot leave the current filesystem root: {target}", target
                )
            if not self._file_repository.exists(target):
                raise PathNotFoundError(f"Directory does not exist: {target}", target)
            if not self._file_repository.is_dir(target):
                raise NotADirectoryPathError(f"Not a directory: {target}", target)
            if not self._file_repository.is_readable(target):
                raise UnreadablePathError(f"Access denied: {target}", target)
        except BaseAppError:
            raise
        except Exception as e:
            self._logger.error(f"Error changing directory: {e}")
            raise FileRepositoryError(f"Failed to change directory to {target}: {str(e)}", target)

        session.move_to(target)
        return target
