import logging
from typing import Optional

from fileshell.exceptions import BaseAppError, FileRepositoryError
from fileshell.ports.files.file_repository_port import FileRepositoryPort
from fileshell.utils.paths import resolve_path


class RemoveEntryUseCase:
    """Delete one file or one empty directory; never recursive."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, name: str, current_directory: str) -> str:
        path = resolve_path(name, current_directory)
        try:
            self._logger.info(f"Removing: {path}")
            return self._file_repository.remove(path)
        except BaseAppError:
            raise
        except Exception as e:
            self._logger.error(f"Error removing entry: {e}")
            raise FileRepositoryError(f"Failed to remove {path}: {str(e)}", path)
