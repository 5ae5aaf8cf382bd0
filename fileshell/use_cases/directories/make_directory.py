import logging
from typing import Optional

from fileshell.exceptions import BaseAppError, FileRepositoryError
from fileshell.ports.files.file_repository_port import FileRepositoryPort
from fileshell.utils.paths import resolve_path


class MakeDirectoryUseCase:
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
            self._logger.info(f"Creating directory: {path}")
            return self._file_repository.make_directories(path)
        except BaseAppError:
            raise
        except Exception as e:
            self._logger.error(f"Error creating directory: {e}")
            raise FileRepositoryError(f"Failed to create directory {path}: {str(e)}", path)
