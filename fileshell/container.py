"""
Dependency injection container for managing application dependencies.
"""

import logging

from fileshell.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from fileshell.ports.files.file_repository_port import FileRepositoryPort
from fileshell.use_cases.directories.make_directory import MakeDirectoryUseCase
from fileshell.use_cases.directories.remove_entry import RemoveEntryUseCase
from fileshell.use_cases.files.copy_file import CopyFileUseCase
from fileshell.use_cases.files.list_directory import ListDirectoryUseCase
from fileshell.use_cases.navigation.change_directory import ChangeDirectoryUseCase


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self):
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    def get_file_repository(self) -> FileRepositoryPort:
        """
        Get file repository adapter instance.

        Returns:
            FileRepositoryPort implementation
        """
        if "file_repository" not in self._instances:
            self._instances["file_repository"] = LocalFileSystemAdapter(self._logger)
        return self._instances["file_repository"]

    def get_list_directory_use_case(self) -> ListDirectoryUseCase:
        """
        Get list directory use case with injected dependencies.

        Returns:
            Configured ListDirectoryUseCase
        """
        if "list_directory_use_case" not in self._instances:
            self._instances["list_directory_use_case"] = ListDirectoryUseCase(
                self.get_file_repository(), self._logger
            )
        return self._instances["list_directory_use_case"]

    def get_copy_file_use_case(self) -> CopyFileUseCase:
        """
        Get copy file use case with injected dependencies.

        Returns:
            Configured CopyFileUseCase
        """
        if "copy_file_use_case" not in self._instances:
            self._instances["copy_file_use_case"] = CopyFileUseCase(
                self.get_file_repository(), self._logger
            )
        return self._instances["copy_file_use_case"]

    def get_change_directory_use_case(self) -> ChangeDirectoryUseCase:
        """
        Get change directory use case with injected dependencies.

        Returns:
            Configured ChangeDirectoryUseCase
        """
        if "change_directory_use_case" not in self._instances:
            self._instances["change_directory_use_case"] = ChangeDirectoryUseCase(
                self.get_file_repository(), self._logger
            )
        return self._instances["change_directory_use_case"]

    def get_make_directory_use_case(self) -> MakeDirectoryUseCase:
        """
        Get make directory use case with injected dependencies.

        Returns:
            Configured MakeDirectoryUseCase
        """
        if "make_directory_use_case" not in self._instances:
            self._instances["make_directory_use_case"] = MakeDirectoryUseCase(
                self.get_file_repository(), self._logger
            )
        return self._instances["make_directory_use_case"]

    def get_remove_entry_use_case(self) -> RemoveEntryUseCase:
        """
        Get remove entry use case with injected dependencies.

        Returns:
            Configured RemoveEntryUseCase
        """
        if "remove_entry_use_case" not in self._instances:
            self._instances["remove_entry_use_case"] = RemoveEntryUseCase(
                self.get_file_repository(), self._logger
            )
        return self._instances["remove_entry_use_case"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
