"""
File repository port interface defining the contract for file operations.
"""

from abc import ABC, abstractmethod

from fileshell.entities.entry import Entry


class FileRepositoryPort(ABC):
    """Port interface for file repository operations."""

    @abstractmethod
    def list_entries(self, directory: str) -> list[Entry]:
        """
        List the files and directories directly inside a directory.

        Args:
            directory: Absolute path to the directory to list

        Returns:
            List of Entry entities in no particular order

        Raises:
            PathNotFoundError: If the directory does not exist
            NotADirectoryPathError: If the path is not a directory
            UnreadablePathError: If the directory cannot be read
        """
        pass

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Check whether anything (file, directory, link) exists at path."""
        pass

    @abstractmethod
    def is_dir(self, path: str) -> bool:
        """Check whether path is an existing directory."""
        pass

    @abstractmethod
    def is_readable(self, path: str) -> bool:
        """Check whether the current user may read path."""
        pass

    @abstractmethod
    def make_directories(self, path: str) -> str:
        """
        Create a directory and any missing intermediate directories.

        Args:
            path: Absolute path of the directory to create

        Returns:
            The created path

        Raises:
            AlreadyExistsError: If something already exists at path
            FileRepositoryError: For any other failure
        """
        pass

    @abstractmethod
    def remove(self, path: str) -> str:
        """
        Delete a single file or an empty directory.

        Args:
            path: Absolute path to delete

        Returns:
            The deleted path

        Raises:
            PathNotFoundError: If nothing exists at path
            DirectoryNotEmptyError: If path is a directory with entries
            FileRepositoryError: For any other failure
        """
        pass

    @abstractmethod
    def copy_file(self, source: str, destination: str) -> str:
        """
        Copy the bytes of source to destination.

        Args:
            source: Absolute path of an existing regular file
            destination: Absolute path of the new file

        Returns:
            The destination path

        Raises:
            FileRepositoryError: If the copy fails
        """
        pass
