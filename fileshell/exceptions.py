"""
Custom exceptions for the application.
"""

from typing import Optional


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


class InvalidArgumentError(BaseAppError):
    """Exception raised for malformed commands (missing or extra arguments)."""

    pass


class FileRepositoryError(BaseAppError):
    """Exception raised for file repository errors not otherwise classified."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class PathNotFoundError(FileRepositoryError):
    """Exception raised when a path does not exist."""

    pass


class NotADirectoryPathError(FileRepositoryError):
    """Exception raised when a directory was expected."""

    pass


class IsADirectoryPathError(FileRepositoryError):
    """Exception raised when a regular file was expected."""

    pass


class AlreadyExistsError(FileRepositoryError):
    """Exception raised when creating something that already exists."""

    pass


class DirectoryNotEmptyError(FileRepositoryError):
    """Exception raised when removing a directory that still has entries."""

    pass


class UnreadablePathError(FileRepositoryError):
    """Exception raised when read access is denied."""

    pass


class BoundaryViolationError(FileRepositoryError):
    """Exception raised when navigation would leave the current filesystem root."""

    pass


class SourceNotFoundError(PathNotFoundError):
    pass


class SourceIsDirectoryError(IsADirectoryPathError):
    pass


class SourceUnreadableError(UnreadablePathError):
    pass


class TargetNotADirectoryError(NotADirectoryPathError):
    pass
