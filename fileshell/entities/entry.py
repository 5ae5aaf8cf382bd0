"""
Directory entry domain entity.
"""

import os
from typing import Any

from fileshell.exceptions import FileRepositoryError, PathNotFoundError
from fileshell.utils.paths import printable
from fileshell.utils.size_format import format_size

FOLDER_LABEL = "folder"


class Entry:
    """
    File system entry entity (file or directory) shown in a directory listing.
    """

    def __init__(self, path: str):
        """
        Initialize the Entry entity.

        Args:
            path: Path to the file or directory

        Raises:
            FileRepositoryError: If path is invalid or its metadata cannot be read
        """
        if not path or not isinstance(path, str):
            raise FileRepositoryError("Path must be a non-empty string")

        if not os.path.lexists(path):
            raise PathNotFoundError(f"Entry does not exist: {path}", path)

        self.path = os.path.abspath(path)
        self.name = os.path.basename(self.path)
        self.is_dir = os.path.isdir(self.path)
        self.size = self._find_size()
        self.extension = "" if self.is_dir else self._find_extension()

    def _find_size(self) -> int:
        """Get the size in bytes as reported by the filesystem."""
        try:
            return os.stat(self.path).st_size
        except OSError as e:
            raise FileRepositoryError(f"Cannot get size of {self.path}: {e}", self.path)

    def _find_extension(self) -> str:
        """Extension including the dot; empty for names without an interior dot (e.g. '.bashrc')."""
        dot = self.name.rfind(".")
        return self.name[dot:] if dot > 0 else ""

    @property
    def display_name(self) -> str:
        return printable(self.name)

    @property
    def type_label(self) -> str:
        return FOLDER_LABEL if self.is_dir else self.extension

    @property
    def human_size(self) -> str:
        return format_size(self.size)

    def get_details(self) -> dict[str, Any]:
        """
        Get the listing fields of this entry.

        Returns:
            Dictionary with entry information
        """
        return {
            "path": self.path,
            "name": self.name,
            "type": self.type_label,
            "size": self.size,
            "human_size": self.human_size,
            "directory": os.path.dirname(self.path),
        }

    def __str__(self) -> str:
        return f"Entry(name='{self.name}', size={self.size}, type='{self.type_label}')"

    def __repr__(self) -> str:
        return f"Entry(path='{self.path}')"
