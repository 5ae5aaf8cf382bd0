"""
Session domain entity.
"""

import os
from dataclasses import dataclass


@dataclass
class Session:
    """State shared between commands of one interactive run: the current directory."""

    current_directory: str

    def __post_init__(self) -> None:
        if not os.path.isabs(self.current_directory):
            raise ValueError(
                f"Current directory must be absolute: {self.current_directory}"
            )

    def move_to(self, directory: str) -> None:
        """Commit a new current directory (callers validate it first)."""
        self.current_directory = directory
