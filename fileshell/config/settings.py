"""
Configuration settings for the application.
"""

import logging
import os

from dotenv import load_dotenv

from fileshell.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

_FALSE_VALUES = ("0", "false", "no", "off")


def parse_log_level(name: str) -> int:
    """Translate a level name such as "info" into its logging constant."""
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"Unknown log level: {name}")
    return level


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.start_directory: str = os.path.abspath(
            self._get_env("FILESHELL_START_DIR", os.getcwd())
        )
        self.log_level: int = parse_log_level(
            self._get_env("FILESHELL_LOG_LEVEL", "WARNING")
        )
        self.auto_list: bool = self._get_bool_env("FILESHELL_AUTO_LIST", True)

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value; blank counts as unset."""
        value = os.getenv(key)
        if value is None or not value.strip():
            return default
        return value.strip()

    def _get_bool_env(self, key: str, default: bool) -> bool:
        """Get a boolean flag; '0', 'false', 'no' and 'off' disable it."""
        value = os.getenv(key)
        if value is None or not value.strip():
            return default
        return value.strip().lower() not in _FALSE_VALUES
