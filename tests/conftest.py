"""
Pytest configuration and shared fixtures.
"""

import os
import tempfile
import pytest
from unittest.mock import MagicMock

from fileshell.container import DependencyContainer
from fileshell.entities.session import Session


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory for testing file operations.

    Layout:
        test1.txt, test2.py, README, subdir/test3.md

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        temp_dir = os.path.realpath(temp_dir)
        with open(os.path.join(temp_dir, "test1.txt"), "w") as f:
            f.write("This is a test file.")

        with open(os.path.join(temp_dir, "test2.py"), "w") as f:
            f.write("print('Hello, world!')")

        with open(os.path.join(temp_dir, "README"), "w") as f:
            f.write("readme")

        subdir = os.path.join(temp_dir, "subdir")
        os.makedirs(subdir)
        with open(os.path.join(subdir, "test3.md"), "w") as f:
            f.write("# Test Markdown\n\nThis is a test.")

        yield temp_dir


@pytest.fixture
def session(temp_directory):
    """Session starting in the temporary directory."""
    return Session(temp_directory)


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def dependency_container(mock_logger):
    """
    Create a dependency container with mocked dependencies for testing.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer()
    # Replace the logger with our mock
    container._logger = mock_logger
    return container
