"""
Interactive read / dispatch / print loop.
"""

import logging
from typing import Callable, Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from fileshell.container import DependencyContainer
from fileshell.entities.command import CommandLine
from fileshell.entities.session import Session
from fileshell.exceptions import BaseAppError, InvalidArgumentError
from fileshell.utils.paths import printable

PROMPT = "\nEnter a command (cd, copy, mkdir, rm, help, exit): "

USAGE = {
    "cd": "cd <path>",
    "copy": 'copy <file> <target_directory>   e.g. copy "my file.txt" "target dir"',
    "mkdir": "mkdir <directory>",
    "rm": "rm <file_or_empty_directory>",
    "help": "help",
    "exit": "exit",
}


class InteractiveShell:
    """One interactive session over the local filesystem."""

    def __init__(
        self,
        container: DependencyContainer,
        session: Session,
        console: Optional[Console] = None,
        input_func: Optional[Callable[[str], str]] = None,
        auto_list: bool = True,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the shell.

        Args:
            container: Dependency container providing the use cases
            session: Session holding the current directory
            console: Rich console used for all output
            input_func: Callable reading one line given a prompt (defaults to console.input)
            auto_list: Show the current directory listing before each prompt
            logger: Logger instance to use for logging
        """
        self._container = container
        self.session = session
        self._console = console or Console()
        self._input = input_func or self._console.input
        self._auto_list = auto_list
        self._logger = logger or logging.getLogger(__name__)
        self._handlers: dict[str, Callable[[list[str]], None]] = {
            "cd": self._handle_cd,
            "copy": self._handle_copy,
            "mkdir": self._handle_mkdir,
            "rm": self._handle_rm,
            "help": self._handle_help,
        }

    # ------------------------- output helpers -------------------------
    def _say(self, message: str, style: Optional[str] = None) -> None:
        # user-supplied names may contain '[...]' or undecodable bytes
        self._console.print(printable(message), style=style, markup=False, highlight=False)

    def _error(self, message: str) -> None:
        self._say(f"Error: {message}", style="red")

    def _success(self, message: str) -> None:
        self._say(message, style="green")

    # ------------------------- loop -------------------------
    def run(self) -> None:
        """Read and execute commands until 'exit' or end of input."""
        self._logger.info(f"Session started in {self.session.current_directory}")
        while True:
            if self._auto_list:
                try:
                    self.show_listing()
                except UnicodeError as e:
                    self._logger.warning(f"Could not display listing: {e}")
                    self._error(f"Could not display directory contents: {e}")
            try:
                line = self._input(PROMPT)
            except (EOFError, KeyboardInterrupt):
                self._console.print()
                break
            except UnicodeDecodeError as e:
                self._error(f"Input is not valid text, command ignored: {e}")
                continue
            if not self.execute(line):
                break
        self._say("Goodbye.")
        self._logger.info("Session ended")

    def execute(self, line: str) -> bool:
        """
        Execute one command line.

        Args:
            line: Raw line typed by the user

        Returns:
            False when the session should end, True otherwise
        """
        command = CommandLine(line)
        if command.is_blank():
            return True
        if command.name == "exit":
            return False

        handler = self._handlers.get(command.name)
        if handler is None:
            self._error(f"Unknown command: {command.arguments[0]}")
            self._handle_help([])
            return True

        try:
            handler(command.args)
        except BaseAppError as e:
            self._logger.info(f"Command '{command.name}' failed: {e}")
            self._error(str(e))
        except OSError as e:
            self._logger.error(f"Unexpected I/O failure in '{command.name}': {e}")
            self._error(f"I/O failure: {e}")
        except UnicodeError as e:
            self._logger.warning(f"Could not display result of '{command.name}': {e}")
            self._error(f"Could not display result: {e}")
        return True

    def show_listing(self) -> None:
        """Print the contents of the current directory as a table."""
        directory = self.session.current_directory
        try:
            entries = self._container.get_list_directory_use_case().execute(directory)
        except BaseAppError as e:
            self._error(str(e))
            return

        table = Table(
            title=Text(printable(f"Contents of {directory}"), style="bold"),
            title_justify="left",
            box=box.SIMPLE_HEAD,
        )
        table.add_column("Name", width=30, overflow="fold")
        table.add_column("Type", width=15)
        table.add_column("Size", width=20)
        for entry in entries:
            table.add_row(
                Text(entry.display_name),
                Text(printable(entry.type_label)),
                Text(entry.human_size),
            )
        self._console.print(table)

    # ------------------------- commands -------------------------
    @staticmethod
    def _expect(command: str, args: list[str], count: int) -> list[str]:
        if len(args) != count:
            raise InvalidArgumentError(f"Invalid command format. Usage: {USAGE[command]}")
        return args

    def _handle_cd(self, args: list[str]) -> None:
        (path,) = self._expect("cd", args, 1)
        new_directory = self._container.get_change_directory_use_case().execute(
            path, self.session
        )
        self._success(f"Current directory: {new_directory}")

    def _handle_copy(self, args: list[str]) -> None:
        source, target = self._expect("copy", args, 2)
        result = self._container.get_copy_file_use_case().execute(
            source, target, self.session.current_directory
        )
        if result.created_directory:
            self._say(f"Created target directory: {result.created_directory}")
        self._success(f"File copied to: {result.destination}")

    def _handle_mkdir(self, args: list[str]) -> None:
        (name,) = self._expect("mkdir", args, 1)
        path = self._container.get_make_directory_use_case().execute(
            name, self.session.current_directory
        )
        self._success(f"Directory created: {path}")

    def _handle_rm(self, args: list[str]) -> None:
        (name,) = self._expect("rm", args, 1)
        path = self._container.get_remove_entry_use_case().execute(
            name, self.session.current_directory
        )
        self._success(f"Removed: {path}")

    def _handle_help(self, args: list[str]) -> None:
        self._say("Available commands:")
        for usage in USAGE.values():
            self._say(f"  {usage}")
