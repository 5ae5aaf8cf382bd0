import argparse
import logging
import os
import sys

from rich.console import Console

from fileshell.config.settings import Settings, parse_log_level
from fileshell.container import container
from fileshell.entities.session import Session
from fileshell.exceptions import ConfigurationError
from fileshell.shell.interactive_shell import InteractiveShell


def _build_session(start_directory: str) -> Session:
    if not os.path.isdir(start_directory):
        raise ConfigurationError(f"Start directory does not exist: {start_directory}")
    if not os.access(start_directory, os.R_OK):
        raise ConfigurationError(f"Start directory is not readable: {start_directory}")
    return Session(os.path.abspath(start_directory))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="fileshell",
        description="Interactive shell to browse, copy, create and remove files.",
    )
    parser.add_argument(
        "--start-dir",
        default=None,
        help="Directory to start in (default: FILESHELL_START_DIR or the current directory)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level, e.g. DEBUG or INFO (default: FILESHELL_LOG_LEVEL or WARNING)",
    )
    parser.add_argument(
        "--no-list",
        dest="auto_list",
        action="store_false",
        default=None,
        help="Do not print the directory listing before each prompt",
    )
    args = parser.parse_args(argv)

    try:
        settings = Settings()
        log_level = (
            parse_log_level(args.log_level) if args.log_level else settings.log_level
        )
        session = _build_session(args.start_dir or settings.start_directory)
    except (ConfigurationError, OSError) as e:
        print(f"fileshell: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if sys.stdin is None:
        print("fileshell: no input stream available", file=sys.stderr)
        return 1

    auto_list = settings.auto_list if args.auto_list is None else args.auto_list
    shell = InteractiveShell(container, session, console=Console(), auto_list=auto_list)
    shell.run()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
