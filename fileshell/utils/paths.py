"""Lexical path resolution and the filesystem-root guard used by ``cd``.

Nothing in here touches the filesystem: existence and type checks belong to the
callers, which apply different policies (``cd`` needs an existing directory, a
copy target may not exist yet).

Every helper takes an optional ``pathmod`` (``os.path`` by default). Passing
``ntpath`` or ``posixpath`` gives the other platform's rules.
"""

import os
from types import ModuleType


def resolve_path(raw_path: str, current_directory: str, pathmod: ModuleType = os.path) -> str:
    """
    Resolve a possibly relative path against the current directory.

    Args:
        raw_path: Path typed by the user (already unquoted)
        current_directory: Absolute path of the session's current directory

    Returns:
        Absolute path with redundant separators, '.' and '..' collapsed
    """
    if pathmod.isabs(raw_path):
        return pathmod.normpath(raw_path)
    return pathmod.normpath(pathmod.join(current_directory, raw_path))


def path_root(path: str, pathmod: ModuleType = os.path) -> str:
    """Return the root component of a path: drive (if any) plus the leading separator."""
    drive, rest = pathmod.splitdrive(path)
    seps = (pathmod.sep, pathmod.altsep) if pathmod.altsep else (pathmod.sep,)
    if rest[:1] in seps:
        return drive + pathmod.sep
    return drive


def crosses_root(candidate: str, current_directory: str, pathmod: ModuleType = os.path) -> bool:
    """Tell whether ``candidate`` lives under a different root than ``current_directory``."""
    current_root = pathmod.normcase(path_root(current_directory, pathmod))
    candidate_root = pathmod.normcase(path_root(candidate, pathmod))
    return candidate_root != current_root


def printable(text: str) -> str:
    """
    Make a path or message safe to write to a UTF-8 terminal.

    Names that are not valid UTF-8 come back from ``os.listdir`` with surrogate
    escapes; those bytes are shown as U+FFFD instead.
    """
    try:
        raw = text.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        # lone surrogates outside the escape range
        raw = text.encode("utf-8", "replace")
    return raw.decode("utf-8", "replace")
