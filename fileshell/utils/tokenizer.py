"""
Quote-aware splitting of a command line into arguments.

Rules:
- a space outside double quotes separates arguments, runs of spaces yield no empty tokens;
- ``"`` toggles quoting and is not kept in the token;
- ``\\"`` yields a literal ``"`` without toggling;
- any other backslash is kept as-is, including a trailing one;
- an unterminated quote swallows the rest of the line.
"""

from enum import Enum, auto


class _State(Enum):
    NORMAL = auto()
    IN_QUOTES = auto()
    ESCAPED = auto()


def tokenize(line: str) -> list[str]:
    """
    Split a raw command line into arguments.

    Args:
        line: Command line as typed by the user

    Returns:
        Arguments in the order they appear in the line
    """
    tokens: list[str] = []
    current: list[str] = []
    state = _State.NORMAL
    # state to go back to once a backslash has been looked at
    resume = _State.NORMAL

    def flush() -> None:
        if current:
            tokens.append("".join(current))
            current.clear()

    for ch in line:
        if state is _State.ESCAPED:
            state = resume
            if ch == '"':
                current.append(ch)
                continue
            current.append("\\")

        if ch == "\\":
            resume, state = state, _State.ESCAPED
        elif ch == '"':
            state = _State.IN_QUOTES if state is _State.NORMAL else _State.NORMAL
        elif ch == " " and state is _State.NORMAL:
            flush()
        else:
            current.append(ch)

    if state is _State.ESCAPED:
        current.append("\\")
    flush()
    return tokens
