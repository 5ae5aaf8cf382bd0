"""
Command line domain entity.
"""

from fileshell.utils.tokenizer import tokenize


class CommandLine:
    """One line typed at the prompt, split into a command name and its arguments."""

    raw: str
    arguments: list[str]

    def __init__(self, raw: str):
        self.raw = raw.strip()
        self.arguments = tokenize(self.raw)

    def is_blank(self) -> bool:
        return not self.arguments

    @property
    def name(self) -> str:
        return self.arguments[0].lower() if self.arguments else ""

    @property
    def args(self) -> list[str]:
        return self.arguments[1:]

    def __repr__(self) -> str:
        return f"CommandLine(raw={self.raw!r})"
