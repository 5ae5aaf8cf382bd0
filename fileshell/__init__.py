"""fileshell package: interactive shell for browsing and manipulating a local filesystem.

This package exposes submodules directly; keep __all__ empty to avoid static checks
that expect module-level symbols.
"""

__all__: list[str] = []
