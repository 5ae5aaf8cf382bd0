"""Human-readable byte sizes."""

_UNITS = ("KB", "MB", "GB")


def format_size(size: int) -> str:
    """Format a byte count as ``"999 B"``, ``"1.50 KB"``, ... with GB as the largest unit."""
    if size < 1024:
        return f"{size} B"
    value = size / 1024
    for unit in _UNITS:
        if value < 1024 or unit == _UNITS[-1]:
            break
        value /= 1024
    return f"{value:.2f} {unit}"
