import os
import sys

DEFAULT_SIZE = (80, 24)


def get_terminal_size(fallback: tuple[int, int] = DEFAULT_SIZE) -> tuple[int, int]:
    """Return (columns, rows) of the terminal on stdout, or ``fallback`` when piped."""
    if not sys.stdout.isatty():
        return fallback
    try:
        size = os.get_terminal_size(sys.stdout.fileno())
    except OSError:
        return fallback
    return (size.columns, size.lines)
