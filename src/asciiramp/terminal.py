import os
import sys

# (columns, rows) assumed when stdout is not a terminal
FALLBACK_SIZE = (80, 24)

TRUECOLOUR_VALUES = ("truecolor", "24bit")


def get_terminal_size() -> tuple[int, int]:
    """Return (columns, rows) of the terminal stdout is attached to, or FALLBACK_SIZE."""
    if not sys.stdout.isatty():
        return FALLBACK_SIZE
    columns, rows = os.get_terminal_size(sys.stdout.fileno())
    return (columns or FALLBACK_SIZE[0], rows or FALLBACK_SIZE[1])


def default_width() -> int:
    """Output width used when none is requested: the terminal's column count."""
    return get_terminal_size()[0]


def supports_truecolour() -> bool:
    """Whether the terminal advertises 24-bit colour through COLORTERM."""
    return os.environ.get("COLORTERM", "").lower() in TRUECOLOUR_VALUES
