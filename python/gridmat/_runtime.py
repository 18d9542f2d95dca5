"""Process-wide print options.

These are the only module-level mutable settings in gridmat. They affect
text rendering only and are never read by arithmetic.
"""

import os

_default_precision = 2
_current_precision = _default_precision
_current_delimiter = "|"


def set_print_precision(n: int) -> None:
    """Set the digits printed after the decimal point.

    ``GRIDMAT_PRINT_PRECISION`` takes precedence while it is set in the
    environment; the value set here applies once it is unset.
    """
    global _current_precision
    n = int(n)
    if n < 0:
        raise ValueError("precision must be >= 0")
    _current_precision = n


def get_print_precision() -> int:
    """Return ``GRIDMAT_PRINT_PRECISION`` if set and valid, else the set value."""
    env = os.environ.get("GRIDMAT_PRINT_PRECISION")
    if env:
        try:
            return max(0, int(env))
        except ValueError:
            return _current_precision
    return _current_precision


def set_print_delimiter(delimiter: str) -> None:
    global _current_delimiter
    if not isinstance(delimiter, str) or not delimiter:
        raise ValueError("delimiter must be a non-empty string")
    _current_delimiter = delimiter


def get_print_delimiter() -> str:
    return _current_delimiter
