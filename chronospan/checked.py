"""Checked signed 64-bit integer operations.

Python integers never overflow, so each helper computes the exact result and
returns None when it falls outside ``[INT64_MIN, INT64_MAX]``. Callers turn
None into the error that fits their context.
"""

from chronospan.util import INT64_MAX, INT64_MIN


def in_range(value: int) -> bool:
    return INT64_MIN <= value <= INT64_MAX


def _bounded(value: int) -> int | None:
    return value if in_range(value) else None


def checked_add(x: int, y: int) -> int | None:
    return _bounded(x + y)


def checked_sub(x: int, y: int) -> int | None:
    return _bounded(x - y)


def checked_mul(x: int, y: int) -> int | None:
    return _bounded(x * y)


def checked_neg(x: int) -> int | None:
    """Negate ``x``; None for INT64_MIN, whose negation has no 64-bit form."""
    return _bounded(-x)
