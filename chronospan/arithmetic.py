"""Overflow-checked addition and subtraction of total seconds."""

from typing import Callable

from chronospan.checked import checked_add, checked_sub, in_range
from chronospan.errors import InvalidDurationFormat


def add(a: int, b: int) -> int:
    """Return ``a + b``, failing if the sum leaves the signed 64-bit range."""
    return _checked(checked_add, a, b, name="add", symbol="+")


def subtract(a: int, b: int) -> int:
    """Return ``a - b``, failing if the result leaves the signed 64-bit range."""
    return _checked(checked_sub, a, b, name="subtract", symbol="-")


def _checked(
    operation: Callable[[int, int], int | None],
    a: int,
    b: int,
    *,
    name: str,
    symbol: str,
) -> int:
    result = operation(a, b) if in_range(a) and in_range(b) else None
    if result is None:
        cause = OverflowError(f"{a} {symbol} {b} is outside the signed 64-bit range")
        message = f"Duration arithmetic overflow ({name})."
        raise InvalidDurationFormat(message) from cause
    return result
