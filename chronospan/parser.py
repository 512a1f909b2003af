"""Parse human-readable duration strings into total seconds.

Grammar::

    duration := ["-"] token+
    token    := digits unit
    unit     := "w" | "d" | "h" | "m" | "s"

Units must appear in descending order (w, d, h, m, s) and at most once.
Whitespace may separate tokens but never splits one, and values are whole
numbers only. A leading ``-`` negates the whole duration; ``+`` is not
accepted.

Example:
    >>> parse("2h30m")
    9000
    >>> parse("1w 2d 3h 4m 5s")
    788645
    >>> parse("-90s")
    -90
"""

import logging
import re
from typing import Any

from chronospan.checked import checked_add, checked_mul, checked_neg
from chronospan.errors import InvalidDurationFormat
from chronospan.units import Unit

logger = logging.getLogger(__name__)

# A digit run immediately followed by one letter. Any letter is captured so
# that an unknown unit gets its own error instead of a generic gap error.
_TOKEN = re.compile(r"([0-9]+)([A-Za-z])")

# Digits in INT64_MAX
_MAX_DIGITS = 19


def parse(text: Any) -> int:
    """Parse ``text`` into a signed count of seconds.

    Raises:
        InvalidDurationFormat: If ``text`` is not a valid duration, or the
            total does not fit in a signed 64-bit integer.
    """
    raw = _require_non_blank(text)
    sign, body = _split_sign(raw.strip(), raw)
    return _parse_body(body, sign, raw)


def _parse_body(body: str, sign: int, raw: str) -> int:
    total = 0
    previous: Unit | None = None
    seen: set[Unit] = set()
    cursor = 0
    matched = False

    for match in _TOKEN.finditer(body):
        matched = True
        _require_blank_gap(body, cursor, match.start(), raw)

        value = _token_value(match.group(1), raw)
        unit = _lookup_unit(match.group(2), raw)

        if unit in seen:
            raise _invalid(f"Duplicate unit: {unit.symbol}", raw)
        if previous is not None and unit.rank >= previous.rank:
            raise _invalid("Units must be in descending order (w d h m s).", raw)

        total = _accumulate(total, value, unit, raw)
        seen.add(unit)
        previous = unit
        cursor = match.end()

    if not matched:
        raise _invalid("No duration tokens found.", raw)

    # Trailing garbage such as "2h30mxx"
    _require_blank_gap(body, cursor, len(body), raw)

    if sign > 0:
        return total
    negated = checked_neg(total)
    if negated is None:
        raise _invalid("Duration is too large (overflow).", raw)
    return negated


def _require_non_blank(text: Any) -> str:
    if text is None:
        raise _invalid("Input is null.", None)
    if not isinstance(text, str):
        raise TypeError(
            f"Duration input must be a str, got {type(text).__name__!r}: {text!r}"
        )
    if not text.strip():
        raise _invalid("Input is empty.", text)
    return text


def _split_sign(stripped: str, raw: str) -> tuple[int, str]:
    if stripped.startswith("+"):
        raise _invalid("Leading '+' is not supported; omit the sign.", raw)
    if not stripped.startswith("-"):
        return 1, stripped

    body = stripped[1:]
    if not body.strip():
        raise _invalid("Empty duration after sign.", raw)
    if body.lstrip().startswith(("-", "+")):
        raise _invalid("Only a single leading '-' is allowed.", raw)
    return -1, body


def _require_blank_gap(body: str, start: int, end: int, raw: str) -> None:
    gap = body[start:end]
    if gap.strip():
        raise _invalid(f"Invalid characters between tokens: '{gap}'", raw)


def _token_value(digits: str, raw: str) -> int:
    # int() refuses very long digit strings; anything past 19 digits overflows.
    significant = digits.lstrip("0") or "0"
    if len(significant) > _MAX_DIGITS:
        raise _invalid(f"Duration value is too large: {digits}", raw)
    return int(significant)


def _lookup_unit(symbol: str, raw: str) -> Unit:
    unit = Unit.from_symbol(symbol)
    if unit is None:
        raise _invalid(f"Invalid duration unit: {symbol}", raw)
    return unit


def _accumulate(total: int, value: int, unit: Unit, raw: str) -> int:
    seconds = checked_mul(value, unit.seconds)
    if seconds is not None:
        seconds = checked_add(total, seconds)
    if seconds is None:
        raise _invalid("Duration is too large (overflow).", raw)
    return seconds


def _invalid(message: str, raw: str | None) -> InvalidDurationFormat:
    suffix = "" if raw is None else f" Input: '{raw}'"
    logger.debug("Rejected duration input: %s%s", message, suffix)
    return InvalidDurationFormat(message + suffix)
