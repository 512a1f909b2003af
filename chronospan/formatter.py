"""Render total seconds as compact or human-readable strings.

Both styles come from the same normalized parts, skip units whose magnitude
is zero, and list the rest from weeks down to seconds.
"""

from chronospan.normalizer import normalize


def format_compact(total_seconds: int) -> str:
    """Return the canonical compact form, e.g. ``"1m30s"`` or ``"-2h"``."""
    parts = normalize(total_seconds)
    if parts.is_zero:
        return "0s"

    body = "".join(
        f"{magnitude}{unit.symbol}" for unit, magnitude in parts.items() if magnitude
    )
    return f"-{body}" if parts.is_negative else body


def format_human(total_seconds: int) -> str:
    """Return a pluralized form, e.g. ``"2 hours 30 minutes"``."""
    parts = normalize(total_seconds)
    if parts.is_zero:
        return "0 seconds"

    body = " ".join(
        f"{magnitude} {unit.pluralize(magnitude)}"
        for unit, magnitude in parts.items()
        if magnitude
    )
    return f"-{body}" if parts.is_negative else body
