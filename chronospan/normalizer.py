"""Break a total-second count into bounded per-unit magnitudes."""

from collections.abc import Iterator
from dataclasses import dataclass

from chronospan.checked import checked_neg, in_range
from chronospan.errors import InvalidDurationFormat
from chronospan.units import Unit
from chronospan.util import DAY, HOUR, MINUTE, WEEK


@dataclass(frozen=True, kw_only=True)
class NormalizedParts:
    """Sign plus non-negative magnitudes for each unit.

    Weeks are unbounded; days, hours, minutes and seconds stay below the
    size of the next larger unit.
    """

    sign: int
    weeks: int
    days: int
    hours: int
    minutes: int
    seconds: int

    @classmethod
    def zero(cls) -> "NormalizedParts":
        return cls(sign=1, weeks=0, days=0, hours=0, minutes=0, seconds=0)

    @property
    def is_zero(self) -> bool:
        return not any(magnitude for _, magnitude in self.items())

    @property
    def is_negative(self) -> bool:
        return self.sign < 0

    def items(self) -> Iterator[tuple[Unit, int]]:
        """Yield ``(unit, magnitude)`` pairs from weeks down to seconds."""
        yield Unit.WEEK, self.weeks
        yield Unit.DAY, self.days
        yield Unit.HOUR, self.hours
        yield Unit.MINUTE, self.minutes
        yield Unit.SECOND, self.seconds

    def total_seconds(self) -> int:
        """Reconstruct the signed total these parts were normalized from."""
        magnitude = sum(unit.seconds * count for unit, count in self.items())
        return self.sign * magnitude


def normalize(total_seconds: int) -> NormalizedParts:
    """Split ``total_seconds`` into weeks, days, hours, minutes and seconds.

    Raises:
        InvalidDurationFormat: If the absolute value has no signed 64-bit
            form (INT64_MIN, or anything outside the 64-bit range).
        TypeError: If ``total_seconds`` is not an int.
    """
    if isinstance(total_seconds, bool) or not isinstance(total_seconds, int):
        raise TypeError(
            f"Total seconds must be an int, got {type(total_seconds).__name__!r}: "
            f"{total_seconds!r}"
        )
    if total_seconds == 0:
        return NormalizedParts.zero()

    sign = -1 if total_seconds < 0 else 1
    remaining = _safe_abs(total_seconds)

    weeks, remaining = divmod(remaining, WEEK)
    days, remaining = divmod(remaining, DAY)
    hours, remaining = divmod(remaining, HOUR)
    minutes, seconds = divmod(remaining, MINUTE)

    return NormalizedParts(
        sign=sign,
        weeks=weeks,
        days=days,
        hours=hours,
        minutes=minutes,
        seconds=seconds,
    )


def _safe_abs(value: int) -> int:
    absolute = checked_neg(value) if value < 0 else value
    if absolute is None or not in_range(value):
        raise InvalidDurationFormat("Duration is too large to normalize (overflow).")
    return absolute
