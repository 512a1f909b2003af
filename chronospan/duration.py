from dataclasses import dataclass
from datetime import timedelta
from typing import Any

from dateutil.relativedelta import relativedelta
from typing_extensions import override

from chronospan import arithmetic, formatter, parser
from chronospan.checked import checked_mul, checked_neg, in_range
from chronospan.errors import InvalidDurationFormat
from chronospan.normalizer import NormalizedParts, normalize
from chronospan.util import DAY, HOUR, INT64_MIN, MINUTE, SECOND, WEEK

_MILLIS_PER_SECOND = 1000


@dataclass(frozen=True, order=True, repr=False)
class Duration:
    """An immutable, signed span of whole seconds.

    Equality, hashing and ordering use ``total_seconds`` only, so
    ``Duration.parse("90s") == Duration.from_minutes(1) + Duration(30)``.
    ``str()`` gives the compact normalized form.

    Example:
        >>> d = Duration.parse("2h 30m")
        >>> d.total_seconds
        9000
        >>> str(d), d.format()
        ('2h30m', '2 hours 30 minutes')
    """

    total_seconds: int = 0

    def __post_init__(self) -> None:
        _require_int(self.total_seconds, "total_seconds")
        if not in_range(self.total_seconds):
            raise InvalidDurationFormat(
                f"Duration of {self.total_seconds} seconds does not fit in a "
                f"signed 64-bit integer."
            )

    # ---------- Factories ----------

    @classmethod
    def parse(cls, text: str) -> "Duration":
        """Parse a duration string such as ``"2h30m"``, ``"1d 12h"`` or ``"-90s"``."""
        return cls(parser.parse(text))

    @classmethod
    def zero(cls) -> "Duration":
        return cls(0)

    @classmethod
    def from_milliseconds(cls, milliseconds: int) -> "Duration":
        """Build from milliseconds; the value must be a whole number of seconds."""
        _require_int(milliseconds, "milliseconds")
        if milliseconds % _MILLIS_PER_SECOND != 0:
            raise InvalidDurationFormat(
                f"Milliseconds must be a multiple of 1000 (no fractional seconds), "
                f"got {milliseconds}."
            )
        # Sign-preserving exact division; the remainder is zero here.
        return cls(milliseconds // _MILLIS_PER_SECOND)

    @classmethod
    def from_seconds(cls, seconds: int) -> "Duration":
        return cls._scaled(seconds, SECOND, "seconds")

    @classmethod
    def from_minutes(cls, minutes: int) -> "Duration":
        return cls._scaled(minutes, MINUTE, "minutes")

    @classmethod
    def from_hours(cls, hours: int) -> "Duration":
        return cls._scaled(hours, HOUR, "hours")

    @classmethod
    def from_days(cls, days: int) -> "Duration":
        return cls._scaled(days, DAY, "days")

    @classmethod
    def from_weeks(cls, weeks: int) -> "Duration":
        return cls._scaled(weeks, WEEK, "weeks")

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> "Duration":
        """Build from a ``datetime.timedelta`` holding whole seconds."""
        if not isinstance(delta, timedelta):
            raise TypeError(
                f"Expected a datetime.timedelta, got {type(delta).__name__!r}: "
                f"{delta!r}"
            )
        if delta.microseconds:
            raise InvalidDurationFormat(
                f"Sub-second durations are not supported, got {delta!r}."
            )
        return cls(delta.days * DAY + delta.seconds)

    @classmethod
    def from_relativedelta(cls, delta: relativedelta) -> "Duration":
        """Build from a ``dateutil.relativedelta.relativedelta``.

        Only relative weeks, days, hours, minutes and seconds are accepted.
        Years, months, leap days, microseconds and absolute fields (``year=``,
        ``weekday=`` ...) depend on a calendar anchor and are rejected.
        """
        if not isinstance(delta, relativedelta):
            raise TypeError(
                f"Expected a dateutil relativedelta, got {type(delta).__name__!r}: "
                f"{delta!r}"
            )
        if delta.years or delta.months or delta.leapdays:
            raise InvalidDurationFormat(
                f"Calendar units (years, months, leap days) have no fixed length "
                f"in seconds: {delta!r}"
            )
        absolute = (
            delta.year,
            delta.month,
            delta.day,
            delta.weekday,
            delta.hour,
            delta.minute,
            delta.second,
            delta.microsecond,
        )
        if any(field is not None for field in absolute):
            raise InvalidDurationFormat(
                f"Absolute relativedelta fields cannot be converted: {delta!r}"
            )
        if delta.microseconds:
            raise InvalidDurationFormat(
                f"Sub-second durations are not supported, got {delta!r}."
            )

        total = 0
        for value, factor in (
            (delta.days, DAY),
            (delta.hours, HOUR),
            (delta.minutes, MINUTE),
            (delta.seconds, SECOND),
        ):
            if value != int(value):
                raise InvalidDurationFormat(
                    f"Fractional values are not supported, got {delta!r}."
                )
            total += int(value) * factor
        return cls(total)

    @classmethod
    def _scaled(cls, value: int, factor: int, unit: str) -> "Duration":
        _require_int(value, unit)
        seconds = checked_mul(value, factor)
        if seconds is None:
            raise InvalidDurationFormat(
                f"Duration of {value} {unit} is too large (overflow)."
            )
        return cls(seconds)

    # ---------- Conversions (truncating toward zero) ----------

    def to_milliseconds(self) -> int:
        millis = checked_mul(self.total_seconds, _MILLIS_PER_SECOND)
        if millis is None:
            raise InvalidDurationFormat(
                f"Duration {self} is too large to express in milliseconds (overflow)."
            )
        return millis

    def to_seconds(self) -> int:
        return self.total_seconds

    def to_minutes(self) -> int:
        return _truncating_div(self.total_seconds, MINUTE)

    def to_hours(self) -> int:
        return _truncating_div(self.total_seconds, HOUR)

    def to_days(self) -> int:
        return _truncating_div(self.total_seconds, DAY)

    def to_weeks(self) -> int:
        return _truncating_div(self.total_seconds, WEEK)

    def to_timedelta(self) -> timedelta:
        try:
            return timedelta(seconds=self.total_seconds)
        except OverflowError as e:
            raise InvalidDurationFormat(
                f"Duration {self.total_seconds}s exceeds the datetime.timedelta range."
            ) from e

    def to_relativedelta(self) -> relativedelta:
        """Return an equivalent relativedelta for calendar arithmetic.

        Example:
            >>> datetime(2025, 1, 1) + Duration.parse("1d2h").to_relativedelta()
            datetime.datetime(2025, 1, 2, 2, 0)
        """
        parts = self.parts()
        return relativedelta(
            days=parts.sign * (parts.weeks * 7 + parts.days),
            hours=parts.sign * parts.hours,
            minutes=parts.sign * parts.minutes,
            seconds=parts.sign * parts.seconds,
        )

    def parts(self) -> NormalizedParts:
        return normalize(self.total_seconds)

    # ---------- Arithmetic ----------

    def add(self, other: "Duration") -> "Duration":
        return Duration(arithmetic.add(self.total_seconds, _require_duration(other)))

    def subtract(self, other: "Duration") -> "Duration":
        return Duration(
            arithmetic.subtract(self.total_seconds, _require_duration(other))
        )

    def __add__(self, other: Any) -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> "Duration":
        negated = checked_neg(self.total_seconds)
        if negated is None:
            raise InvalidDurationFormat("Duration negation overflow.")
        return Duration(negated)

    def __abs__(self) -> "Duration":
        return -self if self.total_seconds < 0 else self

    def __bool__(self) -> bool:
        return self.total_seconds != 0

    @property
    def is_negative(self) -> bool:
        return self.total_seconds < 0

    @property
    def is_zero(self) -> bool:
        return self.total_seconds == 0

    # ---------- Formatting ----------

    def to_normalized_string(self) -> str:
        """Compact normalized form, e.g. ``"1m30s"``."""
        return formatter.format_compact(self.total_seconds)

    def format(self) -> str:
        """Human-readable form, e.g. ``"2 hours 30 minutes"``."""
        return formatter.format_human(self.total_seconds)

    @override
    def __str__(self) -> str:
        return self.to_normalized_string()

    @override
    def __repr__(self) -> str:
        if self.total_seconds == INT64_MIN:
            return f"Duration({self.total_seconds})"
        return f"Duration.parse({self.to_normalized_string()!r})"


def _require_int(value: Any, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"Duration {name} must be an int, got {type(value).__name__!r}: {value!r}"
        )


def _require_duration(other: Any) -> int:
    if not isinstance(other, Duration):
        raise TypeError(
            f"Expected a Duration, got {type(other).__name__!r}: {other!r}\n"
            f"Hint: wrap plain values first, e.g. Duration.parse('90s') or "
            f"Duration.from_seconds(90)"
        )
    return other.total_seconds


def _truncating_div(value: int, divisor: int) -> int:
    quotient = abs(value) // divisor
    return -quotient if value < 0 else quotient
