"""The WallClockTime value type.

A wall-clock time is a reading off a clock on the wall: hours, minutes and
seconds, with no concept of date or time zone.

Example:
    from wall_clock import WallClockTime, time

    opening = WallClockTime(15, 0, 0)
    assert opening == time("15:00:00")
    assert str(opening + 3661) == "16:01:01"
"""

from __future__ import annotations

import datetime as dt
import functools
import logging
from dataclasses import dataclass
from typing import ClassVar

from wall_clock.core.errors import OutOfRange, ParseError, WallClockError
from wall_clock.core.settings import settings

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 86_400
_SECONDS_PER_HOUR = 3_600
_SECONDS_PER_MINUTE = 60

# (name, exclusive upper bound) for each component, in text order.
_FIELDS = (("hour", 24), ("minute", 60), ("second", 60))
_ONE_SECOND = dt.timedelta(seconds=1)


def _check_component(name: str, value: object, limit: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, not {type(value).__name__}")
    if not 0 <= value < limit:
        raise OutOfRange(name, value, limit)


def _reject(text: object, reason: str, field: str | None = None) -> ParseError:
    logger.debug("Rejected wall-clock text %r: %s", text, reason)
    return ParseError(text, reason, field=field)


@dataclass(frozen=True, order=True, repr=False)
class WallClockTime:
    """A time of day as read from a wall clock, independent of date or time zone.

    Instances are immutable and ordered by ``(hour, minute, second)``. The
    default constructor validates its arguments; ``WallClockTime()`` is
    midnight.

    Attributes:
        hour: Hours since midnight (0-23).
        minute: Minutes since the last hour (0-59).
        second: Seconds since the last minute (0-59). Wall clocks don't know
            about leap seconds.
    """

    hour: int = 0
    minute: int = 0
    second: int = 0

    MIDNIGHT: ClassVar[WallClockTime]

    def __post_init__(self) -> None:
        for (name, limit), value in zip(_FIELDS, (self.hour, self.minute, self.second)):
            _check_component(name, value, limit)

    # --- Construction --------------------------------------------------------------

    @classmethod
    def new(cls, hour: int, minute: int, second: int) -> WallClockTime:
        """Build a wall-clock time, validating every component.

        Raises:
            OutOfRange: If hour >= 24, minute >= 60 or second >= 60 (or any is negative).
            TypeError: If a component is not an ``int``.
        """
        return cls(hour, minute, second)

    @classmethod
    def new_unchecked(cls, hour: int, minute: int, second: int) -> WallClockTime:
        """Build a wall-clock time without validating the components.

        The caller guarantees the components are in range. Arithmetic and
        parsing use this path once the values are known to be valid. Setting
        ``WALL_CLOCK_VALIDATE_UNCHECKED`` makes it validate like :meth:`new`.
        """
        if settings.validate_unchecked:
            return cls(hour, minute, second)
        value = object.__new__(cls)
        object.__setattr__(value, "hour", hour)
        object.__setattr__(value, "minute", minute)
        object.__setattr__(value, "second", second)
        return value

    @classmethod
    def from_midnight_offset(cls, seconds: int) -> WallClockTime:
        """Build the wall-clock time ``seconds`` after midnight.

        Raises:
            OutOfRange: If seconds is negative or at least 86,400.
        """
        _check_component("seconds", seconds, SECONDS_PER_DAY)
        hour, remainder = divmod(seconds, _SECONDS_PER_HOUR)
        minute, second = divmod(remainder, _SECONDS_PER_MINUTE)
        return cls.new_unchecked(hour, minute, second)

    @classmethod
    def parse(cls, text: str) -> WallClockTime:
        """Parse an ``HH:MM:SS`` string (zero-padded, 24-hour clock).

        Fractional seconds, AM/PM suffixes, omitted fields and surrounding
        whitespace are all rejected.

        Raises:
            ParseError: If the text does not match the format or a field is
                out of range. ``ParseError.field`` names the failing field when
                one can be identified.
        """
        if not isinstance(text, str):
            raise _reject(text, f"expected a string, not {type(text).__name__}")
        parts = text.split(":")
        if len(parts) != len(_FIELDS):
            raise _reject(text, "expected HH:MM:SS")
        values = []
        for (name, limit), part in zip(_FIELDS, parts):
            if len(part) != 2 or not part.isascii() or not part.isdigit():
                raise _reject(text, f"{name} must be two digits, got {part!r}", field=name)
            value = int(part)
            if value >= limit:
                raise _reject(text, f"{name} must be below {limit}, got {value}", field=name)
            values.append(value)
        return cls.new_unchecked(*values)

    # --- Interop hooks -------------------------------------------------------------

    @classmethod
    def from_native_time_repr(cls, value: dt.time) -> WallClockTime:
        """Build a wall-clock time from a naive :class:`datetime.time`.

        Microseconds are truncated to the whole second.

        Raises:
            WallClockError: If the time carries a time zone.
            TypeError: If ``value`` is not a ``datetime.time``.
        """
        if not isinstance(value, dt.time):
            raise TypeError(f"expected datetime.time, not {type(value).__name__}")
        if value.tzinfo is not None:
            raise WallClockError(f"Wall-clock times have no time zone, got {value.isoformat()}")
        if value.microsecond:
            logger.debug("Dropping %d microseconds from %s", value.microsecond, value.isoformat())
        return cls.new_unchecked(value.hour, value.minute, value.second)

    def to_native_time_repr(self) -> dt.time:
        """Return the equivalent naive :class:`datetime.time`."""
        return dt.time(self.hour, self.minute, self.second)

    @classmethod
    def deserialize_from_text(cls, text: str) -> WallClockTime:
        """Inverse of :meth:`serialize_as_text`; same rules as :meth:`parse`."""
        return cls.parse(text)

    def serialize_as_text(self) -> str:
        """Return the ``HH:MM:SS`` form used by serialization adapters."""
        return str(self)

    # --- Accessors -----------------------------------------------------------------

    @property
    def seconds_since_midnight(self) -> int:
        """The number of seconds elapsed since midnight (0-86399)."""
        return self.hour * _SECONDS_PER_HOUR + self.minute * _SECONDS_PER_MINUTE + self.second

    # --- Arithmetic ----------------------------------------------------------------

    def add_seconds(self, offset: int) -> WallClockTime:
        """Return the time ``offset`` seconds later, wrapping around midnight.

        Negative offsets move backwards. Offsets larger than a day wrap as many
        times as needed; this never fails.
        """
        if isinstance(offset, bool) or not isinstance(offset, int):
            raise TypeError(f"offset must be an int, not {type(offset).__name__}")
        return self.from_midnight_offset((self.seconds_since_midnight + offset) % SECONDS_PER_DAY)

    def __add__(self, other: object) -> WallClockTime:
        if isinstance(other, dt.timedelta):
            return self.add_seconds(other // _ONE_SECOND)
        if isinstance(other, int) and not isinstance(other, bool):
            return self.add_seconds(other)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: object) -> WallClockTime:
        if isinstance(other, dt.timedelta):
            return self.add_seconds(-(other // _ONE_SECOND))
        if isinstance(other, int) and not isinstance(other, bool):
            return self.add_seconds(-other)
        return NotImplemented

    # --- Formatting ----------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"

    def __format__(self, format_spec: str) -> str:
        # Non-empty specs are strftime patterns, e.g. "%I:%M %p".
        if not format_spec:
            return str(self)
        return self.to_native_time_repr().strftime(format_spec)


WallClockTime.MIDNIGHT = WallClockTime()

_parse_literal = functools.lru_cache(maxsize=settings.literal_cache_size)(WallClockTime.parse)


def time(literal: str) -> WallClockTime:
    """Build a wall-clock time from an ``HH:MM:SS`` literal.

    Stands in for literal syntax: ``time("15:30:45")`` equals
    ``WallClockTime.new(15, 30, 45)``. Results are cached, so using a literal
    inside a hot loop costs a dictionary lookup after the first call.

    Raises:
        ParseError: If the literal is not a valid ``HH:MM:SS`` time.
    """
    if not isinstance(literal, str):
        raise _reject(literal, f"expected a string, not {type(literal).__name__}")
    return _parse_literal(literal)
