"""Core value type, errors and configuration."""

from .errors import OutOfRange, ParseError, WallClockError
from .interfaces import NativeTimeConvertible, TextSerializable
from .wall_clock_time import SECONDS_PER_DAY, WallClockTime, time

__all__ = [
    "WallClockTime", "time", "SECONDS_PER_DAY",
    "WallClockError", "ParseError", "OutOfRange",
    "NativeTimeConvertible", "TextSerializable",
]
