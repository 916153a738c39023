"""A time of day as read off a wall clock, with no date or time zone.

Making a wall-clock time:

    from wall_clock import WallClockTime
    wct = WallClockTime(15, 0, 0)

The ``time`` helper gives a syntax resembling a literal:

    from wall_clock import time
    wct = time("15:00:00")

Optional adapters:

- ``wall_clock.db``: SQLAlchemy column type for ``TIME`` columns (extra ``db``).
- ``wall_clock.schemas``: pydantic field type serializing as ``HH:MM:SS`` (extra ``pydantic``).
"""

import logging

from .core import (
    SECONDS_PER_DAY,
    NativeTimeConvertible,
    OutOfRange,
    ParseError,
    TextSerializable,
    WallClockError,
    WallClockTime,
    time,
)
from .core.log import configure_logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "WallClockTime", "time", "SECONDS_PER_DAY",
    "WallClockError", "ParseError", "OutOfRange",
    "NativeTimeConvertible", "TextSerializable",
    "configure_logging",
]
