"""
Pydantic types for wall-clock times.

These types serialize wall-clock times as ``HH:MM:SS`` text and validate the
same text on the way in.
"""

from .wall_clock_time import TEXT_PATTERN, WallClockTimeField

__all__ = ["WallClockTimeField", "TEXT_PATTERN"]
