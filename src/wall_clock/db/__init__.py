"""Database interop for wall-clock times (requires SQLAlchemy)."""

from .types import WallClockTimeType

__all__ = ["WallClockTimeType"]
