"""Exceptions raised when building or reading wall-clock times."""

from __future__ import annotations


class WallClockError(ValueError):
    """Base class for every error raised by wall_clock."""


class ParseError(WallClockError):
    """Raised when text is not a valid ``HH:MM:SS`` wall-clock time.

    Attributes:
        text: The rejected input.
        field: ``"hour"``, ``"minute"`` or ``"second"`` when a field was out of
            range; ``None`` when the text did not match the pattern at all.
        reason: Short human-readable explanation.
    """

    def __init__(self, text: object, reason: str, field: str | None = None) -> None:
        self.text = text
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid wall-clock time {text!r}: {reason}")


class OutOfRange(WallClockError):
    """Raised when a component is outside its bound at construction time.

    Attributes:
        field: Name of the offending component.
        value: The rejected value.
        limit: Exclusive upper bound for the component.
    """

    def __init__(self, field: str, value: int, limit: int) -> None:
        self.field = field
        self.value = value
        self.limit = limit
        super().__init__(f"{field} out of range: {value} (expected 0 to {limit - 1})")
