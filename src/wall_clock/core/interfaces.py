"""Capability protocols consumed by the optional adapters.

The database and serialization adapters only rely on these protocols, so the
value type never has to know about SQLAlchemy or pydantic.
"""

from __future__ import annotations

import datetime as dt
from typing import Protocol, runtime_checkable


@runtime_checkable
class NativeTimeConvertible(Protocol):
    """Values that convert to a :class:`datetime.time` (and back via ``from_native_time_repr``)."""

    def to_native_time_repr(self) -> dt.time: ...


@runtime_checkable
class TextSerializable(Protocol):
    """Values that serialize to a stable textual form (and back via ``deserialize_from_text``)."""

    def serialize_as_text(self) -> str: ...
