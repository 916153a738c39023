"""SQLAlchemy column type storing wall-clock times in ``TIME`` columns.

Example:
    from sqlalchemy.orm import Mapped, mapped_column
    from wall_clock import WallClockTime
    from wall_clock.db import WallClockTimeType

    class Shift(Base):
        __tablename__ = "shift"

        id: Mapped[int] = mapped_column(primary_key=True)
        starts_at: Mapped[WallClockTime] = mapped_column(WallClockTimeType, nullable=False)
"""

from __future__ import annotations

import datetime as dt
import logging
from typing import Any

from sqlalchemy import Time
from sqlalchemy.engine import Dialect
from sqlalchemy.types import TypeDecorator

from wall_clock.core.interfaces import NativeTimeConvertible
from wall_clock.core.wall_clock_time import WallClockTime

logger = logging.getLogger(__name__)


class WallClockTimeType(TypeDecorator[WallClockTime]):
    """Maps :class:`WallClockTime` to the database's native ``TIME`` type.

    Values travel through ``to_native_time_repr`` / ``from_native_time_repr``,
    so the column never sees anything but a naive ``datetime.time``.
    """

    impl = Time
    cache_ok = True

    def __init__(self, value_class: type[WallClockTime] = WallClockTime) -> None:
        super().__init__(timezone=False)
        self.value_class = value_class

    @property
    def python_type(self) -> type[WallClockTime]:
        return self.value_class

    def process_bind_param(self, value: Any, dialect: Dialect) -> dt.time | None:
        if value is None:
            return None
        if isinstance(value, str):
            logger.debug("Binding wall-clock text %r to a TIME column", value)
            value = self.value_class.deserialize_from_text(value)
        elif isinstance(value, dt.time):
            value = self.value_class.from_native_time_repr(value)
        if not isinstance(value, NativeTimeConvertible):
            raise TypeError(f"Cannot bind {type(value).__name__} to a wall-clock TIME column")
        return value.to_native_time_repr()

    def process_result_value(self, value: Any, dialect: Dialect) -> WallClockTime | None:
        if value is None:
            return None
        # Some MySQL drivers return TIME columns as timedelta since midnight.
        if isinstance(value, dt.timedelta):
            value = (dt.datetime.min + value).time()
        return self.value_class.from_native_time_repr(value)
