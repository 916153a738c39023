"""Tests for the native-time and text hooks used by the adapters."""

from __future__ import annotations

import datetime as dt

import pytest

from wall_clock import (
    NativeTimeConvertible,
    ParseError,
    TextSerializable,
    WallClockError,
    WallClockTime,
    time,
)


def test_to_native_time_repr() -> None:
    assert time("17:15:30").to_native_time_repr() == dt.time(17, 15, 30)
    assert WallClockTime().to_native_time_repr() == dt.time(0, 0, 0)


def test_from_native_time_repr() -> None:
    assert WallClockTime.from_native_time_repr(dt.time(9, 30)) == time("09:30:00")


def test_from_native_time_repr_truncates_microseconds(debug_logs: pytest.LogCaptureFixture) -> None:
    value = WallClockTime.from_native_time_repr(dt.time(18, 30, 1, 999_999))
    assert value == time("18:30:01")
    assert any("Dropping 999999 microseconds" in r.getMessage() for r in debug_logs.records)


def test_from_native_time_repr_rejects_time_zones() -> None:
    with pytest.raises(WallClockError):
        WallClockTime.from_native_time_repr(dt.time(12, 0, tzinfo=dt.timezone.utc))


def test_from_native_time_repr_rejects_other_types() -> None:
    with pytest.raises(TypeError):
        WallClockTime.from_native_time_repr(dt.datetime(2024, 1, 1, 12))  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        WallClockTime.from_native_time_repr("12:00:00")  # type: ignore[arg-type]


def test_native_round_trip() -> None:
    for offset in range(0, 86_400, 601):
        value = WallClockTime.from_midnight_offset(offset)
        assert WallClockTime.from_native_time_repr(value.to_native_time_repr()) == value


def test_text_hooks() -> None:
    value = time("07:05:09")
    assert value.serialize_as_text() == "07:05:09"
    assert WallClockTime.deserialize_from_text("07:05:09") == value
    with pytest.raises(ParseError):
        WallClockTime.deserialize_from_text("7:05:09")


def test_capability_protocols() -> None:
    value = time("12:00:00")
    assert isinstance(value, NativeTimeConvertible)
    assert isinstance(value, TextSerializable)
    assert not isinstance("12:00:00", NativeTimeConvertible)
