# tests/conftest.py
from __future__ import annotations

import logging
from collections.abc import Generator, Iterator

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from wall_clock.core import log as log_module
from wall_clock.core import settings as settings_module
from wall_clock.core import wall_clock_time
from wall_clock.core.settings import Settings

TEST_DB_URL = "sqlite://"


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[Settings]:
    """Give every test fresh default settings, shared by every wall_clock module."""
    fresh = Settings()
    monkeypatch.setattr(settings_module, "settings", fresh)
    monkeypatch.setattr(wall_clock_time, "settings", fresh)
    monkeypatch.setattr(log_module, "settings", fresh)
    yield fresh


@pytest.fixture(autouse=True)
def clear_literal_cache() -> Iterator[None]:
    wall_clock_time._parse_literal.cache_clear()
    yield
    wall_clock_time._parse_literal.cache_clear()


@pytest.fixture()
def debug_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Capture DEBUG records emitted under the wall_clock logger."""
    caplog.set_level(logging.DEBUG, logger="wall_clock")
    return caplog


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    try:
        yield engine
    finally:
        engine.dispose()
