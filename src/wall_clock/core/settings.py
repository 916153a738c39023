"""Library settings and configuration.

Settings are loaded from ``WALL_CLOCK_*`` environment variables or an ``.env``
file, with defaults suitable for most applications.
"""

import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables.

    Settings can be overridden via environment variables or .env files.
    """

    # Make WallClockTime.new_unchecked validate like the checked constructor
    validate_unchecked: bool = Field(default=False, alias="WALL_CLOCK_VALIDATE_UNCHECKED")

    # Number of distinct literals remembered by wall_clock.time()
    literal_cache_size: int = Field(default=256, ge=0, alias="WALL_CLOCK_LITERAL_CACHE_SIZE")

    # Level applied to the "wall_clock" logger by configure_logging()
    log_level: str = Field(default="WARNING", alias="WALL_CLOCK_LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
    )

    @property
    def log_level_number(self) -> int:
        """Return the numeric logging level for ``log_level``.

        Unknown level names fall back to ``logging.WARNING``.
        """
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.WARNING


settings = Settings()
