"""
Configuration management for DeadAim.
Uses pydantic-settings for environment variable parsing.
"""

import logging
from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from deadaim.gameplay import constants


class Settings(BaseSettings):
    """Game settings loaded from DEADAIM_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DEADAIM_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Persistence
    high_score_file: str = Field(
        default=constants.HIGH_SCORE_FILE,
        description="Path of the plain-text file holding the high score"
    )

    # Grid and player
    grid_size: int = Field(default=constants.GRID_SIZE, ge=2)
    starting_health: int = Field(default=constants.STARTING_HEALTH, ge=1)
    player_speed: float = Field(default=constants.PLAYER_SPEED, gt=0)

    # Combat
    shoot_range: float = Field(
        default=constants.SHOOT_RANGE,
        gt=0,
        description="Maximum distance at which a shot kills the nearest enemy"
    )
    hit_radius: float = Field(
        default=constants.HIT_RADIUS,
        ge=0,
        description="Distance at which the nearest enemy hits the player"
    )

    # Waves
    base_enemy_count: int = Field(default=constants.BASE_ENEMY_COUNT, ge=1)
    clamp_enemies: bool = Field(
        default=False,
        description="Keep wandering enemies inside the grid"
    )
    seed: Optional[int] = Field(
        default=None,
        description="Seed for the random number generator. None means unseeded"
    )

    # Pacing
    tick_delay_ms: int = Field(default=round(constants.TICK_DELAY * 1000), ge=0)
    menu_retry_delay_ms: int = Field(default=round(constants.MENU_RETRY_DELAY * 1000), ge=0)

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="WARNING")
    log_file: Optional[str] = Field(
        default=None,
        description="Write logs to this file instead of stderr"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(settings: Settings) -> None:
    """Configure root logging from settings."""
    logging.basicConfig(
        level=settings.log_level,
        filename=settings.log_file,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
