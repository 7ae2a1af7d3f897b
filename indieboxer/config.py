"""
Configuration management for Indieboxer.
Uses pydantic-settings for environment variable parsing.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Frame loop
    fps: int = Field(
        default=60,
        gt=0,
        description="Frame cap for the main loop"
    )

    # Randomness
    seed: Optional[int] = Field(
        default=None,
        description="Seed for the session RNG. Unset means a random seed"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Root logging level"
    )

    # Debug
    debug_lanes: bool = Field(
        default=False,
        description="Show how many enemies wait off-board in each lane"
    )

    # Window
    window_scale: float = Field(
        default=1.0,
        gt=0,
        description="Scale factor applied to the 505x606 board"
    )

    class Config:
        env_prefix = "INDIEBOXER_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
