"""Configuration settings for SeatRules."""

from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Engine settings loaded from ``SEAT_RULES_*`` environment variables."""

    # Suggestions
    max_suggestions: int = 5

    # Layout generation
    grid_width: int = 16
    default_row_length: int = 10

    # Logging
    log_level: str = "INFO"

    model_config = {
        "env_prefix": "SEAT_RULES_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
