"""
Yahtzee - Application Settings

Loads configuration from ``YAHTZEE_*`` environment variables (or a ``.env``
file) using Pydantic Settings. Command-line options override these values.
"""
from functools import lru_cache
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .simulation.strategy_registry import strategy_registry


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Highscores
    highscore_path: str = "highscores.txt"
    highscore_limit: int = 10

    # Opponent
    ai_strategy: str = "greedy"
    ai_roll_delay: float = 0.8
    ai_show_delay: float = 1.0
    ai_choice_delay: float = 1.5

    # Logging
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    model_config = SettingsConfigDict(
        env_prefix="YAHTZEE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("ai_strategy")
    @classmethod
    def validate_ai_strategy(cls, v: str) -> str:
        """Only registered strategies can be the opponent."""
        name = v.lower()
        if name not in strategy_registry.list_strategies():
            choices = ", ".join(strategy_registry.list_strategies())
            raise ValueError(f"Unknown strategy '{v}', choose one of: {choices}")
        return name


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()
