"""Configuration management for the bonus conversion calculator.

Settings are loaded from environment variables (prefix ``BONUS_``) using
pydantic-settings. Every field has a default, so a bare environment works.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Calculator settings loaded from environment variables.

    Optional settings (all have defaults):
    - BONUS_LOG_MODE: "development" (console) or "production" (JSON)
    - BONUS_DEFAULT_ODDS: Initial American odds of the promotional leg
    - BONUS_DEFAULT_HEDGE_ODDS: Initial American odds of the hedge leg
    - BONUS_DEFAULT_STAKE: Initial stake of the promotional leg
    - BONUS_DEFAULT_PERCENT_INSURED: Initial "% insured" (0-100)
    - BONUS_DEFAULT_PERCENT_CONVERSION: Initial assumed bonus conversion (0-100)
    - BONUS_DEFAULT_BONUS_VALUE: Initial bonus credit for must-spend offers
    """

    log_mode: Literal["development", "production"] = Field(default="development")

    default_odds: int = Field(default=-110, description="American odds, promotional leg")
    default_hedge_odds: int = Field(default=-110, description="American odds, hedge leg")
    default_stake: float = Field(default=10.0, ge=0)
    default_percent_insured: float = Field(default=100.0, ge=0, le=100)
    default_percent_conversion: float = Field(default=60.0, ge=0, le=100)
    default_bonus_value: float = Field(default=10.0, ge=0)

    model_config = SettingsConfigDict(
        env_prefix="BONUS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance (singleton).

    Returns:
        Settings instance with validated configuration

    Raises:
        ValidationError: If an environment override is out of range
    """
    return Settings()
