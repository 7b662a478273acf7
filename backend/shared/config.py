"""
Central configuration for the Live Board services.
Uses pydantic-settings for env-based config with validation.
"""
from __future__ import annotations

from enum import Enum
from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    DEV = "dev"
    STAGING = "staging"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """Root settings shared across all services."""

    model_config = SettingsConfigDict(
        env_prefix="LB_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # ── General ──────────────────────────────────────────────
    environment: Environment = Environment.DEV
    debug: bool = False
    log_level: str = "INFO"

    # ── API ──────────────────────────────────────────────────
    api_host: str = "0.0.0.0"
    api_port: int = 3000
    api_workers: int = 1
    cors_origins: list[str] = ["*"]

    # ── Live score feed (API-Sports basketball) ──────────────
    apisports_key: str = Field(
        default="",
        validation_alias=AliasChoices("LB_APISPORTS_KEY", "APISPORTS_KEY"),
    )
    apisports_base_url: str = "https://v1.basketball.api-sports.io"
    apisports_league: str = Field(default="12", description="API-Sports league id (12 = NBA)")

    # ── Odds feed (The Odds API) ─────────────────────────────
    odds_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("LB_ODDS_API_KEY", "ODDS_API_KEY"),
    )
    odds_base_url: str = "https://api.the-odds-api.com/v4"
    odds_sport: str = "basketball_nba"
    odds_regions: str = "us"
    odds_markets: str = "h2h"
    odds_format: str = "american"

    feed_request_timeout_s: float = 10.0

    # ── Reconciliation ───────────────────────────────────────
    team_aliases: dict[str, str] = Field(
        default_factory=dict,
        description="Extra team aliases, raw name -> canonical name. Both sides are normalized.",
    )

    # ── Observability ────────────────────────────────────────
    metrics_enabled: bool = True
    metrics_port: int = 9090


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Singleton access to validated settings."""
    return Settings()
