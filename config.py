"""
Configuration settings for contrast-drill.

Uses Pydantic Settings for environment variable management with .env file support.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Contrasting Rounds
    # ========================================
    contrast_total_rounds: int = Field(
        default=3,
        ge=1,
        description="Number of full passes through the vocabulary pool",
    )
    contrast_level_schedule: str = Field(
        default="2,1,0",
        description="Comma-separated contrasting level per round (progressive policy)",
    )
    contrast_seed: str | None = Field(
        default=None,
        description="Seed for reproducible pool shuffles (None for random)",
    )

    # ========================================
    # Similarity Tiers
    # ========================================
    contrast_dissimilar_threshold: float = Field(
        default=0.5,
        ge=0,
        le=1,
        description="Normalized distance above which a pair is dissimilar (tier 2)",
    )
    contrast_similar_threshold: float = Field(
        default=0.2,
        ge=0,
        le=1,
        description="Normalized distance above which a pair is only somewhat similar (tier 1)",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging verbosity level",
    )
    log_file: str | None = Field(
        default=None,
        description="Log file path (None for stderr only)",
    )

    @field_validator("contrast_level_schedule")
    @classmethod
    def validate_level_schedule(cls, value: str) -> str:
        """Every schedule entry must be a contrasting level (0, 1 or 2)."""
        levels = [part.strip() for part in value.split(",") if part.strip()]
        for level in levels:
            if level not in ("0", "1", "2"):
                raise ValueError(
                    f"contrast_level_schedule entries must be 0, 1 or 2, got {level!r}"
                )
        return ",".join(levels)

    def level_schedule(self) -> list[int]:
        """Parse the progressive level schedule."""
        return [int(level.strip()) for level in self.contrast_level_schedule.split(",") if level.strip()]

    def get_contrasting_config(self) -> dict[str, Any]:
        """Get contrasting configuration as a dictionary."""
        return {
            "total_rounds": self.contrast_total_rounds,
            "level_schedule": self.level_schedule(),
            "seed": self.contrast_seed,
            "thresholds": {
                "similar": self.contrast_similar_threshold,
                "dissimilar": self.contrast_dissimilar_threshold,
            },
        }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
