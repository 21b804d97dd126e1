"""Configuration management using Pydantic settings."""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Scheduler settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="WAVESCHED_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Randomness -- wave N is seeded with base_seed + N
    base_seed: int = 12345

    # Continuous pattern pacing (spacing_adjust only feeds the preview script)
    spacing_adjust: float = 1.0      # clamped to [0.5, 2.0]
    jitter: float = 0.2              # +/- fraction applied to each interval
    min_interval: float = 1e-3       # seconds; keeps the loop bounded
    max_spawns: int = 10_000         # hard cap on entries per schedule

    # Roster promotion
    promotion_ramp_waves: float = 20.0

    # Content
    catalog_path: Optional[Path] = None   # None = built-in roster
    scenario_path: Optional[Path] = None

    # Logging
    log_level: str = "INFO"


settings = Settings()
