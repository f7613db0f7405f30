"""Runtime configuration for the portfolio API."""

from functools import lru_cache
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from smartsip.core.constants import MAX_UNDO_STEPS


class Settings(BaseSettings):
    """Application settings, read from SMARTSIP_* environment variables."""

    model_config = SettingsConfigDict(env_prefix="SMARTSIP_", env_file=".env", extra="ignore")

    app_name: str = Field(default="SmartSIP Portfolio API")
    price_cache_path: str = Field(
        default=".smartsip/prices.json",
        description="JSON file holding the last known prices and their refresh day.",
    )
    undo_depth: int = Field(default=MAX_UNDO_STEPS, gt=0, le=1000)
    history_source: str = Field(
        default="synthetic",
        description="Historical price source: 'synthetic' random walk or 'flat'.",
    )
    history_seed: int | None = Field(default=None)
    seed_sample_data: bool = Field(default=True)
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://localhost:5173"]
    )

    @field_validator("history_source")
    @classmethod
    def validate_history_source(cls, v: str) -> str:
        """Validate the historical price source name."""
        normalized = v.strip().lower()
        if normalized not in ("synthetic", "flat"):
            raise ValueError(f"history_source must be 'synthetic' or 'flat', got {v!r}")
        return normalized

    def dict_for_logging(self) -> dict[str, Any]:
        """Return a representation safe for logging."""
        return self.model_dump()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings."""
    return Settings()
