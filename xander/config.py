"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Rules engine settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="XANDER_",
        case_sensitive=False,
        extra="ignore",
    )

    # Rules
    namespace: str = Field(
        default="5E",
        min_length=1,
        description="Namespace prefix used to mint rule entity identities",
    )
    # Fixed for now; scales with level in the full rules
    proficiency_bonus: int = Field(
        default=2,
        ge=0,
        description="Base proficiency bonus for new creatures",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    # Debug
    debug: bool = False


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
