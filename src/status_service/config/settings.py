"""Settings module using pydantic-settings for configuration management."""

from functools import lru_cache
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Service Configuration
    service_name: str = Field(default="status-service")
    environment: str = Field(default="development")
    port: int = Field(default=8080)
    host: str = Field(default="0.0.0.0")
    reload: bool = Field(default=False)

    # Log Emitter Configuration (seconds)
    emitter_enabled: bool = Field(default=True)
    emitter_startup_delay: float = Field(default=5.0, ge=0)
    emitter_interval: float = Field(default=10.0, gt=0)
    emitter_seed: Optional[int] = Field(default=None)

    # Logging
    log_level: str = Field(default="INFO")


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
