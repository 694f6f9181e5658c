"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "TriZones: threshold-based training zone engine."
    VERSION: str = "0.1.0"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"

    # Zone table editing
    DEFAULT_ZONE_WIDTH_PCT: float = 10.0

    # Threshold freshness: 'discipline' (cadence per discipline) or
    # 'uniform' (fixed 30/60 days for every discipline)
    FRESHNESS_METHOD: str = "discipline"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


# Global settings instance
settings = Settings()
