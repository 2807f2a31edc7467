"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "penny-score"
    log_level: str = "INFO"

    # Scoring API
    improvement_count: int = 3  # Areas listed in the improvement ranking


settings = Settings()
