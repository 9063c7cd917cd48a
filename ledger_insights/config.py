"""Configuration management using Pydantic Settings"""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "ledger-insights"
    log_level: str = "INFO"

    # Analytics
    analytics_cache_size: int = 128  # 0 disables memoization
    category_color_strategy: Literal["rank", "hash"] = "rank"
    default_period: str = "3m"


settings = Settings()
