"""
Configuration settings for the ServiceDesk application.
"""
from pydantic_settings import BaseSettings
from pydantic import Field
from functools import lru_cache
from pathlib import Path
from typing import List


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # MongoDB Configuration
    mongodb_uri: str = Field(default="mongodb://localhost:27017", alias="MONGODB_URI")
    mongodb_database: str = Field(default="servicedesk", alias="MONGODB_DATABASE")
    mongodb_timeout_ms: int = Field(default=5000, alias="MONGODB_TIMEOUT_MS")

    # MongoDB Collection Names
    categories_collection: str = Field(default="categories", alias="CATEGORIES_COLLECTION")
    counters_collection: str = Field(default="counters", alias="COUNTERS_COLLECTION")

    # REST Configuration
    application_name: str = Field(default="servicedeskApp", alias="APPLICATION_NAME")
    enable_translation: bool = Field(default=False, alias="ENABLE_TRANSLATION")
    api_prefix: str = Field(default="/api", alias="API_PREFIX")
    cors_allow_origins: List[str] = Field(default=["*"], alias="CORS_ALLOW_ORIGINS")

    # Pagination Configuration
    default_page_size: int = Field(default=20, alias="DEFAULT_PAGE_SIZE")
    max_page_size: int = Field(default=2000, alias="MAX_PAGE_SIZE")

    # Logging Configuration
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_dir: Path = Field(default=Path("./logs"), alias="LOG_DIR")
    log_json: bool = Field(default=True, alias="LOG_JSON")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    def ensure_directories(self) -> None:
        """Create necessary directories if they don't exist."""
        self.log_dir.mkdir(parents=True, exist_ok=True)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    settings = Settings()
    settings.ensure_directories()
    return settings
