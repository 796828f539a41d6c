"""
Configuration settings for the Restaurant Directory API.

Loads environment variables from .env file and provides typed configuration.
"""

from typing import List, Literal
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Configuration
    CORS_ORIGINS: List[str] = Field(
        default=["http://localhost:5173", "http://localhost:3000"],
        description="Allowed CORS origins",
    )

    # Storage Configuration
    STORE_BACKEND: Literal["database", "json"] = Field(
        default="database",
        description="Where restaurants are kept: 'database' (SQL table) or 'json' (flat file)",
    )
    RESTAURANTS_FILE: str = Field(
        default="./data/restaurants.json",
        description="Path of the JSON document used by the 'json' backend",
    )

    # Database Configuration
    DATABASE_URL: str = Field(
        default="sqlite:///./data/restaurants.db", description="SQLAlchemy database URL"
    )
    DATABASE_ECHO: bool = Field(
        default=False, description="Echo SQL queries (for debugging)"
    )

    # Rate Limiting
    RATE_LIMIT_ENABLED: bool = Field(
        default=True, description="Enable per-client rate limiting"
    )
    RATE_LIMIT: str = Field(
        default="100/minute", description="Default rate limit per client address"
    )

    # Logging Configuration
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    ENABLE_FILE_LOGGING: bool = Field(
        default=False, description="Enable logging to file"
    )
    LOG_DIR: str = Field(default="./logs", description="Directory for log files")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


# Global settings instance
settings = Settings()
