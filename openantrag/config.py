"""
Configuration management for OpenAntrag Display.

Supports multiple environments (local, development, production) and
reads the remote API location plus HTTP service settings from the
environment or a .env file.

Responsibility: Centralized configuration and environment management
"""

from enum import Enum
from typing import List
import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Deployment environment"""
    LOCAL = "local"
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class OpenAntragConfig(BaseSettings):
    """Remote OpenAntrag API configuration"""

    api_host: str = Field(default="http://openantrag.de/api")
    user_agent: str = Field(default="OpenAntragDisplay/0.1")

    # Number of proposals shown when the caller does not ask for a count
    default_count: int = Field(default=3, ge=1)

    model_config = SettingsConfigDict(
        env_prefix="OPENANTRAG_",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("api_host")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Endpoint paths are appended with a leading slash"""
        return v.rstrip("/")


class AppConfig(BaseSettings):
    """Application configuration"""

    # Environment
    environment: Environment = Field(default=Environment.LOCAL)
    debug: bool = Field(default=True)

    # Application metadata
    app_name: str = Field(default="OpenAntrag Display")
    app_version: str = Field(default="0.1.0")

    # Logging
    log_level: str = Field(default="INFO")

    # HTTP service settings
    api_host: str = Field(default="0.0.0.0")
    api_port: int = Field(default=8000)

    # CORS settings
    cors_origins: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:8000"],
        description="Allowed CORS origins (JSON list or comma-separated in env)"
    )

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from JSON string or comma-separated list"""
        if isinstance(v, list):
            return v
        if isinstance(v, str):
            v = v.strip()
            if (v.startswith('"') and v.endswith('"')) or (v.startswith("'") and v.endswith("'")):
                v = v[1:-1]
            if v.startswith("["):
                try:
                    return json.loads(v)
                except json.JSONDecodeError:
                    pass
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v


class Settings(BaseSettings):
    """
    Global settings container.

    Loads configuration from:
    1. Environment variables
    2. .env file
    3. Default values

    Example:
        # Point at a staging mirror of the API
        settings = Settings(
            openantrag=OpenAntragConfig(api_host="https://staging.openantrag.de/api")
        )
    """

    app: AppConfig = Field(default_factory=AppConfig)
    openantrag: OpenAntragConfig = Field(default_factory=OpenAntragConfig)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Global settings instance
settings = Settings()
