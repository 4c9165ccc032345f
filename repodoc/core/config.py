"""
Application Configuration - Environment settings and constants.

Loads configuration from environment variables with sensible defaults.
Uses Pydantic Settings for validation and type safety.
"""

from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Usage:
        from repodoc.core.config import get_settings
        settings = get_settings()
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "repodoc"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # HTTP Server Configuration
    server_host: str = "0.0.0.0"
    server_port: int = 8000
    api_prefix: str = "/api"
    allowed_origins: List[str] = ["*"]

    # GitHub
    github_api_url: str = "https://api.github.com"
    github_oauth_url: str = "https://github.com/login/oauth/access_token"
    github_client_id: str = ""
    github_client_secret: str = ""
    github_timeout_seconds: float = 30.0

    # Completion service (Google Gemini)
    google_ai_api_key: str = ""
    gemini_model: str = "gemini-1.5-flash"

    # Session tokens
    jwt_secret: str = "your-secret-key"
    jwt_algorithm: str = "HS256"
    session_ttl_hours: int = 24 * 7

    # User store
    user_store_backend: str = "memory"  # memory or json
    user_store_path: str = "./data/users.json"

    # Pipeline limits
    max_key_files: int = 10
    analysis_content_chars: int = 1000
    fetch_concurrency: int = 10
    summary_concurrency: int = 1


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
