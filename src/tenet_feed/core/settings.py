"""Application settings and configuration.

This module defines all configuration options for the Tenet Feed service.
Settings are loaded from environment variables with sensible defaults.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Settings can be overridden via environment variables or .env files.
    List values (blocked domains, extra profanity words, CORS lists) are read
    as JSON arrays.
    """

    # Application metadata
    app_name: str = Field(default="Tenet Feed", alias="APP_NAME")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")

    # Security and authentication
    secret_key: str = Field(alias="SECRET_KEY")
    debug: bool = Field(default=False, alias="DEBUG")

    # Database configuration
    database_url: str = Field(default="sqlite:///./tenet.db", alias="DATABASE_URL")
    sql_debug: bool = Field(default=False, alias="SQL_DEBUG")

    # JWT authentication settings (tokens are minted by the auth provider)
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = Field(
        default=60 * 24 * 30,
        alias="ACCESS_TOKEN_EXPIRE_MINUTES",
    )

    # Content guard
    content_max_length: int = Field(default=300, alias="CONTENT_MAX_LENGTH")
    content_min_length: int = Field(default=10, alias="CONTENT_MIN_LENGTH")
    blocked_domains: list[str] = Field(
        default=["porn", "xvideos", "redtube", "onlyfans", "nsfw", "lush"],
        alias="BLOCKED_DOMAINS",
    )
    profanity_extra_words: list[str] = Field(default=[], alias="PROFANITY_EXTRA_WORDS")

    # Feed reading
    feed_page_size: int = Field(default=50, alias="FEED_PAGE_SIZE")
    search_scan_limit: int = Field(default=100, alias="SEARCH_SCAN_LIMIT")

    # Handles are "<username>.<handle_domain>"
    handle_domain: str = Field(default="tenetapp.space", alias="HANDLE_DOMAIN")

    # CORS configuration for the mobile/web client
    cors_origins: list[str] = Field(
        default=["*"],
        alias="CORS_ORIGINS",
    )
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: list[str] = Field(
        default=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        alias="CORS_ALLOW_METHODS",
    )
    cors_allow_headers: list[str] = Field(
        default=["*"],
        alias="CORS_ALLOW_HEADERS",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
    )


settings = Settings()  # type: ignore[call-arg]
