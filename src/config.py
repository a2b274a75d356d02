"""Application configuration using pydantic-settings pattern."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "MBJ Digital Portal"
    app_version: str = "0.1.0"
    app_env: str = Field(default="development")
    log_level: str = Field(default="INFO")

    # Database (Turso / local libSQL file)
    turso_database_url: str | None = Field(default=None)
    turso_auth_token: str | None = Field(default=None)

    # Auth
    session_ttl_hours: int = Field(
        default=12,
        ge=1,
        description="How long a sign-in session stays valid",
    )
    require_email_verification: bool = Field(
        default=True,
        description="Refuse sign-in until the verification token is used",
    )
    initial_admin_emails: list[str] = Field(
        default_factory=list,
        description="Accounts that start with the chairman role instead of staff",
    )

    # Localization
    default_language: str = Field(default="ms", pattern="^(ms|en)$")
    display_timezone: str = Field(
        default="Asia/Kuala_Lumpur",
        description="IANA zone dates are displayed in and \"today\" is taken from",
    )

    # Listing
    list_cap: int = Field(
        default=100,
        ge=1,
        le=1000,
        description="Maximum rows fetched per list view",
    )

    # File storage (meeting minutes)
    storage_dir: str = Field(default="storage")
    storage_public_base_url: str = Field(default="/storage")
    max_minutes_bytes: int = Field(default=10 * 1024 * 1024)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
