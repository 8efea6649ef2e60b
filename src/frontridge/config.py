"""Application configuration."""

import logging
import math
import os
from datetime import timedelta

from pydantic_settings import BaseSettings, SettingsConfigDict

from frontridge.domain.errors import ConfigurationError

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")
_DEVELOPMENT_ENVIRONMENTS = {"local", "development", "test"}
_DEVELOPMENT_SIGNING_SECRET = "change-me"

DEFAULT_SESSION_DURATION = timedelta(hours=1)

_logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    works_table: str = "works"
    admin_password: str | None = None
    admin_password_hash: str | None = None
    admin_session_secret: str | None = None
    admin_session_duration_ms: str | None = None
    cloudinary_cloud_name: str | None = None
    cloudinary_api_key: str | None = None
    cloudinary_api_secret: str | None = None
    upload_max_bytes: int = 50 * 1024 * 1024
    upload_default_folder: str = "uploads"
    resend_api_key: str | None = None
    contact_email: str = "Info@frontridge.ca"
    contact_sender: str = "Contact Form <onboarding@resend.dev>"
    works_api_base_url: str | None = None
    works_cache_ttl_seconds: float = 300
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        """Return true when running in the production deployment."""
        return self.environment == "production"

    @property
    def cloudinary_configured(self) -> bool:
        """Return true when all three Cloudinary credentials are present."""
        return bool(
            self.cloudinary_cloud_name
            and self.cloudinary_api_key
            and self.cloudinary_api_secret
        )


def parse_session_duration(raw: str | None) -> timedelta:
    """Parse a session duration in milliseconds, falling back to one hour."""
    if raw is None:
        return DEFAULT_SESSION_DURATION
    try:
        value = float(raw.strip())
    except ValueError:
        return DEFAULT_SESSION_DURATION
    if not math.isfinite(value) or value <= 0:
        return DEFAULT_SESSION_DURATION
    return timedelta(milliseconds=value)


def resolve_signing_secret(settings: Settings) -> str:
    """Return the session signing secret.

    A dedicated ``ADMIN_SESSION_SECRET`` is required outside development.
    Development environments fall back to the admin credential and then to a
    fixed placeholder so a fresh checkout can log in without extra setup.
    """
    if settings.admin_session_secret:
        return settings.admin_session_secret
    if settings.environment not in _DEVELOPMENT_ENVIRONMENTS:
        raise ConfigurationError(
            "ADMIN_SESSION_SECRET must be set when ENVIRONMENT="
            f"{settings.environment}"
        )
    _logger.warning(
        "ADMIN_SESSION_SECRET is not set; using a development fallback secret"
    )
    return (
        settings.admin_password
        or settings.admin_password_hash
        or _DEVELOPMENT_SIGNING_SECRET
    )
