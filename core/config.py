"""
core/config.py -- Centralized application configuration via pydantic-settings.

All environment variable reads for the Customer Profile Service happen here.
No module should call os.getenv() or os.environ.get() directly -- import
get_settings() instead.

Design patterns used:
  Singleton via lru_cache: get_settings() instantiates Settings once at first
      call and returns the cached instance on every subsequent call. This is
      the official FastAPI dependency injection pattern for config.

  BaseSettings (pydantic-settings): Reads values from environment variables
      and an optional .env file automatically. Field names map to env var names
      (e.g. secret_key -> SECRET_KEY, database_url -> DATABASE_URL).

  @model_validator(mode="after"): Runs cross-field validation after all fields
      are resolved. Dev mode generates a signing key with a warning, production
      mode refuses to start without one.

Security notes:
  SECRET_KEY shorter than 32 chars is rejected outright. JWT HS256 signing
  relies on key entropy -- a short key weakens every issued token.

Layer rule: core/ is the kernel. This module may not import from api/, auth/,
or customers/.
"""

import logging
import secrets
from functools import lru_cache
from pathlib import Path

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger("customerprofile.config")

APP_NAME = "Customer Profile Service"
APP_VERSION = "1.0.0"

_DEFAULT_DB_URL = f"sqlite:///{Path(__file__).resolve().parent.parent / 'customerprofile.db'}"


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file.

    All fields have defaults so Settings() can be instantiated in test
    environments without a real .env file. The model_validator enforces
    production-safety rules at startup.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ------------------------------------------------------------------
    # Core
    # ------------------------------------------------------------------

    debug: bool = False
    # Any SQLAlchemy URL: sqlite:///..., mysql+pymysql://..., postgresql://...
    database_url: str = _DEFAULT_DB_URL

    # ------------------------------------------------------------------
    # Auth
    # ------------------------------------------------------------------

    # Empty string is the sentinel for "not configured". The model_validator
    # below either generates a dev key or raises, so callers never see "".
    secret_key: str = ""
    # Issued bearer tokens are valid for one hour.
    token_expire_seconds: int = 3600

    # ------------------------------------------------------------------
    # Validators
    # ------------------------------------------------------------------

    @model_validator(mode="after")
    def validate_secret_key(self) -> "Settings":
        """Enforce the SECRET_KEY policy.

        Dev mode (DEBUG=true): auto-generate a random key with a warning.
            Tokens will not survive restart -- acceptable for local dev.

        Production mode (DEBUG=false or not set): refuse to start if
            SECRET_KEY is missing.

        Both modes: reject keys shorter than 32 characters.
        """
        if not self.secret_key:
            if self.debug:
                self.secret_key = secrets.token_hex(32)
                logger.warning("Using auto-generated SECRET_KEY. Issued tokens will not survive a restart.")
            else:
                raise ValueError(
                    "SECRET_KEY is required in production mode. "
                    "Set SECRET_KEY in your environment or .env file. "
                    "To run in development mode, set DEBUG=true."
                )
        if len(self.secret_key) < 32:
            raise ValueError("SECRET_KEY must be at least 32 characters.")
        if self.token_expire_seconds <= 0:
            raise ValueError("TOKEN_EXPIRE_SECONDS must be positive.")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return the application Settings singleton.

    In tests: call get_settings.cache_clear() between test cases if you need
    to inject different environment variables.
    """
    return Settings()
