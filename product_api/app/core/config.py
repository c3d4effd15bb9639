"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from environment
variables, with defaults for every field.  Token material is split out
into the frozen ``TokenConfig`` so it can be built once at startup and
handed to the token validator instead of being read from a global on
every request.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Product API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")
    secret_key: str = os.getenv("SECRET_KEY", "change_me")
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24)))
    algorithm: str = os.getenv("ALGORITHM", "HS256")

    # Path to the SQLite database file.  Relative paths are resolved
    # against the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "products.db")

    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))


@dataclass(frozen=True)
class TokenConfig:
    """Immutable key material for signing and verifying access tokens."""

    secret_key: str
    algorithm: str = "HS256"
    expire_seconds: int = 60 * 60 * 24

    @classmethod
    def from_settings(cls, source: Settings) -> "TokenConfig":
        return cls(
            secret_key=source.secret_key,
            algorithm=source.algorithm,
            expire_seconds=source.access_token_expire_minutes * 60,
        )


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables should
# be set before importing this module.
settings = Settings()
