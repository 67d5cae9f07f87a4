"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any configuration at all.  The instance is
frozen: settings are read once at startup and never mutated
afterwards.  ``create_app`` accepts an explicit ``Settings`` instance,
which is how tests run the application with their own API key.
"""

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Products API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")

    # ``development`` enables stack traces in error responses.  NODE_ENV
    # is honoured as a fallback so existing deployment manifests keep
    # working.
    environment: str = os.getenv("APP_ENV", os.getenv("NODE_ENV", "production"))

    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")
    log_format: str = os.getenv("LOG_FORMAT", "%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    log_date_format: str = os.getenv("LOG_DATE_FORMAT", "%Y-%m-%d %H:%M:%S")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # Static secret required for write operations, presented by clients
    # in the ``api_key_header`` request header.
    api_key: str = os.getenv("API_KEY", "secret-key-123")
    api_key_header: str = os.getenv("API_KEY_HEADER", "x-api-key")

    # Prefix under which the products router is mounted, e.g. ``/api``.
    api_prefix: str = os.getenv("API_PREFIX", "")

    @property
    def debug(self) -> bool:
        return self.environment.lower() == "development"


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class definition time, environment variables
# should be set before importing this module.
settings = Settings()
