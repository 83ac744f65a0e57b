"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API starts without any configuration at all; override them via
environment variables in a real deployment.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "User Directory API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When empty, logs only go to the console.
    log_file: str = os.getenv("LOG_FILE", "")

    # Interface and port used by ``run.py`` and reported by the root endpoint.
    host: str = os.getenv("HOST", "localhost")
    port: int = int(os.getenv("PORT", "3000"))

    # Prefix under which the users routes are mounted.  Empty by default so
    # the resource lives at ``/users``; set e.g. ``API_PREFIX=/api/v1`` to
    # version the routes.
    api_prefix: str = os.getenv("API_PREFIX", "")

    # Comma‑separated list of origins allowed by the CORS middleware.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    # PBKDF2 work factor for password hashing.  Lower it in tests only.
    password_hash_iterations: int = int(os.getenv("PASSWORD_HASH_ITERATIONS", "100000"))

    # Number of random bytes in a generated user id.  Ids are url‑safe
    # base64, so 9 bytes give a 12 character id.
    user_id_bytes: int = int(os.getenv("USER_ID_BYTES", "9"))

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
