"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all, listening on port 3100
with the Swagger UI at ``/swagger``.
"""

import os
from dataclasses import dataclass, field
from typing import List


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "ITMP API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    description: str = os.getenv("API_DESCRIPTION", "ITMP project API")
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3100"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  Console logging is always enabled.
    log_file: str = os.getenv("LOG_FILE", "")

    # Path under which the interactive Swagger UI is served.
    docs_url: str = os.getenv("DOCS_URL", "/swagger")

    # Comma‑separated list of allowed origins.  ``*`` allows any origin.
    cors_origins: List[str] = field(
        default_factory=lambda: [
            origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()
        ]
    )

    # When enabled, the store starts with the three demo users.
    seed_users: bool = _env_flag("SEED_USERS", "true")

    @property
    def server_url(self) -> str:
        return f"http://localhost:{self.port}"


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
