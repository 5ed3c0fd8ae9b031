"""
Runtime settings of the event registration service.

Everything is read from environment variables when this module is first
imported.  The values that shape behaviour under load are
``DB_TIMEOUT`` (how long a store call waits on a locked SQLite file
before the request answers 503) and ``REQUEST_TIMEOUT`` (the ceiling
for a whole request).  ``CORS_ORIGINS`` lists the browser origins that
may call the API.  Tests build their own ``Settings`` and hand it to
``create_app``.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "API de Gestão de Eventos")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Path to the SQLite database file.  A relative path is resolved
    # against the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "eventos.db")

    # Seconds a store call waits on a locked database before it is
    # reported as unavailable (HTTP 503).
    db_timeout: float = float(os.getenv("DB_TIMEOUT", "5"))

    # Upper bound, in seconds, for handling a single request.
    request_timeout: float = float(os.getenv("REQUEST_TIMEOUT", "30"))

    # Comma‑separated list of origins allowed by CORS.  ``*`` allows any.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


# Read once at import; ``create_app`` falls back to this instance.
settings = Settings()
