import logging
from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_config_logger = logging.getLogger(__name__)

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Construction Portal API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    cors_origins: list[str] = ["http://localhost:3000"]

    # Upstream construction REST API (labour, attendance, projects, ...)
    api_base_url: str = "http://localhost:5000/api"
    api_timeout_seconds: float = 10.0

    # Local login-session store
    database_url: str = "sqlite:///data/portal_sessions.db"
    session_idle_hours: int = 12

    # Upstream MongoDB, only used by maintenance scripts
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_database: str = "janco_construction"

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL queries
    log_level_http: str = "WARNING"          # httpx / httpcore — outbound HTTP
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_upstream: str = "INFO"         # upstream API gateways
    log_level_mongo: str = "WARNING"         # pymongo / motor — maintenance scripts

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    def model_post_init(self, __context: object) -> None:
        """Normalise the upstream base URL so gateways can append paths."""
        if self.api_base_url.endswith("/"):
            object.__setattr__(self, "api_base_url", self.api_base_url.rstrip("/"))
            _config_logger.debug("Stripped trailing slash from api_base_url")


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
