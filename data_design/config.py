import logging
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

_config_logger = logging.getLogger(__name__)

_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)
_SUPPORTED_SCHEMES = ("sqlite", "postgresql", "mysql")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_env: str = "development"
    database_url: str = "sqlite:///data_design.db"
    database_echo: bool = False

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine: SQL statements
    log_level_repository: str = "INFO"       # entity repositories

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
        "env_prefix": "DATA_DESIGN_",
    }

    def model_post_init(self, __context: object) -> None:
        """Warn early about database URLs no driver mapping exists for."""
        scheme = self.database_url.split(":", 1)[0].split("+", 1)[0]
        if scheme not in _SUPPORTED_SCHEMES:
            _config_logger.warning(
                "Unrecognised database scheme '%s'; the URL will be passed to SQLAlchemy as-is",
                scheme,
            )


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance: reads .env once."""
    return Settings()
