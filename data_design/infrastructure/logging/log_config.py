"""Logging setup for scripts and tests that drive the repositories.

SQL echo from SQLAlchemy and the aiosqlite driver is tuned by
``log_level_sql``; the repositories' write and lookup records under
``data_design.infrastructure.database`` by ``log_level_repository``.
"""

import logging
import sys

from data_design.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# Settings field -> loggers whose level it controls
_CATEGORY_MAP: dict[str, tuple[str, ...]] = {
    "log_level_sql": ("sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite"),
    "log_level_repository": ("data_design.infrastructure.database",),
}


def setup_logging(settings: Settings | None = None) -> None:
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    for field_name, logger_names in _CATEGORY_MAP.items():
        level = _parse_level(getattr(settings, field_name))
        for name in logger_names:
            logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).debug(
        "log levels: root=%s sql=%s repository=%s",
        settings.log_level,
        settings.log_level_sql,
        settings.log_level_repository,
    )


def _parse_level(raw: str) -> int:
    """Map a level name such as ``"debug"`` to its constant; unknown names give INFO."""
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else logging.INFO
