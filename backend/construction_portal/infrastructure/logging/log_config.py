"""Log levels for the portal process and the maintenance scripts.

The portal logs in two directions: inbound portal requests (uvicorn) and
outbound calls to the construction API (httpx plus our gateways). Login
sessions add SQL chatter, and the attendance index script talks to MongoDB
directly. Each of these gets its own ``LOG_LEVEL_*`` setting.
"""

import logging
import sys

from construction_portal.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"

# Settings field -> loggers it governs.
_CATEGORY_MAP: dict[str, list[str]] = {
    # login-session store
    "log_level_sql": [
        "sqlalchemy.engine",
        "sqlalchemy.pool",
        "aiosqlite",
    ],
    # raw transport to the construction API
    "log_level_http": [
        "httpx",
        "httpcore",
    ],
    "log_level_uvicorn": [
        "uvicorn",
        "uvicorn.access",
        "uvicorn.error",
    ],
    # gateways and the upstream client: forced logouts, 401s, transport failures
    "log_level_upstream": [
        "construction_portal.infrastructure.api",
    ],
    # fix_attendance_index only
    "log_level_mongo": [
        "pymongo",
        "motor",
    ],
}


def setup_logging() -> None:
    """Apply ``LOG_LEVEL`` to the root logger and each ``LOG_LEVEL_*`` to its loggers.

    Safe to call from both the app lifespan and a script entry point.
    """
    settings = get_settings()

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))
    if not root.handlers:
        # uvicorn installs its own handlers; scripts and pytest do not.
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    levels: dict[str, str] = {}
    for settings_field, logger_names in _CATEGORY_MAP.items():
        raw_level: str = getattr(settings, settings_field, "INFO")
        levels[settings_field.removeprefix("log_level_")] = raw_level
        for name in logger_names:
            logging.getLogger(name).setLevel(_parse_level(raw_level))

    logging.getLogger(__name__).debug(
        "Portal logging at %s (%s)",
        settings.log_level,
        ", ".join(f"{category}={level}" for category, level in levels.items()),
    )


def _parse_level(raw: str) -> int:
    """``"debug"`` -> ``logging.DEBUG``; unknown names fall back to INFO."""
    numeric = getattr(logging, raw.upper(), None)
    if isinstance(numeric, int):
        return numeric
    return logging.INFO
