import logging
import os
from typing import Optional

DEFAULT_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def _resolve_log_level() -> int:
    env_level = os.getenv("INCIDENTSYNC_LOG_LEVEL", "INFO")
    return logging._nameToLevel.get(env_level.upper(), logging.INFO)


def configure_logging(level: Optional[int] = None) -> None:
    resolved = level if level is not None else _resolve_log_level()
    logging.basicConfig(level=resolved, format=DEFAULT_LOG_FORMAT)
