# core/logging_config.py
import logging
from typing import Optional

from core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOGGER_NAME = "feeportal"

# Unlisted environments (development, local) log at DEBUG
ENV_LOG_LEVELS = {
    "production": logging.INFO,
    "staging": logging.INFO,
    "test": logging.WARNING,
}


def resolve_log_level(env: str, override: Optional[str] = None) -> int:
    """LOG_LEVEL wins when it names a real level; otherwise derive from ENV."""
    if override:
        level = logging.getLevelName(override.strip().upper())
        if isinstance(level, int):
            return level
    return ENV_LOG_LEVELS.get(env.lower(), logging.DEBUG)


def setup_logger(name: str = LOGGER_NAME) -> logging.Logger:
    logger = logging.getLogger(name)

    # Avoid duplicate handlers in dev reload
    if logger.handlers:
        return logger

    logger.setLevel(resolve_log_level(settings.ENV, settings.LOG_LEVEL))

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(stream_handler)

    return logger


logger = setup_logger()
