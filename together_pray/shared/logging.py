"""Process-wide logging setup.

Root level follows settings.log_level (or debug). The cache package logs
every HIT/MISS/SET at DEBUG, so it has its own level, cache_log_level,
which lets a deployment silence or surface cache traffic independently.
"""

import logging
import sys

from together_pray.core.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CACHE_LOGGER_NAME = "together_pray.infrastructure.cache"


def root_level(settings: Settings) -> int:
    """Root log level: explicit log_level wins, else DEBUG/INFO from debug."""
    if settings.log_level:
        return logging.getLevelNamesMapping()[settings.log_level]
    return logging.DEBUG if settings.debug else logging.INFO


def setup_logging(settings: Settings | None = None) -> None:
    """Configure stdout logging and the cache logger's level.

    Args:
        settings: Defaults to get_settings(); tests pass their own.
    """
    settings = settings or get_settings()
    logging.basicConfig(
        level=root_level(settings),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    cache_logger = logging.getLogger(CACHE_LOGGER_NAME)
    if settings.cache_log_level:
        cache_logger.setLevel(settings.cache_log_level)
    else:
        cache_logger.setLevel(logging.NOTSET)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module (pass __name__)."""
    return logging.getLogger(name)
