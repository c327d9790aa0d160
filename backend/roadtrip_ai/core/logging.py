import logging

from roadtrip_ai.core.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Attach a single console handler to the package logger.

    Safe to call more than once: uvicorn reloads re-run ``create_app``.
    """
    logger = logging.getLogger("roadtrip_ai")
    logger.setLevel((level or settings.log_level).upper())

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    logger.debug("Logging configured at %s", logging.getLevelName(logger.level))
