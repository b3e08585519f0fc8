import logging
import sys

from core.config import settings


def setup_logging():
    """Configure root logging for the application."""
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)

    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.handlers = []
    root_logger.setLevel(log_level)
    root_logger.addHandler(console_handler)

    logging.getLogger("fastapi_mail").setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.info("Logging configured. Level: %s", settings.LOG_LEVEL)
    return logger
