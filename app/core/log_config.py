"""Logging setup: stdlib logging configured once when the app is created."""

import logging

from app.config import Settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(settings: Settings) -> None:
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # SQL echo goes through the sqlalchemy.engine logger when debug is on
    if settings.debug:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)
