# infrastructure/logging/log_setup.py
import sys

from loguru import logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<5} | {message} | {extra}"


def setup_console_logging(level: str = "INFO", serialize: bool = False) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT, serialize=serialize)
