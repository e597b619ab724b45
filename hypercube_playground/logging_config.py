"""
Logging Configuration
Sets up the package logger for the playground.

Streamlit reruns the page script on every widget interaction, so
setup_logging() is called many times per session. Handlers it installs
are tagged by name; each call swaps out (and closes) only those, and
leaves handlers added by Streamlit, pytest or the user alone.
"""
import logging
import os
import sys
from typing import Optional, Union


LOGGER_NAME = "hypercube_playground"
LEVEL_ENV_VAR = "HYPERCUBE_LOG_LEVEL"

CONSOLE_HANDLER_NAME = f"{LOGGER_NAME}.console"
FILE_HANDLER_NAME = f"{LOGGER_NAME}.file"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def resolve_level(level: Union[int, str, None]) -> int:
    """
    Turn a level name or number into a logging level.

    None falls back to $HYPERCUBE_LOG_LEVEL, then INFO.
    """
    if level is None:
        level = os.environ.get(LEVEL_ENV_VAR, logging.INFO)
    if isinstance(level, int):
        return level
    name = str(level).strip().upper()
    if name.isdigit():
        return int(name)
    value = logging.getLevelName(name)
    if not isinstance(value, int):
        raise ValueError(f"unknown log level {level!r}")
    return value


def _own_handlers(logger: logging.Logger):
    return [h for h in logger.handlers
            if h.get_name() in (CONSOLE_HANDLER_NAME, FILE_HANDLER_NAME)]


def setup_logging(level: Union[int, str, None] = None,
                  log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the logger for the 'hypercube_playground' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, "debug"). Defaults to
            $HYPERCUBE_LOG_LEVEL, else INFO.
        log_file: Optional path to save logs to a file.
    """
    level = resolve_level(level)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in _own_handlers(logger):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.set_name(CONSOLE_HANDLER_NAME)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.set_name(FILE_HANDLER_NAME)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized at %s.", logging.getLevelName(level))
    return logger
