import logging
import os

from rich.console import Console
from rich.logging import RichHandler

from magisk_hluda.constants import (
    DEBUG_LOG_FORMAT,
    INFO_LOG_FORMAT,
    LOG_DATE_FORMAT,
    LOG_LEVEL_ENV_VAR,
    LOGGER_NAME,
)

logger = logging.getLogger(LOGGER_NAME)


def _resolve_level(level_name: str):
    level = getattr(logging, level_name.upper(), None)
    return level if isinstance(level, int) else None


def set_log_level(level_name: str) -> None:
    """
    Set the log level for the magisk_hluda logger and reconfigure all attached handlers.

    If `level_name` is not a valid logging level name (e.g., "DEBUG", "INFO"), a warning
    is logged and the current configuration is left unchanged.

    RichHandler instances always use a message-only formatter; any other handler gets
    INFO_LOG_FORMAT for INFO and above, DEBUG_LOG_FORMAT below INFO.

    Parameters:
        level_name (str): Case-insensitive name of the desired logging level.
    """
    level = _resolve_level(level_name)
    if level is None:
        logger.warning(f"Invalid log level name: {level_name}. Using current level.")
        return

    logger.setLevel(level)

    for handler in logger.handlers:
        handler.setLevel(level)
        if isinstance(handler, RichHandler):
            formatter = logging.Formatter("%(message)s")
        elif level >= logging.INFO:
            formatter = logging.Formatter(INFO_LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
        else:
            formatter = logging.Formatter(DEBUG_LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
        handler.setFormatter(formatter)

    logger.debug(f"Log level set to {logging.getLevelName(level)}")


def _initialize_logger() -> None:
    """
    Initialize the magisk_hluda logger with a RichHandler writing to stderr.

    Removes any existing handlers, disables propagation to the root logger and applies
    the level named by LOG_LEVEL_ENV_VAR (INFO when unset or invalid).
    """
    logger.propagate = False

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    console_handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        show_time=True,
        show_level=True,
        show_path=False,
        markup=False,
        log_time_format=LOG_DATE_FORMAT,
    )
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(console_handler)

    default_log_level = os.environ.get(LOG_LEVEL_ENV_VAR, "INFO")
    initial_level = _resolve_level(default_log_level)
    if initial_level is None:
        logger.warning(
            f"Invalid {LOG_LEVEL_ENV_VAR}={default_log_level}; defaulting to INFO."
        )
        initial_level = logging.INFO

    logger.setLevel(initial_level)
    console_handler.setLevel(initial_level)


# Initialize the logger when the module is imported
_initialize_logger()
