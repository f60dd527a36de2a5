"""
Logging Configuration
Sets up the package logger for the complex-plane tool.

Normal runs log INFO to stdout. Starting the app with ``--debug`` logs every
action and drawn vector at DEBUG level, also into ``complexplane_debug.log``.
"""
import logging
import sys
from typing import Optional, Sequence

from complexplane.config import DEBUG_FLAG, DEBUG_LOG_FILE, LOGGER_NAME


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Configures the logger of the 'complexplane' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Avoid duplicate output when the app is restarted in the same process
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info(f"Logging initialized (level {logging.getLevelName(level)}"
                + (f", file {log_file})." if log_file else ")."))


def setup_logging_from_argv(argv: Sequence[str]) -> bool:
    """
    Configure logging for a run of the app from its command line.

    Returns:
        True when ``--debug`` was given.
    """
    debug = DEBUG_FLAG in argv
    if debug:
        setup_logging(level=logging.DEBUG, log_file=DEBUG_LOG_FILE)
    else:
        setup_logging(level=logging.INFO)
    return debug
