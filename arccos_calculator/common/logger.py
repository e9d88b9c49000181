"""Package-wide logger."""
import logging
import sys

LOGGER_NAME = "arccos_calculator"


def setup_logger(level: int = logging.INFO) -> logging.Logger:
    """
    Configure the package logger with a single console handler.

    Calling it again replaces the existing handler instead of stacking a new one.

    :param int level: Logging level (e.g. logging.DEBUG)

    :return: The configured logger
    :rtype: logging.Logger
    """
    log = logging.getLogger(LOGGER_NAME)
    log.setLevel(level)

    if log.hasHandlers():
        log.handlers.clear()

    # Log to stderr so rendered results on stdout stay clean
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    log.addHandler(handler)
    return log


# Silent until an application calls setup_logger()
logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())
