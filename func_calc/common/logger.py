"""Shared logger for the calculator."""
import logging
import sys


LOGGER_NAME: str = "func_calc"
LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger: logging.Logger = logging.getLogger(LOGGER_NAME)


def configure_logging(verbose: bool = False) -> None:
    """
    Attach a stderr handler to the shared logger and set its level.

    Calling it more than once only updates the level.

    :param bool verbose: Log everything down to DEBUG when True, WARNING and above otherwise
    """
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
