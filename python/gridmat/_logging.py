"""Logging setup for the ``gridmat`` logger namespace.

Modules only create loggers with ``logging.getLogger(__name__)``; importing
gridmat attaches no handlers. Applications that want the library's records
call :func:`setup_logging`.
"""

import logging
import sys


def setup_logging(level=logging.INFO, log_file=None):
    """Attach a stdout handler (and optionally a file handler) to ``gridmat``.

    Parameters
    ----------
    level : int, optional
        Level for the logger and its handlers.
    log_file : str, optional
        Path of a log file, truncated on each call.

    Returns
    -------
    logging.Logger
        The ``gridmat`` logger.

    Notes
    -----
    Calling it again replaces the handlers from the previous call.
    """
    logger = logging.getLogger("gridmat")
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter("%(asctime)s %(levelname)-7s %(name)s: %(message)s", datefmt="%H:%M:%S")
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("logging configured at level %s", logging.getLevelName(level))
    return logger
