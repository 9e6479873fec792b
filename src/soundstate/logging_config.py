"""Logging for soundstate.

Everything logs under the ``soundstate`` logger: the engine announces its
creation at INFO, the player logs every transition and chain swap at DEBUG,
and the CLI logs each finished scenario at INFO. Player output itself never
goes through logging; it is written by the engine.
"""

from __future__ import annotations

import logging

LOGGER_NAME = "soundstate"

_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _level(verbose: bool, quiet: bool) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def setup_logging(
    verbose: bool = False,
    quiet: bool = False,
    log_file: str | None = None,
) -> logging.Logger:
    """Configure and return the soundstate logger.

    verbose logs transitions (DEBUG), quiet keeps warnings only. With
    log_file, entries are appended there; each call replaces the handler
    installed by the previous one.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(_level(verbose, quiet))

    if log_file:
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
        logger.addHandler(handler)
        logger.debug("Logging to %s", log_file)

    return logger
