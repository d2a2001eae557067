# src/scribbles/logs.py
from __future__ import annotations

import logging

_LOGGER_INITIALIZED = False


def setup_logging(verbose: bool = False) -> logging.Logger:
    """
    Attach one stream handler to the package logger. Library modules only
    create loggers; the tools call this once at startup.
    """
    global _LOGGER_INITIALIZED
    logger = logging.getLogger("scribbles")
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    if _LOGGER_INITIALIZED:
        return logger
    handler = logging.StreamHandler()
    fmt = logging.Formatter("[%(asctime)s] %(levelname)s %(name)s: %(message)s")
    handler.setFormatter(fmt)
    logger.addHandler(handler)
    logger.propagate = False
    _LOGGER_INITIALIZED = True
    return logger
