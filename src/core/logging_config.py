"""Structured logger setup shared across the package."""

from __future__ import annotations

import logging

from pythonjsonlogger.json import JsonFormatter

from core.config import AppSettings

_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def get_logger(name: str, settings: AppSettings | None = None) -> logging.Logger:
    """
    Configure a logger once and reuse it.

    JSON output is the default so API calls can be grepped by `method`/`path`
    fields passed through `extra`.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    settings = settings or AppSettings()
    handler = logging.StreamHandler()
    if settings.log_json:
        formatter: logging.Formatter = JsonFormatter(
            "%(levelname)s %(name)s %(message)s %(asctime)s"
        )
    else:
        formatter = logging.Formatter(_PLAIN_FORMAT)
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(settings.log_level)
    logger.propagate = False
    return logger
