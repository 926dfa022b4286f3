"""Logging initialization."""

from __future__ import annotations

import logging

from chunked_asr.config.logging import LOG_LEVEL, LOG_FORMAT, SHOW_HTTP_LOGS


def configure_logging() -> None:
    if not SHOW_HTTP_LOGS:
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)


__all__ = ["configure_logging"]
