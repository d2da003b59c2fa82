"""Minimal logger helper to avoid duplicating setup."""

from __future__ import annotations

import logging

from ..config import get_settings


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        logging.basicConfig(level=get_settings().log_level)
    return logger
