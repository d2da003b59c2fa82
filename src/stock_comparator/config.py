"""Environment-driven settings."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_DEBOUNCE_MS = 500
DEFAULT_TIMEFRAME = "1y"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True, slots=True)
class Settings:
    debounce_ms: int = DEFAULT_DEBOUNCE_MS
    default_timeframe: str = DEFAULT_TIMEFRAME
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def debounce_seconds(self) -> float:
        return self.debounce_ms / 1000


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r (not an integer), using %d", name, raw, default)
        return default
    if value < 0:
        logger.warning("Ignoring negative %s=%r, using %d", name, raw, default)
        return default
    return value


def get_settings() -> Settings:
    timeframe = os.getenv("STOCK_COMPARATOR_DEFAULT_TIMEFRAME", DEFAULT_TIMEFRAME).strip().lower()
    if timeframe not in ("1y", "3y", "5y", "all"):
        logger.warning("Unknown default timeframe %r, using %s", timeframe, DEFAULT_TIMEFRAME)
        timeframe = DEFAULT_TIMEFRAME

    log_level = os.getenv("STOCK_COMPARATOR_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        logger.warning("Unknown log level %r, using %s", log_level, DEFAULT_LOG_LEVEL)
        log_level = DEFAULT_LOG_LEVEL

    return Settings(
        debounce_ms=_int_from_env("STOCK_COMPARATOR_DEBOUNCE_MS", DEFAULT_DEBOUNCE_MS),
        default_timeframe=timeframe,
        log_level=log_level,
    )
