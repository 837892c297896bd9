"""Environment-driven settings for the mock accrual service.

Defaults reproduce the fixture used by the e2e suite:
  ACCRUAL_HOST=0.0.0.0 ACCRUAL_PORT=3000 ACCRUAL_DELAY_MS=1000
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass


DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000
DEFAULT_DELAY_MS = 1000
DEFAULT_LOG_LEVEL = "info"

# Levels understood by uvicorn.
LOG_LEVELS = frozenset({"critical", "error", "warning", "info", "debug", "trace"})


@dataclass(frozen=True, slots=True)
class Settings:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    delay_ms: int = DEFAULT_DELAY_MS
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def delay_seconds(self) -> float:
        return self.delay_ms / 1000.0


def _env(name: str) -> str | None:
    v = (os.getenv(name) or "").strip()
    return v or None


def _env_int(name: str, default: int, *, minimum: int = 0) -> int:
    raw = _env(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return value


def load_settings() -> Settings:
    """Read settings from the environment.

    Blank variables fall back to defaults; malformed numbers raise ValueError.
    """

    log_level = (_env("ACCRUAL_LOG_LEVEL") or DEFAULT_LOG_LEVEL).lower()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"ACCRUAL_LOG_LEVEL must be one of {sorted(LOG_LEVELS)}, got {log_level!r}")

    return Settings(
        host=_env("ACCRUAL_HOST") or DEFAULT_HOST,
        port=_env_int("ACCRUAL_PORT", DEFAULT_PORT, minimum=1),
        delay_ms=_env_int("ACCRUAL_DELAY_MS", DEFAULT_DELAY_MS),
        log_level=log_level,
    )


def configure_logging(level: str) -> None:
    # uvicorn accepts "trace"; the stdlib has no such level.
    name = "DEBUG" if level == "trace" else level.upper()
    logging.basicConfig(
        level=name,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
