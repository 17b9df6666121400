# config.py - runtime settings for the dashboard
from __future__ import annotations
import logging
from dataclasses import dataclass
from functools import lru_cache

from app_secrets import get_secret
from constants import DEFAULT_API_BASE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    api_base: str = DEFAULT_API_BASE
    api_token: str | None = None
    timezone: str = "America/Costa_Rica"
    week_start_day: int = 6  # 0=Monday ... 6=Sunday
    request_timeout: float = 30.0
    log_level: str = "INFO"


def _as_int(value, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _as_float(value, default: float) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def build_settings(source=get_secret) -> Settings:
    """Read settings through `source(key, default)`; bad values fall back to defaults."""
    d = Settings()
    week_start = _as_int(source("WEEK_START_DAY", None), d.week_start_day)
    if not 0 <= week_start <= 6:
        logger.warning("WEEK_START_DAY=%s out of range, using %s", week_start, d.week_start_day)
        week_start = d.week_start_day
    return Settings(
        api_base=(source("API_BASE_URL", None) or d.api_base).rstrip("/"),
        api_token=source("API_TOKEN", None),
        timezone=source("DASHBOARD_TIMEZONE", None) or d.timezone,
        week_start_day=week_start,
        request_timeout=_as_float(source("REQUEST_TIMEOUT", None), d.request_timeout),
        log_level=(source("LOG_LEVEL", None) or d.log_level).upper(),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    settings = build_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("API base: %s", settings.api_base)
    logger.info("Timezone: %s, week starts on day %s", settings.timezone, settings.week_start_day)
    logger.info("API token: %s", "Set" if settings.api_token else "Not Set")
    return settings
