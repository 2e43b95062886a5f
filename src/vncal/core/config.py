# src/vncal/core/config.py
from __future__ import annotations

import os
from dataclasses import dataclass, replace
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

VNCAL_TZ_ENV = "VNCAL_TZ"
VNCAL_WEEK_START_ENV = "VNCAL_WEEK_START"

DEFAULT_TZ = "Asia/Ho_Chi_Minh"


@dataclass(frozen=True)
class CalendarConfig:
    """
    Calendar-level configuration.

    The conversion core works on naive civil dates; tz is only used to decide
    which date is "today" when grid cells are built.
    """
    tz: str = DEFAULT_TZ

    # 0 = Monday (ISO week) ... 6 = Sunday
    week_start: int = 0

    # Upper bound for range tools / API range queries (days)
    max_range_days: int = 370


def _env_int(name: str, default: int) -> int:
    v = os.environ.get(name, "").strip()
    try:
        return int(v) if v else default
    except ValueError:
        return default


def load_config(base: CalendarConfig | None = None) -> CalendarConfig:
    """
    Apply VNCAL_* environment overrides on top of base (or the defaults).
    """
    cfg = base or CalendarConfig()

    tz = os.environ.get(VNCAL_TZ_ENV, "").strip() or cfg.tz
    week_start = _env_int(VNCAL_WEEK_START_ENV, cfg.week_start)
    if not (0 <= week_start <= 6):
        week_start = cfg.week_start

    return replace(cfg, tz=tz, week_start=week_start)


def resolve_tz(name: str) -> ZoneInfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"unknown timezone: {name}") from e
