# src/vncal/features/month_grid.py
from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Iterable, List, Optional, Tuple

from vncal.core.config import CalendarConfig, load_config, resolve_tz
from vncal.core.lunisolar import LunarCycleProvider, LunarDate, solar_to_lunar
from vncal.features.festivals import festivals_on
from vncal.features.lunar_labels import format_lunar_date


@dataclass(frozen=True)
class CalendarDay:
    """
    One cell of the month view.

    Cells outside the displayed month (leading/trailing week padding) are
    kept with is_current_month=False.
    """
    date: date
    solar_year: int
    solar_month: int
    solar_day: int
    lunar: LunarDate
    lunar_label: str
    is_current_month: bool
    is_today: bool
    has_festival: bool


@dataclass(frozen=True)
class MiniCalendarDay:
    """
    One cell of a year-view mini month (solar only).
    """
    date: date
    solar_day: int
    is_current_month: bool
    is_today: bool


def _require_month(month: int) -> int:
    m = int(month)
    if not (1 <= m <= 12):
        raise ValueError(f"month out of range: {month}")
    return m


def _today(today: Optional[date], cfg: CalendarConfig) -> date:
    if today is not None:
        return today
    return datetime.now(resolve_tz(cfg.tz)).date()


def grid_bounds(year: int, month: int, *, week_start: int = 0) -> Tuple[date, date]:
    """
    (first cell, last cell) covering whole weeks around the month.
    week_start: 0 = Monday (ISO week) ... 6 = Sunday
    """
    m = _require_month(month)
    first = date(int(year), m, 1)
    last = date(int(year), m, calendar.monthrange(int(year), m)[1])

    lead = (first.weekday() - week_start) % 7
    trail = 6 - (last.weekday() - week_start) % 7
    return first - timedelta(days=lead), last + timedelta(days=trail)


def iter_grid_dates(year: int, month: int, *, week_start: int = 0) -> Iterable[date]:
    cur, end = grid_bounds(year, month, week_start=week_start)
    while cur <= end:
        yield cur
        cur = cur + timedelta(days=1)


def month_grid(
    year: int,
    month: int,
    *,
    today: Optional[date] = None,
    config: Optional[CalendarConfig] = None,
    provider: Optional[LunarCycleProvider] = None,
) -> List[CalendarDay]:
    cfg = config or load_config()
    t = _today(today, cfg)

    days: List[CalendarDay] = []
    for d in iter_grid_dates(year, month, week_start=cfg.week_start):
        ld = solar_to_lunar(d.year, d.month, d.day, provider=provider)
        days.append(
            CalendarDay(
                date=d,
                solar_year=d.year,
                solar_month=d.month,
                solar_day=d.day,
                lunar=ld,
                lunar_label=format_lunar_date(ld),
                is_current_month=(d.month == month),
                is_today=(d == t),
                has_festival=len(festivals_on(d.month, d.day, ld)) > 0,
            )
        )
    return days


def mini_month_grid(
    year: int,
    month: int,
    *,
    today: Optional[date] = None,
    config: Optional[CalendarConfig] = None,
) -> List[MiniCalendarDay]:
    cfg = config or load_config()
    t = _today(today, cfg)

    return [
        MiniCalendarDay(
            date=d,
            solar_day=d.day,
            is_current_month=(d.month == month),
            is_today=(d == t),
        )
        for d in iter_grid_dates(year, month, week_start=cfg.week_start)
    ]


def year_grid(
    year: int,
    *,
    today: Optional[date] = None,
    config: Optional[CalendarConfig] = None,
) -> List[List[MiniCalendarDay]]:
    cfg = config or load_config()
    t = _today(today, cfg)
    return [mini_month_grid(year, m, today=t, config=cfg) for m in range(1, 13)]
