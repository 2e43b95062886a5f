from __future__ import annotations

import logging
import time
from dataclasses import replace
from datetime import date, datetime
from typing import Any, Dict, List, Literal, Optional

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel, Field

from vncal.core.config import CalendarConfig, load_config, resolve_tz
from vncal.core.lunisolar import LunarDate, solar_to_lunar
from vncal.features.config import Festival
from vncal.features.festivals import (
    festivals_on,
    get_lunar_festivals,
    get_solar_festivals,
)
from vncal.features.lunar_labels import (
    festival_type_label,
    format_lunar_date,
    format_lunar_date_vn,
    lunar_month_display_name,
)
from vncal.features.month_grid import (
    CalendarDay,
    MiniCalendarDay,
    month_grid,
    year_grid,
)

router = APIRouter(prefix="/api/v1", tags=["public"])

log = logging.getLogger("vncal.api.public")


# ============================================================
# Response Models
# ============================================================
class LunarDateModel(BaseModel):
    day: int
    month: int
    year: int = Field(description="solar year of the query")
    is_leap: bool = Field(default=False, description="true for a leap (nhuận) month")
    label: str
    label_vn: str
    month_name: str


class FestivalModel(BaseModel):
    name: str
    type: Literal["solar", "lunar"]
    type_label: str
    is_fixed: bool = True


class DayResponse(BaseModel):
    date: date
    lunar: LunarDateModel
    festivals: List[FestivalModel] = Field(default_factory=list)
    is_today: bool = False


class MonthCell(BaseModel):
    date: date
    solar_day: int
    lunar_label: str
    is_current_month: bool
    is_today: bool
    has_festival: bool


class MonthResponse(BaseModel):
    year: int
    month: int
    tz: str
    days: List[MonthCell]


class MiniCell(BaseModel):
    date: date
    solar_day: int
    is_current_month: bool
    is_today: bool


class YearResponse(BaseModel):
    year: int
    tz: str
    months: List[List[MiniCell]]


# ============================================================
# Helpers: parsing, tz, conversion to plain dicts
# ============================================================
def _parse_iso_date(s: str) -> date:
    try:
        return date.fromisoformat(s)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=f"Invalid date format: {s} (expected YYYY-MM-DD)") from e


def _parse_date_any(x: str | date) -> date:
    if isinstance(x, date):
        return x
    return _parse_iso_date(str(x))


def _config_for_tz(tz: Optional[str]) -> CalendarConfig:
    cfg = load_config()
    name = (tz or "").strip() or cfg.tz
    try:
        resolve_tz(name)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=f"Unknown timezone: {name}") from e
    return replace(cfg, tz=name)


def _require_month(month: int) -> int:
    if not (1 <= int(month) <= 12):
        raise HTTPException(status_code=422, detail=f"month out of range: {month}")
    return int(month)


def _today_in(cfg: CalendarConfig) -> date:
    return datetime.now(resolve_tz(cfg.tz)).date()


def _lunar_dict(ld: LunarDate) -> Dict[str, Any]:
    return {
        "day": int(ld.day),
        "month": int(ld.month),
        "year": int(ld.year),
        "is_leap": bool(ld.is_leap),
        "label": format_lunar_date(ld),
        "label_vn": format_lunar_date_vn(ld),
        "month_name": lunar_month_display_name(int(ld.month), bool(ld.is_leap)),
    }


def _festival_dict(f: Festival) -> Dict[str, Any]:
    return {
        "name": f.name,
        "type": f.type,
        "type_label": festival_type_label(f.type),
        "is_fixed": bool(f.is_fixed),
    }


def _cell_dict(c: CalendarDay) -> Dict[str, Any]:
    return {
        "date": c.date.isoformat(),
        "solar_day": c.solar_day,
        "lunar_label": c.lunar_label,
        "is_current_month": c.is_current_month,
        "is_today": c.is_today,
        "has_festival": c.has_festival,
    }


def _mini_cell_dict(c: MiniCalendarDay) -> Dict[str, Any]:
    return {
        "date": c.date.isoformat(),
        "solar_day": c.solar_day,
        "is_current_month": c.is_current_month,
        "is_today": c.is_today,
    }


# =========================================================
# Public JSON API (function-style, HTTP-ready)
# =========================================================
def get_calendar_day(
    date_: str | date,
    *,
    tz: Optional[str] = None,
    today: Optional[date] = None,
) -> dict:
    d = _parse_date_any(date_)
    cfg = _config_for_tz(tz)
    t = today if today is not None else _today_in(cfg)

    ld = solar_to_lunar(d.year, d.month, d.day)
    festivals = festivals_on(d.month, d.day, ld)

    return {
        "date": d.isoformat(),
        "lunar": _lunar_dict(ld),
        "festivals": [_festival_dict(f) for f in festivals],
        "is_today": d == t,
    }


def get_calendar_month(
    year: int,
    month: int,
    *,
    tz: Optional[str] = None,
    today: Optional[date] = None,
) -> dict:
    m = _require_month(month)
    cfg = _config_for_tz(tz)

    cells = month_grid(int(year), m, today=today, config=cfg)
    return {
        "year": int(year),
        "month": m,
        "tz": cfg.tz,
        "days": [_cell_dict(c) for c in cells],
    }


def get_calendar_year(
    year: int,
    *,
    tz: Optional[str] = None,
    today: Optional[date] = None,
) -> dict:
    cfg = _config_for_tz(tz)

    months = year_grid(int(year), today=today, config=cfg)
    return {
        "year": int(year),
        "tz": cfg.tz,
        "months": [[_mini_cell_dict(c) for c in cells] for cells in months],
    }


# ============================================================
# Endpoints
# ============================================================
@router.get("/day", response_model=DayResponse)
def get_day(
    date_str: str = Query(..., alias="date", description="YYYY-MM-DD"),
    tz: str = Query("", description="timezone used to decide 'today'"),
    timing: bool = Query(False, description="log timing (diagnostics)"),
) -> Dict[str, Any]:
    t0 = time.perf_counter()
    res = get_calendar_day(date_str, tz=tz)
    t1 = time.perf_counter()

    if timing:
        log.warning("timing /day date=%s total=%.3fs", date_str, t1 - t0)
    return res


@router.get("/month", response_model=MonthResponse)
def get_month(
    year: int = Query(..., ge=2, le=9998),
    month: int = Query(..., description="1..12"),
    tz: str = Query("", description="timezone used to decide 'today'"),
    timing: bool = Query(False, description="log timing (diagnostics)"),
) -> Dict[str, Any]:
    t0 = time.perf_counter()
    res = get_calendar_month(year, month, tz=tz)
    t1 = time.perf_counter()

    if timing:
        log.warning("timing /month year=%d month=%d cells=%d total=%.3fs", year, month, len(res["days"]), t1 - t0)
    return res


@router.get("/year", response_model=YearResponse)
def get_year(
    year: int = Query(..., ge=2, le=9998),
    tz: str = Query("", description="timezone used to decide 'today'"),
) -> Dict[str, Any]:
    return get_calendar_year(year, tz=tz)


@router.get("/festivals", response_model=List[FestivalModel])
def get_festivals(
    kind: str = Query(..., description="solar | lunar"),
    month: int = Query(...),
    day: int = Query(...),
) -> List[Dict[str, Any]]:
    if kind == "solar":
        found = get_solar_festivals(month, day)
    elif kind == "lunar":
        found = get_lunar_festivals(month, day)
    else:
        raise HTTPException(status_code=422, detail=f"kind must be 'solar' or 'lunar': {kind}")
    return [_festival_dict(f) for f in found]
