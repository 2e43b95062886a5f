# src/vncal/core/lunisolar.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from functools import lru_cache
from typing import Iterable, List, Optional, Tuple

from .cycle import LunarCycle, LunarCycleProvider
from .providers.lunar_python_provider import LunarPythonProvider

log = logging.getLogger(__name__)


# ============================================================
# Public types
# ============================================================

@dataclass(frozen=True)
class LunarDate:
    """
    Lunar day/month/leap for a solar date.

    year is always the solar year of the query, even around Tết when the
    true lunar year differs. Festival matching only looks at day/month.
    """
    day: int
    month: int
    year: int
    is_leap: bool = False
    day_name: Optional[str] = None
    month_name: Optional[str] = None


# ============================================================
# Provider cache
# ============================================================

@lru_cache(maxsize=1)
def _default_provider() -> LunarCycleProvider:
    return LunarPythonProvider()


def _resolve_provider(provider: Optional[LunarCycleProvider]) -> LunarCycleProvider:
    return provider if provider is not None else _default_provider()


# ============================================================
# Conversion
# ============================================================

def solar_to_lunar(
    year: int,
    month: int,
    day: int,
    *,
    provider: Optional[LunarCycleProvider] = None,
) -> LunarDate:
    """
    Solar (year, month, day) -> LunarDate.

    Never raises for a conversion failure: the error is logged and the solar
    day/month/year are returned as-is with is_leap=False.
    """
    p = _resolve_provider(provider)
    try:
        cycle: LunarCycle = p.convert_solar_to_lunar_cycle(year, month, day)
        return LunarDate(
            day=int(cycle.day),
            month=int(cycle.month),
            year=year,
            is_leap=bool(cycle.is_leap),
            day_name=cycle.label,
            month_name=cycle.label,
        )
    except Exception as e:
        log.warning(
            "lunar conversion failed: solar=%s-%s-%s error=%r",
            year,
            month,
            day,
            e,
        )
        return LunarDate(day=day, month=month, year=year, is_leap=False)


def lunar_dates_between(
    start: date,
    end: date,
    *,
    provider: Optional[LunarCycleProvider] = None,
) -> Iterable[Tuple[date, LunarDate]]:
    """
    Convert every date of [start, end). Empty when end <= start.
    """
    out: List[Tuple[date, LunarDate]] = []
    d = start
    while d < end:
        out.append((d, solar_to_lunar(d.year, d.month, d.day, provider=provider)))
        d += timedelta(days=1)
    return out
