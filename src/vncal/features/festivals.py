# src/vncal/features/festivals.py
from __future__ import annotations

from typing import List, Mapping, Optional, Tuple

from vncal.core.lunisolar import LunarCycleProvider, LunarDate, solar_to_lunar
from vncal.features.config import (
    LUNAR_HOLIDAYS,
    SOLAR_HOLIDAYS,
    Festival,
    festival_key,
)


def _lookup(table: Mapping[str, Tuple[Festival, ...]], month: int, day: int) -> List[Festival]:
    return list(table.get(festival_key(month, day), ()))


def get_solar_festivals(month: int, day: int) -> List[Festival]:
    """
    Fixed solar festivals on day/month. Unknown keys give [].
    """
    return _lookup(SOLAR_HOLIDAYS, month, day)


def get_lunar_festivals(month: int, day: int) -> List[Festival]:
    """
    Fixed lunar festivals on lunar day/month. Unknown keys give [].
    """
    return _lookup(LUNAR_HOLIDAYS, month, day)


def festivals_on(month: int, day: int, lunar: LunarDate) -> List[Festival]:
    """
    Solar matches for month/day, then lunar matches for an already
    converted lunar date.
    """
    return get_solar_festivals(month, day) + get_lunar_festivals(lunar.month, lunar.day)


def get_all_festivals(
    year: int,
    month: int,
    day: int,
    *,
    provider: Optional[LunarCycleProvider] = None,
) -> List[Festival]:
    """
    Festivals on a solar date: solar table matches first, then lunar table
    matches for the converted lunar day/month. No deduplication.
    """
    ld = solar_to_lunar(year, month, day, provider=provider)
    return festivals_on(month, day, ld)


def has_any_festival(
    year: int,
    month: int,
    day: int,
    *,
    provider: Optional[LunarCycleProvider] = None,
) -> bool:
    return len(get_all_festivals(year, month, day, provider=provider)) > 0
