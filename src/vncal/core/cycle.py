# src/vncal/core/cycle.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, runtime_checkable


@dataclass(frozen=True)
class LunarCycle:
    """
    Raw result of a solar -> lunar conversion routine.

    is_leap / label may be missing when a routine does not report them.
    """
    day: int
    month: int
    is_leap: Optional[bool] = None
    label: Optional[str] = None


@runtime_checkable
class LunarCycleProvider(Protocol):
    def convert_solar_to_lunar_cycle(self, year: int, month: int, day: int) -> LunarCycle: ...
