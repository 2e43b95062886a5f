from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from lunar_python import Solar

from vncal.core.cycle import LunarCycle


@dataclass(frozen=True)
class LunarPythonProvider:
    """
    Solar -> lunar conversion backed by lunar_python.

    - civil date legality is checked with datetime.date first
      (e.g. month=13 raises ValueError here, not deep inside the library)
    - lunar_python reports a leap month as a negative month number
    - label is the traditional day label ("初一", "十五", "廿三", ...)
    """

    def convert_solar_to_lunar_cycle(self, year: int, month: int, day: int) -> LunarCycle:
        d = date(int(year), int(month), int(day))
        lunar = Solar.fromYmd(d.year, d.month, d.day).getLunar()

        m = int(lunar.getMonth())
        return LunarCycle(
            day=int(lunar.getDay()),
            month=abs(m),
            is_leap=m < 0,
            label=lunar.getDayInChinese(),
        )
