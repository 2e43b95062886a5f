from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta

import pytest

from vncal.core.lunisolar import (
    LunarCycle,
    LunarCycleProvider,
    LunarDate,
    lunar_dates_between,
    solar_to_lunar,
)
from vncal.core.providers.lunar_python_provider import LunarPythonProvider


@dataclass(frozen=True)
class _FixedProvider:
    cycle: LunarCycle

    def convert_solar_to_lunar_cycle(self, year: int, month: int, day: int) -> LunarCycle:
        return self.cycle


class _FailingProvider:
    def convert_solar_to_lunar_cycle(self, year: int, month: int, day: int) -> LunarCycle:
        raise RuntimeError("out of supported range")


def test_providers_satisfy_protocol():
    assert isinstance(LunarPythonProvider(), LunarCycleProvider)
    assert isinstance(_FailingProvider(), LunarCycleProvider)


def test_year_is_always_the_solar_year():
    # 2024-02-08 is still lunar month 12 of the previous lunar year
    p = _FixedProvider(LunarCycle(day=29, month=12, is_leap=False, label="廿九"))
    ld = solar_to_lunar(2024, 2, 8, provider=p)
    assert ld == LunarDate(day=29, month=12, year=2024, is_leap=False, day_name="廿九", month_name="廿九")


def test_missing_leap_flag_defaults_to_false():
    p = _FixedProvider(LunarCycle(day=3, month=4))
    ld = solar_to_lunar(2020, 5, 25, provider=p)
    assert ld.is_leap is False
    assert ld.day_name is None
    assert ld.month_name is None


def test_leap_flag_is_copied():
    p = _FixedProvider(LunarCycle(day=3, month=4, is_leap=True, label="初三"))
    assert solar_to_lunar(2020, 5, 25, provider=p).is_leap is True


def test_failure_falls_back_to_solar_values(caplog):
    caplog.set_level(logging.WARNING, logger="vncal.core.lunisolar")

    ld = solar_to_lunar(2024, 7, 4, provider=_FailingProvider())

    assert ld == LunarDate(day=4, month=7, year=2024, is_leap=False)
    assert any(
        r.levelno == logging.WARNING and "lunar conversion failed" in r.getMessage()
        for r in caplog.records
    )


class _NoneProvider:
    def convert_solar_to_lunar_cycle(self, year: int, month: int, day: int) -> LunarCycle:
        return None  # type: ignore[return-value]


def test_malformed_result_falls_back(caplog):
    caplog.set_level(logging.WARNING, logger="vncal.core.lunisolar")

    ld = solar_to_lunar(2024, 7, 4, provider=_NoneProvider())

    assert ld == LunarDate(day=4, month=7, year=2024, is_leap=False)
    assert any("lunar conversion failed" in r.getMessage() for r in caplog.records)


def test_non_numeric_day_falls_back():
    p = _FixedProvider(LunarCycle(day="mười", month=8))  # type: ignore[arg-type]
    assert solar_to_lunar(2024, 9, 12, provider=p) == LunarDate(day=12, month=9, year=2024, is_leap=False)


def test_invalid_month_falls_back_with_default_provider(caplog):
    caplog.set_level(logging.WARNING, logger="vncal.core.lunisolar")

    ld = solar_to_lunar(2024, 13, 1)

    assert (ld.day, ld.month, ld.year, ld.is_leap) == (1, 13, 2024, False)
    assert caplog.records


@pytest.mark.parametrize(
    "solar, expected",
    [
        ((2024, 2, 10), (1, 1, False)),   # Tết Giáp Thìn
        ((2025, 1, 29), (1, 1, False)),   # Tết Ất Tỵ
        ((2024, 9, 17), (15, 8, False)),  # Trung thu
        ((2023, 3, 22), (1, 2, True)),    # first day of leap month 2
    ],
)
def test_known_conversions(solar, expected):
    ld = solar_to_lunar(*solar)
    assert (ld.day, ld.month, ld.is_leap) == expected
    assert ld.year == solar[0]


def test_day_label_from_default_provider():
    ld = solar_to_lunar(2024, 2, 10)
    assert ld.day_name == "初一"
    assert ld.month_name == "初一"


def test_whole_year_stays_in_range():
    d = date(2024, 1, 1)
    while d.year == 2024:
        ld = solar_to_lunar(d.year, d.month, d.day)
        assert 1 <= ld.month <= 12, d
        assert 1 <= ld.day <= 30, d
        assert ld.year == 2024
        d += timedelta(days=1)


def test_lunar_dates_between_is_half_open():
    p = _FixedProvider(LunarCycle(day=1, month=1))
    rows = list(lunar_dates_between(date(2024, 2, 10), date(2024, 2, 13), provider=p))
    assert [d for d, _ in rows] == [date(2024, 2, 10), date(2024, 2, 11), date(2024, 2, 12)]


def test_lunar_dates_between_empty_range():
    assert list(lunar_dates_between(date(2024, 2, 10), date(2024, 2, 10))) == []
