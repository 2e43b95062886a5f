from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta

import pytest

from vncal.core.lunisolar import LunarCycle, LunarDate
from vncal.features.config import (
    LUNAR_HOLIDAYS,
    SOLAR_HOLIDAYS,
    Festival,
    festival_key,
    split_festival_key,
)
from vncal.features.festivals import (
    festivals_on,
    get_all_festivals,
    get_lunar_festivals,
    get_solar_festivals,
    has_any_festival,
)


@dataclass(frozen=True)
class _FixedProvider:
    day: int
    month: int

    def convert_solar_to_lunar_cycle(self, year: int, month: int, day: int) -> LunarCycle:
        return LunarCycle(day=self.day, month=self.month)


class _ShiftProvider:
    """Pretends the lunar date is the solar date shifted back 30 days."""

    def convert_solar_to_lunar_cycle(self, year: int, month: int, day: int) -> LunarCycle:
        d = date(year, month, day) - timedelta(days=30)
        return LunarCycle(day=d.day, month=d.month)


def test_solar_national_day():
    assert get_solar_festivals(9, 2) == [Festival(name="Quốc khánh", type="solar", is_fixed=True)]


def test_lunar_new_year():
    assert get_lunar_festivals(1, 1) == [Festival(name="Tết Nguyên đán", type="lunar", is_fixed=True)]


@pytest.mark.parametrize("month, day", [(2, 30), (7, 4), (12, 31)])
def test_unknown_solar_key_is_empty(month, day):
    assert get_solar_festivals(month, day) == []


def test_unknown_lunar_key_is_empty():
    assert get_lunar_festivals(13, 1) == []


def test_lookup_returns_fresh_list():
    found = get_solar_festivals(1, 1)
    found.append(Festival(name="x", type="solar"))
    assert len(get_solar_festivals(1, 1)) == 1


def test_solar_before_lunar():
    # 2/9 solar, pretend the lunar date is 15/8
    out = get_all_festivals(2024, 9, 2, provider=_FixedProvider(day=15, month=8))
    assert [f.name for f in out] == ["Quốc khánh", "Tết Trung thu"]
    assert [f.type for f in out] == ["solar", "lunar"]


def test_both_tables_can_match_same_date():
    # 1/1 solar and 1/1 lunar on the same date -> both returned
    out = get_all_festivals(2024, 1, 1, provider=_FixedProvider(day=1, month=1))
    assert [f.name for f in out] == ["Tết Dương lịch", "Tết Nguyên đán"]


def test_lunar_lookup_uses_lunar_day_month():
    # solar 2/3 is not in the solar table; lunar 3/3 is
    out = get_all_festivals(2024, 2, 3, provider=_FixedProvider(day=3, month=3))
    assert [f.name for f in out] == ["Tết Hàn thực"]


def test_tet_2024_with_default_provider():
    assert [f.name for f in get_all_festivals(2024, 2, 10)] == ["Tết Nguyên đán"]


def test_mid_autumn_2024_with_default_provider():
    assert [f.name for f in get_all_festivals(2024, 9, 17)] == ["Tết Trung thu"]


def test_conversion_failure_still_resolves_solar_festivals():
    # month 13 fails conversion; fallback lunar 1/13 has no entry
    assert get_all_festivals(2024, 13, 1) == []


def test_has_any_festival_matches_get_all_festivals():
    p = _ShiftProvider()
    d = date(2024, 1, 1)
    while d.year == 2024:
        expected = len(get_all_festivals(d.year, d.month, d.day, provider=p)) > 0
        assert has_any_festival(d.year, d.month, d.day, provider=p) is expected
        d += timedelta(days=1)


def test_has_any_festival_false():
    assert has_any_festival(2024, 7, 4, provider=_FixedProvider(day=29, month=5)) is False


@pytest.mark.parametrize("table", [SOLAR_HOLIDAYS, LUNAR_HOLIDAYS])
def test_table_keys_are_valid(table):
    for key, festivals in table.items():
        day, month = split_festival_key(key)
        assert festival_key(month, day) == key
        assert festivals
        assert all(f.is_fixed for f in festivals)


def test_table_types():
    assert all(f.type == "solar" for fs in SOLAR_HOLIDAYS.values() for f in fs)
    assert all(f.type == "lunar" for fs in LUNAR_HOLIDAYS.values() for f in fs)


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        SOLAR_HOLIDAYS["4/7"] = (Festival(name="x", type="solar"),)  # type: ignore[index]


@pytest.mark.parametrize("key", ["", "1", "1/2/3", "a/b", "0/1", "32/1", "1/13"])
def test_split_festival_key_rejects(key):
    with pytest.raises(ValueError):
        split_festival_key(key)


def test_festivals_on_uses_given_lunar_date():
    ld = LunarDate(day=15, month=8, year=2024)
    assert [f.name for f in festivals_on(9, 2, ld)] == ["Quốc khánh", "Tết Trung thu"]
    assert festivals_on(7, 4, LunarDate(day=29, month=5, year=2024)) == []
