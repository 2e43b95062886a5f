# src/vncal/features/config.py
from __future__ import annotations

"""
Feature-level configuration / constants.

- Vietnamese lunar month names (Giêng .. Chạp)
- traditional day labels (初一 .. 三十) => Vietnamese day labels
- fixed festivals: solar table and lunar table, keyed by "day/month"

Design goals:
- Tables are built once at import and are read-only afterwards
  (MappingProxyType of tuples), so lookups are safe from any thread.
- Keys are "day/month" without zero padding, exact-match only.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Literal, Mapping, Tuple

# ============================================================
# Lunar month / day names
# ============================================================

LUNAR_MONTH_NAMES_VN: Tuple[str, ...] = (
    "",
    "Giêng",
    "Hai",
    "Ba",
    "Tư",
    "Năm",
    "Sáu",
    "Bảy",
    "Tám",
    "Chín",
    "Mười",
    "Một",
    "Chạp",
)

_LUNAR_DAY_LABELS: List[str] = [
    "初一", "初二", "初三", "初四", "初五",
    "初六", "初七", "初八", "初九", "初十",
    "十一", "十二", "十三", "十四", "十五",
    "十六", "十七", "十八", "十九", "二十",
    "廿一", "廿二", "廿三", "廿四", "廿五",
    "廿六", "廿七", "廿八", "廿九", "三十",
]


def _vn_day_label(n: int) -> str:
    # Mồng 1 .. Mồng 10, then plain numerals
    return f"Mồng {n}" if n <= 10 else str(n)


LUNAR_DAY_NAMES_VN: Mapping[str, str] = MappingProxyType(
    {label: _vn_day_label(i) for i, label in enumerate(_LUNAR_DAY_LABELS, start=1)}
)


# ============================================================
# Festivals
# ============================================================

FestivalType = Literal["solar", "lunar"]

FESTIVAL_TYPE_LABELS: Mapping[str, str] = MappingProxyType(
    {
        "solar": "Dương lịch",
        "lunar": "Âm lịch",
    }
)


@dataclass(frozen=True)
class Festival:
    name: str
    type: FestivalType
    is_fixed: bool = True


def festival_key(month: int, day: int) -> str:
    return f"{int(day)}/{int(month)}"


def split_festival_key(key: str) -> Tuple[int, int]:
    """
    "day/month" -> (day, month), range-checked.
    """
    parts = key.split("/")
    if len(parts) != 2:
        raise ValueError(f"invalid festival key: {key!r}")
    try:
        day, month = int(parts[0]), int(parts[1])
    except ValueError as e:
        raise ValueError(f"invalid festival key: {key!r}") from e
    if not (1 <= day <= 31) or not (1 <= month <= 12):
        raise ValueError(f"festival key out of range: {key!r}")
    return day, month


def _build_table(
    kind: FestivalType,
    rows: List[Tuple[str, str]],
) -> Mapping[str, Tuple[Festival, ...]]:
    table: Dict[str, Tuple[Festival, ...]] = {}
    for key, name in rows:
        day, month = split_festival_key(key)
        k = festival_key(month, day)
        table[k] = table.get(k, ()) + (Festival(name=name, type=kind),)
    return MappingProxyType(table)


SOLAR_HOLIDAYS: Mapping[str, Tuple[Festival, ...]] = _build_table(
    "solar",
    [
        ("1/1", "Tết Dương lịch"),
        ("14/2", "Lễ tình nhân"),
        ("8/3", "Quốc tế Phụ nữ"),
        ("30/4", "Giải phóng miền Nam"),
        ("1/5", "Quốc tế Lao động"),
        ("19/5", "Sinh nhật Bác Hồ"),
        ("1/6", "Quốc tế Thiếu nhi"),
        ("2/9", "Quốc khánh"),
        ("20/10", "Ngày Phụ nữ Việt Nam"),
        ("20/11", "Ngày Nhà giáo Việt Nam"),
        ("25/12", "Lễ Giáng sinh"),
    ],
)

LUNAR_HOLIDAYS: Mapping[str, Tuple[Festival, ...]] = _build_table(
    "lunar",
    [
        ("1/1", "Tết Nguyên đán"),
        ("2/1", "Mùng 2 Tết"),
        ("3/1", "Mùng 3 Tết"),
        ("15/1", "Tết Nguyên tiêu"),
        ("3/3", "Tết Hàn thực"),
        ("10/3", "Giỗ Tổ Hùng Vương"),
        ("15/4", "Phật đản"),
        ("5/5", "Tết Đoan ngọ"),
        ("15/7", "Vu lan"),
        ("15/8", "Tết Trung thu"),
        ("23/12", "Ông Táo chầu trời"),
    ],
)
