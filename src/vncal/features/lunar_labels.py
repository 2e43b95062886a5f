# src/vncal/features/lunar_labels.py
from __future__ import annotations

from vncal.core.lunisolar import LunarDate
from vncal.features.config import (
    FESTIVAL_TYPE_LABELS,
    LUNAR_DAY_NAMES_VN,
    LUNAR_MONTH_NAMES_VN,
)

LEAP_SUFFIX = " (nhuận)"


def _leap_suffix(is_leap: bool) -> str:
    return LEAP_SUFFIX if is_leap else ""


def lunar_month_name_vn(month: int) -> str:
    """
    1..12 -> Giêng..Chạp. Anything else (e.g. a fallback month 13) is
    rendered as the plain number.
    """
    m = int(month)
    if 1 <= m < len(LUNAR_MONTH_NAMES_VN):
        return LUNAR_MONTH_NAMES_VN[m]
    return str(m)


def lunar_day_name_vn(ld: LunarDate) -> str:
    if ld.day_name and ld.day_name in LUNAR_DAY_NAMES_VN:
        return LUNAR_DAY_NAMES_VN[ld.day_name]
    return str(ld.day)


def format_lunar_date(ld: LunarDate) -> str:
    """
    "15/8", "15/8 (nhuận)"
    """
    return f"{ld.day}/{ld.month}{_leap_suffix(ld.is_leap)}"


def format_lunar_date_vn(ld: LunarDate) -> str:
    """
    "Mồng 1 Giêng", "15 Tám", "Mồng 3 Tư (nhuận)"
    """
    return f"{lunar_day_name_vn(ld)} {lunar_month_name_vn(ld.month)}{_leap_suffix(ld.is_leap)}"


def lunar_month_display_name(month: int, is_leap: bool) -> str:
    return f"Tháng {lunar_month_name_vn(month)}{_leap_suffix(is_leap)}"


def festival_type_label(kind: str) -> str:
    try:
        return FESTIVAL_TYPE_LABELS[kind]
    except KeyError as e:
        raise ValueError(f"unknown festival type: {kind}") from e
