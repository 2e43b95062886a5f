from __future__ import annotations

"""
Lunar date check script.

Uses:
- vncal.core.lunisolar.solar_to_lunar
- vncal.features.lunar_labels (format_lunar_date / format_lunar_date_vn)

    python -m tools.lunar_check --start 2024-02-01 --end 2024-02-29
"""

import argparse

from vncal.core.lunisolar import solar_to_lunar
from vncal.features.lunar_labels import (
    format_lunar_date,
    format_lunar_date_vn,
    lunar_month_display_name,
)

from tools.common import add_common_args, check_range, dump_json, iter_dates, resolve_date_range, setup_logging


def main() -> None:
    parser = argparse.ArgumentParser(description="Lunar date (âm lịch) check")
    add_common_args(parser)
    args = parser.parse_args()
    setup_logging(args.verbose)

    start, end = resolve_date_range(args)
    if start is None or end is None:
        parser.error("--date or --start/--end required")
    check_range(parser, start, end)

    rows = []
    for cur in iter_dates(start, end):
        l = solar_to_lunar(cur.year, cur.month, cur.day)
        label = format_lunar_date(l)

        if args.json:
            rows.append(
                {
                    "date": cur.isoformat(),
                    "year": int(l.year),
                    "month": int(l.month),
                    "day": int(l.day),
                    "leap": bool(l.is_leap),
                    "label": label,
                    "label_vn": format_lunar_date_vn(l),
                    "month_name": lunar_month_display_name(int(l.month), bool(l.is_leap)),
                }
            )
        else:
            sep = "\n" if (int(l.day) == 1 and cur != start) else ""
            print(f"{sep}{cur.isoformat()}  L={label}  {format_lunar_date_vn(l)}")

    if args.json:
        dump_json({"rows": rows})


if __name__ == "__main__":
    main()
