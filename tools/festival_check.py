from __future__ import annotations

"""
Festival check script.

Uses:
- vncal.features.festivals.get_all_festivals
- vncal.features.lunar_labels.festival_type_label

Only dates with at least one festival are listed unless --verbose is given.
"""

import argparse

from vncal.core.lunisolar import solar_to_lunar
from vncal.features.festivals import get_all_festivals
from vncal.features.lunar_labels import festival_type_label, format_lunar_date

from tools.common import add_common_args, check_range, dump_json, iter_dates, resolve_date_range, setup_logging


def main() -> None:
    parser = argparse.ArgumentParser(description="Festival (ngày lễ) check")
    add_common_args(parser)
    args = parser.parse_args()
    setup_logging(args.verbose)

    start, end = resolve_date_range(args)
    if start is None or end is None:
        parser.error("--date or --start/--end required")
    check_range(parser, start, end)

    rows = []
    for cur in iter_dates(start, end):
        festivals = get_all_festivals(cur.year, cur.month, cur.day)
        if not festivals and not args.verbose:
            continue

        if args.json:
            rows.append(
                {
                    "date": cur.isoformat(),
                    "festivals": [
                        {"name": f.name, "type": f.type, "type_label": festival_type_label(f.type)}
                        for f in festivals
                    ],
                }
            )
            continue

        lunar = format_lunar_date(solar_to_lunar(cur.year, cur.month, cur.day))
        names = ", ".join(f"{f.name} ({festival_type_label(f.type)})" for f in festivals) or "-"
        print(f"{cur.isoformat()}  L={lunar}  {names}")

    if args.json:
        dump_json({"rows": rows})


if __name__ == "__main__":
    main()
