from __future__ import annotations

import argparse
import json
import logging
from datetime import date, timedelta
from typing import Iterable, Optional, Tuple

from vncal.core.config import load_config


def add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--date", help="YYYY-MM-DD")
    parser.add_argument("--start", help="YYYY-MM-DD")
    parser.add_argument("--end", help="YYYY-MM-DD")
    parser.add_argument("--json", action="store_true")
    parser.add_argument("--verbose", action="store_true")


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def parse_date(s: str) -> date:
    return date.fromisoformat(s)


def iter_dates(start: date, end: date) -> Iterable[date]:
    cur = start
    while cur <= end:
        yield cur
        cur = cur + timedelta(days=1)


def resolve_date_range(args: argparse.Namespace) -> Tuple[Optional[date], Optional[date]]:
    if args.start and args.end:
        return parse_date(args.start), parse_date(args.end)
    if args.date:
        d = parse_date(args.date)
        return d, d
    return None, None


def check_range(parser: argparse.ArgumentParser, start: date, end: date) -> None:
    if end < start:
        parser.error("--end must be >= --start")
    limit = load_config().max_range_days
    days = (end - start).days + 1
    if days > limit:
        parser.error(f"range too large: {days} days (limit {limit})")


def dump_json(obj: object) -> None:
    print(json.dumps(obj, ensure_ascii=False, indent=2))
