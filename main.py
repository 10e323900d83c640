#!/usr/bin/env python3
"""
Exchange Insider Trading Tracker - Shenzhen and Shanghai.

Queries director/officer shareholding changes for one or more security codes,
summarizes net buying and selling, and prints a report per code.

  python main.py 002065
  python main.py 000768,002456,600118 --span 3
  python main.py 603993 --from 2015/01/01 --to 2015/06/30
"""
import argparse
import logging
import os
import sys
import time

_here = os.path.dirname(os.path.abspath(__file__))
if _here not in sys.path:
    sys.path.insert(0, _here)

from cn_insider.config import DEFAULT_SPAN_MONTHS, LOG_LEVEL, MAX_SPAN_MONTHS, MIN_SPAN_MONTHS
from cn_insider.pipeline import outcome_counts, query_insiders, split_codes
from cn_insider.report import records_to_frame, render_report


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Query director/officer stock trading on the Shenzhen and Shanghai exchanges."
    )
    parser.add_argument(
        "codes",
        help="Security code, or comma-separated codes (e.g. 000768,600118)",
    )
    parser.add_argument(
        "--span",
        type=str,
        default=None,
        help=f"Months back from today, clamped to {MIN_SPAN_MONTHS}-{MAX_SPAN_MONTHS} (default: {DEFAULT_SPAN_MONTHS})",
    )
    parser.add_argument(
        "--from",
        dest="date_from",
        type=str,
        default=None,
        help="Begin date YYYY/MM/DD (overrides --span)",
    )
    parser.add_argument(
        "--to",
        dest="date_to",
        type=str,
        default=None,
        help="End date YYYY/MM/DD (overrides --span)",
    )
    parser.add_argument(
        "--page",
        type=int,
        default=1,
        help="Result page for Shenzhen codes (default: 1)",
    )
    parser.add_argument(
        "--csv",
        type=str,
        default=None,
        help="Write all records to CSV path",
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    codes = split_codes(args.codes)
    if not codes:
        print("No security code given.", file=sys.stderr)
        return 1

    start = time.monotonic()
    outcomes = query_insiders(
        codes,
        span_months=args.span,
        date_from=args.date_from,
        date_to=args.date_to,
        page=args.page,
    )
    elapsed_ms = (time.monotonic() - start) * 1000

    for o in outcomes:
        print()
        if not o.ok:
            print(f"{o.code}: {o.error}", file=sys.stderr)
            detail = getattr(o.error, "headers", None) or getattr(o.error, "detail", None)
            if detail:
                print(f"  {detail}", file=sys.stderr)
            continue
        print(render_report(o.report))

    counts = outcome_counts(outcomes)
    print(f"\nDone in {elapsed_ms:.0f} ms: {counts['ok']} succeeded, {counts['failed']} failed.")

    if args.csv:
        reports = [o.report for o in outcomes if o.ok]
        records_to_frame(reports).to_csv(args.csv, index=False)
        print(f"Wrote {args.csv}.")

    return 0 if counts["failed"] == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
