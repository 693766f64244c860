#!/usr/bin/env python3
"""
Parse one saved day listing and report what the extractor sees.

Prints the restaurant entries as JSON and lists image references that are not in
the name table, which is the quickest way to find table entries to add.
"""

from __future__ import annotations

import argparse
import json
import os
from pathlib import Path
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.lunchguide.assemble import build_day_menu
from src.lunchguide.models import WEEKDAYS
from src.lunchguide.names import get_name_resolver


def main() -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("page", help="Saved day listing (HTML)")
    parser.add_argument(
        "--day",
        type=int,
        default=0,
        choices=range(len(WEEKDAYS)),
        help="Weekday index 0-4 (default: 0, Mandag)",
    )
    parser.add_argument("--encoding", default="utf-8", help="Page encoding (default: utf-8)")
    parser.add_argument("--out", dest="output_path", default=None, help="Write JSON here instead of stdout")
    args = parser.parse_args()

    page_path = Path(args.page)
    if not page_path.exists():
        print(f"[ERR] Page not found: {page_path}")
        return 1

    resolver = get_name_resolver()
    day = build_day_menu(args.day, page_path.read_bytes(), resolver, encoding=args.encoding)

    unmatched = sorted({r.image_reference for r in day.restaurants if not r.resolved})
    payload = {
        "source": str(page_path),
        "num_restaurants": len(day.restaurants),
        "unmatched_image_references": unmatched,
        "day": day.to_dict(),
    }
    text = json.dumps(payload, ensure_ascii=False, indent=2)

    if args.output_path:
        Path(args.output_path).write_text(text, encoding="utf-8")
        print(f"[OK] Wrote {args.output_path} ({len(day.restaurants)} restaurants, {len(unmatched)} unmatched)")
    else:
        print(text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
