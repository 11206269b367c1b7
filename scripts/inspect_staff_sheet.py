#!/usr/bin/env python3
"""
Parse a staff roster spreadsheet and show what would be imported.

Usage:
    python3 scripts/inspect_staff_sheet.py staff_example.xlsx
    python3 scripts/inspect_staff_sheet.py staff_example.xlsx --json > staff.json
"""
import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from hospital_roster.config.settings import settings
from hospital_roster.ingestor.spreadsheet import parse_staff_sheet


def print_summary(rows):
    print(f"\n{'='*80}")
    print(f"{len(rows)} staff rows")
    print(f"{'='*80}")
    for row in rows:
        avatar = "-"
        if row.avatar:
            avatar = f"{len(row.avatar)} chars via {row.avatar_match}"
        print(f"[row {row.row_number}] {row.name} | {row.department} | {row.position or '-'} | avatar: {avatar}")

    matched = [row for row in rows if row.avatar]
    fallback = [row for row in matched if row.avatar_match != "id"]
    print(f"\nAvatars: {len(matched)} matched, {len(fallback)} by fallback (check these)")


def main():
    parser = argparse.ArgumentParser(description="Inspect a staff roster spreadsheet")
    parser.add_argument("path", help="Path to the .xlsx file")
    parser.add_argument("--json", action="store_true", help="Print rows as JSON instead of a summary")
    args = parser.parse_args()

    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    sheet_path = Path(args.path)
    if not sheet_path.exists():
        print(f"Error: File not found: {args.path}")
        sys.exit(1)

    rows = parse_staff_sheet(sheet_path)

    if args.json:
        json.dump([asdict(row) for row in rows], sys.stdout, ensure_ascii=False, indent=2)
        print()
    else:
        print_summary(rows)


if __name__ == "__main__":
    main()
