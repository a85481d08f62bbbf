"""Command line entry point: extract a saved startlist page to JSON, CSV or xlsx.

Usage:
    racecard page.html
    racecard page.html --format csv --output races.csv
    racecard page.html --format xlsx --output races.xlsx
    racecard page.html --format xlsx --vertical --output all-races.xlsx
    racecard page.html --format xlsx --race 2025-08-16_5_1 --horse 4 -o horse.xlsx
    racecard page.html --debug --parser html.parser
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Optional

from racecard.config import settings
from racecard.export import (
    all_races_rows,
    competitor_rows,
    find_competitor,
    find_race,
    race_rows,
    to_json,
    to_table_rows,
    write_rows,
    write_xlsx,
)
from racecard.extraction import ExtractionError, extract_from_html

logger = logging.getLogger("racecard")

EXIT_OK = 0
EXIT_NO_RACES = 1
EXIT_FATAL = 2
EXIT_NOT_FOUND = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="racecard",
        description="Extract races and horses from a saved startlist page",
    )
    parser.add_argument("file", type=Path, help="Saved HTML page")
    parser.add_argument("--format", choices=["json", "csv", "tsv", "xlsx"], default="json")
    parser.add_argument("--output", "-o", type=Path, help="Write here instead of stdout")
    parser.add_argument("--race", help="Only this race (by race id)")
    parser.add_argument("--horse", help="Only this horse (by start number); needs --race")
    parser.add_argument(
        "--vertical", action="store_true",
        help="Key/value rows instead of one row per horse (implied by --race)",
    )
    parser.add_argument(
        "--debug", action="store_true", default=settings.debug,
        help="Include raw startlist column headers per race",
    )
    parser.add_argument("--parser", default=settings.html_parser, help="BeautifulSoup tree builder")
    return parser


def _check_args(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    if args.horse and not args.race:
        parser.error("--horse needs --race")
    if args.format == "xlsx" and args.output is None:
        parser.error("--format xlsx needs --output")


def _select_json(result: dict, race_id: Optional[str], horse: Optional[str]) -> Any:
    if race_id is None:
        return result
    race = find_race(result, race_id)
    if horse is None:
        return race
    return find_competitor(race, horse)


def _select_rows(result: dict, args: argparse.Namespace) -> tuple[list[list[str]], str, bool]:
    """Rows to write, sheet name, and whether they are vertical."""
    if args.race:
        race = find_race(result, args.race)
        if args.horse:
            return competitor_rows(race, args.horse), "Horse Data", True
        return race_rows(race), "Race Data", True
    if args.vertical:
        return all_races_rows(result), "All Races", True
    return to_table_rows(result), "Race Data", False


def _write(result: dict, args: argparse.Namespace) -> None:
    if args.format == "json":
        text = to_json(_select_json(result, args.race, args.horse), indent=settings.output_indent)
        if args.output:
            args.output.write_text(text + "\n", encoding="utf-8")
        else:
            sys.stdout.write(text + "\n")
        return

    rows, sheet_name, vertical = _select_rows(result, args)
    if args.format == "xlsx":
        write_xlsx(rows, args.output, sheet_name, vertical=vertical)
        return

    delimiter = "\t" if args.format == "tsv" else ","
    write_rows(rows, args.output or sys.stdout, delimiter=delimiter)


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _check_args(parser, args)

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    html = args.file.read_text(encoding="utf-8", errors="replace")
    try:
        result = extract_from_html(html, debug=args.debug, parser=args.parser)
    except ExtractionError as e:
        logger.error(f"Extraction failed for {args.file}: {e}")
        return EXIT_FATAL

    if not result["races"]:
        logger.error("No race data found. Is this a saved startlist page?")
        return EXIT_NO_RACES

    logger.info(
        f"Extracted {len(result['races'])} race(s) with "
        f"{result['total_competitor_count']} horse(s) from {args.file}"
    )
    if args.race:
        try:
            race = find_race(result, args.race)
            if args.horse:
                find_competitor(race, args.horse)
        except KeyError as e:
            logger.error(e.args[0])
            return EXIT_NOT_FOUND

    _write(result, args)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
