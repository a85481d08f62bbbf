"""Export helpers for extraction results.

Two shapes of rows are built from a result:

  table      one row per competitor, race columns first (CSV/TSV/xlsx)
  vertical   key/value pairs per horse, per race or for all races (xlsx, CSV)

Rows are plain ``list[list[str]]`` so every writer takes the same input.
"""

import csv
import json
from pathlib import Path
from typing import IO, Any, BinaryIO, Union

from openpyxl import Workbook
from openpyxl.utils import get_column_letter

# Race columns leading every row of the flat table
RACE_COLUMNS = [
    "Source Type", "Race ID", "Race Title", "Race Track",
    "Race Distance", "Discipline", "Start Method",
]

# Previous starts shown per horse in the vertical export
MAX_HISTORY = 5

_HISTORY_LABELS = [
    ("Date", "date"),
    ("Track", "track"),
    ("Driver", "driver"),
    ("Placement", "placement"),
    ("Distance", "distance_and_lane"),
    ("KM-Time", "time"),
    ("Shoes", "shoes"),
    ("Odds", "odds"),
    ("Prize", "prize"),
    ("Wagon", "wagon"),
    ("Comment", "comment"),
]

BLANK = ["", ""]
SEPARATOR = ["-" * 40, ""]

# Spreadsheet layout
TEXT_FORMAT = "@"
MIN_COL_WIDTH = 8
MAX_COL_WIDTH = 30
COL_PADDING = 1
VERTICAL_LABEL_WIDTH = 25
VERTICAL_VALUE_WIDTH = 50


def to_json(result: dict[str, Any], indent: int = 2) -> str:
    return json.dumps(result, indent=indent, ensure_ascii=False)


def find_race(result: dict[str, Any], race_id: str) -> dict[str, Any]:
    for race in result["races"]:
        if race["race_id"] == race_id:
            return race
    raise KeyError(f"Race {race_id} not found")


def find_competitor(race: dict[str, Any], start_number: Union[str, int]) -> dict[str, Any]:
    for competitor in race["competitors"]:
        if competitor.get("start_number") == str(start_number):
            return competitor
    raise KeyError(f"Horse {start_number} not found in race {race['race_id']}")


# ── Table rows ─────────────────────────────────────────────────────────────


def _race_info(race: dict[str, Any]) -> list[str]:
    meta = race.get("metadata", {})
    return [
        meta.get("title", ""),
        meta.get("track", ""),
        meta.get("distance", ""),
        meta.get("discipline", ""),
        meta.get("start_method", ""),
    ]


def to_table_rows(result: dict[str, Any]) -> list[list[str]]:
    """One row per competitor, race columns first, then every competitor field seen.

    Competitor fields keep first-seen order; ``history`` is left out.
    """
    fields: list[str] = []
    for race in result["races"]:
        for competitor in race["competitors"]:
            for key in competitor:
                if key != "history" and key not in fields:
                    fields.append(key)

    rows = [RACE_COLUMNS + fields]
    for race in result["races"]:
        for competitor in race["competitors"]:
            row = [result["source_type"], race["race_id"], *_race_info(race)]
            row.extend(str(competitor.get(key, "")) for key in fields)
            rows.append(row)
    return rows


# ── Vertical rows ──────────────────────────────────────────────────────────


def _race_summary(race: dict[str, Any]) -> list[list[str]]:
    meta = race.get("metadata", {})
    rows = []
    if meta.get("title"):
        rows.append(["raceTitle", meta["title"]])
    rows += [
        ["raceTrack", meta.get("track", "")],
        ["raceDistance", meta.get("distance", "")],
        ["raceDiscipline", meta.get("discipline", "")],
        ["startMethod", meta.get("start_method", "")],
    ]
    if meta.get("description"):
        rows.append(["raceDescription", meta["description"]])
    return rows


def competitor_rows(
    race: dict[str, Any],
    start_number: Union[str, int],
    include_race_info: bool = True,
    max_history: int = MAX_HISTORY,
) -> list[list[str]]:
    """Vertical key/value rows for one horse.

    Previous starts are numbered so the oldest shown is 1 and the most
    recent carries the highest number ("Date-5" is the latest of five).
    """
    competitor = find_competitor(race, start_number)

    rows = [[key, str(value)] for key, value in competitor.items() if key != "history"]

    if include_race_info:
        rows += [BLANK, ["--- RACE INFO ---", ""]]
        rows += _race_summary(race)

    history = competitor.get("history", [])[:max_history]
    if history:
        rows += [BLANK, ["--- PREVIOUS STARTS ---", ""]]
        for index, entry in enumerate(history):
            number = len(history) - index
            rows += [[f"{label}-{number}", entry.get(key, "")] for label, key in _HISTORY_LABELS]
            if index < len(history) - 1:
                rows.append(BLANK)

    return rows


def race_rows(race: dict[str, Any], max_history: int = MAX_HISTORY) -> list[list[str]]:
    """Race info once, then every horse's vertical rows between separators."""
    rows = [["--- RACE INFO ---", ""], ["raceId", race["race_id"]]]
    rows += _race_summary(race)
    rows += [BLANK, SEPARATOR, BLANK]

    competitors = race["competitors"]
    for index, competitor in enumerate(competitors):
        rows += competitor_rows(
            race, competitor["start_number"], include_race_info=False, max_history=max_history,
        )
        if index < len(competitors) - 1:
            rows += [BLANK, SEPARATOR, BLANK]
    return rows


def all_races_rows(result: dict[str, Any], max_history: int = MAX_HISTORY) -> list[list[str]]:
    """Every race's vertical rows, each under a banner with its title and track."""
    rows = []
    races = result["races"]
    for index, race in enumerate(races):
        meta = race.get("metadata", {})
        title = meta.get("title") or race["race_id"]
        rows.append([f"-------- {title} - {meta.get('track') or 'Unknown'} --------", ""])
        rows += race_rows(race, max_history=max_history)
        if index < len(races) - 1:
            rows += [BLANK, BLANK]
    return rows


# ── Writers ────────────────────────────────────────────────────────────────


def write_rows(rows: list[list[str]], target: Union[str, Path, IO[str]], delimiter: str = ",") -> None:
    """Write rows with the csv module to a path or open text file."""
    if isinstance(target, (str, Path)):
        with open(target, "w", newline="", encoding="utf-8") as f:
            csv.writer(f, delimiter=delimiter).writerows(rows)
    else:
        csv.writer(target, delimiter=delimiter).writerows(rows)


def write_csv(result: dict[str, Any], target: Union[str, Path, IO[str]], delimiter: str = ",") -> int:
    """Write the flat table to a path or open text file. Returns competitor rows written."""
    rows = to_table_rows(result)
    write_rows(rows, target, delimiter=delimiter)
    return len(rows) - 1


def _column_widths(rows: list[list[str]]) -> list[int]:
    widths: list[int] = []
    for row in rows:
        for index, value in enumerate(row):
            if index == len(widths):
                widths.append(MIN_COL_WIDTH)
            widths[index] = max(widths[index], len(str(value)))
    return [min(width + COL_PADDING, MAX_COL_WIDTH) for width in widths]


def build_workbook(rows: list[list[str]], sheet_name: str, vertical: bool = False) -> Workbook:
    """One-sheet workbook with cells stored as text.

    Vertical sheets text-format the value column and use fixed label/value
    widths; table sheets text-format every cell and size columns to content.
    """
    wb = Workbook()
    ws = wb.active
    ws.title = sheet_name
    for row in rows:
        ws.append([str(value) for value in row])

    if vertical:
        for cell in ws["B"]:
            cell.number_format = TEXT_FORMAT
        ws.column_dimensions["A"].width = VERTICAL_LABEL_WIDTH
        ws.column_dimensions["B"].width = VERTICAL_VALUE_WIDTH
    else:
        for sheet_row in ws.iter_rows():
            for cell in sheet_row:
                cell.number_format = TEXT_FORMAT
        for index, width in enumerate(_column_widths(rows), start=1):
            ws.column_dimensions[get_column_letter(index)].width = width

    return wb


def write_xlsx(
    rows: list[list[str]],
    target: Union[str, Path, BinaryIO],
    sheet_name: str,
    vertical: bool = False,
) -> None:
    build_workbook(rows, sheet_name, vertical=vertical).save(target)
