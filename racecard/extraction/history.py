"""Previous starts ("history") parsing from a horse's extended row.

Each previous start is one ``tableRowBody`` row, optionally followed by a
``MoreInfoArea`` row (compact layout only) and a ``RaceComments`` row.
"""

import logging
from typing import Any, Optional

from bs4 import Tag

from racecard.extraction import constants as c
from racecard.extraction import selectors as sel
from racecard.extraction.columns import ColumnMap, detect_history_columns
from racecard.extraction.dates import normalize_date
from racecard.extraction.fields import extract_shoe_info
from racecard.extraction.locator import body_rows, class_string, get_attribute, node_text

logger = logging.getLogger(__name__)


def _strip_wagon_prefix(text: str) -> str:
    if text.startswith(c.WAGON_PREFIX):
        text = text[len(c.WAGON_PREFIX):]
    return text.strip()


def is_history_row(row: Tag) -> bool:
    classes = class_string(row)
    return (
        c.TABLE_ROW_BODY in classes
        and c.MORE_INFO_AREA not in classes
        and c.RACE_COMMENTS not in classes
    )


def _cell_at(cells: list[Tag], index: Optional[int]) -> Optional[Tag]:
    if index is None or index >= len(cells):
        return None
    return cells[index]


def _extract_date(cell: Tag, entry: dict[str, Any]) -> None:
    link = cell.find("a")
    entry["date"] = normalize_date(node_text(link if link is not None else cell))
    href = get_attribute(link, c.HREF)
    if href:
        entry["race_link"] = href


def extract_more_info(row: Tag) -> dict[str, str]:
    """Track, driver and sulky from a compact-layout "more info" row."""
    info: dict[str, str] = {}
    cell = row.find("td")
    if cell is None:
        return info

    area = cell.select_one(sel.MORE_DETAILS_AREA)
    if area is None:
        return info

    for index, item in enumerate(area.select(sel.MORE_DETAILS_ITEM)):
        text = node_text(item)
        if index == 0:
            info["track"] = text
        elif index == 1:
            info["driver"] = text
        elif text.startswith(c.WAGON_PREFIX):
            info["wagon"] = _strip_wagon_prefix(text)
    return info


def extract_race_comment(row: Tag) -> str:
    """Comment text from a ``RaceComments`` row."""
    cell = row.find("td")
    if cell is None:
        return ""
    comment = cell.select_one(sel.RACE_COMMENT_CELL)
    return node_text(comment if comment is not None else cell)


def stitch_history_entry(
    rows: list[Tag], index: int, column_map: ColumnMap,
) -> tuple[Optional[dict[str, Any]], int]:
    """Build one previous start beginning at ``rows[index]``.

    Returns ``(entry, consumed)``; ``entry`` is None and ``consumed`` is 1
    when the row does not start a previous start.
    """
    row = rows[index]
    if not is_history_row(row):
        return None, 1

    entry: dict[str, Any] = {}
    cells = row.find_all("td", recursive=False)
    expanded = column_map.is_expanded

    date_cell = _cell_at(cells, column_map.get("date"))
    if date_cell is None and not expanded:
        date_cell = _cell_at(cells, 0)
    if date_cell is not None:
        _extract_date(date_cell, entry)

    for column, key in c.HISTORY_FIELDS:
        cell = _cell_at(cells, column_map.get(column))
        if cell is None:
            continue
        value = extract_shoe_info(cell) if column == "shoes" else node_text(cell)
        if column == "sulky":
            value = _strip_wagon_prefix(value)
        if value:
            entry[key] = value

    if expanded and cells:
        last = cells[-1]
        comment = node_text(last)
        if comment and last.find("button") is None:
            entry["comment"] = comment

    consumed = 1

    if not expanded and index + consumed < len(rows):
        next_row = rows[index + consumed]
        if c.MORE_INFO_AREA in class_string(next_row):
            entry.update(extract_more_info(next_row))
            consumed += 1

    if "comment" not in entry and index + consumed < len(rows):
        next_row = rows[index + consumed]
        if c.RACE_COMMENTS in class_string(next_row):
            entry["comment"] = extract_race_comment(next_row)
            consumed += 1

    return entry, consumed


def parse_history_rows(rows: list[Tag], column_map: ColumnMap) -> list[dict[str, Any]]:
    """Walk previous-starts body rows, most recent first."""
    entries = []
    i = 0
    while i < len(rows):
        entry, consumed = stitch_history_entry(rows, i, column_map)
        if entry is not None:
            entries.append(entry)
        i += consumed
    return entries


def extract_history(extended_row: Tag) -> list[dict[str, Any]]:
    """Previous starts from the sub-table inside an ``extendedStartRow``."""
    table = extended_row.select_one(sel.HISTORY_TABLE)
    if table is None:
        return []

    column_map = detect_history_columns(table.find("thead", recursive=False))
    rows = body_rows(table)
    entries = parse_history_rows(rows, column_map)
    logger.debug(
        f"Parsed {len(entries)} previous starts "
        f"({'expanded' if column_map.is_expanded else 'compact'} layout)"
    )
    return entries
