"""Startlist table parsing: one competitor per horse row plus its follow-up rows.

A horse is spread over up to three ``tbody`` rows:

  horse-row-N            the declared columns (number, name, driver, stats, ...)
  additional-table-row   optional overflow columns ("more details")
  extendedStartRow       optional previous starts sub-table
"""

import logging
from typing import Any, Optional

from bs4 import Tag

from racecard.extraction import constants as c
from racecard.extraction.fields import extract_additional_row, extract_cell
from racecard.extraction.history import extract_history
from racecard.extraction.locator import body_rows, class_string, get_attribute

logger = logging.getLogger(__name__)


def is_horse_row(row: Tag) -> bool:
    test_id = get_attribute(row, c.DATA_TEST_ID)
    if test_id and (test_id.startswith(c.HORSE_ROW_PREFIX) or c.HORSE_ROW_MATCH.search(test_id)):
        return True
    return c.HORSE_ROW_CLASS in class_string(row).split()


def is_additional_row(row: Tag) -> bool:
    test_id = get_attribute(row, c.DATA_TEST_ID) or ""
    if test_id == c.ADDITIONAL_ROW_ID or c.ADDITIONAL_ROW_MATCH in test_id:
        return True
    return c.ADDITIONAL_ROW_CLASS in class_string(row).split()


def is_extended_row(row: Tag) -> bool:
    return c.EXTENDED_ROW_CLASS in class_string(row)


def extract_row_data(row: Tag, headers: list[dict[str, Any]]) -> dict[str, Any]:
    """Map each cell of a horse row through its column's export type."""
    data: dict[str, Any] = {}
    for index, cell in enumerate(row.find_all("td", recursive=False)):
        if index < len(headers):
            export_type = headers[index]["export_type"]
        else:
            export_type = f"{c.COLUMN_PREFIX}{index}"
        data.update(extract_cell(cell, export_type))
    return data


def _merge_additional(record: dict[str, Any], extra: dict[str, Any]) -> None:
    for key, value in extra.items():
        if key in c.IDENTITY_FIELDS and record.get(key):
            continue
        record[key] = value


def stitch_competitor(
    rows: list[Tag], index: int, headers: list[dict[str, Any]],
) -> tuple[Optional[dict[str, Any]], int]:
    """Build one competitor starting at ``rows[index]``.

    Returns ``(record, consumed)``. Rows that are not horse rows (spacers,
    stray continuation rows) give ``(None, 1)``.
    """
    row = rows[index]
    if not is_horse_row(row):
        return None, 1

    record = extract_row_data(row, headers)

    if not record.get("start_number"):
        test_id = get_attribute(row, c.DATA_TEST_ID)
        if test_id:
            record["start_number"] = test_id.removeprefix(c.HORSE_ROW_PREFIX)
        else:
            record["start_number"] = f"{c.HORSE_PREFIX}{index}"

    consumed = 1

    if index + consumed < len(rows) and is_additional_row(rows[index + consumed]):
        _merge_additional(record, extract_additional_row(rows[index + consumed]))
        consumed += 1

    if index + consumed < len(rows) and is_extended_row(rows[index + consumed]):
        history = extract_history(rows[index + consumed])
        if history:
            record["history"] = history
        consumed += 1

    return record, consumed


def extract_competitors(table: Tag, headers: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """All competitors in a startlist table, in table order."""
    rows = body_rows(table)
    competitors = []
    skipped = 0
    i = 0
    while i < len(rows):
        record, consumed = stitch_competitor(rows, i, headers)
        if record is None:
            skipped += 1
        else:
            competitors.append(record)
        i += consumed

    if skipped:
        logger.debug(f"Skipped {skipped} non-horse rows")
    return competitors
