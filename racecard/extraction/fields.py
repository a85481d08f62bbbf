"""Per-cell field extractors for startlist rows.

Each extractor takes one cell (or value container) and returns a value or a
small dict of values. Missing sub-elements degrade to empty strings or
omitted keys, never exceptions.
"""

import re
from typing import Any, Optional

from bs4 import Tag

from racecard.extraction import constants as c
from racecard.extraction import selectors as sel
from racecard.extraction.locator import find_all, get_attribute, node_text


def extract_default(cell: Optional[Tag]) -> str:
    """Cell text, preferring a nested startlist-cell element when there is one."""
    if cell is None:
        return ""
    inner = cell.select_one(sel.CELL_TEXT)
    return node_text(inner if inner is not None else cell)


def extract_horse_cell(cell: Tag) -> dict[str, Any]:
    """Pull start number, name, age/sex, driver and trainer out of the horse cell."""
    data: dict[str, Any] = {}

    number = cell.select_one(sel.START_NUMBER)
    if number is not None:
        start_number = get_attribute(number, c.DATA_START_NUMBER)
        if start_number:
            data["start_number"] = start_number

    name = cell.select_one(sel.HORSE_NAME)
    if name is not None:
        data["name"] = c.LEADING_NUMBER.sub("", node_text(name))

    age = cell.select_one(sel.AGE_AND_SEX)
    if age is not None:
        data["age_and_sex"] = node_text(age)

    driver = cell.select_one(sel.DRIVER)
    if driver is not None:
        # Driver cell may carry the trainer abbreviation, e.g. "Örjan Kihlström (DR)"
        short = driver.select_one(sel.TRAINER_SHORT_NAME)
        if short is not None:
            short_text = node_text(short)
            data["trainer"] = re.sub(r"[()]", "", short_text).strip()
            driver_name = driver.select_one(sel.DRIVER_NAME)
            if driver_name is not None:
                data["driver"] = node_text(driver_name)
            else:
                data["driver"] = node_text(driver).replace(short_text, "").strip()
        else:
            data["driver"] = node_text(driver)

    trainer = cell.select_one(sel.TRAINER)
    if trainer is not None:
        data["trainer"] = node_text(trainer)

    return data


def extract_stats(cell: Optional[Tag]) -> str:
    """Rebuild "starts wins-seconds-thirds" from a stats cell.

    The page renders the total in its own span directly followed by the
    placings ("3110-7-2"), so the total is pulled out and re-joined with a space.
    """
    if cell is None:
        return ""
    stats = cell.select_one(sel.STATS_CELL)
    if stats is None:
        stats = cell

    total_span = stats.select_one(sel.STATS_TOTAL)
    total = node_text(total_span)

    text = stats.get_text()
    if total:
        text = text.replace(total, "", 1)
    placings = re.sub(r"\s+", " ", text).strip()

    if total and placings:
        return f"{total} {placings}"
    return placings or total or ""


def extract_shoe_info(cell: Optional[Tag]) -> str:
    """Map shoe icons to symbols: C shod, Ȼ barefoot, - no information."""
    if cell is None:
        return ""

    no_info = cell.select(sel.SHOE_NO_INFO)
    if no_info:
        return c.SHOE_NO_INFO * len(no_info)

    icons = cell.select(sel.SHOE_ICONS)
    if not icons:
        shoe_cell = cell.select_one(sel.SHOE_CELL)
        if shoe_cell is not None:
            icons = shoe_cell.select(sel.SHOE_ICONS)

    symbols = []
    for icon in icons:
        symbol = c.SHOE_SYMBOLS.get(get_attribute(icon, c.DATA_TEST_ID) or "")
        if symbol:
            symbols.append(symbol)
    return "".join(symbols)


def field_kind(export_type: Optional[str]) -> str:
    return c.FIELD_KINDS.get(export_type or "", c.DEFAULT)


_VALUE_EXTRACTORS = {
    c.STATS: extract_stats,
    c.SHOES: extract_shoe_info,
    c.DEFAULT: extract_default,
}


def extract_cell(cell: Tag, export_type: str) -> dict[str, Any]:
    """Extract one cell according to its column's export type.

    Returns the fields to merge into the competitor record: the horse cell
    contributes several keys, every other kind a single ``export_type`` key.
    """
    kind = field_kind(export_type)
    if kind == c.IDENTITY:
        return extract_horse_cell(cell)
    return {export_type: _VALUE_EXTRACTORS[kind](cell)}


def label_slug(label: str) -> str:
    """Turn a header label into a field name ("Start-poäng:" -> "start_po_ng")."""
    return c.NON_ALPHANUMERIC.sub("_", label.replace(":", "").strip().lower())


def extract_additional_row(row: Tag) -> dict[str, Any]:
    """Key/value pairs from an "additional info" row below a horse row."""
    data: dict[str, Any] = {}

    for column in find_all(row, sel.ADDITIONAL_COLUMNS):
        header = column.select_one(sel.ADDITIONAL_HEADER)
        value_container = column.select_one(sel.ADDITIONAL_TEXT)
        export_type = get_attribute(header, c.EXPORT_TYPE) if header is not None else None
        label = node_text(header) if header is not None else ""

        key = export_type or label_slug(label)
        if not key:
            continue

        kind = field_kind(export_type)
        if kind == c.IDENTITY:
            if value_container is not None:
                data.update(extract_horse_cell(value_container))
        else:
            data[key] = _VALUE_EXTRACTORS[kind](value_container)

    return data
