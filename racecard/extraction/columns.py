"""Column discovery for the startlist table and the previous-starts sub-table."""

from dataclasses import dataclass, field
from typing import Any, Optional

from bs4 import Tag

from racecard.extraction import constants as c
from racecard.extraction import selectors as sel
from racecard.extraction.locator import find_all, get_attribute, node_text


@dataclass
class ColumnMap:
    """Field name -> column index for one previous-starts table.

    The expanded layout is the one with a track column; the compact layout
    moves track/driver/sulky into a "more info" row below each start.
    """

    is_expanded: bool = False
    columns: dict[str, int] = field(default_factory=dict)

    def set(self, name: str, index: int) -> None:
        self.columns[name] = index
        if name == c.TRACK_FIELD:
            self.is_expanded = True

    def get(self, name: str) -> Optional[int]:
        return self.columns.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self.columns


def _match_header_text(text: str) -> Optional[str]:
    upper = text.upper()
    for name, alternatives in c.HISTORY_HEADER_RULES:
        if any(all(word in upper for word in words) for words in alternatives):
            return name
    return None


def detect_history_columns(thead: Optional[Tag]) -> ColumnMap:
    """Work out where each previous-starts field sits from the header row.

    Prefers the ``table-header-<field>`` test ids; falls back to matching
    the header text for columns without a usable id.
    """
    column_map = ColumnMap()
    if thead is None:
        return column_map

    for index, th in enumerate(thead.find_all("th")):
        name = None

        id_element = th.select_one(sel.HISTORY_HEADER_ID)
        if id_element is not None:
            test_id = get_attribute(id_element, c.DATA_TEST_ID) or ""
            candidate = test_id[len(c.HISTORY_HEADER_PREFIX):]
            if candidate and candidate not in c.DISTRUSTED_HEADER_FIELDS:
                name = candidate

        if name is None:
            name = _match_header_text(node_text(th))

        if name is not None:
            column_map.set(name, index)

    return column_map


def extract_table_headers(table: Tag) -> list[dict[str, Any]]:
    """Describe each startlist column: label, export type and test id."""
    headers = []
    for index, th in enumerate(find_all(table, sel.TABLE_HEADERS)):
        label_element = th.select_one(sel.HEADER_LABEL)
        export_type = get_attribute(th, c.EXPORT_TYPE)
        headers.append({
            "index": index,
            "label": node_text(label_element if label_element is not None else th),
            "export_type": export_type or f"{c.COLUMN_PREFIX}{index}",
            "test_id": get_attribute(label_element, c.DATA_TEST_ID),
        })
    return headers
