"""Extraction entry point: saved startlist page -> races and competitors.

Only two conditions are fatal (no game container, no race sections). A race
without a startlist table is logged and skipped; everything below that
degrades to missing fields.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from bs4 import Tag

from racecard.extraction import constants as c
from racecard.extraction import selectors as sel
from racecard.extraction.base import ContainerNotFoundError, NoRacesFoundError, parse_html
from racecard.extraction.columns import extract_table_headers
from racecard.extraction.locator import find_all, find_one, get_attribute
from racecard.extraction.metadata import extract_race_metadata
from racecard.extraction.startlist import extract_competitors

logger = logging.getLogger(__name__)


def _source_type(container: Tag) -> str:
    test_id = get_attribute(container, c.DATA_TEST_ID) or c.UNKNOWN_GAME
    return test_id.removesuffix(c.GAME_SUFFIX)


def _race_id(section: Tag) -> str:
    return get_attribute(section, c.DATA_RACE_ID) or get_attribute(section, c.ID) or c.UNKNOWN_RACE


def extract_race(section: Tag, source_type: str, debug: bool = False) -> Optional[dict[str, Any]]:
    """Extract one race section; None when it has no startlist table."""
    race_id = _race_id(section)
    metadata = extract_race_metadata(find_one(section, sel.LEG_HEADER))

    table = find_one(section, sel.STARTLIST_TABLE)
    if table is None:
        logger.warning(f"No startlist table found for race {race_id}")
        return None

    headers = extract_table_headers(table)
    competitors = extract_competitors(table, headers)

    race: dict[str, Any] = {
        "race_id": race_id,
        "source_type": source_type,
        "metadata": metadata,
        "competitors": competitors,
    }
    if debug:
        race["headers"] = headers

    logger.info(f"Race {race_id}: {len(competitors)} competitors")
    return race


def extract_race_data(doc: Tag, debug: bool = False) -> dict[str, Any]:
    """Extract all races from a parsed startlist page.

    Returns a plain dict ready for JSON export::

        {"source_type": "V75", "races": [...],
         "total_competitor_count": 84, "extracted_at": "2026-...Z"}

    Raises ContainerNotFoundError / NoRacesFoundError when the page does not
    look like a startlist at all.
    """
    container = find_one(doc, sel.GAME_CONTAINER)
    if container is None:
        raise ContainerNotFoundError(sel.GAME_CONTAINER.expressions())

    source_type = _source_type(container)

    sections = find_all(doc, sel.RACE_SECTIONS)
    if not sections:
        raise NoRacesFoundError(sel.RACE_SECTIONS.expressions())

    races = []
    total = 0
    for section in sections:
        race = extract_race(section, source_type, debug=debug)
        if race is None:
            continue
        total += len(race["competitors"])
        races.append(race)

    return {
        "source_type": source_type,
        "races": races,
        "total_competitor_count": total,
        "extracted_at": datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z"),
    }


def extract_from_html(html: str, debug: bool = False, parser: Optional[str] = None) -> dict[str, Any]:
    """Parse raw HTML and extract it."""
    return extract_race_data(parse_html(html, parser), debug=debug)
