"""Race header parsing: title, time and the classified info tokens."""

import re
from typing import Optional

from bs4 import Tag

from racecard.extraction import constants as c
from racecard.extraction import selectors as sel
from racecard.extraction.locator import node_text


def classify_metadata_tokens(tokens: list[str]) -> dict[str, str]:
    """Bucket header info tokens into race metadata slots.

    First match wins per token: distance ("2140 m"), discipline ("Trav"),
    start method ("Autostart"), track (first token only), track condition
    ("Lätt bana"). Anything left over is joined into ``description``.
    """
    metadata: dict[str, str] = {}
    unmatched: list[str] = []

    for index, text in enumerate(tokens):
        if c.DISTANCE_PATTERN.match(text):
            metadata["distance"] = text
        elif c.DISCIPLINE_PATTERN.match(text):
            metadata["discipline"] = text
        elif c.START_METHOD_PATTERN.search(text):
            metadata["start_method"] = text
        elif index == 0 and "track" not in metadata:
            metadata["track"] = text
        elif c.TRACK_CONDITION_PATTERN.search(text):
            metadata["track_condition"] = text
        else:
            unmatched.append(text)

    if unmatched:
        metadata["description"] = c.DESCRIPTION_SEPARATOR.join(unmatched)

    return metadata


def header_tokens(header: Tag) -> list[str]:
    """Non-empty info span texts from the race header, bullets dropped."""
    tokens = []
    for span in header.select(sel.RACE_INFO_SPANS):
        text = node_text(span)
        if text and text != c.BULLET:
            tokens.append(text)
    return tokens


def extract_race_metadata(header: Optional[Tag]) -> dict[str, str]:
    """Race title, time and classified info from the leg header ({} when missing)."""
    if header is None:
        return {}

    metadata: dict[str, str] = {}

    title = header.select_one(sel.RACE_TITLE)
    if title is not None:
        metadata["title"] = re.sub(r",\s*$", "", node_text(title))

    metadata.update(classify_metadata_tokens(header_tokens(header)))

    time_element = header.select_one(sel.RACE_TIME)
    if time_element is not None:
        metadata["time"] = node_text(time_element)

    return metadata
