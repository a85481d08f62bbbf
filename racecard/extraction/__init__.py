"""Startlist extraction engine for saved trotting game pages."""

from racecard.extraction.base import (
    ContainerNotFoundError,
    ExtractionError,
    NoRacesFoundError,
    parse_html,
)
from racecard.extraction.orchestrator import extract_from_html, extract_race_data

__all__ = [
    "ContainerNotFoundError",
    "ExtractionError",
    "NoRacesFoundError",
    "extract_from_html",
    "extract_race_data",
    "parse_html",
]
