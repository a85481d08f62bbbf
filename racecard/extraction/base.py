"""Errors and document loading shared by the extraction engine."""

from typing import Optional

from bs4 import BeautifulSoup


class ExtractionError(Exception):
    """Exception raised when a startlist page cannot be extracted.

    Carries every lookup expression that was tried so an operator can see
    which part of the markup changed.
    """

    def __init__(self, message: str, attempted: Optional[list[str]] = None):
        self.attempted = list(attempted or [])
        if self.attempted:
            message = f"{message}{', '.join(self.attempted)}"
        super().__init__(message)


class ContainerNotFoundError(ExtractionError):
    """No top-level game container in the document."""

    def __init__(self, attempted: list[str]):
        super().__init__("No game container found. Tried selectors: ", attempted)


class NoRacesFoundError(ExtractionError):
    """No race sections in the document."""

    def __init__(self, attempted: list[str]):
        super().__init__("No races found. Tried selectors: ", attempted)


def parse_html(html: str, parser: Optional[str] = None) -> BeautifulSoup:
    """Parse HTML into BeautifulSoup object."""
    return BeautifulSoup(html, parser or "lxml")
