"""Selector lookup with fallbacks, plus attribute and text accessors."""

import logging
import re
from typing import Optional, Union

from bs4 import Tag

from racecard.extraction.selectors import LocatorSpec

logger = logging.getLogger(__name__)

Selector = Union[LocatorSpec, str]


def _as_spec(selector: Selector) -> LocatorSpec:
    if isinstance(selector, LocatorSpec):
        return selector
    return LocatorSpec(primary=selector)


def _warn_fallback(spec: LocatorSpec, expression: str) -> None:
    logger.warning(f"Using fallback selector: {expression} (primary failed: {spec.primary})")


def find_one(scope: Tag, selector: Selector) -> Optional[Tag]:
    """Return the first element matching the primary selector or a fallback."""
    spec = _as_spec(selector)
    for expression in spec.expressions():
        element = scope.select_one(expression)
        if element is not None:
            if expression != spec.primary:
                _warn_fallback(spec, expression)
            return element
    return None


def find_all(scope: Tag, selector: Selector) -> list[Tag]:
    """Return all elements for the first selector (primary, then fallbacks) that matches any."""
    spec = _as_spec(selector)
    for expression in spec.expressions():
        elements = scope.select(expression)
        if elements:
            if expression != spec.primary:
                _warn_fallback(spec, expression)
            return list(elements)
    return []


def _attr_value(element: Tag, name: str) -> Optional[str]:
    value = element.get(name)
    if isinstance(value, list):
        value = " ".join(value)
    return value or None


def get_attribute(element: Optional[Tag], name: str, fallback: Optional[str] = None) -> Optional[str]:
    """Read an attribute, falling back to a second attribute name when empty."""
    if element is None:
        return None
    value = _attr_value(element, name)
    if value:
        return value
    if fallback:
        value = _attr_value(element, fallback)
        if value:
            logger.warning(f"Using fallback attribute: {fallback} (primary failed: {name})")
            return value
    return None


def class_string(element: Optional[Tag]) -> str:
    """Space-joined class list of an element ("" when it has none)."""
    if element is None:
        return ""
    return _attr_value(element, "class") or ""


def node_text(element: Optional[Tag]) -> str:
    """Trimmed text content with whitespace runs collapsed."""
    if element is None:
        return ""
    return re.sub(r"\s+", " ", element.get_text()).strip()


def body_rows(table: Tag) -> list[Tag]:
    """Direct rows of the table's own ``tbody``, or of the table when it has none."""
    tbody = table.find("tbody", recursive=False)
    return (tbody if tbody is not None else table).find_all("tr", recursive=False)
