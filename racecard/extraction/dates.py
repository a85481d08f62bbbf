"""Normalize previous-start date tokens to YYYY-MM-DD."""

from typing import Optional

from racecard.extraction.constants import CENTURY_PREFIX, ISO_DATE, NUMERIC_DATE, SHORT_DATE


def normalize_date(text: Optional[str]) -> str:
    """Normalize a date token, returning it unchanged when the shape is unknown.

    - ``2025-08-14`` passes through.
    - ``250814`` is read as YYMMDD in the 2000s.
    - ``14-08-2025`` / ``14/08/2025`` is day-first when the first group is
      above 12 or the second is at most 12, otherwise month-first
      (``08/14/2025``). When both readings are valid, day-first wins.
    """
    if not text:
        return ""

    cleaned = text.strip()

    if ISO_DATE.match(cleaned):
        return cleaned

    if SHORT_DATE.match(cleaned):
        return f"{CENTURY_PREFIX}{cleaned[:2]}-{cleaned[2:4]}-{cleaned[4:6]}"

    m = NUMERIC_DATE.match(cleaned)
    if m:
        first, second, year = m.group(1).zfill(2), m.group(2).zfill(2), m.group(3)
        if int(first) > 12 or int(second) <= 12:
            return f"{year}-{second}-{first}"
        return f"{year}-{first}-{second}"

    return cleaned
