"""Attribute names, markers, patterns and dispatch tables for the startlist page."""

import re

# --- Attributes ---
DATA_TEST_ID = "data-test-id"
DATA_RACE_ID = "data-race-id"
DATA_START_NUMBER = "data-start-number"
EXPORT_TYPE = "startlist-export-type"
ID = "id"
HREF = "href"

# --- Game container ---
GAME_SUFFIX = "-game"
UNKNOWN_GAME = "UNKNOWN"

# --- Startlist rows ---
HORSE_ROW_PREFIX = "horse-row-"
HORSE_ROW_MATCH = re.compile(r"horse.*row", re.IGNORECASE)
HORSE_ROW_CLASS = "horse-row"
ADDITIONAL_ROW_ID = "additional-table-row"
ADDITIONAL_ROW_MATCH = "additional"
ADDITIONAL_ROW_CLASS = "additional-row"
EXTENDED_ROW_CLASS = "extendedStartRow"

# --- Previous starts rows ---
TABLE_ROW_BODY = "tableRowBody"
MORE_INFO_AREA = "MoreInfoArea"
RACE_COMMENTS = "RaceComments"

# --- Race metadata ---
DISTANCE_PATTERN = re.compile(r"^\d+\s*m$", re.IGNORECASE)
DISCIPLINE_PATTERN = re.compile(r"^(trav|galopp|monté)$", re.IGNORECASE)
START_METHOD_PATTERN = re.compile(r"autostart|voltstart", re.IGNORECASE)
TRACK_CONDITION_PATTERN = re.compile(r"lätt|tung|god|hård|mjuk|fryst", re.IGNORECASE)
BULLET = "•"
DESCRIPTION_SEPARATOR = " - "

# --- Dates ---
ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
SHORT_DATE = re.compile(r"^\d{6}$")
NUMERIC_DATE = re.compile(r"^(\d{1,2})[-/](\d{1,2})[-/](\d{4})$")
CENTURY_PREFIX = "20"

# --- Shoes ---
SHOE_ON = "C"
SHOE_OFF = "Ȼ"  # barefoot
SHOE_NO_INFO = "-"
SHOE_SYMBOLS = {
    "ShoeOnFilledIcon": SHOE_ON,
    "ShoeOffFilledIcon": SHOE_OFF,
}

# --- Text clean-up ---
LEADING_NUMBER = re.compile(r"^\d+\s+")
NON_ALPHANUMERIC = re.compile(r"[^a-z0-9]+")
WAGON_PREFIX = "Vagn:"

# --- Fallback values ---
UNKNOWN_RACE = "unknown-race"
COLUMN_PREFIX = "column_"
HORSE_PREFIX = "horse_"

# --- Column export types -> extractor kind ---
IDENTITY = "identity"
STATS = "stats"
SHOES = "shoes"
DEFAULT = "default"

FIELD_KINDS: dict[str, str] = {
    "horse": IDENTITY,
    "lifeStats": STATS,
    "currentYearStats": STATS,
    "previousYearStats": STATS,
    "shoeInfo": SHOES,
}

# Keys filled by the horse cell; an additional row never overrides them
IDENTITY_FIELDS = ("start_number", "name", "age_and_sex", "driver", "trainer")

# --- Previous starts columns ---
HISTORY_HEADER_PREFIX = "table-header-"
TRACK_FIELD = "track"

# The page labels unrelated columns "table-header-distance"; use the text instead
DISTRUSTED_HEADER_FIELDS = frozenset({"distance"})

# Header text rules, first match wins. A rule matches when every word of
# any one alternative appears in the upper-cased header text.
HISTORY_HEADER_RULES: tuple[tuple[str, tuple[tuple[str, ...], ...]], ...] = (
    ("date", (("DATUM",), ("DATE",))),
    ("place", (("PLAC",),)),
    ("distance", (("DIST", "SPÅR"),)),
    ("kmTime", (("KM-TID",), ("KMTIME",))),
    ("shoes", (("SKOR",), ("SHOE",))),
    ("odds", (("ODDS",),)),
    ("firstPrize", (("PRIS",), ("PRIZE",))),
    ("track", (("BANA",), ("TRACK",))),
    ("driver", (("KUSK",), ("RYTTARE",), ("DRIVER",))),
    ("sulky", (("VAGN",), ("SULKY",))),
)

# Column map key -> history entry key
HISTORY_FIELDS: tuple[tuple[str, str], ...] = (
    ("track", "track"),
    ("driver", "driver"),
    ("place", "placement"),
    ("distance", "distance_and_lane"),
    ("kmTime", "time"),
    ("shoes", "shoes"),
    ("odds", "odds"),
    ("firstPrize", "prize"),
    ("sulky", "wagon"),
)
