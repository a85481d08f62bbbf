"""CSS selector configuration for the startlist page.

Edit these when the page markup changes. Each logical target is a
``LocatorSpec``: a primary selector plus fallbacks tried in order.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class LocatorSpec:
    """Primary CSS selector with ordered fallbacks."""

    primary: str
    fallbacks: tuple[str, ...] = field(default_factory=tuple)

    def expressions(self) -> list[str]:
        """All selectors in the order they are tried."""
        return [self.primary, *self.fallbacks]


# Top-level wrapper; its data-test-id carries the game type ("V75-game")
GAME_CONTAINER = LocatorSpec(
    primary='[data-test-id$="-game"]',
    fallbacks=(
        '[class*="game-container"]',
        'div[class*="V85"]',
        'div[class*="V4"]',
        'div[class*="V75"]',
    ),
)

RACE_SECTIONS = LocatorSpec(
    primary="[data-race-id]",
    fallbacks=(
        '[class*="race-section"]',
        'section[class*="race"]',
    ),
)

LEG_HEADER = LocatorSpec(
    primary="#leg-header",
    fallbacks=(
        '[class*="leg-header"]',
        '[class*="race-header"]',
        "header",
    ),
)

STARTLIST_TABLE = LocatorSpec(
    primary='table[data-test-id="startlist"]',
    fallbacks=(
        'table[class*="startlist"]',
        'table[class*="start-list"]',
        "table",
    ),
)

# Scoped to the table itself so nested previous-starts headers are not picked up
TABLE_HEADERS = LocatorSpec(
    primary=":scope > thead th",
    fallbacks=(
        ":scope > tbody > tr:first-child > th",
        ":scope > tr:first-child > th",
        ":scope > tbody > tr:first-child > td",
    ),
)

ADDITIONAL_COLUMNS = LocatorSpec(
    primary='[class*="moreDetailsColumn"]',
    fallbacks=('[class*="details-column"], [class*="detail-column"]',),
)

# Race header sub-elements
RACE_TITLE = '[class*="title"]'
RACE_INFO_SPANS = 'span[class*="body"]'
RACE_TIME = '[class*="TimeToStart"]'

# Startlist header cells
HEADER_LABEL = '[data-test-id*="tableCellHead"]'

# Horse cell sub-elements
START_NUMBER = "[data-start-number]"
HORSE_NAME = '[startlist-export-id^="startlist-cell-horse-split-export"]'
AGE_AND_SEX = '[startlist-export-id^="startlist-cell-ageAndSex-split-export"]'
DRIVER = '[startlist-export-id^="startlist-cell-driver-split-export"]'
TRAINER = '[startlist-export-id="startlist-cell-trainer-export"]'
TRAINER_SHORT_NAME = '[class*="trainerShortName"]'
DRIVER_NAME = '[class*="driverName"]'

# Generic cells
CELL_TEXT = '[data-test-id^="startlist-cell-"]'
STATS_CELL = '[data-test-id="startlist-cell-stats"]'
STATS_TOTAL = 'span[class*="stats"]'
SHOE_NO_INFO = '[class*="shoeCellNoInfo"]'
SHOE_ICONS = 'svg[data-test-id*="Shoe"]'
SHOE_CELL = '[data-test-id="startlist-cell-shoe"]'

# Additional info row
ADDITIONAL_HEADER = '[class*="moreDetailsColumnHeader"]'
ADDITIONAL_TEXT = '[class*="moreDetailsColumnText"]'

# Previous starts sub-table
HISTORY_TABLE = 'table[class*="PreviousStartsTable"]'
HISTORY_HEADER_ID = '[data-test-id^="table-header-"]'
MORE_DETAILS_AREA = '[class*="moreDetailsArea"]'
MORE_DETAILS_ITEM = '[class*="moreDetailsItem"]'
RACE_COMMENT_CELL = '[class*="RaceCommentCell"]'
