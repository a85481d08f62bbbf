"""Shared test fixtures for racecard."""

import pytest
from bs4 import BeautifulSoup


HORSE_ROW_1 = """
<tr data-test-id="horse-row-1">
  <td>
    <button data-start-number="1">1</button>
    <span startlist-export-id="startlist-cell-horse-split-export-1">1 Don Fanucci Zet</span>
    <span startlist-export-id="startlist-cell-ageAndSex-split-export-1">7 år h</span>
    <span startlist-export-id="startlist-cell-driver-split-export-1"><span class="driverName">Örjan Kihlström</span> <span class="trainerShortName">(DR)</span></span>
    <span startlist-export-id="startlist-cell-trainer-export">Daniel Redén</span>
  </td>
  <td><span data-test-id="startlist-cell-stats"><span class="stats">31</span>10-7-2</span></td>
  <td><span data-test-id="startlist-cell-shoe"><svg data-test-id="ShoeOnFilledIcon"></svg><svg data-test-id="ShoeOffFilledIcon"></svg></span></td>
  <td><span data-test-id="startlist-cell-odds">5,23</span><span class="trend">+</span></td>
</tr>
"""

ADDITIONAL_ROW_1 = """
<tr data-test-id="additional-table-row">
  <td colspan="4">
    <div class="moreDetailsColumn">
      <span class="moreDetailsColumnHeader" startlist-export-type="currentYearStats">I år:</span>
      <span class="moreDetailsColumnText"><span data-test-id="startlist-cell-stats"><span class="stats">5</span>2-1-0</span></span>
    </div>
    <div class="moreDetailsColumn">
      <span class="moreDetailsColumnHeader">Breeder:</span>
      <span class="moreDetailsColumnText">Menhammar Stuteri AB</span>
    </div>
  </td>
</tr>
"""

EXTENDED_ROW_1 = """
<tr class="extendedStartRow">
  <td colspan="4">
    <table class="PreviousStartsTable">
      <thead>
        <tr>
          <th><span data-test-id="table-header-date">Datum</span></th>
          <th><span data-test-id="table-header-track">Bana</span></th>
          <th><span data-test-id="table-header-driver">Kusk</span></th>
          <th><span data-test-id="table-header-place">Plac</span></th>
          <th><span data-test-id="table-header-distance">Dist/spår</span></th>
          <th><span data-test-id="table-header-kmTime">Km-tid</span></th>
          <th><span data-test-id="table-header-shoes">Skor</span></th>
          <th><span data-test-id="table-header-odds">Odds</span></th>
          <th><span data-test-id="table-header-firstPrize">Pris</span></th>
          <th><span data-test-id="table-header-sulky">Vagn</span></th>
          <th>Kommentar</th>
        </tr>
      </thead>
      <tbody>
        <tr class="tableRowBody">
          <td><a href="/spel/2025-08-02/V75/solvalla">250802</a></td>
          <td>Solvalla</td>
          <td>Örjan Kihlström</td>
          <td>1</td>
          <td>2140:4</td>
          <td>11,2a</td>
          <td><svg data-test-id="ShoeOnFilledIcon"></svg><svg data-test-id="ShoeOnFilledIcon"></svg></td>
          <td>3,45</td>
          <td>200 000</td>
          <td>Vagn: Amerikansk</td>
          <td>Ledde hela vägen</td>
        </tr>
        <tr class="tableRowBody">
          <td>2025-07-15</td>
          <td>Åby</td>
          <td>Magnus A Djuse</td>
          <td>3</td>
          <td>2640:2</td>
          <td>13,0a</td>
          <td><svg data-test-id="ShoeOffFilledIcon"></svg><svg data-test-id="ShoeOffFilledIcon"></svg></td>
          <td>7,10</td>
          <td>50 000</td>
          <td>Vanlig</td>
          <td><button>Visa</button></td>
        </tr>
        <tr class="tableRowBody RaceComments">
          <td><div class="RaceCommentCell">Galopp i sista sväng</div></td>
        </tr>
      </tbody>
    </table>
  </td>
</tr>
"""

HORSE_ROW_2 = """
<tr data-test-id="horse-row-2">
  <td>
    <button data-start-number="2">2</button>
    <span startlist-export-id="startlist-cell-horse-split-export-2">2 Hail Mary</span>
    <span startlist-export-id="startlist-cell-ageAndSex-split-export-2">9 år h</span>
    <span startlist-export-id="startlist-cell-driver-split-export-2">Björn Goop</span>
  </td>
  <td><span data-test-id="startlist-cell-stats"><span class="stats">45</span>20-8-5</span></td>
  <td><span class="shoeCellNoInfo"></span><span class="shoeCellNoInfo"></span></td>
  <td><span data-test-id="startlist-cell-odds">12,40</span></td>
</tr>
"""

STARTLIST_HEAD = """
<thead>
  <tr>
    <th startlist-export-type="horse"><span data-test-id="tableCellHead-horse">Häst/Kusk</span></th>
    <th startlist-export-type="lifeStats"><span data-test-id="tableCellHead-lifeStats">Livs</span></th>
    <th startlist-export-type="shoeInfo"><span data-test-id="tableCellHead-shoeInfo">Skor</span></th>
    <th startlist-export-type="odds"><span data-test-id="tableCellHead-odds">V-odds</span></th>
  </tr>
</thead>
"""

LEG_HEADER_1 = """
<div id="leg-header">
  <span class="leg-title">V75-1,</span>
  <span class="bodyText">Solvalla</span>
  <span class="bodyText">•</span>
  <span class="bodyText">2140 m</span>
  <span class="bodyText">•</span>
  <span class="bodyText">Trav</span>
  <span class="bodyText">Autostart</span>
  <span class="raceTimeToStart">16:20</span>
</div>
"""

LEG_HEADER_2 = """
<div id="leg-header">
  <span class="leg-title">V75-2</span>
  <span class="bodyText">Solvalla</span>
  <span class="bodyText">1640 m</span>
  <span class="bodyText">Voltstart</span>
  <span class="bodyText">Lätt bana</span>
  <span class="bodyText">Stayerlopp</span>
  <span class="bodyText">Svensk Travsports Unghästserie</span>
</div>
"""


def startlist_table(*rows: str) -> str:
    """Wrap body rows in a startlist table with the standard header."""
    return f'<table data-test-id="startlist">{STARTLIST_HEAD}<tbody>{"".join(rows)}</tbody></table>'


SAMPLE_PAGE = f"""
<html><body>
<div data-test-id="V75-game">
  <section data-race-id="2025-08-16_5_1">
    {LEG_HEADER_1}
    {startlist_table(HORSE_ROW_1, ADDITIONAL_ROW_1, EXTENDED_ROW_1, HORSE_ROW_2)}
  </section>
  <section data-race-id="2025-08-16_5_2">
    {LEG_HEADER_2}
    {startlist_table(HORSE_ROW_2.replace("horse-row-2", "horse-row-4"))}
  </section>
  <section data-race-id="2025-08-16_5_3">
    <div id="leg-header"><span class="leg-title">V75-3</span></div>
    <p>Startlistan är inte publicerad</p>
  </section>
</div>
</body></html>
"""


def make_soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "lxml")


@pytest.fixture
def sample_page_html() -> str:
    """Saved V75 page: two races with startlists, one without."""
    return SAMPLE_PAGE


@pytest.fixture
def sample_doc() -> BeautifulSoup:
    return make_soup(SAMPLE_PAGE)


@pytest.fixture
def soup():
    """Factory parsing an HTML snippet with the lxml tree builder."""
    return make_soup
