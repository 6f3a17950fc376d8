"""Standings table extraction from the Volleyzone HTML fragment."""

from typing import List

from bs4 import BeautifulSoup
from loguru import logger

from volleyzone_tables.models.team_stats import TEAM_STATS_COLUMNS, TeamStats

TABLE_ROW_SELECTOR = "tr.tableContents"
CELL_TAG = "td"
# lxml applies implied end tags, so unclosed <td>/<tr> still split into cells
PARSER = "lxml"


def _make_soup(html: str) -> BeautifulSoup:
    soup = BeautifulSoup(html, PARSER)
    if soup.find("table") is None:
        # Bare rows are only table rows inside a table
        soup = BeautifulSoup(f"<table>{html}</table>", PARSER)
    return soup


def parse_volleyball_table(html: str) -> List[TeamStats]:
    """Parses every standings row in ``html`` into TeamStats, in document order.

    Rows with fewer than 12 cells are skipped; cells past the twelfth are
    dropped. Markup the parser cannot make sense of yields an empty list
    rather than an error.
    """
    if not isinstance(html, str):
        raise TypeError(f"Expected HTML text, got {type(html).__name__}")

    soup = _make_soup(html)
    teams: List[TeamStats] = []

    for index, row in enumerate(soup.select(TABLE_ROW_SELECTOR)):
        cells = [cell.get_text().strip() for cell in row.find_all(CELL_TAG)]
        if len(cells) < TEAM_STATS_COLUMNS:
            logger.debug(f"Skipping row {index}: only {len(cells)} cells")
            continue
        teams.append(TeamStats.from_cells(cells))

    if not teams:
        logger.warning("No standings rows found in table HTML")
    return teams
