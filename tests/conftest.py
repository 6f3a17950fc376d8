import json
from urllib.parse import parse_qs

import httpx
import pytest

from volleyzone_tables.scrapers.volleyzone_scraper import VolleyzoneScraper


def make_row(*cells, css_class="tableContents"):
    tds = "".join(f"<td>{c}</td>" for c in cells)
    return f'<tr class="{css_class}">{tds}</tr>'


def twelve_cells(position="1", team="Team A", points="20"):
    return [position, team, "10", "8", "2", "25", "9", "16", "900", "750", "1.200", points]


def table_html(*rows):
    return f"<table><tbody>{''.join(rows)}</tbody></table>"


def form_fields(request: httpx.Request) -> dict:
    return {k: v[0] for k, v in parse_qs(request.content.decode()).items()}


def mock_scraper(handler) -> VolleyzoneScraper:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return VolleyzoneScraper(client=client)


def json_handler(html_by_id: dict):
    """Transport handler answering each competition id with its table HTML."""

    def handler(request: httpx.Request) -> httpx.Response:
        competition_id = form_fields(request)["competition_id"]
        return httpx.Response(
            200, text=json.dumps({"CompTables": html_by_id.get(competition_id, "")})
        )

    return handler


@pytest.fixture
def sample_html():
    return table_html(
        make_row(*twelve_cells()),
        make_row("2", "Team B", "10", "6"),
        make_row(*twelve_cells("3", "Team C", "12")),
    )
