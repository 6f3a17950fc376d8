import json
from typing import Any, Optional

import httpx
from loguru import logger

from volleyzone_tables.config.settings import settings
from volleyzone_tables.models.fetch_request import FetchRequest
from .base_scraper import (
    BaseScraper,
    MissingFieldError,
    ResponseDecodeError,
    WrongTypeError,
)

# JSON key holding the rendered standings HTML
COMP_TABLES_KEY = "CompTables"

FORM_HEADERS = {
    "Content-Type": "application/x-www-form-urlencoded; charset=UTF-8",
}


def extract_comp_tables(payload: Any) -> str:
    """Returns the HTML fragment stored under ``CompTables``.

    Raises MissingFieldError when the key (or a JSON object at all) is absent,
    WrongTypeError when the value is not a string.
    """
    if not isinstance(payload, dict) or COMP_TABLES_KEY not in payload:
        raise MissingFieldError(COMP_TABLES_KEY)
    value = payload[COMP_TABLES_KEY]
    if not isinstance(value, str):
        raise WrongTypeError(COMP_TABLES_KEY, str, value)
    return value


class VolleyzoneScraper(BaseScraper):
    """Fetches division standings tables from the Volleyzone competitions site."""

    site: str = "volleyzone"

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        url: Optional[str] = None,
        page_title: Optional[str] = None,
    ):
        super().__init__(client)
        self.url = url or settings.table_url
        self.page_title = page_title or settings.page_title

    async def fetch_table_html(self, competition_id: str) -> str:
        """POSTs the competition id and returns the standings HTML fragment."""
        request_body = FetchRequest(
            competition_id=competition_id, page_title=self.page_title
        )
        response = await self._make_request(
            method="POST",
            url=self.url,
            params={"action": settings.table_action},
            headers=FORM_HEADERS,
            data=request_body.to_form(),
        )

        text = response.text
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as e:
            logger.debug(f"Raw response content: {text[:200]!r}")
            raise ResponseDecodeError(
                f"Response for competition {competition_id} is not valid JSON: {e}"
            ) from e

        html = extract_comp_tables(payload)
        logger.debug(
            f"Received {len(html)} characters of table HTML for competition {competition_id}"
        )
        return html
