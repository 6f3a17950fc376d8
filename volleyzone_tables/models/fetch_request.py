from typing import Dict

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_PAGE_TITLE = "Fixture and Results"


class FetchRequest(BaseModel):
    """Form body for the fetch_table_by_competition AJAX action."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    competition_id: str
    page_title: str = Field(DEFAULT_PAGE_TITLE, alias="pageTitle")

    def to_form(self) -> Dict[str, str]:
        # The endpoint expects the camelCase key for the page title
        return self.model_dump(by_alias=True)
