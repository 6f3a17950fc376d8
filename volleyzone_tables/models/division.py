from typing import List

from pydantic import BaseModel, ConfigDict


class Division(BaseModel):
    """A league division: local label plus the upstream competition id."""

    model_config = ConfigDict(frozen=True)

    label: str  # Used as the output filename stem
    competition_id: str

    @property
    def csv_filename(self) -> str:
        return f"{self.label}.csv"


DEFAULT_DIVISIONS: List[Division] = [
    Division(label="division_1_men_nvl", competition_id="196048"),
    Division(label="div_2a_men", competition_id="198880"),
    Division(label="div_3a_men", competition_id="198882"),
    Division(label="div_1a_women", competition_id="198885"),
    Division(label="div_1b_women", competition_id="198886"),
    Division(label="div_2a_women", competition_id="198887"),
    Division(label="div_2b_women", competition_id="198888"),
]
