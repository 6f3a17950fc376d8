from typing import List, Sequence

from pydantic import BaseModel, ConfigDict

TEAM_STATS_COLUMNS = 12

# Column names in the same order as the TeamStats fields
CSV_HEADER = (
    "Position",
    "Team",
    "Played",
    "Wins",
    "Losses",
    "Sets For",
    "Sets Against",
    "Sets Difference",
    "Points For",
    "Points Against",
    "Points Quotient",
    "Points",
)


class TeamStats(BaseModel):
    """One team's row in a division standings table.

    Every value is kept as the trimmed cell text, exactly as the upstream
    table formats it (e.g. "1.234" quotients, "+5" set differences).
    """

    model_config = ConfigDict(frozen=True)

    position: str
    team: str
    played: str
    wins: str
    losses: str
    sets_for: str
    sets_against: str
    sets_difference: str
    points_for: str
    points_against: str
    points_quotient: str
    points: str

    @classmethod
    def from_cells(cls, cells: Sequence[str]) -> "TeamStats":
        """Builds a row from the first 12 cells; trailing cells are ignored."""
        if len(cells) < TEAM_STATS_COLUMNS:
            raise ValueError(
                f"Expected at least {TEAM_STATS_COLUMNS} cells, got {len(cells)}"
            )
        return cls(**dict(zip(cls.model_fields, cells[:TEAM_STATS_COLUMNS])))

    def as_row(self) -> List[str]:
        return [getattr(self, name) for name in type(self).model_fields]
