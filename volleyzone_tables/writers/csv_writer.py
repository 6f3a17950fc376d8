from pathlib import Path
from typing import Iterable, TextIO, Union

from volleyzone_tables.models.team_stats import CSV_HEADER, TeamStats

DELIMITER = ","


def save_csv(teams: Iterable[TeamStats], writer: TextIO) -> None:
    """Writes the header and one line per team. Values are not quoted."""
    writer.write(DELIMITER.join(CSV_HEADER) + "\n")
    for team in teams:
        writer.write(DELIMITER.join(team.as_row()) + "\n")


def write_division_csv(teams: Iterable[TeamStats], path: Union[str, Path]) -> Path:
    """Creates (or truncates) ``path`` and writes the standings to it."""
    path = Path(path)
    # newline="" keeps "\n" line endings on every platform
    with open(path, "w", encoding="utf-8", newline="") as f:
        save_csv(teams, f)
    return path
