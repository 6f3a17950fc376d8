import sys
import asyncio
import argparse
from pathlib import Path
from typing import List, Optional, Sequence

from loguru import logger
from rich.console import Console
from rich.panel import Panel

from volleyzone_tables.config.settings import settings
from volleyzone_tables.logging.setup import setup_logging
from volleyzone_tables.models.division import Division
from volleyzone_tables.parsing.table_parser import parse_volleyball_table
from volleyzone_tables.scrapers.base_scraper import ScraperError
from volleyzone_tables.scrapers.volleyzone_scraper import VolleyzoneScraper
from volleyzone_tables.writers.csv_writer import write_division_csv


def output_path(output_dir: Optional[str], division: Division) -> Path:
    """Location of a division's CSV; no directory means the working directory."""
    if not output_dir:
        return Path(division.csv_filename)
    return Path(output_dir) / division.csv_filename


async def run(
    output_dir: Optional[str] = None,
    divisions: Optional[Sequence[Division]] = None,
    scraper: Optional[VolleyzoneScraper] = None,
) -> List[Path]:
    """Fetches, parses and writes every division in order.

    The first failure propagates and stops the run; files already written for
    earlier divisions are left untouched.
    """
    divisions = list(settings.divisions if divisions is None else divisions)
    owns_scraper = scraper is None
    if owns_scraper:
        scraper = VolleyzoneScraper()

    written: List[Path] = []
    try:
        for division in divisions:
            logger.info(
                f"Retrieving table for team={division.label}, id={division.competition_id}..."
            )
            html = await scraper.fetch_table_html(division.competition_id)
            teams = parse_volleyball_table(html)
            path = write_division_csv(teams, output_path(output_dir, division))
            written.append(path)
            logger.success(f"Saved: {division.competition_id} -> {path} ({len(teams)} rows)")
    finally:
        if owns_scraper:
            await scraper.close()
    return written


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="volleyzone-tables",
        description="Export Volleyzone division standings to CSV files",
    )
    p.add_argument(
        "output_dir",
        nargs="?",
        default=None,
        help="Directory for the CSV files (default: current directory)",
    )
    return p.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command line entry point. Returns the process exit status."""
    args = parse_args(argv)
    setup_logging()

    try:
        written = asyncio.run(run(args.output_dir))
    except KeyboardInterrupt:
        logger.info("Execution interrupted by user (KeyboardInterrupt).")
        return 130
    except ScraperError as e:
        logger.error(f"Fetching standings failed: {e}")
        return 1
    except OSError as e:
        logger.error(f"Writing standings failed: {e}")
        return 1
    except Exception as e:
        logger.exception(f"Unhandled exception in main execution: {e}")
        return 1

    Console(stderr=True).print(
        Panel(
            "\n".join(str(path) for path in written),
            title=f"Exported {len(written)} divisions",
        )
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
