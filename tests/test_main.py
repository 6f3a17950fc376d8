import asyncio
import json
from pathlib import Path

import httpx
import pytest

from volleyzone_tables import main as main_module
from volleyzone_tables.models.division import DEFAULT_DIVISIONS, Division
from volleyzone_tables.scrapers.base_scraper import MissingFieldError

from conftest import form_fields, json_handler, make_row, mock_scraper, table_html, twelve_cells

DIVISIONS = [
    Division(label="alpha", competition_id="1"),
    Division(label="beta", competition_id="2"),
    Division(label="gamma", competition_id="3"),
]


def test_output_path_without_directory():
    division = DIVISIONS[0]
    assert main_module.output_path(None, division) == Path("alpha.csv")
    assert main_module.output_path("", division) == Path("alpha.csv")


def test_output_path_with_directory():
    assert main_module.output_path("out", DIVISIONS[1]) == Path("out") / "beta.csv"


def test_run_writes_one_file_per_division(tmp_path):
    html = table_html(make_row(*twelve_cells()), make_row("2", "Team B", "1", "2", "3"))
    scraper = mock_scraper(json_handler({"1": html, "2": "", "3": html}))

    written = asyncio.run(main_module.run(str(tmp_path), DIVISIONS, scraper))

    assert written == [tmp_path / "alpha.csv", tmp_path / "beta.csv", tmp_path / "gamma.csv"]
    alpha = (tmp_path / "alpha.csv").read_text(encoding="utf-8").splitlines()
    assert alpha[0].startswith("Position,Team,")
    assert alpha[1:] == ["1,Team A,10,8,2,25,9,16,900,750,1.200,20"]
    # No rows parsed still yields a header
    assert (tmp_path / "beta.csv").read_text(encoding="utf-8").splitlines() == [alpha[0]]


def test_run_processes_divisions_in_order(tmp_path):
    requested = []

    def handler(request):
        requested.append(form_fields(request)["competition_id"])
        return httpx.Response(200, json={"CompTables": ""})

    asyncio.run(main_module.run(str(tmp_path), DIVISIONS, mock_scraper(handler)))
    assert requested == ["1", "2", "3"]


def test_run_stops_at_first_failure(tmp_path):
    requested = []

    def handler(request):
        competition_id = form_fields(request)["competition_id"]
        requested.append(competition_id)
        if competition_id == "2":
            return httpx.Response(200, json={"nothing": "here"})
        return httpx.Response(200, json={"CompTables": ""})

    with pytest.raises(MissingFieldError):
        asyncio.run(main_module.run(str(tmp_path), DIVISIONS, mock_scraper(handler)))

    assert requested == ["1", "2"]
    assert sorted(p.name for p in tmp_path.iterdir()) == ["alpha.csv"]


def test_run_defaults_to_configured_divisions(tmp_path):
    scraper = mock_scraper(json_handler({}))
    written = asyncio.run(main_module.run(str(tmp_path), scraper=scraper))
    assert [p.name for p in written] == [d.csv_filename for d in DEFAULT_DIVISIONS]
    assert len(list(tmp_path.iterdir())) == 7


def test_run_without_directory_writes_to_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    scraper = mock_scraper(json_handler({}))
    asyncio.run(main_module.run(None, DIVISIONS[:1], scraper))
    assert (tmp_path / "alpha.csv").exists()


def patch_scraper(monkeypatch, handler):
    monkeypatch.setattr(main_module, "VolleyzoneScraper", lambda: mock_scraper(handler))


def test_main_exports_all_divisions(tmp_path, monkeypatch):
    html = table_html(make_row(*twelve_cells()))
    patch_scraper(monkeypatch, json_handler({d.competition_id: html for d in DEFAULT_DIVISIONS}))

    assert main_module.main([str(tmp_path)]) == 0
    assert sorted(p.name for p in tmp_path.iterdir()) == sorted(
        d.csv_filename for d in DEFAULT_DIVISIONS
    )


def test_main_returns_nonzero_on_fetch_failure(tmp_path, monkeypatch):
    patch_scraper(monkeypatch, lambda request: httpx.Response(200, text="not json"))
    assert main_module.main([str(tmp_path)]) == 1
    assert list(tmp_path.iterdir()) == []


def test_main_returns_nonzero_on_write_failure(tmp_path, monkeypatch):
    patch_scraper(monkeypatch, lambda request: httpx.Response(200, text=json.dumps({"CompTables": ""})))
    assert main_module.main([str(tmp_path / "missing" / "dir")]) == 1


def test_main_returns_130_on_keyboard_interrupt(tmp_path, monkeypatch):
    def interrupted(output_dir):
        raise KeyboardInterrupt

    monkeypatch.setattr(main_module, "run", interrupted)
    assert main_module.main([str(tmp_path)]) == 130
