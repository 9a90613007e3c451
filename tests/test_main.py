from __future__ import annotations

import csv
import json

import pytest

import main


@pytest.fixture
def run(tmp_path, monkeypatch):
    monkeypatch.setenv("COUNTRIES_STATE_DIR", str(tmp_path / "state"))

    def _run(*argv):
        return main.main(["--offline", *argv])

    return _run


def test_list_json(run, capsys):
    assert run("list", "--search", "united", "--json") == 0
    data = json.loads(capsys.readouterr().out)
    assert [d["alpha3Code"] for d in data] == ["GBR", "USA"]


def test_list_table_marks_favorites(run, capsys):
    run("fav", "add", "fra")
    capsys.readouterr()
    run("list", "--region", "Europe")
    out = capsys.readouterr().out
    assert "* FRA" in out
    assert "3 countries" in out


def test_fav_list_reports_unloaded_codes(run, capsys):
    run("fav", "toggle", "ZZZ")
    capsys.readouterr()
    run("fav", "list")
    assert "Not loaded: ZZZ" in capsys.readouterr().out


def test_show_with_borders(run, capsys):
    assert run("show", "usa") == 0
    out = capsys.readouterr().out
    assert "United States (USA)" in out
    assert "Canada, Mexico" in out


def test_show_unknown_name_exits_nonzero(run, capsys):
    assert run("show", "--name", "atlantis") == 1
    assert "atlantis" in capsys.readouterr().err


def test_theme_toggle(run, capsys):
    run("theme", "--toggle")
    run("theme")
    assert capsys.readouterr().out.split() == ["dark", "dark"]


def test_export_writes_json_and_csv(run, tmp_path):
    out = tmp_path / "out"
    assert run("export", "--output", str(out), "--region", "Asia", "--sort", "population") == 0
    data = json.loads((out / "countries.json").read_text(encoding="utf-8"))
    assert [d["alpha3Code"] for d in data] == ["IND", "JPN"]
    with (out / "countries.csv").open(newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert rows[0]["name"] == "India"
    assert rows[0]["languages"] == "Hindi;English"


def test_where_rejects_out_of_range_coordinates(run, capsys):
    with pytest.raises(SystemExit) as exc:
        run("where", "91", "0")
    assert exc.value.code == 2
    assert "outside -90..90" in capsys.readouterr().err
