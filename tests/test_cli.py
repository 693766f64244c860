"""
Tests for the command-line entry point.
"""

import json

import pytest

from src.lunchguide import cli
from src.lunchguide.config import Config
from src.lunchguide.serialize import content_digest
from tests.helpers import make_page, make_segment


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    # Keep structlog's default pipeline so other tests can capture logs.
    monkeypatch.setattr(cli, "configure_logging", lambda log_level="INFO": None)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("LUNCHGUIDE_URL", "LUNCHGUIDE_CITY", "LUNCHGUIDE_WEEK", "LUNCHGUIDE_OUT",
                "LUNCHGUIDE_PAGES_DIR", "NAME_TABLE_PATH"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def pages_dir(tmp_path):
    pages = tmp_path / "pages"
    pages.mkdir()
    (pages / "Mandag.html").write_text(
        make_page(
            make_segment("lunchlogo/Jacob.gif", ["Wallenbergare"], caption="Dagens lunch"),
            make_segment("lunchlogo/okand.gif", ["Soppa"]),
        ),
        encoding="utf-8",
    )
    (pages / "Fredag.html").write_text(make_page(make_segment("lunchlogo/moraparken.gif")), encoding="utf-8")
    return pages


def test_config_from_args_overrides_base():
    args = cli.build_parser().parse_args(
        ["--city", "Mora", "--week", "5", "--sequential", "--timeout", "3", "--log-level", "debug"]
    )
    base = Config(base_url="http://x.test/?a=1", city="Falun", week=1, output_path="o.json")

    config = cli.config_from_args(args, base)

    assert config.city == "Mora"
    assert config.week == 5
    assert config.base_url == "http://x.test/?a=1"
    assert config.output_path == "o.json"
    assert config.concurrent_days is False
    assert config.fetch_timeout_seconds == 3.0
    assert config.log_level == "DEBUG"


def test_main_writes_artifacts(tmp_path, pages_dir):
    out = tmp_path / "mora.json"

    code = cli.main(
        ["--pages-dir", str(pages_dir), "--out", str(out), "--city", "Mora", "--week", "32"]
    )

    assert code == 0
    data = out.read_bytes()
    assert (tmp_path / "mora.json.md5").read_text(encoding="ascii") == content_digest(data)

    week = json.loads(data)
    assert week["city"] == "Mora"
    assert week["weekNumber"] == 32
    assert [d["weekdayName"] for d in week["days"]] == ["Mandag", "Tisdag", "Onsdag", "Torsdag", "Fredag"]

    monday = week["days"][0]["restaurants"]
    assert [r["name"] for r in monday] == ["Jacob restaurang &amp; bar", ""]
    assert monday[0]["description"] == "Dagens lunch"
    assert week["days"][1]["restaurants"] == []
    assert week["days"][4]["restaurants"][0]["name"] == "Mora Parken"


def test_main_uses_name_overrides(tmp_path, pages_dir):
    names = tmp_path / "names.json"
    names.write_text(json.dumps({"lunchlogo/okand.gif": "Nya Stället"}), encoding="utf-8")
    out = tmp_path / "mora.json"

    code = cli.main(
        ["--pages-dir", str(pages_dir), "--out", str(out), "--city", "Mora", "--week", "32",
         "--names", str(names)]
    )

    assert code == 0
    monday = json.loads(out.read_text(encoding="utf-8"))["days"][0]["restaurants"]
    assert monday[1]["name"] == "Nya Stället"


def test_main_rejects_missing_settings(capsys):
    assert cli.main(["--city", "Mora"]) == 2
    assert "LUNCHGUIDE_OUT" in capsys.readouterr().err


def test_main_unreadable_name_table(tmp_path, pages_dir):
    code = cli.main(
        ["--pages-dir", str(pages_dir), "--out", str(tmp_path / "o.json"), "--city", "Mora",
         "--week", "32", "--names", str(tmp_path / "missing.json")]
    )
    assert code == 2


def test_main_output_write_failure(tmp_path, pages_dir):
    code = cli.main(
        ["--pages-dir", str(pages_dir), "--out", str(tmp_path / "nope" / "o.json"), "--city", "Mora",
         "--week", "32"]
    )
    assert code == 1
