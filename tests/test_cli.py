from __future__ import annotations

import json

import pytest

from fakegps import cli
from fakegps._store.memory import MemoryStore
from fakegps.models.coordinate import LatLong


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in (
        "FAKEGPS_KEY_TEMPLATE",
        "FAKEGPS_DEVICE_CLASSES",
        "FAKEGPS_INSTANCE_IDS",
        "FAKEGPS_START_TIMEOUT",
        "FAKEGPS_SETTLE_DELAY",
        "FAKEGPS_BREAK_ON_FAILURE",
    ):
        monkeypatch.delenv(key, raising=False)


def test_set_from_string(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["51.5074,-0.1278", "--dry-run"]) == 0
    assert capsys.readouterr().out.strip() == "51.5074,-0.1278"


def test_negative_latitude_after_double_dash(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["--dry-run", "--", "-33.8688,151.2093"]) == 0
    assert capsys.readouterr().out.strip() == "-33.8688,151.2093"


def test_json_output(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["1.5,2.5", "--dry-run", "--json"]) == 0
    assert json.loads(capsys.readouterr().out) == {"latitude": 1.5, "longitude": 2.5}


def test_bad_format_exit_code(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["999,50", "--dry-run"]) == 2
    assert "Invalid LatLong format" in capsys.readouterr().err


def test_live(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    calls: list[dict[str, float]] = []

    def _fake_query(**kwargs: float) -> LatLong:
        calls.append(kwargs)
        return LatLong(latitude=40.7128, longitude=-74.006)

    monkeypatch.setattr(cli, "query_live_location", _fake_query)

    assert cli.main(["--live", "--dry-run"]) == 0
    assert calls == [{"start_timeout": 1.0, "settle_delay": 1.0}]
    assert capsys.readouterr().out.strip() == "40.7128,-74.006"


def test_store_not_found_exit_code(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr(cli, "_dry_run_store", lambda _config: MemoryStore())

    assert cli.main(["1,2", "--dry-run"]) == 1
    assert "Searched" in capsys.readouterr().err


def test_show_rejects_dry_run(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--show", "--dry-run"])

    assert exc_info.value.code == 2
    assert "--dry-run" in capsys.readouterr().err


def test_show_prints_stored_location(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr(cli, "read_lat_long", lambda **_kwargs: LatLong(latitude=10.5, longitude=-20.25))

    assert cli.main(["--show"]) == 0
    assert capsys.readouterr().out.strip() == "10.5,-20.25"


def test_source_required() -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--dry-run"])
    assert exc_info.value.code == 2


def test_sources_are_exclusive() -> None:
    with pytest.raises(SystemExit):
        cli.main(["1,2", "--live"])
