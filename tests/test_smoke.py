"""Smoke tests for the package CLI."""

import json

import pytest

from solunar_forecast.__main__ import main


def test_cli_import_smoke() -> None:
    """Ensure CLI entrypoint can be imported and executed."""
    assert main([]) == 0


def test_cli_day_prints_json(capsys: pytest.CaptureFixture[str]) -> None:
    """`day` prints the solunar payload for the requested date."""
    assert main(["day", "--date", "2024-06-21"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["date"] == "2024-06-21T00:00:00"
    assert payload["daily_score"] == 82
    assert payload["rating"] == "excellent"


def test_cli_forecast_prints_summary(capsys: pytest.CaptureFixture[str]) -> None:
    """`forecast` prints one line per day followed by the best day."""
    assert main(["forecast", "--start", "2024-06-20", "--days", "2"]) == 0

    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 3
    assert lines[0].startswith("2024-06-20 ")
    assert lines[-1].startswith("best_day=2024-06-2")


def test_cli_rejects_invalid_date() -> None:
    """Unparseable dates are argparse errors."""
    with pytest.raises(SystemExit):
        main(["day", "--date", "not-a-date"])


def test_cli_rejects_half_location() -> None:
    """--lat without --lon is rejected."""
    with pytest.raises(SystemExit):
        main(["day", "--date", "2024-06-21", "--lat", "44.0"])


def test_cli_reports_polar_location_as_argument_error(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Engine errors for the requested location exit through argparse."""
    with pytest.raises(SystemExit) as excinfo:
        main(["day", "--date", "2024-06-21", "--lat", "80", "--lon", "0"])

    assert excinfo.value.code == 2
    assert "does not rise or set" in capsys.readouterr().err


def test_cli_forecast_rejects_distant_longitude(capsys: pytest.CaptureFixture[str]) -> None:
    """A forecast for a far-away longitude exits through argparse."""
    with pytest.raises(SystemExit) as excinfo:
        main(["forecast", "--start", "2024-06-21", "--days", "2", "--lat", "34", "--lon", "-118"])

    assert excinfo.value.code == 2
    assert "outside the local civil day" in capsys.readouterr().err
