"""Tests for the memento-mori command line."""

import json

import pytest
from typer.testing import CliRunner

from memento_mori.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def cli_database(sqlite_url, monkeypatch):
    from memento_mori.core.config import get_settings

    monkeypatch.setenv("MEMENTO_DATABASE_URL", sqlite_url)
    get_settings.cache_clear()
    return sqlite_url


def _json_payload(output: str) -> dict:
    return json.loads(output[output.index("{") : output.rindex("}") + 1])


def _save_profile(*extra: str):
    result = runner.invoke(
        app,
        ["set-profile", "--birth-date", "1990-05-15", "--life-expectancy", "80", *extra],
    )
    assert result.exit_code == 0, result.output
    return result


class TestSetProfileAndShow:
    def test_round_trip_as_json(self):
        saved = _save_profile()
        assert "born 1990-05-15" in saved.output

        result = runner.invoke(app, ["show", "--at", "2026-02-20", "--json"])

        assert result.exit_code == 0, result.output
        data = _json_payload(result.output)
        assert data["profile"] == {
            "birthDate": "1990-05-15T00:00:00",
            "lifeExpectancyYears": 80,
        }
        assert data["totalDays"] == 29220
        assert data["daysLived"] == 13065
        assert data["daysRemaining"] == 29220 - 13065
        assert data["formattedPercentageLived"] == "45"
        assert data["units"]["weeks"] == {"total": 4160, "elapsed": 1866, "remaining": 2294}
        assert data["units"]["months"]["elapsed"] == 429
        assert data["units"]["years"]["elapsed"] == 35

    def test_decimal_places(self):
        _save_profile("--decimal-places", "2")

        result = runner.invoke(app, ["show", "--at", "2026-02-20", "--json"])

        assert _json_payload(result.output)["formattedPercentageLived"] == "44.71"

    def test_table_output(self):
        _save_profile()

        result = runner.invoke(app, ["show", "--at", "2026-02-20"])

        assert result.exit_code == 0, result.output
        assert "Memento mori." in result.output
        assert "2294 weeks left" in result.output

    def test_empty_store_shows_default_profile(self):
        result = runner.invoke(app, ["show", "--json"])

        assert result.exit_code == 0, result.output
        assert _json_payload(result.output)["profile"]["lifeExpectancyYears"] == 80


class TestRejectedInput:
    def test_negative_life_expectancy(self):
        result = runner.invoke(
            app, ["set-profile", "--birth-date", "1990-05-15", "--life-expectancy=-5"]
        )

        assert result.exit_code == 2
        assert "must be >= 0" in result.output

    def test_too_many_decimal_places(self):
        result = runner.invoke(
            app,
            ["set-profile", "--birth-date", "1990-05-15", "--decimal-places", "16"],
        )

        assert result.exit_code == 2
        assert "between 0 and 15" in result.output

        shown = runner.invoke(app, ["show", "--json"])
        assert "decimalPlaces" not in _json_payload(shown.output)["profile"]

    def test_future_birth_date(self):
        result = runner.invoke(app, ["set-profile", "--birth-date", "2999-01-01"])

        assert result.exit_code == 2
        assert "future" in result.output

    def test_unknown_surface(self, tmp_path):
        result = runner.invoke(
            app, ["render", "huge", "--output", str(tmp_path / "x.png")]
        )

        assert result.exit_code == 2
        assert "Unknown surface" in result.output
        assert not (tmp_path / "x.png").exists()


class TestRenderAndRefresh:
    def test_render_writes_png(self, tmp_path):
        _save_profile()
        target = tmp_path / "medium.png"

        result = runner.invoke(
            app,
            [
                "render",
                "medium",
                "--width",
                "230",
                "--height",
                "140",
                "--output",
                str(target),
                "--at",
                "2026-02-20",
            ],
        )

        assert result.exit_code == 0, result.output
        assert target.exists()
        assert str(target) in result.output

    def test_next_refresh(self):
        result = runner.invoke(app, ["next-refresh", "--at", "2026-02-20"])

        assert result.exit_code == 0, result.output
        assert result.output.strip() == "2026-02-23T00:00:00"
