"""End-to-end tests for the ledger CLI."""

from datetime import datetime
from pathlib import Path

import pytest
from typer.testing import CliRunner

from ledger.cli import app
from ledger.commands.views import month_command, week_command, year_command
from ledger.config import get_config_path

runner = CliRunner()


def fixed_clock() -> datetime:
    return datetime(2024, 3, 6, 12, 0, 0)


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG config and data directories into a temporary directory."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    return tmp_path


class TestInit:
    """Tests for ledger init."""

    def test_creates_config_and_database(self, isolated_home: Path) -> None:
        result = runner.invoke(app, ["init"])

        assert result.exit_code == 0
        assert get_config_path().exists()
        assert (isolated_home / "data" / "ledger" / "ledger.db").exists()

    def test_refuses_to_overwrite(self) -> None:
        runner.invoke(app, ["init"])
        result = runner.invoke(app, ["init"])

        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_force_overwrites(self) -> None:
        runner.invoke(app, ["init"])
        result = runner.invoke(app, ["init", "--force"])

        assert result.exit_code == 0


class TestExpenses:
    """Tests for adding, editing and removing expenses."""

    def test_add_and_show_day(self) -> None:
        assert runner.invoke(app, ["add", "12.50", "-c", "food", "-d", "2024-03-05"]).exit_code == 0
        assert runner.invoke(app, ["add", "7", "-c", "transport", "-d", "2024-03-05"]).exit_code == 0

        result = runner.invoke(app, ["day", "--date", "2024-03-05"])

        assert result.exit_code == 0
        assert "$19.50" in result.output
        assert "64%" in result.output
        assert "36%" in result.output

    def test_invalid_amount(self) -> None:
        result = runner.invoke(app, ["add", "abc"])

        assert result.exit_code == 1
        assert "Enter a valid amount" in result.output

    def test_out_of_range_amount(self) -> None:
        result = runner.invoke(app, ["add", "1e30"])

        assert result.exit_code == 1
        assert "Enter a valid amount" in result.output

    def test_future_date(self) -> None:
        result = runner.invoke(app, ["add", "5", "--date", "2999-01-01"])

        assert result.exit_code == 1
        assert "in the future" in result.output

    def test_delete_missing(self) -> None:
        result = runner.invoke(app, ["delete", "12345"])

        assert result.exit_code == 0
        assert "No expense with id 12345" in result.output

    def test_edit_missing(self) -> None:
        result = runner.invoke(app, ["edit", "12345", "--amount", "3"])

        assert result.exit_code == 1

    def test_clear_requires_confirmation(self) -> None:
        runner.invoke(app, ["add", "5", "-d", "2024-03-05"])

        cancelled = runner.invoke(app, ["clear"], input="n\n")
        assert "Cancelled" in cancelled.output

        cleared = runner.invoke(app, ["clear", "--yes"])
        assert cleared.exit_code == 0
        assert "Cleared 1 expenses" in cleared.output


class TestSettings:
    """Tests for income and currency commands."""

    def test_set_income(self) -> None:
        result = runner.invoke(app, ["income", "1000", "--month", "2024-03"])

        assert result.exit_code == 0
        assert "$1000.00" in result.output

    def test_negative_income_clears(self) -> None:
        result = runner.invoke(app, ["income", "--month", "2024-03", "--", "-5"])

        assert result.exit_code == 0
        assert "cleared" in result.output

    def test_unpadded_month_normalized(self) -> None:
        runner.invoke(app, ["income", "300", "--month", "2024-3"])
        runner.invoke(app, ["add", "50", "-d", "2024-03-05"])

        result = runner.invoke(app, ["day", "--date", "2024-03-05"])

        assert "$300.00" in result.output

    def test_invalid_month(self) -> None:
        result = runner.invoke(app, ["income", "10", "--month", "March"])

        assert result.exit_code == 1

    def test_set_currency(self) -> None:
        result = runner.invoke(app, ["currency", "eur"])

        assert result.exit_code == 0
        assert "Currency set to EUR" in result.output

    def test_unknown_currency(self) -> None:
        result = runner.invoke(app, ["currency", "XYZ"])

        assert result.exit_code == 1
        assert "Unknown currency" in result.output

    def test_list_currencies(self) -> None:
        result = runner.invoke(app, ["currency"])

        assert result.exit_code == 0
        assert "IDR" in result.output


class TestViews:
    """Tests for the week, month and year views with a fixed clock."""

    @pytest.fixture(autouse=True)
    def seeded(self) -> None:
        runner.invoke(app, ["add", "20", "-c", "food", "-d", "2024-03-03"])
        runner.invoke(app, ["add", "35", "-c", "entertainment", "-d", "2024-03-02"])
        runner.invoke(app, ["add", "300", "-c", "bills", "-d", "2024-03-04"])

    def test_week_shows_peak_day_without_income(self, capsys: pytest.CaptureFixture[str]) -> None:
        week_command(0, clock=fixed_clock)
        output = capsys.readouterr().out

        assert "Mar 3 – Mar 9" in output
        assert "Peak day" in output
        assert "$320.00" in output

    def test_week_shows_budget_with_income(self, capsys: pytest.CaptureFixture[str]) -> None:
        runner.invoke(app, ["income", "1000", "--month", "2024-03"])
        week_command(0, clock=fixed_clock)
        output = capsys.readouterr().out

        assert "Est. budget left" in output
        assert "over" in output

    def test_month_over_budget(self, capsys: pytest.CaptureFixture[str]) -> None:
        runner.invoke(app, ["income", "300", "--month", "2024-03"])
        month_command(0, clock=fixed_clock)
        output = capsys.readouterr().out

        assert "March 2024" in output
        assert "Over budget by $55.00" in output

    def test_year_peak_month(self, capsys: pytest.CaptureFixture[str]) -> None:
        year_command(0, clock=fixed_clock)
        output = capsys.readouterr().out

        assert "2024" in output
        assert "Peak month" in output
        assert "$355.00 (Mar)" in output
