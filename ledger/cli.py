"""CLI entry point for ledger."""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from ledger.commands.admin import init_command
from ledger.commands.expenses import add_command, clear_command, delete_command, edit_command
from ledger.commands.settings import currency_command, income_command
from ledger.commands.views import day_command, month_command, week_command, year_command

app = typer.Typer(
    name="ledger",
    help="Ledger - track your daily expenses against your monthly income",
    add_completion=False,
)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Ledger - track your daily expenses against your monthly income."""
    configure_logging(verbose)


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
) -> None:
    """Initialize ledger database and configuration."""
    init_command(force)


@app.command()
def add(
    amount: str,
    category: str = typer.Option("food", "--category", "-c", help="Category id (food, transport, shopping, ...)"),
    note: str = typer.Option(None, "--note", "-n", help="Note (defaults to the category name)"),
    date: str = typer.Option(None, "--date", "-d", help="Date (YYYY-MM-DD, default: today)"),
) -> None:
    """Add an expense."""
    add_command(amount, category, note, date)


@app.command()
def edit(
    expense_id: int,
    amount: str = typer.Option(None, "--amount", "-a", help="New amount"),
    category: str = typer.Option(None, "--category", "-c", help="New category id"),
    note: str = typer.Option(None, "--note", "-n", help="New note"),
    date: str = typer.Option(None, "--date", "-d", help="New date (YYYY-MM-DD)"),
) -> None:
    """Edit an expense."""
    edit_command(expense_id, amount, category, note, date)


@app.command()
def delete(expense_id: int) -> None:
    """Delete an expense."""
    delete_command(expense_id)


@app.command()
def clear(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Delete all your expenses (incomes and currency are kept)."""
    clear_command(yes)


@app.command()
def day(
    date: str = typer.Option(None, "--date", "-d", help="Day to show (YYYY-MM-DD, default: today)"),
) -> None:
    """Show your expenses for a day."""
    day_command(date)


@app.command()
def week(
    offset: int = typer.Option(0, "--offset", "-o", min=0, help="Weeks back from the current week"),
) -> None:
    """Show your spending for a week."""
    week_command(offset)


@app.command()
def month(
    offset: int = typer.Option(0, "--offset", "-o", min=0, help="Months back from the current month"),
) -> None:
    """Show your spending for a month."""
    month_command(offset)


@app.command()
def year(
    offset: int = typer.Option(0, "--offset", "-o", min=0, help="Years back from the current year"),
) -> None:
    """Show your spending for a year."""
    year_command(offset)


@app.command()
def income(
    amount: str,
    month: str = typer.Option(None, "--month", "-m", help="Month (YYYY-MM, default: current month)"),
) -> None:
    """Set your income for a month."""
    income_command(amount, month)


@app.command()
def currency(code: str = typer.Argument(None, help="Currency code to use (omit to list currencies)")) -> None:
    """Show or set your display currency."""
    currency_command(code)


if __name__ == "__main__":
    app()
