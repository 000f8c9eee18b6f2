"""Commands for the monthly income and display currency."""

import sys
from pathlib import Path

from rich.table import Table

from ledger.commands.context import console, open_ledger, warn_if_unsaved
from ledger.dates import Clock, month_key, month_key_of, month_range, parse_month_key, system_clock
from ledger.domain.formatting import format_money
from ledger.domain.models import CURRENCIES, is_known_currency


def income_command(
    amount: str,
    month: str | None = None,
    config_path: Path | None = None,
    clock: Clock = system_clock,
) -> None:
    """Set the income for a month (defaults to the current month)."""
    target = month_key_of(clock().date())
    if month:
        try:
            target = month_key(*parse_month_key(month))
        except ValueError:
            console.print(f"[red]Invalid month '{month}', expected YYYY-MM[/red]", style="bold")
            sys.exit(1)

    state = open_ledger(config_path)
    income = state.set_income(target, amount)
    _, _, label = month_range(target)

    if income > 0:
        console.print(f"[green]✓[/green] Income for {label} set to {format_money(income, state.currency)}")
    else:
        console.print(f"[green]✓[/green] Income for {label} cleared")
    warn_if_unsaved(state)


def currency_command(code: str | None = None, config_path: Path | None = None) -> None:
    """Show the available currencies, or set the display currency."""
    state = open_ledger(config_path)

    if code is None:
        table = Table(title="Currencies")
        table.add_column("", justify="center")
        table.add_column("Code", style="cyan")
        table.add_column("Symbol")
        table.add_column("Name", style="white")
        for currency in CURRENCIES:
            marker = "[green]●[/green]" if currency.code == state.currency else ""
            table.add_row(marker, currency.code, currency.symbol, currency.label)
        console.print(table)
        return

    code = code.upper()
    if not is_known_currency(code):
        console.print(f"[red]Unknown currency '{code}'[/red]", style="bold")
        console.print(f"[dim]Choose one of: {', '.join(c.code for c in CURRENCIES)}[/dim]")
        sys.exit(1)

    state.set_currency(code)
    console.print(f"[green]✓[/green] Currency set to {code}")
    warn_if_unsaved(state)
