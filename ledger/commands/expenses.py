"""Commands for adding, editing, deleting and clearing expenses."""

import sys
from pathlib import Path

import typer

from ledger.commands.context import console, open_ledger, warn_if_unsaved
from ledger.dates import Clock, date_key, system_clock
from ledger.domain.expenses import build_expense, edit_expense, new_expense_id
from ledger.domain.formatting import format_money
from ledger.domain.models import Expense, get_category


def describe_expense(expense: Expense, currency: str) -> str:
    category = get_category(expense.category)
    return f"{category.emoji} {expense.note} {format_money(expense.amount, currency)} on {expense.date}"


def add_command(
    amount: str,
    category: str = "food",
    note: str | None = None,
    day: str | None = None,
    config_path: Path | None = None,
    clock: Clock = system_clock,
) -> None:
    """Add a new expense."""
    now = clock()
    today = now.date()

    try:
        expense = build_expense(
            amount=amount,
            category=category,
            note=note,
            day=day or date_key(today),
            today=today,
            expense_id=new_expense_id(now),
        )
    except ValueError as e:
        console.print(f"[red]{e}[/red]", style="bold")
        sys.exit(1)

    state = open_ledger(config_path)
    while state.get(expense.id) is not None:
        # Two adds within the same millisecond must not replace each other
        expense = Expense(expense.id + 1, expense.amount, expense.category, expense.note, expense.date)
    state.add_or_replace(expense)

    console.print(f"[green]✓[/green] Added #{expense.id}: {describe_expense(expense, state.currency)}")
    warn_if_unsaved(state)


def edit_command(
    expense_id: int,
    amount: str | None = None,
    category: str | None = None,
    note: str | None = None,
    day: str | None = None,
    config_path: Path | None = None,
    clock: Clock = system_clock,
) -> None:
    """Edit an existing expense, keeping its id."""
    state = open_ledger(config_path)
    existing = state.get(expense_id)
    if existing is None:
        console.print(f"[red]No expense with id {expense_id}[/red]", style="bold")
        sys.exit(1)

    try:
        updated = edit_expense(existing, clock().date(), amount=amount, category=category, note=note, day=day)
    except ValueError as e:
        console.print(f"[red]{e}[/red]", style="bold")
        sys.exit(1)

    state.add_or_replace(updated)
    console.print(f"[green]✓[/green] Updated #{updated.id}: {describe_expense(updated, state.currency)}")
    warn_if_unsaved(state)


def delete_command(expense_id: int, config_path: Path | None = None) -> None:
    """Delete an expense by id."""
    state = open_ledger(config_path)
    if state.delete(expense_id):
        console.print(f"[green]✓[/green] Deleted #{expense_id}")
    else:
        console.print(f"[yellow]No expense with id {expense_id}[/yellow]")
    warn_if_unsaved(state)


def clear_command(yes: bool = False, config_path: Path | None = None) -> None:
    """Delete every expense. Incomes and currency are kept."""
    state = open_ledger(config_path)
    count = len(state.expenses)

    if count == 0:
        console.print("[dim]No expenses to clear[/dim]")
        return

    if not yes and not typer.confirm(f"Delete all {count} expenses? This cannot be undone", default=False):
        console.print("[dim]Cancelled[/dim]")
        return

    state.clear_all()
    console.print(f"[green]✓[/green] Cleared {count} expenses")
    warn_if_unsaved(state)
