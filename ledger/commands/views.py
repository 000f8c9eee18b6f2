"""Day, week, month and year views of spending."""

import sys
from decimal import Decimal
from pathlib import Path

from rich.table import Table

from ledger.commands.context import console, open_ledger
from ledger.dates import (
    Clock,
    date_key,
    day_label,
    month_key_of,
    month_range,
    parse_date_key,
    shift_month,
    system_clock,
    week_label,
)
from ledger.domain.aggregate import (
    CategoryShare,
    budget_level,
    spent_percentage,
    summarize_day,
    summarize_month,
    summarize_week,
    summarize_year,
)
from ledger.domain.formatting import bar_length, format_compact, format_money, format_signed
from ledger.domain.models import Money, get_category

LEVEL_COLORS = {"ok": "green", "warning": "yellow", "danger": "red"}


def render_breakdown(breakdown: list[CategoryShare], currency: str, bar_width: int = 24) -> None:
    """Render category totals with their share of the grand total."""
    if not breakdown:
        console.print("[dim]No data yet.[/dim]")
        return

    console.print("[bold]By category:[/bold]\n")
    max_amount = breakdown[0].total
    for share in breakdown:
        category = get_category(share.category)
        bar = "█" * bar_length(share.total, max_amount, bar_width)
        console.print(
            f"  {category.emoji} {category.label:20} {share.percentage:>4.0f}% "
            f"{format_money(share.total, currency):>14} [magenta]{bar}[/magenta]"
        )


def render_income_banner(income: Money, spent: Money, currency: str, label: str) -> None:
    """Render a month's income, what is left and how much of it is spent."""
    if income <= 0:
        console.print(f"[dim]💰 No income set for {label}. Use 'ledger income AMOUNT' to set one.[/dim]\n")
        return

    left = income - spent
    pct = spent_percentage(income, spent)
    color = LEVEL_COLORS[budget_level(pct)]
    left_color = "red" if left < 0 else "green"

    console.print(
        f"{label} income: [bold]{format_money(income, currency)}[/bold]   "
        f"Income left: [{left_color}]{format_signed(left, currency)}[/{left_color}]   "
        f"[{color}]{pct:.1f}% spent[/{color}]"
    )
    if left < 0:
        console.print(f"[red]⚠️  Over budget by {format_money(abs(left), currency)}[/red]")
    console.print()


def _stat(label: str, value: str) -> str:
    return f"[dim]{label}:[/dim] [bold]{value}[/bold]"


def day_command(day: str | None = None, config_path: Path | None = None, clock: Clock = system_clock) -> None:
    """Show the expenses recorded on a day."""
    today = clock().date()
    try:
        selected = parse_date_key(day) if day else today
    except ValueError:
        console.print(f"[red]Invalid date '{day}', expected YYYY-MM-DD[/red]", style="bold")
        sys.exit(1)
    if selected > today:
        console.print(f"[red]Date {date_key(selected)} is in the future[/red]", style="bold")
        sys.exit(1)

    state = open_ledger(config_path)
    summary = summarize_day(state.expenses, state.incomes, date_key(selected))
    _, _, month_label = month_range(month_key_of(selected))

    console.print(f"[bold cyan]{day_label(selected, today)}[/bold cyan]\n")
    render_income_banner(summary.month_income, summary.month_spent, state.currency, month_label)

    if not summary.expenses:
        console.print("[dim]No expenses on this day[/dim]")
        return

    table = Table(title=f"{len(summary.expenses)} expenses")
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Category", style="magenta")
    table.add_column("Note", style="white")
    table.add_column("Amount", justify="right")

    for expense in summary.expenses:
        category = get_category(expense.category)
        table.add_row(
            str(expense.id),
            f"{category.emoji} {category.label}",
            expense.note,
            f"[red]{format_money(expense.amount, state.currency)}[/red]",
        )

    console.print(table)
    console.print(f"\n[bold]Total:[/bold] {format_money(summary.total, state.currency)}\n")
    render_breakdown(summary.breakdown, state.currency)


def week_command(offset: int = 0, config_path: Path | None = None, clock: Clock = system_clock) -> None:
    """Show daily spending for a Sunday-to-Saturday week."""
    state = open_ledger(config_path)
    summary = summarize_week(state.expenses, state.incomes, clock().date(), offset)
    currency = state.currency

    console.print(f"[bold cyan]{week_label(summary.days)}[/bold cyan]\n")

    stats = [
        _stat("Week total", format_money(summary.total, currency)),
        _stat("Daily avg", format_money(summary.daily_average, currency)),
    ]
    if summary.budget_left is not None:
        color = "red" if summary.budget_left < 0 else "green"
        status = "over" if summary.budget_left < 0 else "remaining"
        stats.append(
            f"[dim]Est. budget left:[/dim] [{color}]{format_signed(summary.budget_left, currency)}[/{color}] ({status})"
        )
    elif summary.peak is not None:
        stats.append(_stat("Peak day", f"{format_money(summary.peak.total, currency)} ({summary.peak.label})"))
    console.print("\n".join(stats) + "\n")

    max_amount = summary.peak.total if summary.peak else Decimal(0)
    table = Table(show_header=True)
    table.add_column("Day", style="cyan")
    table.add_column("Date", style="dim")
    table.add_column("Spent", justify="right")
    table.add_column("")

    for day, point in zip(summary.days, summary.series):
        is_peak = point.total > 0 and point.total == max_amount
        bar_style = "magenta" if is_peak else "yellow"
        bar = "█" * bar_length(point.total, max_amount, 30)
        table.add_row(point.label, day, format_money(point.total, currency), f"[{bar_style}]{bar}[/{bar_style}]")

    console.print(table)
    console.print()
    render_breakdown(summary.breakdown, currency)


def month_command(offset: int = 0, config_path: Path | None = None, clock: Clock = system_clock) -> None:
    """Show spending for a month against its income."""
    state = open_ledger(config_path)
    month = shift_month(clock().date(), offset)
    summary = summarize_month(state.expenses, state.incomes, month)
    currency = state.currency
    _, _, label = month_range(month)

    console.print(f"[bold cyan]{label}[/bold cyan]")
    console.print(f"[dim]{len(summary.expenses)} expenses · {summary.active_days} active days[/dim]\n")

    income_display = format_money(summary.income, currency) if summary.income > 0 else "Not set"
    if summary.income > 0:
        color = "red" if summary.left < 0 else "green"
        left_display = f"[{color}]{format_signed(summary.left, currency)}[/{color}]"
    else:
        left_display = "[dim]—[/dim]"
    console.print(
        "\n".join(
            [
                _stat("Month spent", format_money(summary.total, currency)),
                _stat("Month's income", income_display),
                f"[dim]Income left:[/dim] {left_display}",
            ]
        )
    )
    if summary.income > 0:
        color = LEVEL_COLORS[budget_level(summary.spent_percentage)]
        console.print(f"[{color}]{summary.spent_percentage:.1f}% spent[/{color}]")
        if summary.left < 0:
            console.print(f"[red]⚠️  Over budget by {format_money(abs(summary.left), currency)}[/red]")
    console.print()

    if summary.expenses:
        final = summary.cumulative[-1].total
        table = Table(title="Cumulative spending")
        table.add_column("Day", style="cyan", justify="right")
        table.add_column("Running total", justify="right")
        table.add_column("")

        previous = Decimal(0)
        for point in summary.cumulative:
            if point.total == previous:
                continue
            previous = point.total
            bar = "█" * bar_length(point.total, max(final, summary.income), 30)
            table.add_row(point.label, format_money(point.total, currency), f"[yellow]{bar}[/yellow]")

        console.print(table)
        console.print()

    render_breakdown(summary.breakdown, currency)


def year_command(offset: int = 0, config_path: Path | None = None, clock: Clock = system_clock) -> None:
    """Show monthly spending across a year."""
    state = open_ledger(config_path)
    year = clock().date().year - offset
    summary = summarize_year(state.expenses, state.incomes, year)
    currency = state.currency

    console.print(f"[bold cyan]{year}[/bold cyan]\n")

    income_note = (
        f"{summary.months_with_income} months set" if summary.months_with_income else "set per month with 'ledger income'"
    )
    stats = [
        _stat("Year spent", format_money(summary.total, currency)),
        f"{_stat('Total income', format_money(summary.income, currency))} [dim]({income_note})[/dim]",
    ]
    if summary.income > 0:
        color = "red" if summary.left < 0 else "green"
        status = "over budget" if summary.left < 0 else "remaining"
        stats.append(f"[dim]Year left:[/dim] [{color}]{format_signed(summary.left, currency)}[/{color}] ({status})")
    elif summary.peak is not None:
        stats.append(_stat("Peak month", f"{format_money(summary.peak.total, currency)} ({summary.peak.label})"))
    console.print("\n".join(stats) + "\n")

    max_amount = summary.peak.total if summary.peak else Decimal(0)
    table = Table(title="Monthly spending")
    table.add_column("Month", style="cyan")
    table.add_column("Spent", justify="right")
    table.add_column("")
    for point in summary.series:
        bar = "█" * bar_length(point.total, max_amount, 30)
        table.add_row(point.label, format_compact(point.total, currency), f"[yellow]{bar}[/yellow]")
    console.print(table)
    console.print()

    if summary.months_with_income:
        budget_table = Table(title="Income vs spending")
        budget_table.add_column("Month", style="cyan")
        budget_table.add_column("Income", justify="right")
        budget_table.add_column("Spent", justify="right")
        budget_table.add_column("Left", justify="right")
        for row in summary.budget_rows:
            if row.left is None:
                left_display = "[dim]no income set[/dim]"
            else:
                color = LEVEL_COLORS[budget_level(row.spent_percentage)]
                word = "over" if row.left < 0 else "left"
                left_display = f"[{color}]{format_signed(row.left, currency)} {word}[/{color}]"
            budget_table.add_row(
                row.label,
                format_money(row.income, currency) if row.income > 0 else "[dim]-[/dim]",
                format_money(row.spent, currency),
                left_display,
            )
        console.print(budget_table)
        console.print()

    render_breakdown(summary.breakdown, currency)
