"""Pure functions for spending aggregation across days, weeks, months and years.

This module contains the functional core for the ledger views:
- No I/O operations (no database, no console, no files)
- No side effects; input collections are never mutated
- Pure data transformations
- Easy to test

All monetary amounts are Decimals (Money type).
"""

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal

from ledger.dates import (
    MONTH_NAMES,
    date_key,
    day_name,
    days_in_month,
    month_key,
    month_key_of,
    parse_date_key,
    week_start,
)
from ledger.domain.models import CATEGORIES, ZERO, CategoryId, DateKey, Expense, Money, MonthKey

# Approximate number of weeks in a month, used to derive a weekly budget
WEEKS_PER_MONTH = Decimal("4.33")

WARNING_PERCENTAGE = 70.0
DANGER_PERCENTAGE = 90.0


@dataclass(frozen=True)
class SeriesPoint:
    """One labelled total in a time series."""

    label: str
    total: Money


@dataclass(frozen=True)
class CategoryShare:
    """Spending of one category within a subset of expenses."""

    category: CategoryId
    total: Money
    percentage: float


@dataclass(frozen=True)
class DaySummary:
    """Immutable summary for a single day."""

    day: DateKey
    expenses: list[Expense]
    total: Money
    breakdown: list[CategoryShare]
    month_income: Money
    month_spent: Money
    month_left: Money


@dataclass(frozen=True)
class WeekSummary:
    """Immutable summary for a Sunday-to-Saturday week."""

    days: list[DateKey]
    series: list[SeriesPoint]
    total: Money
    daily_average: Money
    peak: SeriesPoint | None
    weekly_budget: Money | None
    budget_left: Money | None
    breakdown: list[CategoryShare]


@dataclass(frozen=True)
class MonthSummary:
    """Immutable summary for a calendar month."""

    month: MonthKey
    expenses: list[Expense]
    total: Money
    income: Money
    left: Money
    days_in_month: int
    active_days: int
    spent_percentage: float
    cumulative: list[SeriesPoint]
    breakdown: list[CategoryShare]


@dataclass(frozen=True)
class MonthBudgetRow:
    """Income against spending for one month of a year."""

    label: str
    income: Money
    spent: Money
    left: Money | None
    spent_percentage: float


@dataclass(frozen=True)
class YearSummary:
    """Immutable summary for a calendar year."""

    year: int
    total: Money
    income: Money
    months_with_income: int
    left: Money
    series: list[SeriesPoint]
    peak: SeriesPoint | None
    budget_rows: list[MonthBudgetRow]
    breakdown: list[CategoryShare]


def sum_amounts(expenses: Iterable[Expense]) -> Money:
    """Sum expense amounts."""
    return Money(sum((e.amount for e in expenses), ZERO))


def filter_day(expenses: Iterable[Expense], day: str) -> list[Expense]:
    """Expenses on a given day, most recently added first.

    Args:
        expenses: Expense collection.
        day: Day in YYYY-MM-DD format.

    Returns:
        Matching expenses sorted by id descending.
    """
    return sorted((e for e in expenses if e.date == day), key=lambda e: e.id, reverse=True)


def filter_month(expenses: Iterable[Expense], month: str) -> list[Expense]:
    """Expenses whose date falls in the YYYY-MM month."""
    prefix = f"{month}-"
    return [e for e in expenses if e.date.startswith(prefix)]


def filter_year(expenses: Iterable[Expense], year: int) -> list[Expense]:
    """Expenses whose date falls in the given year."""
    prefix = f"{year:04d}-"
    return [e for e in expenses if e.date.startswith(prefix)]


def filter_days(expenses: Iterable[Expense], days: Sequence[str]) -> list[Expense]:
    """Expenses whose date is one of the given days."""
    wanted = set(days)
    return [e for e in expenses if e.date in wanted]


def totals_by_day(expenses: Iterable[Expense]) -> dict[DateKey, Money]:
    """Total spending for every distinct date present."""
    totals: dict[DateKey, Money] = {}
    for expense in expenses:
        totals[expense.date] = Money(totals.get(expense.date, ZERO) + expense.amount)
    return totals


def week_days(today: date, offset: int = 0) -> list[DateKey]:
    """Seven day keys of a Sunday-to-Saturday week.

    Args:
        today: Reference date.
        offset: Weeks back from the current week (0 = current week).

    Returns:
        Day keys in window order, Sunday first.
    """
    start = week_start(today, offset)
    return [date_key(start + timedelta(days=i)) for i in range(7)]


def week_series(expenses: Sequence[Expense], days: Sequence[str]) -> list[SeriesPoint]:
    """Daily totals for each day of a week, labelled by day name."""
    totals = totals_by_day(filter_days(expenses, days))
    return [SeriesPoint(day_name(parse_date_key(d)), totals.get(DateKey(d), ZERO)) for d in days]


def cumulative_series(expenses: Iterable[Expense], month: MonthKey) -> list[SeriesPoint]:
    """Running total of spending for each day of a month.

    The series has one point per calendar day, is non-decreasing, and its
    final value equals the month total.
    """
    totals = totals_by_day(filter_month(expenses, month))
    running = ZERO
    series: list[SeriesPoint] = []
    for day in range(1, days_in_month(month) + 1):
        running = Money(running + totals.get(DateKey(f"{month}-{day:02d}"), ZERO))
        series.append(SeriesPoint(str(day), running))
    return series


def year_series(expenses: Iterable[Expense], year: int) -> list[SeriesPoint]:
    """Monthly spending totals for January through December."""
    year_expenses = filter_year(expenses, year)
    series: list[SeriesPoint] = []
    for index, name in enumerate(MONTH_NAMES, start=1):
        series.append(SeriesPoint(name, sum_amounts(filter_month(year_expenses, month_key(year, index)))))
    return series


def category_breakdown(expenses: Iterable[Expense]) -> list[CategoryShare]:
    """Group spending by category.

    Zero-sum categories are dropped. Categories are sorted by total
    descending; ties keep the category table order.

    Returns:
        List of CategoryShare with each category's percentage of the grand total.
    """
    totals: dict[CategoryId, Money] = {c.id: ZERO for c in CATEGORIES}
    for expense in expenses:
        totals[expense.category] = Money(totals.get(expense.category, ZERO) + expense.amount)

    nonzero = [(cat, total) for cat, total in totals.items() if total > 0]
    nonzero.sort(key=lambda x: x[1], reverse=True)

    grand = sum((total for _, total in nonzero), ZERO)
    if grand <= 0:
        return []

    return [CategoryShare(cat, total, float(total / grand * 100)) for cat, total in nonzero]


def budget_remainder(income: Money, spent: Money) -> Money:
    """Income left for a period (negative when over budget)."""
    return Money(income - spent)


def is_over_budget(income: Money, spent: Money) -> bool:
    return budget_remainder(income, spent) < 0


def spent_percentage(income: Money, spent: Money) -> float:
    """Percentage of income spent, capped at 100 (0 when income is unset)."""
    if income <= 0:
        return 0.0
    return min(100.0, float(spent / income * 100))


def budget_level(percentage: float) -> str:
    """Classify a spent percentage as "ok", "warning" or "danger"."""
    if percentage >= DANGER_PERCENTAGE:
        return "danger"
    if percentage >= WARNING_PERCENTAGE:
        return "warning"
    return "ok"


def weekly_budget(incomes: Mapping[str, Money], days: Sequence[str]) -> Money | None:
    """Estimate a weekly budget from the incomes of the months a week touches.

    Args:
        incomes: Income per month key.
        days: Day keys of the week.

    Returns:
        Average monthly income divided by WEEKS_PER_MONTH, or None when no
        touched month has an income.
    """
    touched = sorted({d[:7] for d in days})
    if not touched:
        return None
    average = sum((incomes.get(m, ZERO) for m in touched), ZERO) / len(touched)
    if average <= 0:
        return None
    return Money((average / WEEKS_PER_MONTH).quantize(Decimal("0.01")))


def peak(series: Sequence[SeriesPoint]) -> SeriesPoint | None:
    """Point with the highest total; ties resolve to the first occurrence."""
    if not series:
        return None
    return max(series, key=lambda p: p.total)


def summarize_day(expenses: Sequence[Expense], incomes: Mapping[str, Money], day: str) -> DaySummary:
    """Summarize spending for a day alongside its month's budget."""
    day_expenses = filter_day(expenses, day)
    month = month_key_of(parse_date_key(day))
    month_income = incomes.get(month, ZERO)
    month_spent = sum_amounts(filter_month(expenses, month))

    return DaySummary(
        day=DateKey(day),
        expenses=day_expenses,
        total=sum_amounts(day_expenses),
        breakdown=category_breakdown(day_expenses),
        month_income=month_income,
        month_spent=month_spent,
        month_left=budget_remainder(month_income, month_spent),
    )


def summarize_week(
    expenses: Sequence[Expense],
    incomes: Mapping[str, Money],
    today: date,
    offset: int = 0,
) -> WeekSummary:
    """Summarize spending for the week `offset` weeks before the current one."""
    days = week_days(today, offset)
    week_expenses = filter_days(expenses, days)
    series = week_series(week_expenses, days)
    total = sum_amounts(week_expenses)
    budget = weekly_budget(incomes, days)

    return WeekSummary(
        days=days,
        series=series,
        total=total,
        daily_average=Money((total / 7).quantize(Decimal("0.01"))),
        peak=peak(series),
        weekly_budget=budget,
        budget_left=budget_remainder(budget, total) if budget is not None else None,
        breakdown=category_breakdown(week_expenses),
    )


def summarize_month(expenses: Sequence[Expense], incomes: Mapping[str, Money], month: MonthKey) -> MonthSummary:
    """Summarize spending for a month against its declared income."""
    month_expenses = filter_month(expenses, month)
    total = sum_amounts(month_expenses)
    income = incomes.get(month, ZERO)

    return MonthSummary(
        month=month,
        expenses=month_expenses,
        total=total,
        income=income,
        left=budget_remainder(income, total),
        days_in_month=days_in_month(month),
        active_days=len({e.date for e in month_expenses}),
        spent_percentage=spent_percentage(income, total),
        cumulative=cumulative_series(month_expenses, month),
        breakdown=category_breakdown(month_expenses),
    )


def summarize_year(expenses: Sequence[Expense], incomes: Mapping[str, Money], year: int) -> YearSummary:
    """Summarize spending for a year with per-month budget rows."""
    year_expenses = filter_year(expenses, year)
    series = year_series(year_expenses, year)
    month_incomes = [incomes.get(month_key(year, i), ZERO) for i in range(1, 13)]
    income = Money(sum(month_incomes, ZERO))
    total = sum_amounts(year_expenses)

    rows: list[MonthBudgetRow] = []
    for point, month_income in zip(series, month_incomes):
        if month_income <= 0 and point.total <= 0:
            continue
        rows.append(
            MonthBudgetRow(
                label=point.label,
                income=month_income,
                spent=point.total,
                left=budget_remainder(month_income, point.total) if month_income > 0 else None,
                spent_percentage=spent_percentage(month_income, point.total),
            )
        )

    return YearSummary(
        year=year,
        total=total,
        income=income,
        months_with_income=sum(1 for m in month_incomes if m > 0),
        left=budget_remainder(income, total),
        series=series,
        peak=peak(series),
        budget_rows=rows,
        breakdown=category_breakdown(year_expenses),
    )
