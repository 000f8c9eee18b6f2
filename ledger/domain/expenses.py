"""Pure functions for building and validating expenses.

This module contains the functional core for expense entry:
- No I/O operations (no database, no console, no files)
- Validation failures are raised as ValueError subclasses
- Identity and "today" are passed in by the caller
"""

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from ledger.dates import date_key, parse_date_key
from ledger.domain.models import CENT, ZERO, CategoryId, DateKey, Expense, Money, get_category


class InvalidAmountError(ValueError):
    """Raised when an amount is missing, non-numeric or not positive."""


class FutureDateError(ValueError):
    """Raised when an expense is dated after today."""


def _to_decimal(raw: object) -> Decimal | None:
    if raw is None or isinstance(raw, bool):
        return None
    try:
        value = Decimal(str(raw).strip())
    except InvalidOperation:
        return None
    if not value.is_finite():
        return None
    try:
        return quantize(value)
    except InvalidOperation:
        return None


def quantize(value: Decimal) -> Money:
    """Round to cents, halves away from zero.

    Raises:
        InvalidOperation: If the value has more digits than the context precision.
    """
    return Money(value.quantize(CENT, rounding=ROUND_HALF_UP))


def parse_amount(raw: object) -> Money:
    """Parse a user-entered expense amount.

    Args:
        raw: Amount as entered (string or number).

    Returns:
        Amount rounded to two decimal places.

    Raises:
        InvalidAmountError: If the amount is empty, non-numeric or not positive.
    """
    amount = _to_decimal(raw)
    if amount is None or amount <= 0:
        raise InvalidAmountError("Enter a valid amount")
    return Money(amount)


def coerce_income(raw: object) -> Money:
    """Coerce a user-entered income to a non-negative amount.

    Negative, non-numeric and out-of-range input become zero.
    """
    amount = _to_decimal(raw)
    if amount is None or amount <= 0:
        return ZERO
    return Money(amount)


def resolve_category(raw: str | None) -> CategoryId:
    """Return a known category id, falling back to "other"."""
    return get_category(raw or "").id


def new_expense_id(now: datetime) -> int:
    """Derive an expense id from a timestamp (milliseconds since epoch)."""
    return int(now.timestamp() * 1000)


def validate_date(day: str, today: date) -> DateKey:
    """Validate an expense date.

    Raises:
        ValueError: If the date is malformed.
        FutureDateError: If the date is after today.
    """
    parsed = parse_date_key(day)
    if parsed > today:
        raise FutureDateError(f"Date {day} is in the future")
    return date_key(parsed)


def build_expense(
    amount: object,
    category: str | None,
    note: str | None,
    day: str,
    today: date,
    expense_id: int,
) -> Expense:
    """Build a new expense from user input.

    Args:
        amount: Amount as entered.
        category: Category id; unknown ids become "other".
        note: Free text; blank notes default to the category label.
        day: Date in YYYY-MM-DD format.
        today: Current date, used to reject future dates.
        expense_id: Identity for the new record.

    Returns:
        A validated Expense.

    Raises:
        InvalidAmountError: If the amount is not a positive number.
        FutureDateError: If the date is after today.
        ValueError: If the date is malformed.
    """
    parsed_amount = parse_amount(amount)
    category_id = resolve_category(category)
    clean_note = (note or "").strip() or get_category(category_id).label

    return Expense(
        id=expense_id,
        amount=parsed_amount,
        category=category_id,
        note=clean_note,
        date=validate_date(day, today),
    )


def edit_expense(
    existing: Expense,
    today: date,
    amount: object | None = None,
    category: str | None = None,
    note: str | None = None,
    day: str | None = None,
) -> Expense:
    """Build the replacement for an existing expense.

    Fields left as None keep their current value. The id is preserved.
    """
    return build_expense(
        amount=existing.amount if amount is None else amount,
        category=existing.category if category is None else category,
        note=existing.note if note is None else note,
        day=existing.date if day is None else day,
        today=today,
        expense_id=existing.id,
    )
