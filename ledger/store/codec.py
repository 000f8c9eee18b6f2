"""JSON encoding of the persisted expense collection and settings."""

import json
import logging
from decimal import Decimal, InvalidOperation
from typing import Any

from ledger.dates import date_key, month_key, parse_date_key, parse_month_key
from ledger.domain.expenses import coerce_income, quantize, resolve_category
from ledger.domain.models import (
    DEFAULT_CURRENCY,
    CurrencyCode,
    Expense,
    Money,
    MonthKey,
    Settings,
    is_known_currency,
)

logger = logging.getLogger(__name__)


class CorruptDataError(ValueError):
    """Raised when a persisted blob cannot be decoded."""


def _number(value: Decimal) -> int | float:
    """Render a Decimal as the JSON number the stored format uses."""
    if value == value.to_integral_value():
        return int(value)
    return float(value)


def _loads(payload: str) -> Any:
    try:
        return json.loads(payload, parse_float=Decimal)
    except json.JSONDecodeError as e:
        raise CorruptDataError(f"Invalid JSON: {e}") from e


def expense_to_dict(expense: Expense) -> dict[str, Any]:
    return {
        "id": expense.id,
        "amount": _number(expense.amount),
        "category": expense.category,
        "note": expense.note,
        "date": expense.date,
    }


def expense_from_dict(record: dict[str, Any]) -> Expense:
    """Build an Expense from a stored record.

    Raises:
        CorruptDataError: If a field is missing or has the wrong shape.
    """
    try:
        raw_id = record["id"]
        raw_amount = record["amount"]
        raw_date = record["date"]
    except (KeyError, TypeError) as e:
        raise CorruptDataError(f"Missing field in expense record: {e}") from e

    if isinstance(raw_id, bool) or not isinstance(raw_id, (int, Decimal)) or raw_id != int(raw_id):
        raise CorruptDataError(f"Invalid expense id: {raw_id!r}")
    if isinstance(raw_amount, bool) or not isinstance(raw_amount, (int, Decimal)):
        raise CorruptDataError(f"Invalid expense amount: {raw_amount!r}")
    try:
        amount = quantize(Decimal(raw_amount))
    except InvalidOperation as e:
        raise CorruptDataError(f"Invalid expense amount: {raw_amount!r}") from e
    if amount <= 0:
        raise CorruptDataError(f"Invalid expense amount: {raw_amount!r}")
    try:
        day = date_key(parse_date_key(raw_date))
    except (TypeError, ValueError) as e:
        raise CorruptDataError(f"Invalid expense date: {raw_date!r}") from e

    note = record.get("note")
    return Expense(
        id=int(raw_id),
        amount=amount,
        category=resolve_category(record.get("category")),
        note=note if isinstance(note, str) else "",
        date=day,
    )


def encode_expenses(expenses: list[Expense]) -> str:
    return json.dumps([expense_to_dict(e) for e in expenses], ensure_ascii=False)


def decode_expenses(payload: str) -> list[Expense]:
    """Decode the stored expense collection.

    Records that fail validation are skipped and logged; the rest are kept.

    Raises:
        CorruptDataError: If the payload is not a JSON array.
    """
    data = _loads(payload)
    if not isinstance(data, list):
        raise CorruptDataError("Expense collection must be a JSON array")

    expenses: list[Expense] = []
    seen: set[int] = set()
    for record in data:
        try:
            expense = expense_from_dict(record)
        except CorruptDataError as e:
            logger.warning("Skipping stored expense %r: %s", record, e)
            continue
        if expense.id in seen:
            logger.warning("Skipping duplicate stored expense id %s", expense.id)
            continue
        seen.add(expense.id)
        expenses.append(expense)
    return expenses


def encode_settings(settings: Settings) -> str:
    return json.dumps(
        {
            "currency": settings.currency,
            "incomes": {month: _number(amount) for month, amount in settings.incomes.items()},
        },
        ensure_ascii=False,
    )


def decode_settings(payload: str, default_currency: str = DEFAULT_CURRENCY.code) -> Settings:
    """Decode the stored settings object.

    Unknown currencies fall back to `default_currency`; malformed month keys
    are dropped and income values are coerced to non-negative amounts.

    Raises:
        CorruptDataError: If the payload is not a JSON object.
    """
    data = _loads(payload)
    if not isinstance(data, dict):
        raise CorruptDataError("Settings must be a JSON object")

    currency = data.get("currency")
    if not isinstance(currency, str) or not is_known_currency(currency):
        currency = default_currency

    raw_incomes = data.get("incomes") or {}
    if not isinstance(raw_incomes, dict):
        raise CorruptDataError("Settings incomes must be a JSON object")

    incomes: dict[MonthKey, Money] = {}
    for month, value in raw_incomes.items():
        try:
            key = month_key(*parse_month_key(month))
        except ValueError:
            logger.warning("Skipping income for malformed month %r", month)
            continue
        incomes[key] = coerce_income(value)

    return Settings(currency=CurrencyCode(currency), incomes=incomes)
