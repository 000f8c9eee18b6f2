"""Domain type definitions for ledger.

These NewTypes provide semantic clarity and help with type checking:
- Money: Decimal amount quantized to 2 places
- MonthKey: Month in YYYY-MM format
- DateKey: Day in YYYY-MM-DD format
- CategoryId: Identifier of a spending category
- CurrencyCode: ISO code of the display currency
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import NewType

# Money amounts are Decimals with two places to avoid floating point drift
Money = NewType("Money", Decimal)

# Month is always in YYYY-MM format (e.g., "2025-01")
MonthKey = NewType("MonthKey", str)

# Day is always in YYYY-MM-DD format (e.g., "2025-01-31")
DateKey = NewType("DateKey", str)

CategoryId = NewType("CategoryId", str)

CurrencyCode = NewType("CurrencyCode", str)

CENT = Decimal("0.01")
ZERO = Money(Decimal("0.00"))


@dataclass(frozen=True)
class Category:
    """Immutable spending category."""

    id: CategoryId
    label: str
    emoji: str


@dataclass(frozen=True)
class Currency:
    """Immutable display currency."""

    code: CurrencyCode
    symbol: str
    label: str


@dataclass(frozen=True)
class Expense:
    """Immutable expense record."""

    id: int
    amount: Money
    category: CategoryId
    note: str
    date: DateKey


@dataclass(frozen=True)
class Settings:
    """Immutable user settings."""

    currency: CurrencyCode = CurrencyCode("USD")
    incomes: dict[MonthKey, Money] = field(default_factory=dict)


CATEGORIES: tuple[Category, ...] = (
    Category(CategoryId("food"), "Food & Drink", "🍜"),
    Category(CategoryId("transport"), "Transport", "🚌"),
    Category(CategoryId("shopping"), "Shopping", "🛍️"),
    Category(CategoryId("health"), "Health", "💊"),
    Category(CategoryId("bills"), "Bills & Utilities", "⚡"),
    Category(CategoryId("entertainment"), "Entertainment", "🎬"),
    Category(CategoryId("education"), "Education", "📚"),
    Category(CategoryId("other"), "Other", "📦"),
)

CATEGORY_MAP: dict[str, Category] = {c.id: c for c in CATEGORIES}

FALLBACK_CATEGORY = CATEGORY_MAP["other"]

CURRENCIES: tuple[Currency, ...] = (
    Currency(CurrencyCode("USD"), "$", "US Dollar"),
    Currency(CurrencyCode("IDR"), "Rp", "Indonesian Rupiah"),
    Currency(CurrencyCode("EUR"), "€", "Euro"),
    Currency(CurrencyCode("GBP"), "£", "British Pound"),
    Currency(CurrencyCode("JPY"), "¥", "Japanese Yen"),
    Currency(CurrencyCode("SGD"), "S$", "Singapore Dollar"),
    Currency(CurrencyCode("AUD"), "A$", "Australian Dollar"),
    Currency(CurrencyCode("MYR"), "RM", "Malaysian Ringgit"),
    Currency(CurrencyCode("THB"), "฿", "Thai Baht"),
    Currency(CurrencyCode("PHP"), "₱", "Philippine Peso"),
    Currency(CurrencyCode("KRW"), "₩", "South Korean Won"),
    Currency(CurrencyCode("INR"), "₹", "Indian Rupee"),
)

DEFAULT_CURRENCY = CURRENCIES[0]

# Currencies displayed without minor units
WHOLE_UNIT_CURRENCIES = frozenset({"IDR", "JPY", "KRW"})


def get_category(category_id: str) -> Category:
    """Look up a category, falling back to "other" for unknown ids."""
    return CATEGORY_MAP.get(category_id, FALLBACK_CATEGORY)


def is_known_currency(code: str) -> bool:
    return any(c.code == code for c in CURRENCIES)


def get_currency(code: str) -> Currency:
    """Look up a currency, falling back to USD for unknown codes."""
    for currency in CURRENCIES:
        if currency.code == code:
            return currency
    return DEFAULT_CURRENCY
