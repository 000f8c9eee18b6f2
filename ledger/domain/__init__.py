"""Domain models and types for ledger.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Easy to test
- Business logic separated from infrastructure
"""

from ledger.domain.models import CategoryId, CurrencyCode, DateKey, Expense, Money, MonthKey, Settings

__all__ = ["Money", "MonthKey", "DateKey", "CategoryId", "CurrencyCode", "Expense", "Settings"]
