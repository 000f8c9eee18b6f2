"""Application state: the expense collection and settings.

LedgerState owns both collections for the session. Every mutation updates
memory first and then writes the full snapshot of the affected collection
through the persistence gateway, in the same call.
"""

import logging

from ledger.domain.expenses import coerce_income
from ledger.domain.models import (
    DEFAULT_CURRENCY,
    ZERO,
    CurrencyCode,
    Expense,
    Money,
    MonthKey,
    Settings,
)
from ledger.store.codec import encode_expenses, encode_settings
from ledger.store.gateway import EXPENSES_KEY, SETTINGS_KEY, PersistenceGateway

logger = logging.getLogger(__name__)


class LedgerState:
    """In-memory expenses, currency and incomes mirrored to the gateway."""

    def __init__(
        self,
        gateway: PersistenceGateway,
        expenses: list[Expense] | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.gateway = gateway
        self.expenses: list[Expense] = list(expenses or [])
        settings = settings or Settings(currency=CurrencyCode(gateway.default_currency or DEFAULT_CURRENCY.code))
        self.currency: CurrencyCode = settings.currency
        self.incomes: dict[MonthKey, Money] = dict(settings.incomes)
        self.last_save_ok = True

    @classmethod
    def load(cls, gateway: PersistenceGateway) -> "LedgerState":
        """Load state from the gateway, using empty defaults for anything missing."""
        expenses, settings = gateway.load()
        return cls(gateway, expenses, settings)

    @property
    def settings(self) -> Settings:
        return Settings(currency=self.currency, incomes=dict(self.incomes))

    def get(self, expense_id: int) -> Expense | None:
        for expense in self.expenses:
            if expense.id == expense_id:
                return expense
        return None

    def income_for(self, month: str) -> Money:
        """Income declared for a month, zero when unset."""
        return self.incomes.get(MonthKey(month), ZERO)

    def _persist_expenses(self) -> None:
        self.last_save_ok = self.gateway.save(EXPENSES_KEY, encode_expenses(self.expenses))

    def _persist_settings(self) -> None:
        self.last_save_ok = self.gateway.save(SETTINGS_KEY, encode_settings(self.settings))

    def add_or_replace(self, expense: Expense) -> None:
        """Replace the expense with the same id in place, or prepend a new one."""
        for index, existing in enumerate(self.expenses):
            if existing.id == expense.id:
                self.expenses = [*self.expenses[:index], expense, *self.expenses[index + 1 :]]
                logger.debug("Replaced expense %s", expense.id)
                break
        else:
            self.expenses = [expense, *self.expenses]
            logger.debug("Added expense %s", expense.id)
        self._persist_expenses()

    def delete(self, expense_id: int) -> bool:
        """Remove an expense by id.

        Returns:
            True if an expense was removed. The collection is unchanged
            when the id is absent.
        """
        remaining = [e for e in self.expenses if e.id != expense_id]
        removed = len(remaining) != len(self.expenses)
        self.expenses = remaining
        self._persist_expenses()
        return removed

    def clear_all(self) -> None:
        """Remove every expense. Incomes and currency are kept."""
        self.expenses = []
        self._persist_expenses()

    def set_income(self, month: str, value: object) -> Money:
        """Set the income for a month; negative or non-numeric values become zero."""
        amount = coerce_income(value)
        self.incomes = {**self.incomes, MonthKey(month): amount}
        self._persist_settings()
        return amount

    def set_currency(self, code: str) -> None:
        self.currency = CurrencyCode(code)
        self._persist_settings()
