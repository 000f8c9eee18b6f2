"""Display formatting for amounts.

Formatting never affects stored values; currency only changes the symbol
and the number of displayed decimals.
"""

from decimal import ROUND_HALF_UP, Decimal

from ledger.domain.models import WHOLE_UNIT_CURRENCIES, get_currency


def format_number(amount: Decimal | None, code: str) -> str:
    """Format an amount without a currency symbol.

    Args:
        amount: Amount to format (None is treated as zero).
        code: Currency code.

    Returns:
        Whole units with grouping separators for IDR, JPY and KRW;
        exactly two decimal places otherwise.
    """
    value = Decimal(amount or 0)
    if code in WHOLE_UNIT_CURRENCIES:
        return f"{int(value.quantize(Decimal('1'), rounding=ROUND_HALF_UP)):,}"
    return f"{value.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP):.2f}"


def format_money(amount: Decimal | None, code: str) -> str:
    """Format an amount with its currency symbol, e.g. "$12.50"."""
    return f"{get_currency(code).symbol}{format_number(amount, code)}"


def format_signed(amount: Decimal, code: str) -> str:
    """Format a possibly negative amount as "−$5.00" (minus sign before the symbol)."""
    sign = "−" if amount < 0 else ""
    return f"{sign}{format_money(abs(amount), code)}"


def format_compact(amount: Decimal, code: str) -> str:
    """Compact form for axis labels: 1.2M, 3.4K, or the plain number.

    Negative amounts get a leading "−", as in format_signed.
    """
    sign = "−" if amount < 0 else ""
    value = abs(Decimal(amount))
    if value >= 1_000_000:
        return f"{sign}{value / 1_000_000:.1f}M"
    if value >= 1_000:
        return f"{sign}{value / 1_000:.1f}K"
    return f"{sign}{format_number(value, code)}"


def bar_length(amount: Decimal, max_amount: Decimal, bar_width: int) -> int:
    """Calculate histogram bar length.

    Args:
        amount: Amount to display.
        max_amount: Maximum amount in dataset.
        bar_width: Maximum bar width in characters.

    Returns:
        Bar length in characters.
    """
    if max_amount <= 0:
        return 0
    return int((abs(amount) / max_amount) * bar_width)
