"""Tests for ledger.domain.formatting."""

from decimal import Decimal

from ledger.domain.formatting import bar_length, format_compact, format_money, format_number, format_signed


class TestFormatNumber:
    """Tests for format_number and format_money."""

    def test_two_decimals(self) -> None:
        assert format_number(Decimal("12.5"), "USD") == "12.50"
        assert format_number(Decimal("1234.5"), "EUR") == "1234.50"

    def test_whole_unit_currencies(self) -> None:
        """IDR, JPY and KRW round to whole units with grouping."""
        assert format_number(Decimal("1234567.5"), "IDR") == "1,234,568"
        assert format_number(Decimal("999.4"), "JPY") == "999"
        assert format_number(Decimal("15000"), "KRW") == "15,000"

    def test_none_is_zero(self) -> None:
        assert format_number(None, "USD") == "0.00"

    def test_symbols(self) -> None:
        assert format_money(Decimal("19.5"), "USD") == "$19.50"
        assert format_money(Decimal("50000"), "IDR") == "Rp50,000"
        assert format_money(Decimal("3"), "GBP") == "£3.00"

    def test_unknown_currency_uses_dollar(self) -> None:
        assert format_money(Decimal("1"), "XXX") == "$1.00"

    def test_signed(self) -> None:
        assert format_signed(Decimal("-50"), "USD") == "−$50.00"
        assert format_signed(Decimal("650"), "USD") == "$650.00"


class TestFormatCompact:
    """Tests for format_compact."""

    def test_millions(self) -> None:
        assert format_compact(Decimal("2300000"), "IDR") == "2.3M"

    def test_thousands(self) -> None:
        assert format_compact(Decimal("4200"), "USD") == "4.2K"

    def test_small_values(self) -> None:
        assert format_compact(Decimal("999"), "USD") == "999.00"

    def test_negative_values_keep_sign(self) -> None:
        assert format_compact(Decimal("-4200"), "USD") == "−4.2K"
        assert format_compact(Decimal("-12.5"), "USD") == "−12.50"


class TestBarLength:
    """Tests for bar_length."""

    def test_scales_to_width(self) -> None:
        assert bar_length(Decimal("50"), Decimal("100"), 30) == 15
        assert bar_length(Decimal("100"), Decimal("100"), 30) == 30

    def test_zero_max(self) -> None:
        assert bar_length(Decimal("0"), Decimal("0"), 30) == 0
