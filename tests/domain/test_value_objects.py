"""Unit tests for the Money value object."""

from decimal import Decimal

import pytest

from invtrack.domain.exceptions import ValidationError
from invtrack.domain.model.value_objects import Money


class TestMoney:

    def test_of_coerces_strings_and_floats(self):
        assert Money.of("12.50").amount == Decimal("12.50")
        assert Money.of(99.99).amount == Decimal("99.99")

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money.of("-1")

    def test_garbage_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("twelve")

    def test_non_decimal_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(12.5)

    def test_multiply_by_quantity(self):
        assert Money.of("2.50") * 4 == Money.of("10.00")
        assert Money.of("2.50") * 0 == Money.zero()

    def test_multiply_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("2.50") * 1.5

    def test_add(self):
        assert Money.of("1.10") + Money.of("2.20") == Money.of("3.30")

    def test_add_different_currency_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("1"), "USD") + Money(Decimal("1"), "EUR")

    def test_str_formats_with_separators(self):
        assert str(Money.of("1234.5")) == "$1,234.50"

    def test_ratio_of(self):
        assert Money.of("25").ratio_of(Money.of("100")) == Decimal("25.00")

    def test_ratio_of_zero_total_is_zero(self):
        assert Money.zero().ratio_of(Money.zero()) == Decimal("0")

    @pytest.mark.parametrize("raw", ["Infinity", "-Infinity", "NaN", float("inf")])
    def test_non_finite_rejected(self, raw):
        with pytest.raises(ValidationError, match="must be finite"):
            Money.of(raw)
