"""Unit tests for Money, Quantity and VatPercent."""

from decimal import Decimal

import pytest

from eventmgmt.domain.exceptions import ValidationError
from eventmgmt.domain.model.value_objects import Money, Quantity, VatPercent


class TestMoney:

    def test_zero_is_allowed(self):
        assert Money.of("0").is_zero

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money.of("-1")

    def test_float_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(1.5)  # type: ignore[arg-type]

    def test_garbage_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("ten")

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money.of("1") + Money.of("1", "EUR")

    def test_multiply_by_int_only(self):
        assert Money.of("2.50") * 3 == Money.of("7.50")
        with pytest.raises(TypeError):
            Money.of("2.50") * 1.5  # type: ignore[operator]

    def test_percent(self):
        assert Money.of("200").percent(Decimal("25")) == Money.of("50.00")

    def test_str(self):
        assert str(Money.of("12.5")) == "12.50 NOK"


class TestQuantity:

    @pytest.mark.parametrize("value", [0, 3])
    def test_non_negative(self, value):
        assert Quantity(value).value == value

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Quantity(-2)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(True)


class TestVatPercent:

    @pytest.mark.parametrize("value", ["0", "12", "25", "100"])
    def test_bounds_accepted(self, value):
        assert VatPercent.of(value).value == Decimal(value)

    @pytest.mark.parametrize("value", ["-1", "100.01"])
    def test_out_of_range_rejected(self, value):
        with pytest.raises(ValidationError, match="between 0 and 100"):
            VatPercent.of(value)

    def test_str(self):
        assert str(VatPercent.of("25")) == "25%"
