"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from catview.domain.exceptions import ValidationError
from catview.domain.model.value_objects import Price


class TestPrice:

    def test_creation(self):
        p = Price(Decimal("10.50"))
        assert p.amount == Decimal("10.50")

    def test_of_factory_from_string(self):
        assert Price.of("25.99").amount == Decimal("25.99")

    def test_of_factory_from_int(self):
        assert Price.of(10).amount == Decimal("10")

    def test_of_factory_from_float_keeps_literal(self):
        assert Price.of(19.99).amount == Decimal("19.99")

    def test_non_numeric_rejected(self):
        with pytest.raises(ValidationError, match="Invalid price"):
            Price.of("cheap")

    def test_none_rejected(self):
        with pytest.raises(ValidationError, match="Invalid price"):
            Price.of(None)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="Invalid price"):
            Price.of(True)

    def test_infinite_rejected(self):
        with pytest.raises(ValidationError, match="must be finite"):
            Price.of("Infinity")

    def test_non_decimal_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Price(10)

    def test_str_formatting(self):
        assert str(Price.of("15")) == "$15.00"
        assert str(Price.of("9.5")) == "$9.50"

    def test_comparison_operators(self):
        assert Price.of("5") < Price.of("10")
        assert Price.of("10") > Price.of("5")
        assert Price.of("10") >= Price.of("10.00")
        assert Price.of("10") == Price.of("10.00")
