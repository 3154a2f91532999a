"""Tests for billing strategies."""

from decimal import Decimal

import pytest

from src.services.billing_strategy import BillingStrategy, RegularBillingStrategy


class TestRegularBillingStrategy:
    """Tests for flat price x quantity pricing."""

    def test_multiplies_price_by_quantity(self):
        strategy = RegularBillingStrategy()
        assert strategy.calculate(Decimal("2.50"), 4) == Decimal("10.00")

    def test_zero_quantity_is_zero(self):
        strategy = RegularBillingStrategy()
        assert strategy.calculate(Decimal("15.00"), 0) == 0

    def test_zero_price_is_zero(self):
        strategy = RegularBillingStrategy()
        assert strategy.calculate(Decimal("0"), 7) == 0

    def test_returns_decimal(self):
        strategy = RegularBillingStrategy()
        assert isinstance(strategy.calculate(Decimal("3.50"), 2), Decimal)

    def test_no_float_drift(self):
        strategy = RegularBillingStrategy()
        assert strategy.calculate(Decimal("0.10"), 3) == Decimal("0.30")


class TestBillingStrategyContract:
    """The base class is abstract; variants plug in by subclassing."""

    def test_base_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            BillingStrategy()

    def test_custom_variant_can_be_defined(self):
        class HalfPrice(BillingStrategy):
            def calculate(self, price, qty):
                return price * qty / 2

        assert HalfPrice().calculate(Decimal("4"), 3) == Decimal("6")
