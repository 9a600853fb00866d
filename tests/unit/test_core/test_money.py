#!/usr/bin/env python3
"""Tests for Money primitive type."""

from decimal import Decimal

import pytest

from fairs.core.currency import InvalidAmountError
from fairs.core.money import Money


class TestMoneyConstruction:
    """Test Money class construction."""

    @pytest.mark.currency
    def test_from_cents(self):
        """Test creating Money from cents."""
        m = Money.from_cents(1234)
        assert m.to_cents() == 1234

    @pytest.mark.currency
    def test_from_amount_string(self):
        """Test parsing from amount strings."""
        assert Money.from_amount("12.34").to_cents() == 1234
        assert Money.from_amount("€12,34").to_cents() == 1234

    @pytest.mark.currency
    def test_from_amount_int(self):
        """Test creating from integer units."""
        assert Money.from_amount(12).to_cents() == 1200

    @pytest.mark.currency
    def test_from_amount_rejects_garbage(self):
        with pytest.raises(InvalidAmountError):
            Money.from_amount("twelve")

    @pytest.mark.currency
    def test_from_amount_or_zero(self):
        assert Money.from_amount_or_zero("oops") == Money.zero()
        assert Money.from_amount_or_zero("3.10").to_cents() == 310

    @pytest.mark.currency
    def test_from_decimal_rounds_half_up(self):
        assert Money.from_decimal(Decimal("2.005")).to_cents() == 201
        assert Money.from_decimal(Decimal("2.0049")).to_cents() == 200


class TestMoneyArithmetic:
    """Test Money arithmetic operations."""

    @pytest.mark.currency
    def test_addition_and_subtraction(self):
        a = Money.from_cents(100)
        b = Money.from_cents(30)
        assert (a + b).to_cents() == 130
        assert (a - b).to_cents() == 70

    @pytest.mark.currency
    def test_multiplication(self):
        """Test multiplying Money by quantity."""
        assert (Money.from_cents(500) * 2).to_cents() == 1000

    @pytest.mark.currency
    def test_split_sums_to_whole(self):
        shares = Money.from_cents(1000).split(3)
        assert [s.to_cents() for s in shares] == [334, 333, 333]
        assert sum(s.to_cents() for s in shares) == 1000

    def test_abs(self):
        assert Money.from_cents(-450).abs() == Money.from_cents(450)


class TestMoneyComparison:
    """Test Money comparison operations."""

    @pytest.mark.currency
    def test_equality(self):
        assert Money.from_cents(100) == Money.from_cents(100)
        assert Money.from_cents(100) != Money.from_cents(50)

    @pytest.mark.currency
    def test_ordering(self):
        small = Money.from_cents(50)
        large = Money.from_cents(100)
        assert small < large
        assert large > small
        assert small <= Money.from_cents(50)
        assert large >= small

    def test_hashable(self):
        assert len({Money.from_cents(1), Money.from_cents(1), Money.from_cents(2)}) == 2


class TestMoneyFormatting:
    """Test Money string formatting."""

    @pytest.mark.currency
    def test_str_is_plain_amount(self):
        assert str(Money.from_cents(850)) == "8.50"

    @pytest.mark.currency
    def test_format_with_symbol(self):
        assert Money.from_cents(-3365).format("€") == "€-33.65"

    def test_to_amount_str_and_decimal(self):
        m = Money.from_cents(1999)
        assert m.to_amount_str() == "19.99"
        assert m.to_decimal() == Decimal("19.99")

    def test_repr(self):
        assert repr(Money.from_cents(5)) == "Money(cents=5)"
