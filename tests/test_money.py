"""Tests for integer-cent helpers and the error hierarchy."""
from decimal import Decimal

import pytest

from splitledger.core.errors import InvalidInput, LedgerError, StateError, ValidationError
from splitledger.utils.money import (
    allocate_largest_remainder,
    format_cents,
    is_zero,
    require_positive_cents,
)


class TestMoneyHelpers:

    def test_format_cents(self):
        assert format_cents(4000) == "40.00"
        assert format_cents(-5) == "-0.05"
        assert format_cents(123456) == "1234.56"

    def test_is_zero_with_one_cent_tolerance(self):
        assert is_zero(0, 1)
        assert not is_zero(1, 1)
        assert not is_zero(-1, 1)

    def test_require_positive_cents(self):
        assert require_positive_cents(1) == 1
        with pytest.raises(InvalidInput):
            require_positive_cents(0)
        with pytest.raises(InvalidInput):
            require_positive_cents(1.0)

    def test_allocation_always_sums_to_amount(self):
        weights = [Decimal(1), Decimal(1), Decimal(1), Decimal(1), Decimal(1), Decimal(1), Decimal(1)]

        result = allocate_largest_remainder(100, weights)

        assert sum(result) == 100
        assert result == [15, 15, 14, 14, 14, 14, 14]

    def test_allocation_is_exact_for_huge_amounts(self):
        amount = 10**30 + 7
        weights = [Decimal(1), Decimal(1), Decimal(1)]

        result = allocate_largest_remainder(amount, weights)

        assert sum(result) == amount
        third = amount // 3
        assert result == [third + 1, third + 1, third]

    def test_allocation_with_fractional_weights(self):
        result = allocate_largest_remainder(10**28 + 1, [Decimal("33.3"), Decimal("33.3"), Decimal("33.4")])

        assert sum(result) == 10**28 + 1


class TestErrors:

    def test_all_errors_share_a_base(self):
        for cls in (ValidationError, InvalidInput, StateError):
            assert issubclass(cls, LedgerError)

    def test_str_includes_details(self):
        err = InvalidInput("Bad amount", {"amount_cents": -1})

        assert str(err) == "Bad amount (amount_cents=-1)"
        assert err.kind == "invalid_input"

    def test_str_without_details(self):
        assert str(StateError("Corrupt")) == "Corrupt"
