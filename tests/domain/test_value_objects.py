"""Unit tests for form-input value objects."""

import pytest

from stockroom.domain.exceptions import (
    InvalidPriceError,
    InvalidQuantityError,
    NotANumberError,
)
from stockroom.domain.model.value_objects import (
    MAX_COUNT,
    Position,
    Quantity,
    UnitPrice,
)


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_parse_digits(self):
        assert Quantity.parse("12") == Quantity(12)

    def test_parse_ignores_surrounding_whitespace(self):
        assert Quantity.parse(" 4 ").value == 4

    def test_parse_accepts_int(self):
        assert Quantity.parse(7).value == 7

    def test_zero_rejected(self):
        with pytest.raises(InvalidQuantityError, match="valid quantity"):
            Quantity.parse("0")

    @pytest.mark.parametrize("raw", ["", "abc", "-3", "2.5", "1e3"])
    def test_unparsable_collapses_to_invalid(self, raw):
        with pytest.raises(InvalidQuantityError):
            Quantity.parse(raw)

    def test_direct_construction_rejects_negative(self):
        with pytest.raises(InvalidQuantityError):
            Quantity(-1)

    def test_largest_machine_count_accepted(self):
        assert Quantity.parse(str(MAX_COUNT)).value == MAX_COUNT

    @pytest.mark.parametrize(
        "raw", [str(MAX_COUNT + 1), "1" + "0" * 400, "1" * 5000],
    )
    def test_oversized_count_collapses_to_invalid(self, raw):
        with pytest.raises(InvalidQuantityError):
            Quantity.parse(raw)


# ── UnitPrice ────────────────────────────────────────────────────────────────


class TestUnitPrice:

    def test_parse_decimal_text(self):
        assert UnitPrice.parse("9.99").amount == 9.99

    def test_parse_integer_text(self):
        assert UnitPrice.parse("10").amount == 10.0

    def test_zero_rejected(self):
        with pytest.raises(InvalidPriceError, match="valid price"):
            UnitPrice.parse("0.0")

    def test_negative_rejected(self):
        with pytest.raises(InvalidPriceError):
            UnitPrice.parse("-5")

    @pytest.mark.parametrize("raw", ["", "ten", "nan", "inf"])
    def test_unparsable_or_non_finite_rejected(self, raw):
        with pytest.raises(InvalidPriceError):
            UnitPrice.parse(raw)


# ── Position ─────────────────────────────────────────────────────────────────


class TestPosition:

    def test_parse(self):
        assert Position.parse("3") == Position(3)

    def test_zero_parses(self):
        # Range checking happens against the list, not here.
        assert Position.parse("0").value == 0

    @pytest.mark.parametrize(
        "raw", ["", "one", "-1", "1.0", str(MAX_COUNT + 1), "1" * 5000],
    )
    def test_not_a_number_rejected(self, raw):
        with pytest.raises(NotANumberError, match="valid number"):
            Position.parse(raw)
