"""Unit tests for the Inventory aggregate."""

import pytest

from stockroom.domain.exceptions import OutOfRangeError
from stockroom.domain.model.inventory import Inventory
from stockroom.domain.model.product import Product
from stockroom.domain.model.value_objects import Position


def _abc() -> Inventory:
    return Inventory.of([
        Product.create("A", "1", "1"),
        Product.create("B", "2", "2"),
        Product.create("C", "3", "3"),
    ])


def _types(inv: Inventory) -> list[str]:
    return [p.product_type for p in inv.products]


class TestInventoryAppend:

    def test_append_keeps_insertion_order(self):
        inv = Inventory().append(Product.create("A", "1", "1"))
        inv = inv.append(Product.create("B", "1", "1"))
        assert _types(inv) == ["A", "B"]

    def test_duplicates_are_not_merged(self):
        p = Product.create("A", "1", "1")
        inv = Inventory().append(p).append(p)
        assert len(inv) == 2

    def test_append_leaves_original_untouched(self):
        original = Inventory()
        original.append(Product.create("A", "1", "1"))
        assert len(original) == 0


class TestInventoryWithout:

    def test_removal_shifts_positions(self):
        inv, removed = _abc().without(Position(1))
        assert removed.product_type == "A"
        assert _types(inv) == ["B", "C"]

        inv, removed = inv.without(Position(1))
        assert removed.product_type == "B"
        assert _types(inv) == ["C"]

    def test_remove_last(self):
        inv, removed = _abc().without(Position(3))
        assert removed.product_type == "C"
        assert _types(inv) == ["A", "B"]

    def test_position_zero_rejected(self):
        inv = _abc()
        with pytest.raises(OutOfRangeError, match="Invalid product ID"):
            inv.without(Position(0))
        assert _types(inv) == ["A", "B", "C"]

    def test_position_past_end_rejected(self):
        inv = _abc()
        with pytest.raises(OutOfRangeError):
            inv.without(Position(len(inv) + 1))
        assert len(inv) == 3

    def test_remove_from_empty_rejected(self):
        with pytest.raises(OutOfRangeError):
            Inventory().without(Position(1))
