"""Inventory aggregate: the ordered list of product records.

Order is insertion order and duplicates are kept as separate lines.
Records are addressed by their 1-based position, which shifts whenever
an earlier record is removed.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from stockroom.domain.exceptions import OutOfRangeError
from stockroom.domain.model.product import Product
from stockroom.domain.model.value_objects import Position


@dataclass(frozen=True)
class Inventory:
    """Aggregate root for the inventory list.

    Mutations return a new Inventory and leave the receiver untouched, so
    a caller can persist the candidate state before adopting it.

    Invariants:
    - records keep their insertion order
    - a removal takes out exactly one record
    """

    _products: tuple[Product, ...] = field(default=())

    @staticmethod
    def of(products: list[Product]) -> Inventory:
        return Inventory(tuple(products))

    @property
    def products(self) -> tuple[Product, ...]:
        return self._products

    def __len__(self) -> int:
        return len(self._products)

    def append(self, product: Product) -> Inventory:
        return Inventory(self._products + (product,))

    def without(self, position: Position) -> tuple[Inventory, Product]:
        """Remove the record at *position*.

        Returns the new Inventory and the removed record.
        Raises OutOfRangeError if *position* is not in ``1..len``.
        """
        if position.value < 1 or position.value > len(self._products):
            raise OutOfRangeError()
        index = position.value - 1
        removed = self._products[index]
        remaining = self._products[:index] + self._products[index + 1:]
        return Inventory(remaining), removed
