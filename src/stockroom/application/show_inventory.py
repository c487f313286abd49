"""Application service: Show Inventory use case (query)."""

from __future__ import annotations

from stockroom.application.dto import ProductLineDTO
from stockroom.application.inventory_store import InventoryStore


def _money(amount: float) -> str:
    return f"${amount:.2f}"


class ShowInventoryHandler:

    def __init__(self, store: InventoryStore) -> None:
        self._store = store

    def handle(self) -> list[ProductLineDTO]:
        return [
            ProductLineDTO(
                position=index,
                product_type=product.product_type,
                quantity=product.quantity,
                price_per_unit=_money(product.price_per_unit),
                sales_tax=_money(product.sales_tax),
                total_price=_money(product.total_price),
            )
            for index, product in enumerate(self._store.list(), start=1)
        ]
