"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from stockroom.domain.exceptions import PersistenceError
from stockroom.domain.model.product import Product
from stockroom.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    @property
    def file_path(self) -> Path:
        return self._file_path

    # --- ProductRepository interface ------------------------------------------

    def load_all(self) -> list[Product]:
        if not self._file_path.exists():
            logger.debug("No inventory file at %s; starting empty", self._file_path)
            return []

        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
            if not isinstance(raw, list):
                raise TypeError("top level must be a list")
            products = [self._to_domain(item) for item in raw]
        except (
            OSError, UnicodeDecodeError, ValueError, TypeError, KeyError, RecursionError,
        ) as exc:
            logger.warning(
                "Ignoring unreadable inventory file %s: %s", self._file_path, exc
            )
            return []

        logger.debug("Loaded %d record(s) from %s", len(products), self._file_path)
        return products

    def save_all(self, products: list[Product]) -> None:
        raw = [self._to_raw(p) for p in products]
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(
                json.dumps(raw, indent=2) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            raise PersistenceError(str(exc)) from exc
        logger.debug("Wrote %d record(s) to %s", len(raw), self._file_path)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "product_type": product.product_type,
            "quantity": product.quantity,
            "price_per_unit": product.price_per_unit,
            "sales_tax": product.sales_tax,
            "total_price": product.total_price,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        """Rebuild a stored record as written; raise on any shape mismatch."""
        product_type = raw["product_type"]
        quantity = raw["quantity"]
        if not isinstance(product_type, str):
            raise TypeError("product_type must be a string")
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 0:
            raise TypeError("quantity must be a non-negative integer")
        return Product(
            product_type=product_type,
            quantity=quantity,
            price_per_unit=_number(raw["price_per_unit"]),
            sales_tax=_number(raw["sales_tax"]),
            total_price=_number(raw["total_price"]),
        )


def _number(value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected a number, got {type(value).__name__}")
    return float(value)
