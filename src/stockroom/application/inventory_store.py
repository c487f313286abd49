"""Application service: the Inventory Store.

Owns the in-memory Inventory and serialises every use case that touches
it (add, list, delete by position) behind one lock.  Each mutation is
written through the repository *before* it is adopted in memory, so a
failed write leaves both the file and the in-memory list as they were.
"""

from __future__ import annotations

import logging
import threading

from stockroom.domain.exceptions import PersistenceError
from stockroom.domain.model.inventory import Inventory
from stockroom.domain.model.product import Product
from stockroom.domain.model.value_objects import Position
from stockroom.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class InventoryStore:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo
        self._lock = threading.Lock()
        self._inventory = Inventory.of(product_repo.load_all())
        logger.debug("Loaded %d product(s)", len(self._inventory))

    def add(
        self,
        product_type: str,
        quantity: str | int,
        price_per_unit: str | int | float,
    ) -> Product:
        """Validate, persist and append a new product record.

        Raises a ValidationError subclass for bad input, or
        PersistenceError if the backing file could not be written.
        """
        product = Product.create(product_type, quantity, price_per_unit)

        with self._lock:
            candidate = self._inventory.append(product)
            self._commit(candidate, action="add")

        logger.info(
            "Added %s x%d at %.2f (position %d)",
            product.product_type, product.quantity,
            product.price_per_unit, len(candidate),
        )
        return product

    def list(self) -> tuple[Product, ...]:
        """Return a read-only snapshot of every record in order."""
        with self._lock:
            return self._inventory.products

    def delete_by_position(self, position: str | int) -> Product:
        """Remove the record at a 1-based *position* and return it.

        Raises NotANumberError if *position* is not a number,
        OutOfRangeError if it addresses no record, or PersistenceError
        if the backing file could not be written.
        """
        pos = Position.parse(position)

        with self._lock:
            candidate, removed = self._inventory.without(pos)
            self._commit(candidate, action="delete")

        logger.info("Deleted %s at position %d", removed.product_type, pos.value)
        return removed

    # --- Internal helpers -----------------------------------------------------

    def _commit(self, candidate: Inventory, action: str) -> None:
        """Persist *candidate* and adopt it. Caller must hold the lock."""
        try:
            self._product_repo.save_all(list(candidate.products))
        except PersistenceError:
            logger.warning("Could not persist %s; in-memory list unchanged", action)
            raise
        self._inventory = candidate
