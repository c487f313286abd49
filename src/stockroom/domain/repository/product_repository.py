"""Abstract repository for the product record list.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory)
live in the infrastructure layer and the test suite.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from stockroom.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def load_all(self) -> list[Product]:
        """Return every stored record in order, or an empty list.

        Never raises: a missing or unreadable store yields ``[]``.
        """

    @abstractmethod
    def save_all(self, products: list[Product]) -> None:
        """Replace the stored list with *products*.

        Raises PersistenceError if the store cannot be written.
        """
