"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from stockroom.application.inventory_store import InventoryStore
from stockroom.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

# Relative to the working directory the program is launched from.
DEFAULT_DATA_FILE = Path("inventory.json")


def product_repository(file_path: Path = DEFAULT_DATA_FILE) -> JsonProductRepository:
    return JsonProductRepository(file_path)


def inventory_store(file_path: Path = DEFAULT_DATA_FILE) -> InventoryStore:
    return InventoryStore(product_repo=product_repository(file_path))
