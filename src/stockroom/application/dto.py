"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductLineDTO:
    """Output: a single inventory record as displayed to the user."""

    position: int  # 1-based, valid until the next deletion
    product_type: str
    quantity: int
    price_per_unit: str  # formatted, e.g. "$10.00"
    sales_tax: str
    total_price: str
