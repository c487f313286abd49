"""Product record: one inventory line item.

Sales tax and total price are derived from the unit price and quantity
when the record is created and never change afterwards.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from stockroom.domain.exceptions import EmptyTypeError, InvalidPriceError
from stockroom.domain.model.value_objects import Quantity, UnitPrice

SALES_TAX_RATE = 0.10


@dataclass(frozen=True)
class Product:
    """An immutable inventory record.

    Use the ``Product.create()`` factory for new records; it enforces the
    input rules and computes the derived fields.  The ``__init__`` is kept
    plain so the repository can reconstitute stored records as written.
    """

    product_type: str
    quantity: int
    price_per_unit: float
    sales_tax: float
    total_price: float

    @staticmethod
    def create(
        product_type: str,
        quantity: str | int,
        price_per_unit: str | int | float,
    ) -> Product:
        """Validate raw input and build a new record.

        Checks run in form order (type, quantity, price) and the first
        failure is raised.
        """
        product_type = (product_type or "").strip()
        if not product_type:
            raise EmptyTypeError()

        qty = Quantity.parse(quantity)
        price = UnitPrice.parse(price_per_unit)

        sales_tax = SALES_TAX_RATE * price.amount
        total_price = (price.amount + sales_tax) * qty.value
        # The total must stay a finite JSON number.
        if not math.isfinite(total_price):
            raise InvalidPriceError()

        return Product(
            product_type=product_type,
            quantity=qty.value,
            price_per_unit=price.amount,
            sales_tax=sales_tax,
            total_price=total_price,
        )
