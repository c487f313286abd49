"""One-shot CLI commands for inventory records."""

from __future__ import annotations

import click

from stockroom.application.dto import ProductLineDTO
from stockroom.application.inventory_store import InventoryStore
from stockroom.application.show_inventory import ShowInventoryHandler
from stockroom.domain.exceptions import DomainException, PersistenceError
from stockroom.domain.model.value_objects import Position

EMPTY_INVENTORY = "No products in the inventory."


def echo_inventory(lines: list[ProductLineDTO]) -> None:
    """Shared formatting for listing the inventory."""
    if not lines:
        click.echo(EMPTY_INVENTORY)
        return

    for line in lines:
        click.echo(
            f"{line.position}. Item: {line.product_type}, Qty: {line.quantity}, "
            f"Price: {line.price_per_unit}, Sales Tax: {line.sales_tax}, "
            f"T.Price: {line.total_price}"
        )


@click.command("add")
@click.option("--type", "product_type", required=True, help="Product type, e.g. 'Electronics'.")
@click.option("--quantity", required=True, help="Units in stock (positive integer).")
@click.option("--price", required=True, help="Price per unit (e.g. 10.00).")
@click.pass_obj
def product_add(store: InventoryStore, product_type: str, quantity: str, price: str) -> None:
    """Add a product record to the inventory."""
    try:
        product = store.add(product_type, quantity, price)
    except PersistenceError as exc:
        raise click.ClickException(f"Could not save product: {exc}")
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product saved: {product.product_type} x{product.quantity} "
        f"(total ${product.total_price:.2f})"
    )


@click.command("list")
@click.pass_obj
def product_list(store: InventoryStore) -> None:
    """List all product records."""
    echo_inventory(ShowInventoryHandler(store).handle())


@click.command("delete")
@click.option("--position", required=True, help="1-based position shown by 'list'.")
@click.pass_obj
def product_delete(store: InventoryStore, position: str) -> None:
    """Delete the product record at a position."""
    try:
        removed = store.delete_by_position(position)
    except PersistenceError as exc:
        raise click.ClickException(f"Could not delete product: {exc}")
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{Position.parse(position).value} '{removed.product_type}' deleted.")
