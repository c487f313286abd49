"""Interactive text-mode form over the inventory.

A menu loop with the same four actions as the dialog it replaces:
Save, Show All, Delete by ID and Quit.  Every action goes through the
InventoryStore; errors are shown and the loop carries on.
"""

from __future__ import annotations

import click

from stockroom.application.inventory_store import InventoryStore
from stockroom.application.show_inventory import ShowInventoryHandler
from stockroom.domain.exceptions import DomainException, PersistenceError
from stockroom.infrastructure.cli.product_commands import echo_inventory

MENU = (
    ("1", "Save"),
    ("2", "Show All"),
    ("3", "Delete by ID"),
    ("4", "Quit"),
)


def _ask(label: str) -> str:
    return click.prompt(label, default="", show_default=False)


def _save(store: InventoryStore) -> None:
    product_type = _ask("Product Type")
    quantity = _ask("Quantity")
    price_per_unit = _ask("Price per Unit")

    try:
        store.add(product_type, quantity, price_per_unit)
    except PersistenceError as exc:
        click.echo(f"Error saving product: {exc}")
        return
    except DomainException as exc:
        click.echo(f"Error: {exc}")
        return

    click.echo("Product saved successfully!")


def _delete(store: InventoryStore) -> None:
    raw = _ask("Enter product ID to delete (blank to cancel)")
    if not raw.strip():
        click.echo("Cancelled.")
        return

    try:
        store.delete_by_position(raw)
    except PersistenceError as exc:
        click.echo(f"Error deleting product: {exc}")
        return
    except DomainException as exc:
        click.echo(f"Error: {exc}")
        return

    click.echo("Product deleted successfully!")


@click.command("form")
@click.pass_obj
def form(store: InventoryStore) -> None:
    """Open the interactive inventory form."""
    actions = {
        "1": _save,
        "2": lambda s: echo_inventory(ShowInventoryHandler(s).handle()),
        "3": _delete,
    }

    while True:
        click.echo()
        click.echo("== Inventory Management ==")
        for key, label in MENU:
            click.echo(f"  {key}) {label}")

        try:
            choice = click.prompt(
                "Choose an action",
                type=click.Choice([key for key, _ in MENU]),
                show_choices=False,
            )
            if choice == "4":
                return
            actions[choice](store)
        except click.Abort:
            # End of input (Ctrl-D / Ctrl-C) quits like the Quit action.
            click.echo()
            return
