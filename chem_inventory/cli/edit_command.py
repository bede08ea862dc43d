"""Edit command: seed an edit-mode draft from the stored product, apply options, commit."""

import asyncio
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from chem_inventory.config import STORE_PATH
from chem_inventory.errors import ValidationError
from chem_inventory.inventory import InventoryManager
from chem_inventory.models import Product
from chem_inventory.utils.logger import bind_context, clear_context

from .shared import build_manager, console, exit_on_validation_error, format_quantity, logger


async def _edit(manager: InventoryManager, product_id: int, changes: dict) -> Product | None:
    await manager.initialize()
    current = manager.get_product(product_id)
    if current is None:
        return None
    manager.begin_edit(current)
    manager.update_draft(**changes)
    return await manager.commit_pending()


def edit(
    product_id: int = typer.Argument(..., help="Product id"),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="New name"),
    stock: Optional[str] = typer.Option(None, "--stock", help="New stock"),
    unit: Optional[str] = typer.Option(None, "--unit", "-u", help="kg, L, g or mL"),
    min_stock: Optional[str] = typer.Option(None, "--min-stock", "-m", help="New minimum stock"),
    store: Path = typer.Option(STORE_PATH, "--store", "-s", help="Path to the device store JSON file"),
) -> None:
    """Edit an existing product; omitted fields keep their current value."""
    log = logger.bind(command="edit", product_id=product_id, store=str(store))
    changes = {
        key: value
        for key, value in (("name", name), ("stock", stock), ("unit", unit), ("min_stock", min_stock))
        if value is not None
    }
    manager = build_manager(store)
    bind_context(command="edit", product_id=product_id)
    try:
        product = asyncio.run(_edit(manager, product_id, changes))
    except ValidationError as e:
        exit_on_validation_error(e, log)
    finally:
        clear_context()
    if product is None:
        console.print(f"[red]No product with id {product_id}.[/red]")
        log.info("edit.not_found")
        raise typer.Exit(1)
    console.print(
        f"[green]Updated {escape(product.name)} ({format_quantity(product.stock)} {product.unit})[/green]"
    )
    log.info("edit.complete", fields=sorted(changes))
