"""Delete command: remove a product after confirmation."""

import asyncio
from pathlib import Path

import typer

from chem_inventory.config import STORE_PATH
from chem_inventory.inventory import InventoryManager

from .shared import build_manager, console, logger


async def _delete(manager: InventoryManager, product_id: int) -> bool:
    await manager.initialize()
    return await manager.delete_product(product_id)


def delete(
    product_id: int = typer.Argument(..., help="Product id"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt"),
    store: Path = typer.Option(STORE_PATH, "--store", "-s", help="Path to the device store JSON file"),
) -> None:
    """Delete a product (asks for confirmation)."""
    log = logger.bind(command="delete", product_id=product_id, store=str(store))
    manager = build_manager(store, assume_yes=yes)
    deleted = asyncio.run(_delete(manager, product_id))
    if deleted:
        console.print(f"[green]Deleted product {product_id}.[/green]")
    else:
        console.print("[dim]Nothing deleted.[/dim]")
    log.info("delete.complete", deleted=deleted)
