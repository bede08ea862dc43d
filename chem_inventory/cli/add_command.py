"""Add command: build an add-mode draft from options and commit it."""

import asyncio
from pathlib import Path

import typer
from rich.markup import escape

from chem_inventory.config import DEFAULT_MIN_STOCK, DEFAULT_STOCK, DEFAULT_UNIT, STORE_PATH
from chem_inventory.errors import ValidationError
from chem_inventory.inventory import InventoryManager
from chem_inventory.models import Product
from chem_inventory.utils.logger import bind_context, clear_context

from .shared import build_manager, console, exit_on_validation_error, format_quantity, logger


async def _add(manager: InventoryManager, name: str, stock: str, unit: str, min_stock: str) -> Product:
    await manager.initialize()
    manager.begin_add()
    manager.update_draft(name=name, stock=stock, unit=unit, min_stock=min_stock)
    return await manager.commit_pending()


def add(
    name: str = typer.Argument(..., help="Product name"),
    stock: str = typer.Option(str(DEFAULT_STOCK), "--stock", help="Current stock"),
    unit: str = typer.Option(DEFAULT_UNIT, "--unit", "-u", help="kg, L, g or mL"),
    min_stock: str = typer.Option(str(DEFAULT_MIN_STOCK), "--min-stock", "-m", help="Minimum stock threshold"),
    store: Path = typer.Option(STORE_PATH, "--store", "-s", help="Path to the device store JSON file"),
) -> None:
    """Add a new product."""
    log = logger.bind(command="add", store=str(store))
    manager = build_manager(store)
    bind_context(command="add")
    try:
        product = asyncio.run(_add(manager, name, stock, unit, min_stock))
    except ValidationError as e:
        exit_on_validation_error(e, log)
    finally:
        clear_context()
    console.print(
        f"[green]Added {escape(product.name)} ({format_quantity(product.stock)} {product.unit}), id {product.id}[/green]"
    )
    log.info("add.complete", product_id=product.id)
