"""List and show commands: render the stored inventory."""

import asyncio
from pathlib import Path

import typer
from rich.markup import escape

from chem_inventory.config import STORE_PATH

from .shared import build_manager, console, format_quantity, logger, products_table


def list_products(
    store: Path = typer.Option(STORE_PATH, "--store", "-s", help="Path to the device store JSON file"),
    low_only: bool = typer.Option(False, "--low", help="Only products at or below their minimum stock"),
) -> None:
    """List all products in insertion order."""
    log = logger.bind(command="list", store=str(store))
    manager = build_manager(store)
    products = asyncio.run(manager.initialize())
    if low_only:
        products = [p for p in products if p.is_low_stock]
    if not products:
        console.print("[dim]No products.[/dim]")
        log.info("list.empty", low_only=low_only)
        return
    console.print(products_table(products))
    log.info("list.complete", count=len(products), low_only=low_only)


def show(
    product_id: int = typer.Argument(..., help="Product id"),
    store: Path = typer.Option(STORE_PATH, "--store", "-s", help="Path to the device store JSON file"),
) -> None:
    """Show a single product."""
    log = logger.bind(command="show", product_id=product_id)
    manager = build_manager(store)
    asyncio.run(manager.initialize())
    product = manager.get_product(product_id)
    if product is None:
        console.print(f"[red]No product with id {product_id}.[/red]")
        log.info("show.not_found")
        raise typer.Exit(1)
    console.print(f"[bold]{escape(product.name)}[/bold] (id {product.id})")
    console.print(f"  Stock: {format_quantity(product.stock)} {product.unit}")
    console.print(f"  Minimum stock: {format_quantity(product.min_stock)} {product.unit}")
    console.print(f"  Last updated: {product.last_updated.isoformat()}")
    if product.is_low_stock:
        console.print("  [bold red]Below minimum stock[/bold red]")
