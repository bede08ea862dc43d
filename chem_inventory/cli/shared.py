"""Shared CLI helpers: console, logger, console collaborators, manager factory, product table."""

from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm
from rich.table import Table

from chem_inventory.config import STORAGE_KEY, STORE_PATH
from chem_inventory.errors import ValidationError
from chem_inventory.inventory import InventoryManager
from chem_inventory.models import Product
from chem_inventory.storage import FileKeyValueStore, ProductStore
from chem_inventory.utils.logger import get_logger

console = Console()
logger = get_logger("chem_inventory.cli")


class ConsoleNotifier:
    """Prints validation alerts to the console."""

    def alert(self, title: str, message: str) -> None:
        console.print(f"[bold red]{title}:[/bold red] {message}")


class ConsoleConfirmDialog:
    """Asks for confirmation on the console. assume_yes skips the prompt."""

    def __init__(self, assume_yes: bool = False):
        self._assume_yes = assume_yes

    def confirm(
        self,
        title: str,
        message: str,
        *,
        confirm_label: str,
        cancel_label: str,
    ) -> bool:
        if self._assume_yes:
            return True
        console.print(f"[bold]{title}[/bold]")
        return Confirm.ask(
            f"{message} [dim]({confirm_label} = y, {cancel_label} = n)[/dim]",
            console=console,
            default=False,
        )


def build_manager(store_path: Path | None = None, assume_yes: bool = False) -> InventoryManager:
    """Return a manager over the file-backed device store (not yet initialized)."""
    store = ProductStore(FileKeyValueStore(store_path or STORE_PATH), key=STORAGE_KEY)
    return InventoryManager(
        store=store,
        notifier=ConsoleNotifier(),
        confirm_dialog=ConsoleConfirmDialog(assume_yes=assume_yes),
    )


def format_quantity(value: float) -> str:
    return f"{value:g}"


def products_table(products: list[Product], title: str = "Chemical inventory") -> Table:
    table = Table(title=title)
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="white")
    table.add_column("Stock", justify="right")
    table.add_column("Min. stock", justify="right", style="dim")
    table.add_column("Last updated", style="dim")
    for p in products:
        stock_style = "bold red" if p.is_low_stock else "green"
        table.add_row(
            str(p.id),
            escape(p.name),
            f"[{stock_style}]{format_quantity(p.stock)} {p.unit}[/{stock_style}]",
            f"{format_quantity(p.min_stock)} {p.unit}",
            p.last_updated.strftime("%Y-%m-%d %H:%M"),
        )
    return table


def exit_on_validation_error(e: ValidationError, log) -> NoReturn:
    """The notifier already showed the message; record it and exit non-zero."""
    log.warning("cli.validation_error", reason=e.reason, field=e.field)
    raise typer.Exit(1) from e
