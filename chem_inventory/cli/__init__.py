"""CLI commands: one module per command group (list/show, add, edit, delete)."""

from typer import Typer

from chem_inventory.cli import add_command, delete_command, edit_command, list_command

app = Typer(help="Chemical inventory manager")


def register_commands() -> None:
    """Register all CLI commands on the global app."""
    app.command(name="list")(list_command.list_products)
    app.command()(list_command.show)
    app.command()(add_command.add)
    app.command()(edit_command.edit)
    app.command()(delete_command.delete)


register_commands()
