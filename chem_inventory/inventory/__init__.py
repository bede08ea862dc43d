"""Inventory state manager, draft validation and user collaborators."""

from chem_inventory.inventory.collaborators import ConfirmDialog, Notifier
from chem_inventory.inventory.manager import InventoryManager
from chem_inventory.inventory.validation import ValidatedFields, parse_quantity, validate_draft

__all__ = [
    "InventoryManager",
    "Notifier",
    "ConfirmDialog",
    "ValidatedFields",
    "validate_draft",
    "parse_quantity",
]
