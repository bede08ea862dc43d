"""Utility modules."""

from chem_inventory.utils.logger import bind_context, clear_context, get_logger

__all__ = [
    "get_logger",
    "bind_context",
    "clear_context",
]
