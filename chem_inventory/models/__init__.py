"""Pydantic models for the chemical inventory."""

from chem_inventory.models.product import (
    EditMode,
    PendingEdit,
    Product,
    ProductDraft,
    Unit,
    utc_now,
)

__all__ = [
    "Product",
    "ProductDraft",
    "PendingEdit",
    "Unit",
    "EditMode",
    "utc_now",
]
