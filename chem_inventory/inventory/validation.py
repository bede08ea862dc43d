"""Coercion and constraint checks for product drafts."""

import math

from pydantic import BaseModel

from chem_inventory.config import UNITS
from chem_inventory.errors import ValidationError
from chem_inventory.models.product import ProductDraft, RawQuantity, Unit


class ValidatedFields(BaseModel):
    """Draft values after trimming and numeric coercion."""

    name: str
    stock: float
    unit: Unit
    min_stock: float


def clean_name(raw: str | None) -> str:
    return (raw or "").strip()


def parse_quantity(raw: RawQuantity, field: str) -> float:
    """Coerce a form value to a finite float. Blank or non-numeric text is rejected."""
    if isinstance(raw, bool):
        raw = None
    try:
        if isinstance(raw, (int, float)):
            value = float(raw)
        else:
            value = float((raw or "").strip())
    except (ValueError, OverflowError):
        value = math.nan
    if not math.isfinite(value):
        raise ValidationError(
            ValidationError.INVALID_QUANTITY,
            "Stock and minimum stock must be numbers",
            field=field,
        )
    return value


def validate_draft(draft: ProductDraft) -> ValidatedFields:
    """Return coerced fields for draft or raise ValidationError.

    Checks run in order: name, quantities, unit. The first failure wins.
    """
    name = clean_name(draft.name)
    if not name:
        raise ValidationError(
            ValidationError.EMPTY_NAME,
            "Product name cannot be empty",
            field="name",
        )

    stock = parse_quantity(draft.stock, "stock")
    min_stock = parse_quantity(draft.min_stock, "min_stock")
    if stock < 0 or min_stock < 0:
        raise ValidationError(
            ValidationError.NEGATIVE_QUANTITY,
            "Quantities cannot be negative",
            field="stock" if stock < 0 else "min_stock",
        )

    unit = (draft.unit or "").strip()
    if unit not in UNITS:
        raise ValidationError(
            ValidationError.INVALID_UNIT,
            f"Unit must be one of {', '.join(UNITS)}",
            field="unit",
        )

    return ValidatedFields(name=name, stock=stock, unit=unit, min_stock=min_stock)
