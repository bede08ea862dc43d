"""Product record and the transient draft/edit state bound to form input."""

from datetime import datetime, timezone
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from chem_inventory.config import DEFAULT_MIN_STOCK, DEFAULT_STOCK, DEFAULT_UNIT

Unit = Literal["kg", "L", "g", "mL"]
EditMode = Literal["add", "edit"]

# Form inputs arrive as text; numbers are accepted too so stored products can seed an edit draft
RawQuantity = Union[str, float, int, None]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Product(BaseModel):
    """A tracked chemical. Stored with camelCase keys (minStock, lastUpdated)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: int
    name: str
    stock: float = Field(ge=0)
    unit: Unit
    min_stock: float = Field(ge=0)
    last_updated: datetime = Field(default_factory=utc_now)
    logs: list[dict[str, Any]] = []

    @property
    def is_low_stock(self) -> bool:
        """True when stock is at or below the minimum threshold."""
        return self.stock <= self.min_stock

    def to_storage(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class ProductDraft(BaseModel):
    """Uncommitted, unvalidated field values as typed into the product form."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: Optional[int] = None
    name: str = ""
    stock: RawQuantity = DEFAULT_STOCK
    unit: str = DEFAULT_UNIT
    min_stock: RawQuantity = DEFAULT_MIN_STOCK

    @classmethod
    def from_product(cls, product: Product) -> "ProductDraft":
        return cls(
            id=product.id,
            name=product.name,
            stock=product.stock,
            unit=product.unit,
            min_stock=product.min_stock,
        )


class PendingEdit(BaseModel):
    """In-progress create/edit form. Never authoritative until committed."""

    active: bool = False
    mode: EditMode = "add"
    draft: ProductDraft = Field(default_factory=ProductDraft)

    @classmethod
    def blank(cls) -> "PendingEdit":
        return cls()
