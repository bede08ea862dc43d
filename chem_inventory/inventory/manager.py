"""Inventory state manager: authoritative product list plus validated mutations.

Every mutation updates memory first and then writes the whole snapshot through
the ProductStore. A failed write is logged and memory is kept as is.
"""

import asyncio
from collections.abc import Callable
from datetime import datetime
from typing import Any

from chem_inventory.config import (
    DELETE_CANCEL_LABEL,
    DELETE_CONFIRM_LABEL,
    DELETE_CONFIRM_MESSAGE,
    DELETE_CONFIRM_TITLE,
    VALIDATION_ALERT_TITLE,
)
from chem_inventory.errors import ValidationError
from chem_inventory.inventory.collaborators import ConfirmDialog, Notifier
from chem_inventory.inventory.validation import ValidatedFields, validate_draft
from chem_inventory.models.product import PendingEdit, Product, ProductDraft, utc_now
from chem_inventory.storage.product_store import ProductStore
from chem_inventory.utils.logger import get_logger

logger = get_logger("chem_inventory.inventory.manager")


class InventoryManager:
    """Owns the in-memory products and the pending add/edit draft."""

    def __init__(
        self,
        store: ProductStore,
        notifier: Notifier,
        confirm_dialog: ConfirmDialog,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._store = store
        self._notifier = notifier
        self._confirm_dialog = confirm_dialog
        self._clock = clock
        self._lock = asyncio.Lock()
        self._products: list[Product] = []
        self._pending = PendingEdit.blank()

    @property
    def products(self) -> list[Product]:
        """Snapshot of the products in insertion order."""
        return list(self._products)

    @property
    def pending_edit(self) -> PendingEdit:
        return self._pending

    def get_product(self, product_id: int) -> Product | None:
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    async def initialize(self) -> list[Product]:
        """Replace the in-memory list with the stored snapshot, if there is one."""
        async with self._lock:
            loaded = await self._store.load()
            if loaded:
                self._products = loaded
            logger.info("inventory.initialized", count=len(self._products))
            return self.products

    # Draft state (no persistence)

    def begin_add(self) -> PendingEdit:
        self._pending = PendingEdit(active=True, mode="add")
        return self._pending

    def begin_edit(self, product: Product) -> PendingEdit:
        self._pending = PendingEdit(
            active=True,
            mode="edit",
            draft=ProductDraft.from_product(product),
        )
        return self._pending

    def update_draft(self, **changes: Any) -> ProductDraft:
        """Apply raw form values to the pending draft. Nothing is validated here."""
        draft = self._pending.draft.model_copy(update=changes)
        self._pending = self._pending.model_copy(update={"draft": draft})
        return draft

    def cancel_edit(self) -> PendingEdit:
        self._pending = PendingEdit.blank()
        return self._pending

    # Mutations

    def _validate(self, draft: ProductDraft, operation: str) -> ValidatedFields:
        try:
            return validate_draft(draft)
        except ValidationError as e:
            logger.warning(
                "inventory.validation_failed",
                operation=operation,
                reason=e.reason,
                field=e.field,
            )
            self._notifier.alert(VALIDATION_ALERT_TITLE, e.message)
            raise

    def _next_id(self) -> int:
        """Creation timestamp in ms, bumped past the highest id so ids stay unique."""
        now_ms = int(self._clock().timestamp() * 1000)
        highest = max((p.id for p in self._products), default=0)
        return max(now_ms, highest + 1)

    async def _persist(self, operation: str) -> bool:
        saved = await self._store.save(self._products)
        if not saved:
            logger.warning(
                "inventory.persist_failed",
                operation=operation,
                count=len(self._products),
            )
        return saved

    async def add_product(self, draft: ProductDraft | None = None) -> Product:
        """Validate draft (default: the pending draft), append a new product and persist."""
        draft = draft if draft is not None else self._pending.draft
        fields = self._validate(draft, "add")
        async with self._lock:
            product = Product(
                id=self._next_id(),
                name=fields.name,
                stock=fields.stock,
                unit=fields.unit,
                min_stock=fields.min_stock,
                last_updated=self._clock(),
                logs=[],
            )
            self._products = [*self._products, product]
            logger.info("inventory.add.ok", product_id=product.id, name=product.name)
            await self._persist("add")
            self._pending = PendingEdit.blank()
            return product

    async def edit_product(self, draft: ProductDraft | None = None) -> Product | None:
        """Replace the editable fields of the product with draft.id.

        Returns the updated product, or None when no product has that id (the
        list is left unchanged and nothing is written).
        """
        draft = draft if draft is not None else self._pending.draft
        fields = self._validate(draft, "edit")
        async with self._lock:
            current = self.get_product(draft.id) if draft.id is not None else None
            if current is None:
                logger.warning("inventory.edit.not_found", product_id=draft.id)
                self._pending = PendingEdit.blank()
                return None
            updated = current.model_copy(
                update={
                    "name": fields.name,
                    "stock": fields.stock,
                    "unit": fields.unit,
                    "min_stock": fields.min_stock,
                    "last_updated": self._clock(),
                }
            )
            self._products = [updated if p.id == current.id else p for p in self._products]
            logger.info("inventory.edit.ok", product_id=updated.id, name=updated.name)
            await self._persist("edit")
            self._pending = PendingEdit.blank()
            return updated

    async def commit_pending(self) -> Product | None:
        """Commit the pending draft as an add or an edit, depending on its mode."""
        if self._pending.mode == "edit":
            return await self.edit_product(self._pending.draft)
        return await self.add_product(self._pending.draft)

    async def delete_product(self, product_id: int) -> bool:
        """Remove the product after user confirmation. Returns True if one was removed."""
        confirmed = self._confirm_dialog.confirm(
            DELETE_CONFIRM_TITLE,
            DELETE_CONFIRM_MESSAGE,
            confirm_label=DELETE_CONFIRM_LABEL,
            cancel_label=DELETE_CANCEL_LABEL,
        )
        if not confirmed:
            logger.info("inventory.delete.cancelled", product_id=product_id)
            return False
        async with self._lock:
            remaining = [p for p in self._products if p.id != product_id]
            if len(remaining) == len(self._products):
                logger.warning("inventory.delete.not_found", product_id=product_id)
                return False
            self._products = remaining
            logger.info("inventory.delete.ok", product_id=product_id)
            await self._persist("delete")
            return True
