"""Persistent store adapter: whole-snapshot product list under one storage key.

Loads and saves fail soft. Errors are logged and never raised to the caller,
so the in-memory inventory stays the source of truth for the session.
"""

import json
from collections.abc import Sequence

from pydantic import ValidationError as PydanticValidationError

from chem_inventory.config import STORAGE_KEY
from chem_inventory.errors import StorageReadError, StorageWriteError
from chem_inventory.models.product import Product
from chem_inventory.storage.protocol import KeyValueStore
from chem_inventory.utils.logger import get_logger

logger = get_logger("chem_inventory.storage.product_store")


def encode_products(products: Sequence[Product]) -> str:
    """Serialize the full product sequence to JSON text."""
    return json.dumps([p.to_storage() for p in products])


def decode_products(text: str) -> list[Product]:
    """Parse JSON text into products. Records that fail validation are skipped.

    Raises ValueError when the text is not a JSON array.
    """
    data = json.loads(text)
    if not isinstance(data, list):
        raise ValueError(f"expected a JSON array, got {type(data).__name__}")
    products: list[Product] = []
    seen_ids: set[int] = set()
    for index, item in enumerate(data):
        try:
            product = Product.model_validate(item)
        except PydanticValidationError as e:
            logger.warning(
                "product_store.record_skipped",
                index=index,
                errors=e.error_count(),
            )
            continue
        if product.id in seen_ids:
            # First occurrence wins; ids must stay unique in memory
            logger.warning("product_store.duplicate_id_skipped", index=index, product_id=product.id)
            continue
        seen_ids.add(product.id)
        products.append(product)
    return products


class ProductStore:
    """Reads and writes the product snapshot through a key-value store."""

    def __init__(self, kv_store: KeyValueStore, key: str = STORAGE_KEY):
        self._kv = kv_store
        self._key = key

    async def _read(self) -> list[Product]:
        try:
            raw = await self._kv.get_item(self._key)
        except Exception as e:
            raise StorageReadError(self._key, e) from e
        if raw is None:
            return []
        try:
            return decode_products(raw)
        except ValueError as e:
            # json.JSONDecodeError is a ValueError
            raise StorageReadError(self._key, e) from e

    async def load(self) -> list[Product]:
        """Return the stored products, or an empty list when absent or unreadable."""
        try:
            products = await self._read()
        except StorageReadError as e:
            logger.error("product_store.load_error", key=self._key, error=str(e.cause))
            return []
        logger.info("product_store.loaded", key=self._key, count=len(products))
        return products

    async def _write(self, products: Sequence[Product]) -> None:
        try:
            text = encode_products(products)
            await self._kv.set_item(self._key, text)
        except Exception as e:
            raise StorageWriteError(self._key, e) from e

    async def save(self, products: Sequence[Product]) -> bool:
        """Overwrite the snapshot with products. Returns False (logged) on failure."""
        try:
            await self._write(products)
        except StorageWriteError as e:
            logger.error("product_store.save_error", key=self._key, error=str(e.cause))
            return False
        logger.debug("product_store.saved", key=self._key, count=len(products))
        return True
