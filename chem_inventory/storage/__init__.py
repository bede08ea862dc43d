"""Storage: key-value store backends and the product snapshot adapter."""

from chem_inventory.storage.file_store import FileKeyValueStore
from chem_inventory.storage.memory_store import InMemoryKeyValueStore
from chem_inventory.storage.product_store import ProductStore, decode_products, encode_products
from chem_inventory.storage.protocol import KeyValueStore

__all__ = [
    "KeyValueStore",
    "FileKeyValueStore",
    "InMemoryKeyValueStore",
    "ProductStore",
    "encode_products",
    "decode_products",
]
