"""Exception hierarchy for inventory operations."""


class InventoryError(Exception):
    """Base class for inventory errors."""


class ValidationError(InventoryError):
    """A draft violates a field constraint. Raised before any state change."""

    EMPTY_NAME = "empty name"
    NEGATIVE_QUANTITY = "negative quantity"
    INVALID_QUANTITY = "invalid quantity"
    INVALID_UNIT = "invalid unit"

    def __init__(self, reason: str, message: str, field: str | None = None):
        super().__init__(message)
        self.reason = reason
        self.message = message
        self.field = field


class StorageError(InventoryError):
    """The device key-value store could not be used."""

    def __init__(self, key: str, cause: BaseException | None = None):
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"storage key {key!r}{detail}")
        self.key = key
        self.cause = cause


class StorageReadError(StorageError):
    """Reading or decoding the stored snapshot failed."""


class StorageWriteError(StorageError):
    """Encoding or writing the snapshot failed."""
