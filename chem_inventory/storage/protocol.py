"""Key-value store protocol (device-local storage interface)."""

from typing import Protocol


class KeyValueStore(Protocol):
    """Abstract async interface for a string-keyed store of text values."""

    async def get_item(self, key: str) -> str | None:
        """Return the stored text for key, or None when the key was never written."""
        ...

    async def set_item(self, key: str, value: str) -> None:
        """Write value under key, replacing any previous value."""
        ...

    async def remove_item(self, key: str) -> None:
        """Delete key. No-op when absent."""
        ...
