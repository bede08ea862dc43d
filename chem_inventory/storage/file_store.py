"""File-backed key-value store: every key lives in one JSON object on disk."""

import json
import os
import tempfile
from pathlib import Path

from chem_inventory.utils.logger import get_logger

logger = get_logger("chem_inventory.storage.file_store")


class FileKeyValueStore:
    """Key-value store persisted to a single JSON file ({key: text}).

    Read and write errors propagate; callers decide whether they are fatal.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)
        logger.debug("file_store.init", path=str(self._path))

    def _read_all(self) -> dict[str, str]:
        if not self._path.exists():
            logger.debug("file_store.file_missing", path=str(self._path))
            return {}
        data = json.loads(self._path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object in {self._path}, got {type(data).__name__}")
        return data

    def _write_all(self, data: dict[str, str]) -> None:
        """Write to a sibling temp file, then swap it in so a failed write leaves the old file intact."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    async def get_item(self, key: str) -> str | None:
        value = self._read_all().get(key)
        if value is not None and not isinstance(value, str):
            raise ValueError(f"value under {key!r} is not text")
        return value

    async def set_item(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)
        logger.debug("file_store.set_item", key=key, size=len(value))

    async def remove_item(self, key: str) -> None:
        data = self._read_all()
        if data.pop(key, None) is None:
            return
        self._write_all(data)
        logger.debug("file_store.remove_item", key=key)
