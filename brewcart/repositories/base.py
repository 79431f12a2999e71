"""Base repository for a single storage entry."""
from __future__ import annotations

from typing import Any

from brewcart.core.storage import KeyValueStorage


class BaseRepository:
    """Owns one JSON entry in the key-value storage."""

    entry: str = ""
    versioned: bool = True

    def __init__(self, storage: KeyValueStorage) -> None:
        """Initialize repository with a storage instance.

        Args:
            storage: Shared storage, already bound to a namespace
        """
        self.storage = storage
        self.key = storage.key(self.entry, versioned=self.versioned)

    def _read(self, default: Any = None) -> Any:
        return self.storage.get_json(self.key, default=default)

    def _write(self, value: Any) -> bool:
        return self.storage.set_json(self.key, value)
