"""In-memory draft store."""

from __future__ import annotations

import copy
from typing import Any

from .base import DraftStorage


class MemoryDraftStorage(DraftStorage):
    """Draft store kept in a dict; lost when the process exits."""

    def __init__(self) -> None:
        self._items: dict[str, dict[str, Any]] = {}

    def get_item(self, key: str) -> dict[str, Any] | None:
        value = self._items.get(key)
        return copy.deepcopy(value) if value is not None else None

    def set_item(self, key: str, value: dict[str, Any]) -> None:
        self._items[key] = copy.deepcopy(value)

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def get_keys(self) -> list[str]:
        return list(self._items)

    def clear(self) -> None:
        self._items.clear()
