"""Persistent draft store interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class DraftStorage(ABC):
    """Key-value store holding serialized drafts, keyed by fs path."""

    @abstractmethod
    def get_item(self, key: str) -> dict[str, Any] | None:
        """Get a stored draft, or None if absent."""
        ...

    @abstractmethod
    def set_item(self, key: str, value: dict[str, Any]) -> None:
        """Store a draft, replacing any previous value."""
        ...

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Remove a stored draft (no-op when absent)."""
        ...

    @abstractmethod
    def get_keys(self) -> list[str]:
        """List stored keys."""
        ...

    def clear(self) -> None:
        """Remove every stored draft."""
        for key in self.get_keys():
            self.remove_item(key)
