"""Persistent draft stores."""

from .base import DraftStorage
from .file import FileDraftStorage
from .memory import MemoryDraftStorage

__all__ = ["DraftStorage", "FileDraftStorage", "MemoryDraftStorage"]
