"""Draft models."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from .base import ContentItem
from .git import RemoteFile
from .status import DraftStatus

ItemT = TypeVar("ItemT", bound=ContentItem)


class ContentConflict(BaseModel):
    """Remote content differs from the content the draft started from."""

    remote_content: str
    local_content: str


class DraftItem(BaseModel, Generic[ItemT]):
    """A locally pending change to one file-system path.

    ``status`` is always assigned from ``compute_status(modified, original)``
    and recomputed when drafts are loaded from storage.
    """

    fs_path: str
    status: DraftStatus
    original: ItemT | None = None
    modified: ItemT | None = None
    remote_file: RemoteFile | None = None
    conflict: ContentConflict | None = None

    @property
    def origin_fs_path(self) -> str | None:
        """Path this draft was renamed from, if it carries rename lineage."""
        if self.status != DraftStatus.CREATED or self.original is None:
            return None
        if self.original.fs_path == self.fs_path:
            return None
        return self.original.fs_path

    def to_storage(self) -> dict[str, Any]:
        """Serialize for a draft store."""
        return self.model_dump(mode="json", exclude_none=True)
