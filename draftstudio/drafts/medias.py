"""Drafts of media assets."""

from __future__ import annotations

import logging

from ..content import build_media_item, join_path, relocate_media_item, slugify_file_name, strip_data_url, to_data_url
from ..models import ContentKind, DraftItem, MediaItem, RemoteFile
from .base import DraftManager

logger = logging.getLogger(__name__)


class MediaDrafts(DraftManager[MediaItem]):
    """Pending changes of files under ``public/``, carried as data URLs."""

    kind = ContentKind.MEDIA
    item_type = MediaItem
    encoding = "base64"

    def generate_content(self, item: MediaItem) -> str:
        return strip_data_url(item.raw or "")

    def decode_remote_content(self, remote_file: RemoteFile) -> str | None:
        if remote_file.content is None:
            return None
        return remote_file.content.replace("\n", "")

    def relocate(self, item: MediaItem, fs_path: str) -> MediaItem:
        return relocate_media_item(item, fs_path)

    async def upload(self, parent_fs_path: str, file_name: str, data: bytes) -> DraftItem[MediaItem]:
        """Add a new media file.

        Args:
            parent_fs_path: Directory to upload into ("/" or "" for the root).
            file_name: Name of the uploaded file, slugified before use.
            data: File bytes.

        Returns:
            The created draft.
        """
        fs_path = join_path(parent_fs_path, slugify_file_name(file_name))
        item = build_media_item(fs_path, to_data_url(fs_path, data))
        logger.info(f"Uploading media {fs_path} ({len(data)} bytes)")
        return await self.create(fs_path, item)
