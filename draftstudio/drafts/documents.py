"""Drafts of content documents."""

from __future__ import annotations

from ..content import DocumentCodec
from ..db import DocumentDatabase
from ..git import GitProvider
from ..hooks import Hooks
from ..models import ContentKind, DocumentItem, RemoteFile
from ..storage import DraftStorage
from .base import DraftManager
from .utils import decode_remote_content


class DocumentDrafts(DraftManager[DocumentItem]):
    """Pending changes of markdown pages and data files under ``content/``."""

    kind = ContentKind.DOCUMENT
    item_type = DocumentItem
    encoding = "utf-8"

    def __init__(
        self,
        live_db: DocumentDatabase,
        storage: DraftStorage,
        provider: GitProvider,
        hooks: Hooks,
        codec: DocumentCodec | None = None,
    ):
        super().__init__(live_db, storage, provider, hooks)
        self.codec = codec or live_db.codec

    def are_equal(self, item1: DocumentItem, item2: DocumentItem) -> bool:
        return self.codec.are_equal(item1, item2)

    def generate_content(self, item: DocumentItem) -> str:
        return self.codec.generate(item)

    def decode_remote_content(self, remote_file: RemoteFile) -> str | None:
        return decode_remote_content(remote_file)

    def relocate(self, item: DocumentItem, fs_path: str) -> DocumentItem:
        # Round trip through the file content so derived fields follow the new path
        return self.codec.parse(fs_path, self.codec.generate(item))
