"""Live database adapters backed by DuckDB."""

from __future__ import annotations

import json
import logging
from typing import Generic, TypeVar

import duckdb

from ..content import DocumentCodec, build_media_item, generate_fs_path_from_id, generate_id_from_fs_path
from ..models import ContentItem, ContentKind, DocumentItem, MediaItem, TreeRootId

logger = logging.getLogger(__name__)

ItemT = TypeVar("ItemT", bound=ContentItem)


class LiveDatabase(Generic[ItemT]):
    """Queryable live representation of one content kind.

    Items are keyed by fs path and listed in first-insertion order.
    """

    item_type: type[ContentItem] = ContentItem

    def __init__(self, conn: duckdb.DuckDBPyConnection, kind: ContentKind, root: str):
        self.conn = conn
        self.kind = kind
        self.root = root

    async def get(self, fs_path: str) -> ItemT | None:
        """Get the live item at fs_path."""
        result = self.conn.execute(
            "SELECT data FROM items WHERE collection = ? AND fs_path = ?",
            [self.kind.value, fs_path],
        ).fetchone()
        if result:
            return self._to_item(result[0])
        return None

    async def upsert(self, fs_path: str, item: ItemT) -> None:
        """Insert or replace the item at fs_path, keeping its list position."""
        item = self._normalize(fs_path, item)
        data = item.model_dump_json()

        existing = self.conn.execute(
            "SELECT position FROM items WHERE collection = ? AND fs_path = ?",
            [self.kind.value, fs_path],
        ).fetchone()

        if existing:
            self.conn.execute(
                """
                UPDATE items SET id = ?, data = ?, updated_at = current_timestamp
                WHERE collection = ? AND fs_path = ?
                """,
                [item.id, data, self.kind.value, fs_path],
            )
        else:
            self.conn.execute(
                """
                INSERT INTO items (collection, fs_path, id, position, data)
                VALUES (?, ?, ?, nextval('items_position_seq'), ?)
                """,
                [self.kind.value, fs_path, item.id, data],
            )

    async def delete(self, fs_path: str) -> None:
        """Delete the item at fs_path (no-op when absent)."""
        self.conn.execute(
            "DELETE FROM items WHERE collection = ? AND fs_path = ?",
            [self.kind.value, fs_path],
        )

    async def list(self) -> list[ItemT]:
        """Get all items in insertion order."""
        result = self.conn.execute(
            "SELECT data FROM items WHERE collection = ? ORDER BY position",
            [self.kind.value],
        ).fetchall()
        return [self._to_item(row[0]) for row in result]

    async def create(self, fs_path: str, content: str) -> ItemT:
        """Build an item from raw file content and upsert it."""
        item = self._parse(fs_path, content)
        await self.upsert(fs_path, item)
        return item

    def get_file_system_path(self, item_id: str) -> str:
        """Get the fs path of an item from its id."""
        return generate_fs_path_from_id(item_id, self.root)

    def count(self) -> int:
        """Get the number of live items."""
        result = self.conn.execute(
            "SELECT COUNT(*) FROM items WHERE collection = ?", [self.kind.value]
        ).fetchone()
        return result[0] if result else 0

    def _normalize(self, fs_path: str, item: ItemT) -> ItemT:
        if item.fs_path == fs_path:
            return item
        return item.model_copy(
            update={"fs_path": fs_path, "id": generate_id_from_fs_path(fs_path, self.root)}
        )

    def _parse(self, fs_path: str, content: str) -> ItemT:
        raise NotImplementedError

    def _to_item(self, data: str | dict) -> ItemT:
        if isinstance(data, str):
            data = json.loads(data)
        return self.item_type.model_validate(data)  # type: ignore[return-value]


class DocumentDatabase(LiveDatabase[DocumentItem]):
    """Live documents, parsed through a document codec."""

    item_type = DocumentItem

    def __init__(self, conn: duckdb.DuckDBPyConnection, codec: DocumentCodec | None = None):
        super().__init__(conn, ContentKind.DOCUMENT, TreeRootId.CONTENT.value)
        self.codec = codec or DocumentCodec(self.root)

    def _parse(self, fs_path: str, content: str) -> DocumentItem:
        return self.codec.parse(fs_path, content)


class MediaDatabase(LiveDatabase[MediaItem]):
    """Live media assets; content is a data URL."""

    item_type = MediaItem

    def __init__(self, conn: duckdb.DuckDBPyConnection):
        super().__init__(conn, ContentKind.MEDIA, TreeRootId.MEDIA.value)

    def _parse(self, fs_path: str, content: str) -> MediaItem:
        return build_media_item(fs_path, content)
