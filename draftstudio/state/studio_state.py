"""Wire the studio services together."""

from __future__ import annotations

import logging
from pathlib import Path

import httpx
import yaml

from ..config import ConfigLoader, StudioConfig
from ..content import ContentScanner, DocumentCodec
from ..db import DocumentDatabase, MediaDatabase, create_schema, get_connection
from ..drafts import DocumentDrafts, MediaDrafts
from ..git import GitProvider, create_provider
from ..hooks import Hooks
from ..models import CommitResult, ContentKind, TreeRootId
from ..storage import DraftStorage, FileDraftStorage
from .publisher import Publisher
from .tree_state import TreeState

logger = logging.getLogger(__name__)


class StudioState:
    """Studio services for one project: live database, drafts, trees and publisher."""

    def __init__(
        self,
        root_path: str | Path,
        config: StudioConfig | None = None,
        provider: GitProvider | None = None,
        storages: dict[ContentKind, DraftStorage] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the studio.

        Args:
            root_path: Project directory holding ``content/`` and ``public/``.
            config: Configuration; loaded from the project when None.
            provider: Git provider; built from the configuration when None.
            storages: Draft stores per content kind; YAML files under the
                drafts directory when None.
            transport: Optional httpx transport for the built provider.
        """
        self._root_path = Path(root_path)

        self._config_loader = ConfigLoader(self._root_path)
        self.config = config or self._config_loader.load()
        settings = self.config.settings

        # Initialize DuckDB (in-memory by default)
        self._conn = get_connection(settings.database)
        create_schema(self._conn)

        self.hooks = Hooks()
        self.codec = DocumentCodec()
        self.document_db = DocumentDatabase(self._conn, self.codec)
        self.media_db = MediaDatabase(self._conn)

        self.provider = provider or create_provider(
            self.config.repository,
            self.config.author,
            timeout=settings.request_timeout,
            transport=transport,
        )

        if storages is None:
            drafts_dir = self._root_path / settings.drafts_dir
            storages = {kind: FileDraftStorage(drafts_dir, kind.value) for kind in ContentKind}

        self.documents = DocumentDrafts(
            self.document_db, storages[ContentKind.DOCUMENT], self.provider, self.hooks, self.codec
        )
        self.medias = MediaDrafts(self.media_db, storages[ContentKind.MEDIA], self.provider, self.hooks)

        self.document_tree = TreeState(self.documents, TreeRootId.CONTENT)
        self.media_tree = TreeState(self.medias, TreeRootId.MEDIA)

        self.publisher = Publisher(self.provider, [self.documents, self.medias], self.hooks)

    @property
    def root_path(self) -> Path:
        return self._root_path

    async def load(self) -> None:
        """Seed the live database from the project files, then replay drafts."""
        scanner = ContentScanner(self._root_path)

        for fs_path, content in scanner.scan_documents():
            try:
                await self.document_db.create(fs_path, content)
            except (yaml.YAMLError, ValueError) as e:
                logger.warning(f"Failed to parse document {fs_path}: {e}")

        for fs_path, raw in scanner.scan_medias():
            await self.media_db.create(fs_path, raw)

        logger.info(
            f"Loaded {self.document_db.count()} documents and {self.media_db.count()} medias "
            f"from {self._root_path}"
        )

        await self.documents.load()
        await self.medias.load()

    async def publish(self, message: str) -> CommitResult | None:
        return await self.publisher.publish(message)

    async def revert_all(self) -> None:
        """Discard every pending change of every content kind."""
        await self.documents.revert_all()
        await self.medias.revert_all()

    async def close(self) -> None:
        """Release resources."""
        self.document_tree.close()
        self.media_tree.close()
        await self.provider.aclose()
        self._conn.close()
