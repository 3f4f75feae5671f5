"""Draft reconciliation shared by every content kind."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, Generic, TypeVar

from ..content import join_path
from ..db import LiveDatabase
from ..errors import DraftExistsError, DraftNotFoundError, ItemNotFoundError
from ..git import GitProvider
from ..hooks import PREVIEW_RERENDER, Hooks
from ..models import ContentConflict, ContentItem, ContentKind, DraftItem, DraftStatus, RawFile, RemoteFile
from ..storage import DraftStorage
from .status import compute_status
from .utils import check_conflict, find_descendants_from_fs_path

logger = logging.getLogger(__name__)

ItemT = TypeVar("ItemT", bound=ContentItem)


class DraftManager(Generic[ItemT]):
    """Pending changes of one content kind.

    Keeps an ordered list of drafts mirrored one to one in a draft store and
    applies every change to the live database. Callers must not run two
    operations on the same path concurrently.
    """

    kind: ContentKind = ContentKind.DOCUMENT
    item_type: type[ContentItem] = ContentItem
    encoding: str = "utf-8"

    def __init__(
        self,
        live_db: LiveDatabase,
        storage: DraftStorage,
        provider: GitProvider,
        hooks: Hooks,
    ):
        self.live_db = live_db
        self.storage = storage
        self.provider = provider
        self.hooks = hooks
        self.drafts: list[DraftItem[ItemT]] = []
        self.current: DraftItem[ItemT] | None = None
        self._draft_type = DraftItem[self.item_type]

    @property
    def hook_name(self) -> str:
        return f"studio:draft:{self.kind.value}:updated"

    # Status

    def are_equal(self, item1: ItemT, item2: ItemT) -> bool:
        """Compare two items of this kind."""
        return item1 == item2

    def get_status(self, modified: ItemT | None, original: ItemT | None) -> DraftStatus:
        return compute_status(modified, original, self.are_equal)

    # Content conversion, specialized per kind

    def generate_content(self, item: ItemT) -> str:
        """File content of an item as sent to the remote repository."""
        raise NotImplementedError

    def decode_remote_content(self, remote_file: RemoteFile) -> str | None:
        """Remote content in the same form as :meth:`generate_content`."""
        raise NotImplementedError

    def relocate(self, item: ItemT, fs_path: str) -> ItemT:
        """Build the equivalent item located at fs_path."""
        raise NotImplementedError

    # Queries

    def get(self, fs_path: str) -> DraftItem[ItemT] | None:
        """Get the draft at fs_path."""
        for draft in self.drafts:
            if draft.fs_path == fs_path:
                return draft
        return None

    async def current_content(self, fs_path: str) -> ItemT | None:
        """Draft content if any, else the live database value."""
        draft = self.get(fs_path)
        if draft is not None and draft.modified is not None:
            return draft.modified
        return await self.live_db.get(fs_path)

    # Mutations

    async def create(
        self,
        fs_path: str,
        item: ItemT,
        original: ItemT | None = None,
        rerender: bool = True,
    ) -> DraftItem[ItemT]:
        """Create a draft at fs_path.

        Args:
            fs_path: Path of the draft.
            item: Current content.
            original: Content the draft started from (rename lineage).
            rerender: Emit the change notification.

        Raises:
            DraftExistsError: If a draft already exists at fs_path.
        """
        if self.get(fs_path) is not None:
            raise DraftExistsError(f"Draft file already exists for {self.kind.value} at {fs_path}")

        remote_file = await self.fetch_remote_file(fs_path)

        draft = self._draft_type(
            fs_path=fs_path,
            status=self.get_status(item, original),
            original=original,
            modified=item,
            remote_file=remote_file,
        )
        draft.conflict = self.check_conflict(draft)

        self._persist(draft)
        self.drafts.append(draft)
        await self.live_db.upsert(fs_path, item)

        if rerender:
            await self.notify("create")
        return draft

    async def update(
        self,
        fs_path: str,
        item: ItemT | Mapping[str, Any],
        rerender: bool = True,
    ) -> DraftItem[ItemT]:
        """Replace the content of a draft.

        Status is recomputed against the draft's own original, so rename
        lineage survives edits. When no draft exists yet but the live
        database has an entry, a pristine baseline draft is created first.

        Args:
            fs_path: Path of the draft.
            item: New content, or a mapping of fields to change.
            rerender: Emit change and preview notifications.

        Raises:
            DraftNotFoundError: If neither a draft nor a live entry exists.
        """
        draft = self.get(fs_path)
        if draft is None:
            live_item = await self.live_db.get(fs_path)
            if live_item is None:
                raise DraftNotFoundError(f"Draft file not found for {self.kind.value} fsPath: {fs_path}")
            draft = await self.create(fs_path, live_item, live_item, rerender=False)

        if isinstance(item, Mapping):
            base = draft.modified if draft.modified is not None else draft.original
            item = base.model_copy(update=dict(item))  # type: ignore[union-attr]

        old_status = draft.status
        draft.modified = item
        draft.status = self.get_status(item, draft.original)

        self._persist(draft)
        await self.live_db.upsert(fs_path, item)

        if not rerender:
            return draft
        if draft.status != old_status:
            await self.notify("update")
        else:
            await self.hooks.call_hook(PREVIEW_RERENDER, fs_path=fs_path)

        return draft

    async def remove(self, fs_paths: Iterable[str], rerender: bool = True) -> None:
        """Delete files.

        Created drafts are discarded; any other existing file becomes a
        deleted draft that keeps its original content.
        """
        changed = False
        for fs_path in fs_paths:
            draft = self.get(fs_path)
            live_item = await self.live_db.get(fs_path)

            if draft is None and live_item is None:
                continue
            if draft is not None and draft.status == DraftStatus.DELETED:
                continue

            await self.live_db.delete(fs_path)
            changed = True

            if draft is not None and draft.status == DraftStatus.CREATED:
                self._purge(draft)
                continue

            original = draft.original if draft is not None else live_item
            remote_file = draft.remote_file if draft is not None else None
            if remote_file is None:
                remote_file = await self.fetch_remote_file(fs_path)

            deleted = self._draft_type(
                fs_path=fs_path,
                status=self.get_status(None, original),
                original=original,
                remote_file=remote_file,
            )
            self._persist(deleted)
            self._replace(draft, deleted)

        if changed and rerender:
            await self.notify("remove")

    async def revert(self, fs_path: str, rerender: bool = True) -> None:
        """Discard the changes at fs_path, below it, or everywhere for a root id.

        Raises:
            DraftNotFoundError: If no draft matches fs_path.
        """
        drafts = find_descendants_from_fs_path(self.drafts, fs_path)
        if not drafts:
            raise DraftNotFoundError(f"No draft found for {self.kind.value} fsPath: {fs_path}")

        for draft in drafts:
            await self._revert_draft(draft)

        if rerender:
            await self.notify("revert")

    async def revert_all(self) -> None:
        """Discard every pending change and clear the store."""
        for draft in list(self.drafts):
            await self._revert_draft(draft)

        self.storage.clear()
        self.drafts = []
        self.current = None
        await self.notify("revert_all")

    async def rename(self, pairs: Iterable[tuple[str, str]], rerender: bool = True) -> None:
        """Move files, keeping a link to the content they had before.

        Each rename yields a deleted draft at the old path and a created draft
        at the new one, both holding the same original content.

        Raises:
            ItemNotFoundError: If there is nothing at the old path.
            DraftExistsError: If a file already exists at the new path.
        """
        for fs_path, new_fs_path in pairs:
            if fs_path == new_fs_path:
                continue

            draft = self.get(fs_path)
            live_item = await self.live_db.get(fs_path)
            item = draft.modified if draft is not None and draft.modified is not None else live_item
            if item is None:
                raise ItemNotFoundError(f"Database item not found for {self.kind.value} fsPath: {fs_path}")

            if await self.live_db.get(new_fs_path) is not None:
                raise DraftExistsError(f"A {self.kind.value} already exists at {new_fs_path}")

            original = draft.original if draft is not None else live_item

            target = self.get(new_fs_path)
            if target is not None:
                # Only a rename back onto its own origin folds the pair
                renamed_back = original is not None and original.fs_path == new_fs_path
                if target.status != DraftStatus.DELETED or not renamed_back:
                    raise DraftExistsError(f"Draft file already exists for {self.kind.value} at {new_fs_path}")
                self._purge(target)

            new_item = self.relocate(item, new_fs_path)
            await self.live_db.upsert(new_fs_path, new_item)

            await self.remove([fs_path], rerender=False)
            await self.create(new_fs_path, new_item, original, rerender=False)
            logger.debug(f"Renamed {self.kind.value} {fs_path} -> {new_fs_path}")

        if rerender:
            await self.notify("rename")

    async def duplicate(self, fs_path: str, rerender: bool = True) -> DraftItem[ItemT]:
        """Copy a file next to itself as a new file.

        Raises:
            ItemNotFoundError: If there is nothing at fs_path.
        """
        item = await self.current_content(fs_path)
        if item is None:
            raise ItemNotFoundError(f"Database item not found for {self.kind.value} fsPath: {fs_path}")

        new_fs_path = await self._copy_fs_path(fs_path)
        new_item = self.relocate(item, new_fs_path)
        await self.live_db.upsert(new_fs_path, new_item)

        return await self.create(new_fs_path, new_item, rerender=rerender)

    async def load(self) -> None:
        """Rebuild the draft list from the store and replay it on the live database."""
        drafts: list[DraftItem[ItemT]] = []
        for key in self.storage.get_keys():
            data = self.storage.get_item(key)
            if data is None:
                continue

            draft = self._draft_type.model_validate(data)
            draft.status = self.get_status(draft.modified, draft.original)
            if draft.status == DraftStatus.PRISTINE:
                self.storage.remove_item(key)
                continue
            drafts.append(draft)

        self.drafts = drafts
        self.current = None

        for draft in self.drafts:
            if draft.status == DraftStatus.DELETED:
                await self.live_db.delete(draft.fs_path)
            else:
                await self.live_db.upsert(draft.fs_path, draft.modified)

        logger.info(f"Loaded {len(self.drafts)} {self.kind.value} drafts")
        await self.notify("load", select_item=False)

    # Selection

    async def select(self, fs_path: str) -> DraftItem[ItemT]:
        """Make the draft at fs_path current, opening the live item if needed.

        Raises:
            ItemNotFoundError: If no draft and no live entry exist.
        """
        draft = self.get(fs_path)
        if draft is None:
            live_item = await self.live_db.get(fs_path)
            if live_item is None:
                raise ItemNotFoundError(
                    f"Cannot select item: no corresponding database entry found for fsPath {fs_path}"
                )
            draft = await self.create(fs_path, live_item, live_item)

        self.current = draft
        return draft

    def unselect(self) -> None:
        self.current = None

    # Publishing

    def list_as_raw_files(self) -> list[RawFile]:
        """Commit payload of every pending change."""
        files = []
        for draft in self.drafts:
            if draft.status == DraftStatus.PRISTINE:
                continue

            path = join_path(self.kind.remote_dir, draft.fs_path)
            if draft.status == DraftStatus.DELETED:
                files.append(RawFile(path=path, content=None, status=draft.status, encoding=self.encoding))
            else:
                files.append(
                    RawFile(
                        path=path,
                        content=self.generate_content(draft.modified),
                        status=draft.status,
                        encoding=self.encoding,
                    )
                )
        return files

    # Remote

    async def fetch_remote_file(self, fs_path: str) -> RemoteFile | None:
        return await self.provider.fetch_file(join_path(self.kind.remote_dir, fs_path), cached=True)

    def check_conflict(self, draft: DraftItem[ItemT]) -> ContentConflict | None:
        """Compare the published content with the content the draft started from."""
        if draft.remote_file is None or draft.original is None:
            return None
        return check_conflict(
            self.decode_remote_content(draft.remote_file),
            self.generate_content(draft.original),
        )

    async def notify(self, caller: str, **meta: Any) -> None:
        await self.hooks.call_hook(self.hook_name, caller=f"{type(self).__name__}.{caller}", **meta)

    # Internal

    async def _revert_draft(self, draft: DraftItem[ItemT]) -> None:
        if self.get(draft.fs_path) is not draft:
            return

        if draft.status == DraftStatus.CREATED:
            await self.live_db.delete(draft.fs_path)
            self._purge(draft)

            origin = draft.origin_fs_path
            if origin is not None:
                origin_draft = self.get(origin)
                if origin_draft is not None:
                    await self._revert_draft(origin_draft)
            return

        await self.live_db.upsert(draft.fs_path, draft.original)
        draft.modified = draft.original
        draft.status = self.get_status(draft.modified, draft.original)
        self._persist(draft)

    async def _copy_fs_path(self, fs_path: str) -> str:
        directory, _, name = fs_path.rpartition("/")
        stem, dot, extension = name.rpartition(".")
        if not dot or not stem:
            stem, extension = name, ""

        index = 1
        while True:
            suffix = "-copy" if index == 1 else f"-copy-{index}"
            candidate_name = f"{stem}{suffix}.{extension}" if extension else f"{stem}{suffix}"
            candidate = join_path(directory, candidate_name)
            if self.get(candidate) is None and await self.live_db.get(candidate) is None:
                return candidate
            index += 1

    def _persist(self, draft: DraftItem[ItemT]) -> None:
        self.storage.set_item(draft.fs_path, draft.to_storage())

    def _purge(self, draft: DraftItem[ItemT]) -> None:
        self.storage.remove_item(draft.fs_path)
        self.drafts = [d for d in self.drafts if d is not draft]
        if self.current is draft:
            self.current = None

    def _replace(self, old: DraftItem[ItemT] | None, new: DraftItem[ItemT]) -> None:
        if old is None:
            self.drafts.append(new)
            return
        self.drafts = [new if d is old else d for d in self.drafts]
        if self.current is old:
            self.current = new
