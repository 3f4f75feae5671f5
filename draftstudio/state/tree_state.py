"""Tree view kept in sync with a draft manager."""

from __future__ import annotations

import logging
from typing import Any

from ..drafts import DraftManager
from ..models import DraftItem, TreeItem, TreeRootId
from ..tree import build_tree, find_item_from_fs_path, find_parent_from_fs_path

logger = logging.getLogger(__name__)


class TreeState:
    """Observable tree of one content kind.

    Rebuilds whenever the draft manager reports a change.
    """

    def __init__(self, drafts: DraftManager, root_id: TreeRootId):
        self._drafts = drafts
        self.root_id = root_id
        self.tree: list[TreeItem] = []
        self.current_item: TreeItem | None = None
        self._unregister = drafts.hooks.hook(drafts.hook_name, self._on_drafts_updated)

    @property
    def root(self) -> TreeItem:
        """Root item holding the whole tree."""
        return TreeItem(
            id=self.root_id.value,
            name=self.root_id.value,
            fs_path="",
            type="root",
            children=self.tree,
        )

    @property
    def current_tree(self) -> list[TreeItem]:
        """Children of the current directory, or of its parent for a file."""
        item = self.current_item
        if item is None:
            return self.tree
        if item.type == "directory":
            return item.children or []

        parent = find_parent_from_fs_path(self.tree, item.fs_path)
        if parent is None:
            return self.tree
        return parent.children or []

    async def rebuild(self) -> list[TreeItem]:
        """Rebuild the tree from the live database and the draft list."""
        live_items = await self._drafts.live_db.list()
        self.tree = build_tree(live_items, self._drafts.drafts, self.root_id)

        # Keep the selection pointing at the rebuilt node
        if self.current_item is not None:
            self.current_item = find_item_from_fs_path(self.tree, self.current_item.fs_path)

        logger.debug(f"Rebuilt {self.root_id.value} tree ({len(live_items)} live items)")
        return self.tree

    async def select_item(self, item: TreeItem | None) -> DraftItem | None:
        """Select a tree item; opening a file selects its draft."""
        self.current_item = item
        if item is None or not item.is_file:
            self._drafts.unselect()
            return None
        return await self._drafts.select(item.fs_path)

    async def select_by_fs_path(self, fs_path: str) -> DraftItem | None:
        item = find_item_from_fs_path(self.tree, fs_path)
        if item is None:
            logger.warning(f"No tree item at {fs_path}")
        return await self.select_item(item)

    async def _on_drafts_updated(self, **meta: Any) -> None:
        await self.rebuild()

    def close(self) -> None:
        """Stop following the draft manager."""
        self._unregister()
