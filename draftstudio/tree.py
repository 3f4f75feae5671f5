"""Build the file tree shown to editors from live items and drafts."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .content import generate_id_from_fs_path, parse_numeric_prefix
from .drafts import tree_status
from .models import ContentItem, DraftItem, DraftStatus, TreeItem, TreeRootId, TreeStatus

HIDDEN_FILE_NAMES = {".gitkeep"}

# Statuses a directory inherits when every child carries it
UNANIMOUS_STATUSES = {TreeStatus.DELETED, TreeStatus.CREATED, TreeStatus.RENAMED}


def build_tree(
    live_items: Sequence[ContentItem],
    drafts: Iterable[DraftItem] | None = None,
    root_id: TreeRootId | str = TreeRootId.CONTENT,
) -> list[TreeItem]:
    """Merge live items and pending drafts into a tree.

    Deleted drafts that are no longer in the live list still appear (after
    the live items of their directory) unless they are the origin of a
    rename. Directory statuses are derived from their children.

    Args:
        live_items: Items of the live database, in display order.
        drafts: Pending drafts of the same content kind.
        root_id: Root the tree belongs to; prefixes directory ids.

    Returns:
        Top level tree items.
    """
    root = root_id.value if isinstance(root_id, TreeRootId) else root_id
    drafts = list(drafts or [])
    drafts_by_path = {draft.fs_path: draft for draft in drafts}

    items = list(live_items)
    live_paths = {item.fs_path for item in items}
    renamed_origins = {draft.origin_fs_path for draft in drafts if draft.origin_fs_path}
    for draft in drafts:
        if draft.status != DraftStatus.DELETED or draft.original is None:
            continue
        if draft.fs_path in live_paths or draft.fs_path in renamed_origins:
            continue
        items.append(draft.original.model_copy(update={"fs_path": draft.fs_path}))

    tree: list[TreeItem] = []
    directories: dict[str, TreeItem] = {}

    for item in items:
        segments = item.fs_path.split("/")
        children = tree

        for depth in range(len(segments) - 1):
            dir_fs_path = "/".join(segments[: depth + 1])
            directory = directories.get(dir_fs_path)
            if directory is None:
                prefix, name = parse_numeric_prefix(segments[depth])
                directory = TreeItem(
                    id=generate_id_from_fs_path(dir_fs_path, root),
                    name=name,
                    fs_path=dir_fs_path,
                    type="directory",
                    prefix=prefix,
                    children=[],
                )
                directories[dir_fs_path] = directory
                children.append(directory)
            children = directory.children  # type: ignore[assignment]

        children.append(_build_file(item, segments, drafts_by_path.get(item.fs_path)))

    for node in tree:
        _bubble_status(node)

    return tree


def _build_file(item: ContentItem, segments: list[str], draft: DraftItem | None) -> TreeItem:
    file_name = segments[-1]
    stem = file_name.rsplit(".", 1)[0] if "." in file_name.lstrip(".") else file_name
    prefix, name = parse_numeric_prefix(stem)
    if len(segments) == 1 and name == "index":
        name = "home"

    file_item = TreeItem(
        id=item.id,
        name=name,
        fs_path=item.fs_path,
        type="file",
        prefix=prefix,
        route_path=item.path if item.path and item.extension == "md" else None,
    )
    if file_name in HIDDEN_FILE_NAMES:
        file_item.hide = True
    if draft is not None:
        file_item.status = tree_status(draft)
    return file_item


def directory_status(children: Sequence[TreeItem]) -> TreeStatus | None:
    """Status of a directory from the statuses of its children.

    ======================================  ==============
    children                                directory
    ======================================  ==============
    none changed (no status or opened)      no status
    all share deleted, created or renamed   that status
    anything else                           updated
    ======================================  ==============
    """
    statuses = [child.status for child in children]
    if all(status in (None, TreeStatus.OPENED) for status in statuses):
        return None
    if len(set(statuses)) == 1 and statuses[0] in UNANIMOUS_STATUSES:
        return statuses[0]
    return TreeStatus.UPDATED


def _bubble_status(node: TreeItem) -> None:
    if node.type == "file" or not node.children:
        return
    for child in node.children:
        _bubble_status(child)
    node.status = directory_status(node.children)


def find_item_from_fs_path(tree: Sequence[TreeItem], fs_path: str) -> TreeItem | None:
    """Find a file or directory by fs path."""
    if not fs_path:
        return None
    for item in tree:
        if item.fs_path == fs_path:
            return item
        if item.children:
            found = find_item_from_fs_path(item.children, fs_path)
            if found is not None:
                return found
    return None


def find_parent_from_fs_path(tree: Sequence[TreeItem], fs_path: str) -> TreeItem | None:
    """Find the directory directly containing fs_path; None at the top level."""
    for item in tree:
        if not item.children:
            continue
        for child in item.children:
            if child.fs_path == fs_path:
                return item
        found = find_parent_from_fs_path(item.children, fs_path)
        if found is not None:
            return found
    return None


def find_descendants_file_items_from_fs_path(tree: Sequence[TreeItem], fs_path: str) -> list[TreeItem]:
    """Every file at or below fs_path."""
    item = find_item_from_fs_path(tree, fs_path)
    if item is None:
        return []

    files: list[TreeItem] = []
    stack = [item]
    while stack:
        node = stack.pop(0)
        if node.is_file:
            files.append(node)
        elif node.children:
            stack = list(node.children) + stack
    return files


def find_item_from_route(tree: Sequence[TreeItem], route_path: str) -> TreeItem | None:
    """Find the page served at route_path."""
    for item in tree:
        if item.is_file and item.route_path == route_path:
            return item
        if item.children:
            found = find_item_from_route(item.children, route_path)
            if found is not None:
                return found
    return None
