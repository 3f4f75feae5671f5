"""Derive draft and tree statuses from draft contents."""

from __future__ import annotations

from collections.abc import Callable

from ..errors import InconsistentDraftError
from ..models import ContentItem, DraftItem, DraftStatus, TreeStatus

ItemComparator = Callable[[ContentItem, ContentItem], bool]


def compute_status(
    modified: ContentItem | None,
    original: ContentItem | None,
    are_equal: ItemComparator | None = None,
) -> DraftStatus:
    """Resolve the lifecycle status of a draft.

    Args:
        modified: Current content, None when the file is deleted.
        original: Content the draft started from, None for new files.
        are_equal: Content-aware comparator. Defaults to structural equality.

    Returns:
        The draft status.

    Raises:
        InconsistentDraftError: If both items are None.
    """
    if modified is None and original is None:
        raise InconsistentDraftError("Inconsistent draft: both modified and original are undefined")

    if modified is None:
        return DraftStatus.DELETED

    if original is None or original.id != modified.id:
        return DraftStatus.CREATED

    if modified is original:
        return DraftStatus.PRISTINE

    equal = are_equal(original, modified) if are_equal else original == modified
    return DraftStatus.PRISTINE if equal else DraftStatus.UPDATED


def tree_status(draft: DraftItem) -> TreeStatus:
    """Map a draft to the status displayed in the tree.

    A created draft carrying rename lineage shows as renamed and a pristine
    draft shows as opened.
    """
    if draft.status == DraftStatus.CREATED and draft.origin_fs_path is not None:
        return TreeStatus.RENAMED
    if draft.status == DraftStatus.PRISTINE:
        return TreeStatus.OPENED
    return TreeStatus(draft.status.value)
