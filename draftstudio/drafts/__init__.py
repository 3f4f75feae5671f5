"""Draft reconciliation engines."""

from .base import DraftManager
from .documents import DocumentDrafts
from .medias import MediaDrafts
from .status import compute_status, tree_status
from .utils import check_conflict, decode_remote_content, find_descendants_from_fs_path

__all__ = [
    "check_conflict",
    "compute_status",
    "decode_remote_content",
    "DocumentDrafts",
    "DraftManager",
    "find_descendants_from_fs_path",
    "MediaDrafts",
    "tree_status",
]
