"""Helpers shared by the draft managers."""

from __future__ import annotations

import base64
import binascii
import logging
from collections.abc import Iterable

from ..content import is_equal
from ..models import ContentConflict, DraftItem, RemoteFile, TreeRootId

logger = logging.getLogger(__name__)

ROOT_IDS = {"", "/", TreeRootId.CONTENT.value, TreeRootId.MEDIA.value}


def find_descendants_from_fs_path(drafts: Iterable[DraftItem], fs_path: str) -> list[DraftItem]:
    """Drafts at fs_path or below it; every draft when fs_path names a root."""
    drafts = list(drafts)
    if fs_path in ROOT_IDS:
        return drafts

    prefix = fs_path.rstrip("/") + "/"
    return [d for d in drafts if d.fs_path == fs_path or d.fs_path.startswith(prefix)]


def decode_remote_content(remote_file: RemoteFile) -> str | None:
    """Decode the content of a remote file as text."""
    if remote_file.content is None:
        return None
    if remote_file.encoding != "base64":
        return remote_file.content

    try:
        return base64.b64decode(remote_file.content.replace("\n", "")).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as e:
        logger.warning(f"Cannot decode remote content of {remote_file.path}: {e}")
        return None


def check_conflict(remote_content: str | None, local_content: str | None) -> ContentConflict | None:
    """Report a conflict when the published content differs from the local one."""
    if remote_content is None or local_content is None:
        return None
    if is_equal(remote_content, local_content):
        return None
    return ContentConflict(remote_content=remote_content, local_content=local_content)
