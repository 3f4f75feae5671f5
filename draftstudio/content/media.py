"""Media item helpers."""

from __future__ import annotations

import base64
import mimetypes
import re

from ..models import MediaItem, TreeRootId
from .paths import (
    generate_id_from_fs_path,
    generate_stem_from_fs_path,
    get_file_extension,
    join_path,
)

DATA_URL_PATTERN = re.compile(r"^data:[\w.+-]+/[\w.+-]+;base64,")
MEDIA_ROOT = TreeRootId.MEDIA.value


def slugify_file_name(file_name: str) -> str:
    """Normalize an uploaded file name.

    Example: "My Photo (1).PNG" -> "my-photo-1.png"
    """
    stem, dot, extension = file_name.rpartition(".")
    if not dot:
        stem, extension = file_name, ""
    slug = re.sub(r"[^a-z0-9_-]+", "-", stem.lower()).strip("-") or "file"
    return f"{slug}.{extension.lower()}" if extension else slug


def to_data_url(fs_path: str, data: bytes) -> str:
    """Encode bytes as a data URL, guessing the mime type from the path."""
    mime_type = mimetypes.guess_type(fs_path)[0] or "application/octet-stream"
    return f"data:{mime_type};base64,{base64.b64encode(data).decode('ascii')}"


def strip_data_url(raw: str) -> str:
    """Return the base64 payload of a data URL."""
    return DATA_URL_PATTERN.sub("", raw, count=1)


def build_media_item(fs_path: str, raw: str | None = None) -> MediaItem:
    """Create a media item located at fs_path."""
    return MediaItem(
        id=generate_id_from_fs_path(fs_path, MEDIA_ROOT),
        fs_path=fs_path,
        extension=get_file_extension(fs_path),
        stem=generate_stem_from_fs_path(fs_path),
        path="/" + join_path(fs_path),
        raw=raw,
    )


def relocate_media_item(item: MediaItem, fs_path: str) -> MediaItem:
    """Copy a media item to a new path, keeping its data."""
    return build_media_item(fs_path, item.raw)
