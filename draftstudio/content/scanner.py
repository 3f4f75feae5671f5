"""Scan a project directory for content and media files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

from ..models import ContentFileExtension, ContentKind
from .media import to_data_url

logger = logging.getLogger(__name__)


class ContentScanner:
    """Read the files the live database is seeded with.

    Documents live under ``content/`` and media under ``public/``.
    """

    DOCUMENT_EXTENSIONS = {f".{ext.value}" for ext in ContentFileExtension}

    def __init__(self, root_path: str | Path):
        self.root = Path(root_path)

    def get_kind_dir(self, kind: ContentKind) -> Path:
        return self.root / kind.remote_dir

    def scan_documents(self) -> Iterator[tuple[str, str]]:
        """Yield (fs_path, text) for every document file."""
        for path in self._iter_files(self.get_kind_dir(ContentKind.DOCUMENT)):
            if path.suffix.lower() not in self.DOCUMENT_EXTENSIONS:
                continue
            try:
                yield self._fs_path(ContentKind.DOCUMENT, path), path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                logger.warning(f"Failed to read {path}: {e}")

    def scan_medias(self) -> Iterator[tuple[str, str]]:
        """Yield (fs_path, data URL) for every media file."""
        for path in self._iter_files(self.get_kind_dir(ContentKind.MEDIA)):
            fs_path = self._fs_path(ContentKind.MEDIA, path)
            try:
                yield fs_path, to_data_url(fs_path, path.read_bytes())
            except OSError as e:
                logger.warning(f"Failed to read {path}: {e}")

    def _iter_files(self, directory: Path) -> Iterator[Path]:
        if not directory.exists():
            return
        for path in sorted(directory.rglob("*")):
            if path.is_file():
                yield path

    def _fs_path(self, kind: ContentKind, path: Path) -> str:
        return path.relative_to(self.get_kind_dir(kind)).as_posix()
