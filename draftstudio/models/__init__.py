"""Pydantic models for studio content, drafts, trees and git payloads."""

from .base import ContentFileExtension, ContentItem, ContentKind, DocumentItem, MediaItem
from .draft import ContentConflict, DraftItem
from .git import CommitResult, FileEncoding, GitProviderType, RawFile, RemoteFile, RepositoryInfo
from .status import DraftStatus, TreeStatus
from .tree import TreeItem, TreeRootId

__all__ = [
    "CommitResult",
    "ContentConflict",
    "ContentFileExtension",
    "ContentItem",
    "ContentKind",
    "DocumentItem",
    "DraftItem",
    "DraftStatus",
    "FileEncoding",
    "GitProviderType",
    "MediaItem",
    "RawFile",
    "RemoteFile",
    "RepositoryInfo",
    "TreeItem",
    "TreeRootId",
    "TreeStatus",
]
