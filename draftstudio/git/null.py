"""Provider used when no remote repository is configured."""

from __future__ import annotations

from ..models import CommitResult, ContentKind, RawFile, RemoteFile, RepositoryInfo
from .base import GitProvider


class NullProvider(GitProvider):
    """Does nothing; every lookup is empty."""

    name = "null"

    async def fetch_file(self, path: str, cached: bool = False) -> RemoteFile | None:
        return None

    async def commit_files(self, files: list[RawFile], message: str) -> CommitResult | None:
        return None

    @property
    def repository_url(self) -> str:
        return ""

    @property
    def branch_url(self) -> str:
        return ""

    def commit_url(self, sha: str) -> str:
        return ""

    def file_url(self, kind: ContentKind, fs_path: str) -> str:
        return ""

    def repository_info(self) -> RepositoryInfo:
        return RepositoryInfo()
