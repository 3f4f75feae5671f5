"""GitLab REST API provider."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

from ..models import CommitResult, ContentKind, DraftStatus, GitProviderType, RawFile, RemoteFile, RepositoryInfo
from .base import HttpGitProvider

logger = logging.getLogger(__name__)

GITLAB_URL = "https://gitlab.com"


class GitLabProvider(HttpGitProvider):
    """Commit through the single-request commits API."""

    name = "GitLab"

    def __init__(self, *args: Any, instance_url: str = GITLAB_URL, **kwargs: Any):
        self.instance_url = instance_url.rstrip("/")
        super().__init__(*args, **kwargs)

    @property
    def api_base_url(self) -> str:
        project = quote(f"{self.owner}/{self.repo}", safe="")
        return f"{self.instance_url}/api/v4/projects/{project}"

    def _headers(self) -> dict[str, str]:
        if not self.token:
            return {}
        return {"Authorization": f"Bearer {self.token}"}

    async def _get_file(self, path: str) -> RemoteFile | None:
        # Without /raw the API returns metadata and base64 content
        r = await self._client.get(
            f"/repository/files/{quote(path, safe='')}",
            params={"ref": self.branch},
        )
        if r.status_code == 404:
            return None
        r.raise_for_status()
        data = r.json()
        return RemoteFile(
            provider=GitProviderType.GITLAB,
            name=path.rsplit("/", 1)[-1],
            path=path,
            sha=data["blob_id"],
            size=data.get("size", 0),
            url=data.get("file_path", path),
            content=data.get("content"),
            encoding="base64",
        )

    async def _commit(self, files: list[RawFile], message: str) -> CommitResult:
        r = await self._client.post(
            "/repository/commits",
            json={
                "branch": self.branch,
                "commit_message": message,
                "actions": [self._action(file) for file in files],
                "author_name": self.author_name,
                "author_email": self.author_email,
            },
        )
        r.raise_for_status()
        commit_sha = r.json()["id"]
        return CommitResult(success=True, commit_sha=commit_sha, url=self.commit_url(commit_sha))

    def _action(self, file: RawFile) -> dict[str, Any]:
        if file.status == DraftStatus.DELETED:
            return {"action": "delete", "file_path": file.path}
        return {
            "action": "create" if file.status == DraftStatus.CREATED else "update",
            "file_path": file.path,
            "content": file.content,
            "encoding": "base64" if file.encoding == "base64" else "text",
        }

    @property
    def repository_url(self) -> str:
        return f"{self.instance_url}/{self.owner}/{self.repo}"

    @property
    def branch_url(self) -> str:
        return f"{self.repository_url}/-/tree/{self.branch}"

    def commit_url(self, sha: str) -> str:
        return f"{self.repository_url}/-/commit/{sha}"

    def file_url(self, kind: ContentKind, fs_path: str) -> str:
        return f"{self.repository_url}/-/blob/{self.branch}/{self._content_path(kind, fs_path)}"

    def repository_info(self) -> RepositoryInfo:
        return RepositoryInfo(
            owner=self.owner,
            repo=self.repo,
            branch=self.branch,
            provider=GitProviderType.GITLAB,
        )
