"""GitHub REST API provider."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from ..errors import RefConflictError
from ..models import CommitResult, ContentKind, DraftStatus, GitProviderType, RawFile, RemoteFile, RepositoryInfo
from .base import HttpGitProvider

logger = logging.getLogger(__name__)

GITHUB_API_URL = "https://api.github.com"
GITHUB_URL = "https://github.com"


class GitHubProvider(HttpGitProvider):
    """Commit through the git database API (blobs, trees, commits, refs)."""

    name = "GitHub"

    @property
    def api_base_url(self) -> str:
        return f"{GITHUB_API_URL}/repos/{self.owner}/{self.repo}"

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/vnd.github.v3+json"}
        if self.token:
            # Classic personal access tokens use the "token" scheme
            scheme = "token" if self.token.startswith("ghp_") else "Bearer"
            headers["Authorization"] = f"{scheme} {self.token}"
        return headers

    async def _get_file(self, path: str) -> RemoteFile | None:
        r = await self._client.get(f"/contents/{path}", params={"ref": self.branch})
        if r.status_code == 404:
            return None
        r.raise_for_status()
        data = r.json()
        return RemoteFile(
            provider=GitProviderType.GITHUB,
            name=data.get("name", path.rsplit("/", 1)[-1]),
            path=data.get("path", path),
            sha=data["sha"],
            size=data.get("size", 0),
            url=data.get("html_url") or data.get("url", ""),
            content=data.get("content"),
            encoding="base64" if data.get("encoding") == "base64" else "utf-8",
        )

    async def _commit(self, files: list[RawFile], message: str) -> CommitResult:
        ref_path = f"/git/refs/heads/{self.branch}"

        r = await self._client.get(ref_path)
        r.raise_for_status()
        latest_commit_sha = r.json()["object"]["sha"]

        r = await self._client.get(f"/git/commits/{latest_commit_sha}")
        r.raise_for_status()
        base_tree_sha = r.json()["tree"]["sha"]

        # Blobs are created one at a time
        tree: list[dict[str, Any]] = []
        for file in files:
            entry: dict[str, Any] = {"path": file.path, "mode": "100644", "type": "blob", "sha": None}
            if file.status != DraftStatus.DELETED:
                r = await self._client.post(
                    "/git/blobs",
                    json={"content": file.content, "encoding": file.encoding},
                )
                r.raise_for_status()
                entry["sha"] = r.json()["sha"]
            tree.append(entry)

        r = await self._client.post("/git/trees", json={"base_tree": base_tree_sha, "tree": tree})
        r.raise_for_status()
        tree_sha = r.json()["sha"]

        r = await self._client.post(
            "/git/commits",
            json={
                "message": message,
                "tree": tree_sha,
                "parents": [latest_commit_sha],
                "author": {
                    "name": self.author_name,
                    "email": self.author_email,
                    "date": datetime.now(timezone.utc).isoformat(),
                },
            },
        )
        r.raise_for_status()
        commit_sha = r.json()["sha"]

        r = await self._client.patch(ref_path, json={"sha": commit_sha, "force": False})
        if r.status_code == 422:
            raise RefConflictError(
                f"Branch {self.branch} moved while committing; commit {commit_sha} was not applied"
            )
        r.raise_for_status()

        return CommitResult(success=True, commit_sha=commit_sha, url=self.commit_url(commit_sha))

    @property
    def repository_url(self) -> str:
        return f"{GITHUB_URL}/{self.owner}/{self.repo}"

    @property
    def branch_url(self) -> str:
        return f"{self.repository_url}/tree/{self.branch}"

    def commit_url(self, sha: str) -> str:
        return f"{self.repository_url}/commit/{sha}"

    def file_url(self, kind: ContentKind, fs_path: str) -> str:
        return f"{self.repository_url}/blob/{self.branch}/{self._content_path(kind, fs_path)}"

    def repository_info(self) -> RepositoryInfo:
        return RepositoryInfo(
            owner=self.owner,
            repo=self.repo,
            branch=self.branch,
            provider=GitProviderType.GITHUB,
        )
