"""Git provider interface and shared HTTP behaviour."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

import httpx

from ..content import join_path
from ..models import CommitResult, ContentKind, DraftStatus, RawFile, RemoteFile, RepositoryInfo

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


class GitProvider(ABC):
    """Remote source of truth that published content is committed to."""

    name: str = ""

    @abstractmethod
    async def fetch_file(self, path: str, cached: bool = False) -> RemoteFile | None:
        """Fetch the last published version of a file."""
        ...

    @abstractmethod
    async def commit_files(self, files: list[RawFile], message: str) -> CommitResult | None:
        """Commit files atomically."""
        ...

    @property
    @abstractmethod
    def repository_url(self) -> str:
        ...

    @property
    @abstractmethod
    def branch_url(self) -> str:
        ...

    @abstractmethod
    def commit_url(self, sha: str) -> str:
        ...

    @abstractmethod
    def file_url(self, kind: ContentKind, fs_path: str) -> str:
        ...

    @abstractmethod
    def repository_info(self) -> RepositoryInfo:
        ...

    async def aclose(self) -> None:
        """Release network resources."""
        return None


class HttpGitProvider(GitProvider):
    """Provider talking to a git host REST API through httpx.

    Fetched files are cached for the lifetime of the provider when requested
    with ``cached=True``. Fetch failures degrade to None; commit failures
    propagate to the caller.
    """

    def __init__(
        self,
        owner: str,
        repo: str,
        branch: str = "main",
        token: str | None = None,
        root_dir: str = "",
        author_name: str = "",
        author_email: str = "",
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize provider.

        Args:
            owner: Repository owner, user or group.
            repo: Repository name.
            branch: Branch commits are pushed to.
            token: API token. Without one, commits are skipped.
            root_dir: Directory of the studio project within the repository.
            author_name: Commit author name.
            author_email: Commit author email.
            timeout: HTTP request timeout in seconds.
            transport: Optional httpx transport (used by tests).
        """
        self.owner = owner
        self.repo = repo
        self.branch = branch
        self.token = token
        self.root_dir = root_dir
        self.author_name = author_name
        self.author_email = author_email
        self._files: dict[str, RemoteFile] = {}
        self._client = httpx.AsyncClient(
            base_url=self.api_base_url,
            headers=self._headers(),
            timeout=timeout,
            transport=transport,
        )

    @property
    @abstractmethod
    def api_base_url(self) -> str:
        ...

    @abstractmethod
    def _headers(self) -> dict[str, str]:
        ...

    @abstractmethod
    async def _get_file(self, path: str) -> RemoteFile | None:
        """Request file metadata; None when the host answers 404."""
        ...

    @abstractmethod
    async def _commit(self, files: list[RawFile], message: str) -> CommitResult:
        ...

    async def fetch_file(self, path: str, cached: bool = False) -> RemoteFile | None:
        """Fetch the last published version of a file.

        Args:
            path: Path relative to the project root directory.
            cached: Consult and fill the in-process cache.

        Returns:
            RemoteFile, or None if the file is missing, the request failed or
            the response could not be read.
        """
        path = join_path(self.root_dir, path)
        if cached and path in self._files:
            return self._files[path]

        try:
            remote_file = await self._get_file(path)
        except httpx.HTTPError as e:
            logger.error(f"Failed to fetch file from {self.name}: {path}: {e}")
            return None
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            logger.error(f"Unexpected {self.name} response for {path}: {e!r}")
            return None

        if remote_file is None:
            logger.warning(f"File not found on {self.name}: {path}")
            return None

        if cached:
            self._files[path] = remote_file
        return remote_file

    async def commit_files(self, files: list[RawFile], message: str) -> CommitResult | None:
        """Commit files as a single commit on the configured branch.

        Pristine files are skipped and paths are rewritten under the root
        directory.

        Returns:
            CommitResult, or None when there is no token or nothing to commit.
        """
        if not self.token:
            logger.warning(f"No {self.name} token configured, skipping commit")
            return None

        files = [
            file.model_copy(update={"path": join_path(self.root_dir, file.path)})
            for file in files
            if file.status != DraftStatus.PRISTINE
        ]
        if not files:
            return None

        result = await self._commit(files, message)
        logger.info(f"Committed {len(files)} files to {self.owner}/{self.repo}@{self.branch}: {result.commit_sha}")
        return result

    def _content_path(self, kind: ContentKind, fs_path: str) -> str:
        return join_path(self.root_dir, kind.remote_dir, fs_path)

    async def aclose(self) -> None:
        await self._client.aclose()
