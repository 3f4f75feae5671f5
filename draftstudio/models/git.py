"""Models exchanged with remote git providers."""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field, model_validator

from .status import DraftStatus


class GitProviderType(str, Enum):
    """Supported remote git hosts."""

    GITHUB = "github"
    GITLAB = "gitlab"


FileEncoding = Literal["utf-8", "base64"]


class RemoteFile(BaseModel):
    """Metadata of the last published version of a file."""

    provider: GitProviderType
    name: str
    path: str
    sha: str
    size: int = 0
    url: str = ""
    content: str | None = None
    encoding: FileEncoding | None = None


class RawFile(BaseModel):
    """A single file of a commit payload."""

    path: str
    content: str | None
    status: DraftStatus
    encoding: FileEncoding = "utf-8"

    @model_validator(mode="after")
    def _check_content(self) -> "RawFile":
        if self.content is None and self.status != DraftStatus.DELETED:
            raise ValueError(f"RawFile {self.path} has no content but is {self.status.value}")
        return self


class CommitResult(BaseModel):
    """Outcome of a successful commit."""

    success: bool = True
    commit_sha: str = Field(..., description="Sha of the new commit")
    url: str = Field(default="", description="Web URL of the new commit")


class RepositoryInfo(BaseModel):
    """Identity of the configured repository."""

    owner: str = ""
    repo: str = ""
    branch: str = ""
    provider: GitProviderType | None = None
