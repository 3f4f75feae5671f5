"""Configuration models for draftstudio."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class RepositoryConfig(BaseModel):
    """Remote repository content is published to."""

    provider: Literal["github", "gitlab", "null"] = "null"
    owner: str = Field(default="", description="Repository owner, user or group")
    repo: str = Field(default="", description="Repository name")
    branch: str = Field(default="main", description="Branch name")
    root_dir: str = Field(default="", description="Path within repo to the studio project")
    instance_url: str = Field(
        default="https://gitlab.com", description="GitLab instance URL (gitlab only)"
    )
    token: str | None = Field(
        default=None, description="API token; falls back to GITHUB_TOKEN / GITLAB_TOKEN"
    )


class AuthorConfig(BaseModel):
    """Author of published commits."""

    name: str = Field(default="Draft Studio")
    email: str = Field(default="studio@localhost")


class StudioSettings(BaseModel):
    """Global settings."""

    drafts_dir: str = Field(default=".drafts", description="Directory holding pending drafts")
    database: str = Field(default=":memory:", description="DuckDB database path")
    request_timeout: float = Field(default=30.0, description="HTTP request timeout in seconds")


class StudioConfig(BaseModel):
    """Root configuration model."""

    version: int = Field(default=1)
    repository: RepositoryConfig = Field(default_factory=RepositoryConfig)
    author: AuthorConfig = Field(default_factory=AuthorConfig)
    settings: StudioSettings = Field(default_factory=StudioSettings)
