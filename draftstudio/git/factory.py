"""Build a git provider from configuration."""

from __future__ import annotations

import logging

import httpx

from ..config import AuthorConfig, RepositoryConfig, resolve_token
from .base import DEFAULT_TIMEOUT, GitProvider
from .github import GitHubProvider
from .gitlab import GitLabProvider
from .null import NullProvider

logger = logging.getLogger(__name__)


def create_provider(
    repository: RepositoryConfig,
    author: AuthorConfig | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    transport: httpx.AsyncBaseTransport | None = None,
) -> GitProvider:
    """Create the provider named by the repository config.

    Falls back to the null provider when the provider is "null" or the
    repository is not fully configured.
    """
    if repository.provider == "null":
        return NullProvider()

    if not repository.owner or not repository.repo:
        logger.warning(f"Incomplete {repository.provider} repository config, publishing disabled")
        return NullProvider()

    author = author or AuthorConfig()
    options = dict(
        owner=repository.owner,
        repo=repository.repo,
        branch=repository.branch,
        token=resolve_token(repository),
        root_dir=repository.root_dir,
        author_name=author.name,
        author_email=author.email,
        timeout=timeout,
        transport=transport,
    )

    if repository.provider == "gitlab":
        return GitLabProvider(instance_url=repository.instance_url, **options)
    return GitHubProvider(**options)


def provider_name(provider: GitProvider) -> str:
    """Human readable name of a provider."""
    return provider.name
