"""Git providers publishing studio content."""

from .base import GitProvider, HttpGitProvider
from .factory import create_provider, provider_name
from .github import GitHubProvider
from .gitlab import GitLabProvider
from .null import NullProvider

__all__ = [
    "create_provider",
    "GitHubProvider",
    "GitLabProvider",
    "GitProvider",
    "HttpGitProvider",
    "NullProvider",
    "provider_name",
]
