"""Configuration management for draftstudio."""

from .loader import ConfigLoader, load_config, resolve_token
from .models import AuthorConfig, RepositoryConfig, StudioConfig, StudioSettings

__all__ = [
    "AuthorConfig",
    "ConfigLoader",
    "RepositoryConfig",
    "StudioConfig",
    "StudioSettings",
    "load_config",
    "resolve_token",
]
