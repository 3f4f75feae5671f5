"""Read and write studio.yaml."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import RepositoryConfig, StudioConfig

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "DRAFTSTUDIO_CONFIG"

TOKEN_ENV_VARS = {
    "github": "GITHUB_TOKEN",
    "gitlab": "GITLAB_TOKEN",
}


class ConfigLoader:
    """Locate, parse and persist the studio configuration of a project.

    Lookup order is ``$DRAFTSTUDIO_CONFIG``, ``<project>/studio.yaml``, then
    ``~/.draftstudio/studio.yaml``.
    """

    CONFIG_FILENAME = "studio.yaml"
    USER_CONFIG_DIR = Path.home() / ".draftstudio"

    def __init__(self, project_path: Path | None = None):
        """Initialize config loader.

        Args:
            project_path: Studio project directory. Defaults to the cwd.
        """
        self._project_path = project_path or Path.cwd()

    def _candidates(self) -> Iterator[Path]:
        override = os.environ.get(CONFIG_ENV_VAR)
        if override:
            yield Path(override)
        yield self._project_path / self.CONFIG_FILENAME
        yield self.USER_CONFIG_DIR / self.CONFIG_FILENAME

    def get_config_path(self) -> Path | None:
        """First existing config file, or None."""
        return next((path for path in self._candidates() if path.is_file()), None)

    def load(self) -> StudioConfig:
        """Parse the config file; unreadable or invalid files yield defaults."""
        path = self.get_config_path()
        if path is None:
            logger.debug(f"No {self.CONFIG_FILENAME} for {self._project_path}, using defaults")
            return StudioConfig()

        try:
            raw = yaml.safe_load(path.read_text(encoding="utf-8"))
            config = StudioConfig.model_validate(raw or {})
        except (OSError, yaml.YAMLError, ValidationError) as e:
            logger.warning(f"Ignoring invalid studio config {path}: {e}")
            return StudioConfig()

        logger.info(f"Studio config: {path} (provider {config.repository.provider})")
        return config

    def save(self, config: StudioConfig, user_level: bool = False) -> Path:
        """Write the config as YAML, leaving tokens out.

        Args:
            config: Configuration to write.
            user_level: Write to the user directory instead of the project.

        Returns:
            The written file.
        """
        directory = self.USER_CONFIG_DIR if user_level else self._project_path
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / self.CONFIG_FILENAME

        payload = config.model_dump(exclude_none=True)
        payload["repository"].pop("token", None)
        path.write_text(
            yaml.dump(payload, default_flow_style=False, sort_keys=False, allow_unicode=True),
            encoding="utf-8",
        )

        logger.info(f"Wrote studio config {path}")
        return path


def resolve_token(repository: RepositoryConfig) -> str | None:
    """Token from the config, else from the provider's environment variable."""
    if repository.token:
        return repository.token
    env_var = TOKEN_ENV_VARS.get(repository.provider)
    return (os.environ.get(env_var) or None) if env_var else None


def load_config(project_path: Path | str | None = None) -> StudioConfig:
    """Shortcut for ``ConfigLoader(project_path).load()``."""
    return ConfigLoader(Path(project_path) if project_path else None).load()
