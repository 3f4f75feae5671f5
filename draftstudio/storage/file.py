"""Draft store writing one YAML file per draft."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any
from urllib.parse import quote, unquote

import yaml

from .base import DraftStorage

logger = logging.getLogger(__name__)


def encode_key(key: str) -> str:
    """Turn a draft key into a safe file name.

    Example: "1.docs/intro.md" -> "1.docs%2Fintro.md.yaml"
    """
    return f"{quote(key, safe='')}.yaml"


def decode_key(filename: str) -> str:
    """Inverse of :func:`encode_key`."""
    return unquote(filename.removesuffix(".yaml"))


class FileDraftStorage(DraftStorage):
    """Persist drafts under ``<base_path>/<namespace>/`` as YAML files."""

    def __init__(self, base_path: Path | str, namespace: str):
        """Initialize the store.

        Args:
            base_path: Drafts directory.
            namespace: Sub-directory for one content kind (e.g. "document").
        """
        self.path = Path(base_path) / namespace

    def _get_item_path(self, key: str) -> Path:
        return self.path / encode_key(key)

    def get_item(self, key: str) -> dict[str, Any] | None:
        path = self._get_item_path(key)
        if not path.exists():
            return None

        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.warning(f"Ignoring unreadable draft {path}: {e}")
            return None

        return data if isinstance(data, dict) else None

    def set_item(self, key: str, value: dict[str, Any]) -> None:
        self.path.mkdir(parents=True, exist_ok=True)
        with open(self._get_item_path(key), "w", encoding="utf-8") as f:
            yaml.dump(
                value,
                f,
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
            )

    def remove_item(self, key: str) -> None:
        self._get_item_path(key).unlink(missing_ok=True)

    def get_keys(self) -> list[str]:
        if not self.path.exists():
            return []
        files = sorted(self.path.glob("*.yaml"))
        return [decode_key(p.name) for p in files]
