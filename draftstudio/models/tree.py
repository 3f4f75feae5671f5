"""Tree view models."""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field

from .status import TreeStatus


class TreeRootId(str, Enum):
    """Ids of the tree roots, one per content kind."""

    CONTENT = "content"
    MEDIA = "public-assets"


class TreeItem(BaseModel):
    """A file, directory or root node of the tree view."""

    id: str
    name: str
    fs_path: str
    type: Literal["file", "directory", "root"]
    status: TreeStatus | None = None
    prefix: int | None = None
    route_path: str | None = None
    hide: bool | None = None
    children: list[TreeItem] | None = Field(default=None)

    @property
    def is_file(self) -> bool:
        return self.type == "file"
