"""Base models for live content items."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class ContentKind(str, Enum):
    """Kinds of content managed by the studio."""

    DOCUMENT = "document"
    MEDIA = "media"

    @property
    def remote_dir(self) -> str:
        """Directory holding this kind of file in the repository."""
        return "content" if self is ContentKind.DOCUMENT else "public"


class ContentFileExtension(str, Enum):
    """Document file extensions understood by the codec."""

    MARKDOWN = "md"
    YAML = "yaml"
    YML = "yml"
    JSON = "json"


class ContentItem(BaseModel):
    """Common fields of every item stored in the live database."""

    id: str = Field(..., description="Unique id (root directory + fs path)")
    fs_path: str = Field(..., description="Path relative to the content root")
    extension: str = Field(default="", description="File extension")
    stem: str = Field(default="", description="fs path without extension")
    path: str | None = Field(default=None, description="Route path, if routable")


class DocumentItem(ContentItem):
    """A parsed content document (markdown page or data file)."""

    title: str | None = None
    description: str | None = None
    meta: dict[str, Any] = Field(default_factory=dict)
    body: Any = None


class MediaItem(ContentItem):
    """A media asset carried as a base64 data URL."""

    raw: str | None = Field(default=None, description="data:<mime>;base64,... URL")
