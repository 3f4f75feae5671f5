"""Convert between file content and document items."""

from __future__ import annotations

import json
from typing import Any

import yaml

from ..models import ContentFileExtension, DocumentItem, TreeRootId
from .paths import (
    generate_id_from_fs_path,
    generate_route_path,
    generate_stem_from_fs_path,
    get_file_extension,
)

FRONT_MATTER_DELIMITER = "---"


def is_equal(content1: str | None, content2: str | None) -> bool:
    """Compare two file contents ignoring surrounding whitespace."""
    if content1 is None or content2 is None:
        return False
    return content1.strip() == content2.strip()


class DocumentCodec:
    """Parse and generate markdown (with YAML front matter), YAML and JSON files."""

    def __init__(self, root: str = TreeRootId.CONTENT.value):
        self.root = root

    def parse(self, fs_path: str, content: str) -> DocumentItem:
        """Build a document from file content."""
        extension = get_file_extension(fs_path)
        document = DocumentItem(
            id=generate_id_from_fs_path(fs_path, self.root),
            fs_path=fs_path,
            extension=extension,
            stem=generate_stem_from_fs_path(fs_path),
        )

        if extension == ContentFileExtension.MARKDOWN.value:
            front_matter, body = self._split_front_matter(content)
            document.path = generate_route_path(fs_path)
            document.body = body
            self._assign_data(document, front_matter)
            if document.title is None:
                document.title = self._first_heading(body)
        elif extension in (ContentFileExtension.YAML.value, ContentFileExtension.YML.value):
            data = yaml.safe_load(content) if content.strip() else {}
            self._assign_data(document, data)
        elif extension == ContentFileExtension.JSON.value:
            data = json.loads(content) if content.strip() else {}
            self._assign_data(document, data)
        else:
            document.body = content

        return document

    def generate(self, document: DocumentItem) -> str:
        """Generate file content from a document."""
        extension = document.extension or get_file_extension(document.fs_path)

        if extension == ContentFileExtension.MARKDOWN.value:
            body = document.body if isinstance(document.body, str) else ""
            front_matter = self._collect_data(document, skip_derived_title=True)
            if not front_matter:
                return body.strip() + "\n"
            dumped = yaml.dump(
                front_matter,
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
            )
            return f"{FRONT_MATTER_DELIMITER}\n{dumped}{FRONT_MATTER_DELIMITER}\n\n{body.strip()}\n"

        if extension in (ContentFileExtension.YAML.value, ContentFileExtension.YML.value):
            return yaml.dump(
                self._collect_data(document),
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
            )

        if extension == ContentFileExtension.JSON.value:
            return json.dumps(self._collect_data(document), indent=2, ensure_ascii=False) + "\n"

        return document.body if isinstance(document.body, str) else ""

    def are_equal(self, document1: DocumentItem, document2: DocumentItem) -> bool:
        """Content-aware comparison: equal when both generate the same file."""
        if document1.id != document2.id:
            return False
        return is_equal(self.generate(document1), self.generate(document2))

    def _split_front_matter(self, content: str) -> tuple[dict[str, Any], str]:
        lines = content.splitlines()
        if not lines or lines[0].strip() != FRONT_MATTER_DELIMITER:
            return {}, content.strip()

        for index, line in enumerate(lines[1:], start=1):
            if line.strip() == FRONT_MATTER_DELIMITER:
                data = yaml.safe_load("\n".join(lines[1:index])) or {}
                body = "\n".join(lines[index + 1:])
                return (data if isinstance(data, dict) else {}), body.strip()

        # Unterminated front matter is treated as plain markdown
        return {}, content.strip()

    def _first_heading(self, body: str) -> str | None:
        for line in body.splitlines():
            if line.startswith("# "):
                return line[2:].strip()
        return None

    def _assign_data(self, document: DocumentItem, data: Any) -> None:
        if not isinstance(data, dict):
            document.body = data
            return
        data = dict(data)
        title = data.pop("title", None)
        description = data.pop("description", None)
        document.title = str(title) if title is not None else None
        document.description = str(description) if description is not None else None
        document.meta = data

    def _collect_data(self, document: DocumentItem, skip_derived_title: bool = False) -> Any:
        if document.body is not None and document.extension != ContentFileExtension.MARKDOWN.value:
            return document.body

        data: dict[str, Any] = {}
        title = document.title
        if skip_derived_title and title is not None and isinstance(document.body, str):
            if self._first_heading(document.body) == title:
                title = None
        if title is not None:
            data["title"] = title
        if document.description is not None:
            data["description"] = document.description
        for key, value in document.meta.items():
            if value is not None:
                data[key] = value
        return data
