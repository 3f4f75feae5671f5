"""Path helpers shared by the live database, drafts and tree."""

from __future__ import annotations

import re

NUMERIC_PREFIX_PATTERN = re.compile(r"^(\d+)\.(.+)$")


def join_path(*parts: str) -> str:
    """Join path segments with single slashes, ignoring empty segments."""
    segments = [part.strip("/") for part in parts if part and part.strip("/")]
    return "/".join(segments)


def get_file_extension(fs_path: str) -> str:
    """Return the extension of the last path segment ("" when there is none)."""
    name = fs_path.rsplit("/", 1)[-1]
    if "." not in name.lstrip("."):
        return name.lstrip(".") if name.startswith(".") else ""
    return name.rsplit(".", 1)[-1]


def generate_stem_from_fs_path(fs_path: str) -> str:
    """Drop the extension from an fs path.

    Example: "1.getting-started/2.introduction.md" -> "1.getting-started/2.introduction"
    """
    directory, _, name = fs_path.rpartition("/")
    if "." in name.lstrip("."):
        name = name.rsplit(".", 1)[0]
    return f"{directory}/{name}" if directory else name


def generate_id_from_fs_path(fs_path: str, root: str) -> str:
    """Build the unique id of an item from its root directory and fs path."""
    return join_path(root, fs_path)


def generate_fs_path_from_id(item_id: str, root: str) -> str:
    """Inverse of :func:`generate_id_from_fs_path`."""
    prefix = f"{root}/"
    if item_id.startswith(prefix):
        return item_id[len(prefix):]
    return item_id


def parse_numeric_prefix(name: str) -> tuple[int | None, str]:
    """Split an ordering prefix from a path segment.

    Example: "2.introduction" -> (2, "introduction"), "index" -> (None, "index")
    """
    match = NUMERIC_PREFIX_PATTERN.match(name)
    if not match:
        return None, name
    return int(match.group(1)), match.group(2)


def strip_numeric_prefix(name: str) -> str:
    """Remove an ordering prefix from a path segment."""
    return parse_numeric_prefix(name)[1]


def generate_route_path(fs_path: str) -> str:
    """Compute the route a markdown page is served under.

    Example: "1.getting-started/2.introduction.md" -> "/getting-started/introduction"
    """
    segments = [strip_numeric_prefix(seg) for seg in generate_stem_from_fs_path(fs_path).split("/")]
    if segments and segments[-1] == "index":
        segments = segments[:-1]
    return "/" + "/".join(segments)
