"""Content codec and path helpers."""

from .codec import DocumentCodec, is_equal
from .media import build_media_item, relocate_media_item, slugify_file_name, strip_data_url, to_data_url
from .scanner import ContentScanner
from .paths import (
    generate_fs_path_from_id,
    generate_id_from_fs_path,
    generate_route_path,
    generate_stem_from_fs_path,
    get_file_extension,
    join_path,
    parse_numeric_prefix,
    strip_numeric_prefix,
)

__all__ = [
    "ContentScanner",
    "DocumentCodec",
    "build_media_item",
    "generate_fs_path_from_id",
    "generate_id_from_fs_path",
    "generate_route_path",
    "generate_stem_from_fs_path",
    "get_file_extension",
    "is_equal",
    "join_path",
    "parse_numeric_prefix",
    "relocate_media_item",
    "slugify_file_name",
    "strip_data_url",
    "strip_numeric_prefix",
    "to_data_url",
]
