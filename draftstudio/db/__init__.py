"""DuckDB-backed live database."""

from .adapter import DocumentDatabase, LiveDatabase, MediaDatabase
from .schema import create_schema, get_connection

__all__ = [
    "create_schema",
    "get_connection",
    "DocumentDatabase",
    "LiveDatabase",
    "MediaDatabase",
]
