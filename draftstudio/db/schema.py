"""DuckDB schema definitions for the live database."""

import duckdb


def get_connection(path: str = ":memory:") -> duckdb.DuckDBPyConnection:
    """Get a DuckDB connection."""
    return duckdb.connect(path)


def create_schema(conn: duckdb.DuckDBPyConnection) -> None:
    """Create DuckDB tables for live content items."""

    # One row per live item; collection is the content kind
    conn.execute("""
        CREATE TABLE IF NOT EXISTS items (
            collection VARCHAR NOT NULL,
            fs_path VARCHAR NOT NULL,
            id VARCHAR NOT NULL,
            position BIGINT NOT NULL,
            data JSON NOT NULL,
            updated_at TIMESTAMP DEFAULT current_timestamp,
            PRIMARY KEY(collection, fs_path)
        )
    """)

    # Insertion order of items, kept stable across updates
    conn.execute("""
        CREATE SEQUENCE IF NOT EXISTS items_position_seq START 1
    """)
