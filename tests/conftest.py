"""Shared fixtures for draftstudio tests."""

import duckdb
import pytest

from draftstudio.config import ConfigLoader
from draftstudio.db import DocumentDatabase, MediaDatabase, create_schema, get_connection
from draftstudio.drafts import DocumentDrafts, MediaDrafts
from draftstudio.git import NullProvider
from draftstudio.hooks import Hooks
from draftstudio.storage import MemoryDraftStorage


@pytest.fixture(autouse=True)
def isolated_user_config(tmp_path_factory, monkeypatch):
    monkeypatch.delenv("DRAFTSTUDIO_CONFIG", raising=False)
    monkeypatch.setattr(ConfigLoader, "USER_CONFIG_DIR", tmp_path_factory.mktemp("user-config"))


@pytest.fixture
def conn() -> duckdb.DuckDBPyConnection:
    conn = get_connection()
    create_schema(conn)
    yield conn
    conn.close()


@pytest.fixture
def hooks() -> Hooks:
    return Hooks()


@pytest.fixture
def document_db(conn) -> DocumentDatabase:
    return DocumentDatabase(conn)


@pytest.fixture
def media_db(conn) -> MediaDatabase:
    return MediaDatabase(conn)


@pytest.fixture
def document_storage() -> MemoryDraftStorage:
    return MemoryDraftStorage()


@pytest.fixture
def documents(document_db, document_storage, hooks) -> DocumentDrafts:
    return DocumentDrafts(document_db, document_storage, NullProvider(), hooks)


@pytest.fixture
def medias(media_db, hooks) -> MediaDrafts:
    return MediaDrafts(media_db, MemoryDraftStorage(), NullProvider(), hooks)
