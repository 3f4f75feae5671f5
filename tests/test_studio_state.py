"""Tests for the wired studio state."""

from pathlib import Path

import pytest

from draftstudio.config import StudioConfig
from draftstudio.git import NullProvider
from draftstudio.main import format_tree, run
from draftstudio.models import DraftStatus, TreeStatus
from draftstudio.state import StudioState


def _make_project(root: Path) -> Path:
    guide = root / "content" / "1.guide"
    guide.mkdir(parents=True)
    (root / "content" / "index.md").write_text("# Home\n\nWelcome\n", encoding="utf-8")
    (guide / "1.intro.md").write_text("---\ntitle: Intro\n---\n\nHello\n", encoding="utf-8")
    (root / "content" / "authors.yaml").write_text("name: Editor\n", encoding="utf-8")
    (root / "content" / "broken.yaml").write_text("name: [unclosed\n", encoding="utf-8")
    (root / "content" / "notes.txt").write_text("not content\n", encoding="utf-8")
    (root / "public").mkdir()
    (root / "public" / "logo.png").write_bytes(b"abc")
    return root


async def _make_studio(root: Path) -> StudioState:
    studio = StudioState(root, config=StudioConfig())
    await studio.load()
    return studio


class TestStudioState:
    @pytest.mark.asyncio
    async def test_load_seeds_live_databases(self, tmp_path):
        studio = await _make_studio(_make_project(tmp_path))

        assert isinstance(studio.provider, NullProvider)
        assert studio.document_db.count() == 3
        assert studio.media_db.count() == 1
        assert (await studio.document_db.get("authors.yaml")).meta == {"name": "Editor"}
        assert (await studio.media_db.get("logo.png")).raw == "data:image/png;base64,YWJj"
        await studio.close()

    @pytest.mark.asyncio
    async def test_trees_follow_drafts(self, tmp_path):
        studio = await _make_studio(_make_project(tmp_path))

        names = [item.name for item in studio.document_tree.tree]
        assert set(names) == {"home", "guide", "authors"}
        assert [item.name for item in studio.media_tree.tree] == ["logo"]

        await studio.documents.select("1.guide/1.intro.md")
        await studio.documents.update("1.guide/1.intro.md", {"title": "Introduction"})

        guide = next(item for item in studio.document_tree.tree if item.name == "guide")
        assert guide.status == TreeStatus.UPDATED
        assert guide.children[0].status == TreeStatus.UPDATED
        await studio.close()

    @pytest.mark.asyncio
    async def test_select_by_fs_path(self, tmp_path):
        studio = await _make_studio(_make_project(tmp_path))

        draft = await studio.document_tree.select_by_fs_path("1.guide/1.intro.md")

        assert draft.status == DraftStatus.PRISTINE
        assert studio.documents.current is draft
        assert [item.fs_path for item in studio.document_tree.current_tree] == ["1.guide/1.intro.md"]
        assert studio.document_tree.current_item.status == TreeStatus.OPENED

        assert await studio.document_tree.select_by_fs_path("1.guide") is None
        assert studio.documents.current is None
        assert await studio.document_tree.select_by_fs_path("missing.md") is None
        assert studio.document_tree.current_tree == studio.document_tree.tree
        await studio.close()

    @pytest.mark.asyncio
    async def test_drafts_survive_restart(self, tmp_path):
        root = _make_project(tmp_path)
        studio = await _make_studio(root)
        await studio.documents.select("index.md")
        await studio.documents.update("index.md", {"title": "Start"})
        await studio.medias.remove(["logo.png"])
        await studio.close()

        studio = await _make_studio(root)

        assert (await studio.document_db.get("index.md")).title == "Start"
        assert await studio.media_db.get("logo.png") is None
        assert [file.path for file in studio.publisher.pending_files()] == ["content/index.md", "public/logo.png"]
        assert studio.media_tree.tree[0].status == TreeStatus.DELETED
        await studio.close()

    @pytest.mark.asyncio
    async def test_publish_without_remote(self, tmp_path):
        studio = await _make_studio(_make_project(tmp_path))
        await studio.documents.select("index.md")
        await studio.documents.update("index.md", {"title": "Start"})

        assert await studio.publish("Update") is None
        assert studio.publisher.has_changes()

        await studio.revert_all()
        assert not studio.publisher.has_changes()
        assert (await studio.document_db.get("index.md")).title == "Home"
        await studio.close()


class TestCommandLine:
    @pytest.mark.asyncio
    async def test_status_and_revert(self, tmp_path, capsys):
        root = _make_project(tmp_path)
        studio = await _make_studio(root)
        await studio.documents.remove(["index.md"])
        await studio.close()

        assert await run(root, "status", []) == 0
        assert "deleted  content/index.md" in capsys.readouterr().out

        assert await run(root, "revert-all", []) == 0
        assert await run(root, "status", []) == 0
        assert "No pending changes" in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_publish_requires_message(self, tmp_path):
        assert await run(_make_project(tmp_path), "publish", []) == 2

    @pytest.mark.asyncio
    async def test_format_tree(self, tmp_path):
        studio = await _make_studio(_make_project(tmp_path))
        await studio.documents.select("1.guide/1.intro.md")
        await studio.documents.update("1.guide/1.intro.md", {"title": "Introduction"})

        lines = format_tree(studio.document_tree.tree)

        assert "guide/ [updated]" in lines
        assert "  intro [updated]" in lines
        assert "home" in lines
        await studio.close()
