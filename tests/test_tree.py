"""Tests for the tree view builder."""

from draftstudio.content import DocumentCodec, build_media_item
from draftstudio.models import DocumentItem, DraftItem, DraftStatus, MediaItem, TreeRootId, TreeStatus
from draftstudio.tree import (
    build_tree,
    directory_status,
    find_descendants_file_items_from_fs_path,
    find_item_from_fs_path,
    find_item_from_route,
    find_parent_from_fs_path,
)

CODEC = DocumentCodec()

INDEX = CODEC.parse("index.md", "# Home\n")
INTRODUCTION = CODEC.parse("1.getting-started/2.introduction.md", "# Introduction\n")
INSTALLATION = CODEC.parse("1.getting-started/3.installation.md", "# Installation\n")
STUDIO = CODEC.parse("1.getting-started/1.advanced/1.studio.md", "# Studio\n")
LIVE_ITEMS = [INDEX, INTRODUCTION, INSTALLATION]


def _make_draft(status: DraftStatus, original=None, modified=None) -> DraftItem[DocumentItem]:
    fs_path = (modified or original).fs_path
    return DraftItem[DocumentItem](fs_path=fs_path, status=status, original=original, modified=modified)


def _without(items, removed):
    return [item for item in items if item.fs_path != removed.fs_path]


class TestBuildTree:
    def test_without_drafts(self):
        tree = build_tree(LIVE_ITEMS)

        assert [item.name for item in tree] == ["home", "getting-started"]
        home, directory = tree
        assert home.type == "file"
        assert home.route_path == "/"
        assert home.prefix is None
        assert directory.type == "directory"
        assert directory.id == "content/1.getting-started"
        assert directory.fs_path == "1.getting-started"
        assert directory.prefix == 1
        assert [child.name for child in directory.children] == ["introduction", "installation"]
        assert directory.children[0].prefix == 2
        assert directory.children[0].route_path == "/getting-started/introduction"
        assert all(item.status is None for item in [home, directory, *directory.children])

    def test_created_draft_at_top_level(self):
        tree = build_tree(LIVE_ITEMS, [_make_draft(DraftStatus.CREATED, modified=INDEX)])
        assert tree[0].status == TreeStatus.CREATED
        assert tree[1].status is None

    def test_deleted_file_is_appended_last(self):
        drafts = [_make_draft(DraftStatus.DELETED, original=INTRODUCTION)]

        tree = build_tree(_without(LIVE_ITEMS, INTRODUCTION), drafts)

        directory = tree[1]
        assert [child.name for child in directory.children] == ["installation", "introduction"]
        assert directory.children[1].status == TreeStatus.DELETED
        assert directory.children[1].route_path == "/getting-started/introduction"
        assert directory.status == TreeStatus.UPDATED

    def test_deleted_file_in_missing_directory(self):
        drafts = [_make_draft(DraftStatus.DELETED, original=STUDIO)]

        tree = build_tree(LIVE_ITEMS, drafts)

        directory = tree[1]
        nested = directory.children[-1]
        assert nested.fs_path == "1.getting-started/1.advanced"
        assert nested.name == "advanced"
        assert nested.status == TreeStatus.DELETED
        assert directory.status == TreeStatus.UPDATED

    def test_all_children_deleted(self):
        drafts = [
            _make_draft(DraftStatus.DELETED, original=INTRODUCTION),
            _make_draft(DraftStatus.DELETED, original=INSTALLATION),
        ]

        tree = build_tree([INDEX], drafts)

        assert tree[1].status == TreeStatus.DELETED

    def test_created_and_opened_children(self):
        drafts = [
            _make_draft(DraftStatus.CREATED, modified=INTRODUCTION),
            _make_draft(DraftStatus.PRISTINE, original=INSTALLATION, modified=INSTALLATION),
        ]

        tree = build_tree(LIVE_ITEMS, drafts)

        children = tree[1].children
        assert [child.status for child in children] == [TreeStatus.CREATED, TreeStatus.OPENED]
        assert tree[1].status == TreeStatus.UPDATED

    def test_opened_children_only(self):
        drafts = [
            _make_draft(DraftStatus.PRISTINE, original=INTRODUCTION, modified=INTRODUCTION),
            _make_draft(DraftStatus.PRISTINE, original=INSTALLATION, modified=INSTALLATION),
        ]

        tree = build_tree(LIVE_ITEMS, drafts)

        assert tree[1].status is None

    def test_rename_shows_only_new_name(self):
        renamed = CODEC.parse("1.getting-started/2.renamed.md", "# Introduction\n")
        drafts = [
            _make_draft(DraftStatus.DELETED, original=INTRODUCTION),
            _make_draft(DraftStatus.CREATED, original=INTRODUCTION, modified=renamed),
        ]

        tree = build_tree(_without(LIVE_ITEMS, INTRODUCTION) + [renamed], drafts)

        children = tree[1].children
        assert [child.name for child in children] == ["installation", "renamed"]
        assert children[1].status == TreeStatus.RENAMED
        assert tree[1].status == TreeStatus.UPDATED

    def test_nested_update_bubbles_up(self):
        updated = STUDIO.model_copy(update={"body": "Changed"})
        drafts = [_make_draft(DraftStatus.UPDATED, original=STUDIO, modified=updated)]

        tree = build_tree(LIVE_ITEMS + [STUDIO], drafts)

        directory = tree[1]
        nested = find_item_from_fs_path(tree, "1.getting-started/1.advanced")
        assert nested.status == TreeStatus.UPDATED
        assert directory.status == TreeStatus.UPDATED

    def test_language_prefixed_index_keeps_name(self):
        tree = build_tree([CODEC.parse("en/index.md", "# English\n")])
        assert tree[0].name == "en"
        assert tree[0].children[0].name == "index"
        assert tree[0].children[0].route_path == "/en"

    def test_gitkeep_is_hidden(self):
        gitkeep = build_media_item("media-folder/.gitkeep")
        image = build_media_item("media-folder/image.jpg", "data:image/jpeg;base64,YWJj")
        drafts = [DraftItem[MediaItem](fs_path=gitkeep.fs_path, status=DraftStatus.CREATED, modified=gitkeep)]

        tree = build_tree([gitkeep, image], drafts, TreeRootId.MEDIA)

        assert len(tree) == 1
        assert tree[0].id == "public-assets/media-folder"
        hidden = find_item_from_fs_path(tree, "media-folder/.gitkeep")
        visible = find_item_from_fs_path(tree, "media-folder/image.jpg")
        assert hidden.hide is True
        assert visible.hide is None
        assert visible.route_path is None


class TestDirectoryStatus:
    def test_decision_table(self):
        def _statuses(*statuses):
            tree = build_tree([CODEC.parse(f"d/{i}.md", "x\n") for i in range(len(statuses))])
            children = tree[0].children
            for child, status in zip(children, statuses):
                child.status = status
            return directory_status(children)

        assert _statuses(None, TreeStatus.OPENED) is None
        assert _statuses(TreeStatus.DELETED, TreeStatus.DELETED) == TreeStatus.DELETED
        assert _statuses(TreeStatus.RENAMED) == TreeStatus.RENAMED
        assert _statuses(TreeStatus.CREATED, None) == TreeStatus.UPDATED
        assert _statuses(TreeStatus.CREATED, TreeStatus.DELETED) == TreeStatus.UPDATED
        assert _statuses(TreeStatus.UPDATED, TreeStatus.UPDATED) == TreeStatus.UPDATED


class TestFindHelpers:
    tree = build_tree(LIVE_ITEMS + [STUDIO])

    def test_find_item_from_fs_path(self):
        assert find_item_from_fs_path(self.tree, "index.md").name == "home"
        assert find_item_from_fs_path(self.tree, "1.getting-started").type == "directory"
        assert find_item_from_fs_path(self.tree, "1.getting-started/2.introduction") is None
        assert find_item_from_fs_path(self.tree, "") is None
        assert find_item_from_fs_path([], "index.md") is None

    def test_find_parent_from_fs_path(self):
        parent = find_parent_from_fs_path(self.tree, "1.getting-started/1.advanced/1.studio.md")
        assert parent.fs_path == "1.getting-started/1.advanced"
        assert find_parent_from_fs_path(self.tree, "index.md") is None
        assert find_parent_from_fs_path(self.tree, "non/existent.md") is None

    def test_find_descendants_file_items(self):
        descendants = find_descendants_file_items_from_fs_path(self.tree, "1.getting-started")
        assert sorted(item.fs_path for item in descendants) == [
            "1.getting-started/1.advanced/1.studio.md",
            "1.getting-started/2.introduction.md",
            "1.getting-started/3.installation.md",
        ]
        assert len(find_descendants_file_items_from_fs_path(self.tree, "index.md")) == 1
        assert find_descendants_file_items_from_fs_path(self.tree, "missing") == []

    def test_find_item_from_route(self):
        assert find_item_from_route(self.tree, "/").fs_path == "index.md"
        assert find_item_from_route(self.tree, "/getting-started/advanced/studio").name == "studio"
        assert find_item_from_route(self.tree, "/missing") is None
