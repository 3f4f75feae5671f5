"""Tests for path helpers, the document codec and media helpers."""

import base64

import pytest

from draftstudio.content import (
    ContentScanner,
    DocumentCodec,
    build_media_item,
    generate_fs_path_from_id,
    generate_id_from_fs_path,
    generate_route_path,
    generate_stem_from_fs_path,
    get_file_extension,
    is_equal,
    join_path,
    parse_numeric_prefix,
    relocate_media_item,
    slugify_file_name,
    strip_data_url,
    to_data_url,
)


class TestPaths:
    def test_join_path_skips_empty_segments(self):
        assert join_path("", "content", "/docs/", "intro.md") == "content/docs/intro.md"

    def test_file_extension(self):
        assert get_file_extension("docs/intro.md") == "md"
        assert get_file_extension("images/.gitkeep") == "gitkeep"
        assert get_file_extension("LICENSE") == ""

    def test_stem(self):
        assert generate_stem_from_fs_path("1.getting-started/2.introduction.md") == "1.getting-started/2.introduction"

    def test_id_round_trip(self):
        item_id = generate_id_from_fs_path("docs/intro.md", "content")
        assert item_id == "content/docs/intro.md"
        assert generate_fs_path_from_id(item_id, "content") == "docs/intro.md"

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("2.introduction", (2, "introduction")),
            ("index", (None, "index")),
            ("v1.2", (None, "v1.2")),
        ],
    )
    def test_parse_numeric_prefix(self, name, expected):
        assert parse_numeric_prefix(name) == expected

    @pytest.mark.parametrize(
        "fs_path,route",
        [
            ("index.md", "/"),
            ("1.getting-started/2.introduction.md", "/getting-started/introduction"),
            ("en/index.md", "/en"),
        ],
    )
    def test_route_path(self, fs_path, route):
        assert generate_route_path(fs_path) == route


class TestDocumentCodec:
    def test_parse_markdown_with_front_matter(self):
        codec = DocumentCodec()
        document = codec.parse(
            "1.docs/2.intro.md",
            "---\ntitle: Intro\ndescription: First page\nlayout: docs\n---\n\nHello world\n",
        )

        assert document.id == "content/1.docs/2.intro.md"
        assert document.title == "Intro"
        assert document.description == "First page"
        assert document.meta == {"layout": "docs"}
        assert document.body == "Hello world"
        assert document.path == "/docs/intro"

    def test_title_falls_back_to_heading(self):
        document = DocumentCodec().parse("intro.md", "# Welcome\n\nText")
        assert document.title == "Welcome"

    def test_generate_markdown_round_trip(self):
        codec = DocumentCodec()
        content = "---\ntitle: Intro\nlayout: docs\n---\n\nHello world\n"
        assert codec.generate(codec.parse("intro.md", content)) == content

    def test_generate_omits_derived_title(self):
        codec = DocumentCodec()
        content = "# Welcome\n\nText\n"
        assert codec.generate(codec.parse("intro.md", content)) == content

    def test_yaml_data_file(self):
        codec = DocumentCodec()
        document = codec.parse("data/authors.yml", "title: Authors\nnames:\n- Ada\n")
        assert document.title == "Authors"
        assert document.meta == {"names": ["Ada"]}
        assert document.path is None
        assert "names:\n- Ada" in codec.generate(document)

    def test_json_data_file(self):
        codec = DocumentCodec()
        document = codec.parse("data/site.json", '{"name": "Site"}')
        assert document.meta == {"name": "Site"}
        assert codec.generate(document) == '{\n  "name": "Site"\n}\n'

    def test_are_equal_ignores_whitespace(self):
        codec = DocumentCodec()
        document1 = codec.parse("intro.md", "Hello\n")
        document2 = codec.parse("intro.md", "\n\nHello\n\n")
        assert codec.are_equal(document1, document2)

    def test_are_equal_detects_changes(self):
        codec = DocumentCodec()
        document = codec.parse("intro.md", "Hello\n")
        assert not codec.are_equal(document, document.model_copy(update={"title": "New"}))

    def test_is_equal_with_missing_content(self):
        assert not is_equal(None, "a")
        assert is_equal(" a\n", "a")


class TestMedia:
    def test_slugify_file_name(self):
        assert slugify_file_name("My Photo (1).PNG") == "my-photo-1.png"

    def test_data_url(self):
        raw = to_data_url("images/logo.png", b"abc")
        assert raw == "data:image/png;base64,YWJj"
        assert strip_data_url(raw) == "YWJj"

    def test_build_media_item(self):
        item = build_media_item("images/logo.png", "data:image/png;base64,YWJj")
        assert item.id == "public-assets/images/logo.png"
        assert item.path == "/images/logo.png"
        assert item.extension == "png"
        assert item.stem == "images/logo"

    def test_relocate_keeps_data(self):
        item = build_media_item("images/logo.png", "data:image/png;base64,YWJj")
        moved = relocate_media_item(item, "brand/logo.png")
        assert moved.fs_path == "brand/logo.png"
        assert moved.id == "public-assets/brand/logo.png"
        assert moved.raw == item.raw


class TestContentScanner:
    def test_scans_documents_and_medias(self, tmp_path):
        (tmp_path / "content" / "1.docs").mkdir(parents=True)
        (tmp_path / "content" / "index.md").write_text("# Home\n", encoding="utf-8")
        (tmp_path / "content" / "1.docs" / "intro.md").write_text("Intro\n", encoding="utf-8")
        (tmp_path / "content" / "notes.txt").write_text("ignored", encoding="utf-8")
        (tmp_path / "public").mkdir()
        (tmp_path / "public" / "logo.png").write_bytes(b"abc")

        scanner = ContentScanner(tmp_path)
        documents = dict(scanner.scan_documents())
        medias = dict(scanner.scan_medias())

        assert set(documents) == {"index.md", "1.docs/intro.md"}
        assert documents["index.md"] == "# Home\n"
        assert medias == {"logo.png": "data:image/png;base64," + base64.b64encode(b"abc").decode()}

    def test_missing_directories(self, tmp_path):
        scanner = ContentScanner(tmp_path)
        assert list(scanner.scan_documents()) == []
        assert list(scanner.scan_medias()) == []
