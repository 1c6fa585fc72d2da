"""Tests for MountManager URI routing and search."""

import pytest

from fsmanager.filesystem import (
    FileNotFound,
    InvalidPath,
    LocalFilesystem,
    MountManager,
    NamespaceNotFound,
    join_path,
)


@pytest.fixture
def manager(site):
    return MountManager(
        {
            "files": LocalFilesystem(site / "files", namespace="files"),
            "themes": LocalFilesystem(site / "themes", namespace="themes"),
        }
    )


class TestJoinPath:
    @pytest.mark.parametrize(
        "parent, name, expected",
        [
            ("docs", "a.txt", "docs/a.txt"),
            ("docs/", "a.txt", "docs/a.txt"),
            ("/docs/", "/a.txt", "docs/a.txt"),
            ("", "a.txt", "a.txt"),
            ("docs", "", "docs"),
        ],
    )
    def test_single_separator(self, parent, name, expected):
        assert join_path(parent, name) == expected

    @pytest.mark.parametrize(
        "parent, name, expected",
        [
            ("images", "../moved", "moved"),
            ("a/b", "..", "a"),
            ("docs/./drafts", "x", "docs/drafts/x"),
            ("docs", "..", ""),
            ("..", "evil.txt", "../evil.txt"),
        ],
    )
    def test_dot_segments_collapsed(self, parent, name, expected):
        assert join_path(parent, name) == expected


class TestRouting:
    def test_from_config(self, config):
        manager = MountManager.from_config(config)
        assert manager.namespaces() == ["files", "themes"]
        assert manager.get_filesystem("files").root == config.namespaces["files"]
        assert manager.default_namespace == "files"

    def test_parse_uri(self, manager):
        assert manager.parse_uri("files://docs/a.txt") == ("files", "docs/a.txt")
        assert manager.parse_uri("files://") == ("files", "")

    def test_parse_uri_requires_separator(self, manager):
        with pytest.raises(InvalidPath):
            manager.parse_uri("docs/a.txt")

    def test_unknown_namespace(self, manager):
        with pytest.raises(NamespaceNotFound) as exc_info:
            manager.put("nope://a.txt", " ")
        assert exc_info.value.kind == "namespace_not_found"

    def test_invalid_namespace_name(self, manager, tmp_path):
        with pytest.raises(ValueError):
            manager.mount("a://b", LocalFilesystem(tmp_path))

    def test_put_has_delete(self, manager, site):
        assert manager.put("themes://base/style.css", " ")
        assert manager.has("themes://base/style.css")
        assert (site / "themes" / "base" / "style.css").read_text() == " "
        assert manager.delete("themes://base/style.css")
        with pytest.raises(FileNotFound):
            manager.delete("themes://base/style.css")

    def test_rename_with_plain_destination(self, manager, site):
        assert manager.rename("files://docs/notes.txt", "docs/renamed.txt")
        assert (site / "files" / "docs" / "renamed.txt").exists()

    def test_copy_across_namespaces_refused(self, manager):
        with pytest.raises(InvalidPath):
            manager.copy("files://docs/notes.txt", "themes://notes.txt")

    def test_copy_with_same_namespace_uri(self, manager, site):
        assert manager.copy("files://docs/notes.txt", "files://docs/notes2.txt")
        assert (site / "files" / "docs" / "notes2.txt").read_text() == "notes"

    def test_create_and_delete_dir(self, manager, site):
        assert manager.create_dir("files://new/folder")
        assert (site / "files" / "new" / "folder").is_dir()
        assert manager.delete_dir("files://new")
        assert not (site / "files" / "new").exists()


class TestDuplicate:
    def test_duplicate_twice(self, manager, site):
        assert manager.duplicate("files://docs/report.pdf") == "docs/report_copy.pdf"
        assert manager.duplicate("files://docs/report.pdf") == "docs/report_copy1.pdf"
        copy = site / "files" / "docs" / "report_copy1.pdf"
        assert copy.read_text() == "%PDF-1.4"

    def test_duplicate_missing_file(self, manager):
        with pytest.raises(FileNotFound):
            manager.duplicate("files://docs/missing.pdf")


class TestSearch:
    def test_term_matches_path_case_insensitively(self, manager):
        assert manager.search("REPORT") == ["docs/report.pdf"]
        assert manager.search("images") == [
            "images/2024/logo.png",
            "images/banner.jpg",
        ]

    def test_empty_term_lists_all_visible_files(self, manager):
        assert manager.search("") == [
            "docs/notes.txt",
            "docs/report.pdf",
            "images/2024/logo.png",
            "images/banner.jpg",
        ]

    def test_extension_filter(self, manager):
        assert manager.search("", "png, .JPG") == [
            "images/2024/logo.png",
            "images/banner.jpg",
        ]
        assert manager.search("", ["pdf"]) == ["docs/report.pdf"]

    def test_limit(self, manager):
        assert manager.search("", limit=1) == ["docs/notes.txt"]

    def test_other_namespace(self, manager):
        manager.put("themes://base/theme.yaml", " ")
        assert manager.search("theme", namespace="themes") == ["base/theme.yaml"]

    def test_missing_namespace_root(self, tmp_path):
        manager = MountManager({"files": LocalFilesystem(tmp_path / "missing")})
        with pytest.raises(FileNotFound):
            manager.search("a")
