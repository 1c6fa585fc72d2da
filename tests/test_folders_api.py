"""Tests for the folder endpoints."""

import pytest


def post(client, url, **data):
    response = client.post(f"/async{url}", data=data)
    assert response.status_code == 200
    return response.json()


class TestCreateFolder:
    def test_create(self, client, site):
        result = post(client, "/folder/create", namespace="files", parent="docs", foldername="drafts")
        assert result["success"] is True
        assert result["path"] == "docs/drafts"
        assert (site / "files" / "docs" / "drafts").is_dir()

    @pytest.mark.parametrize("parent", ["docs/", "/docs", "docs"])
    def test_parent_with_or_without_slash(self, client, site, parent):
        assert post(client, "/folder/create", namespace="files", parent=parent, foldername="x")["success"]
        assert (site / "files" / "docs" / "x").is_dir()

    def test_at_namespace_root(self, client, site):
        assert post(client, "/folder/create", namespace="themes", foldername="dark")["success"]
        assert (site / "themes" / "dark").is_dir()

    def test_already_exists(self, client):
        result = post(client, "/folder/create", namespace="files", parent="", foldername="docs")
        assert result["success"] is False
        assert result["error"] == "already_exists"

    def test_unknown_namespace(self, client):
        result = post(client, "/folder/create", namespace="nope", foldername="x")
        assert result["error"] == "namespace_not_found"


class TestRenameFolder:
    def test_round_trip(self, client, site):
        files = site / "files"
        assert post(client, "/folder/rename", namespace="files", parent="images", oldname="2024", newname="archive")["success"]
        assert (files / "images" / "archive" / "logo.png").exists()
        assert not (files / "images" / "2024").exists()

        assert post(client, "/folder/rename", namespace="files", parent="images", oldname="archive", newname="2024")["success"]
        assert (files / "images" / "2024" / "logo.png").exists()
        assert not (files / "images" / "archive").exists()

    def test_missing_folder(self, client):
        result = post(client, "/folder/rename", namespace="files", parent="", oldname="nope", newname="x")
        assert result["error"] == "not_found"

    def test_target_exists(self, client):
        result = post(client, "/folder/rename", namespace="files", parent="", oldname="docs", newname="images")
        assert result["error"] == "already_exists"


class TestRemoveFolder:
    def test_recursive(self, client, site):
        result = post(client, "/folder/remove", namespace="files", parent="", foldername="images")
        assert result["success"] is True
        assert not (site / "files" / "images").exists()
        assert (site / "files" / "docs").exists()

    def test_missing(self, client):
        result = post(client, "/folder/remove", namespace="files", parent="docs", foldername="nope")
        assert result["success"] is False
        assert result["error"] == "not_found"

    def test_namespace_root_is_protected(self, client, site):
        result = post(client, "/folder/remove", namespace="files", parent="", foldername="/")
        assert result["error"] == "invalid_path"
        assert (site / "files").is_dir()

    def test_file_is_not_a_folder(self, client, site):
        result = post(client, "/folder/remove", namespace="files", parent="docs", foldername="notes.txt")
        assert result["error"] == "invalid_path"
        assert (site / "files" / "docs" / "notes.txt").exists()

    def test_dot_dot_does_not_remove_the_parent(self, client, site):
        result = post(client, "/folder/remove", namespace="files", parent="images/2024", foldername="..")
        assert result["error"] == "invalid_path"
        assert (site / "files" / "images" / "2024" / "logo.png").exists()

    @pytest.mark.parametrize("foldername", [".", "2024/..", "../docs"])
    def test_name_is_a_single_entry(self, client, site, foldername):
        result = post(client, "/folder/remove", namespace="files", parent="images", foldername=foldername)
        assert result["error"] == "invalid_path"
        assert (site / "files" / "images").is_dir()
        assert (site / "files" / "docs").is_dir()


class TestFolderNamesStayInParent:
    @pytest.mark.parametrize("foldername", ["..", "../outside", "a/b", "."])
    def test_create(self, client, site, foldername):
        result = post(client, "/folder/create", namespace="files", parent="docs", foldername=foldername)
        assert result["success"] is False
        assert result["error"] == "invalid_path"
        assert not (site / "files" / "outside").exists()
        assert not (site / "files" / "docs" / "a").exists()

    def test_rename_old_name_cannot_point_at_the_parent(self, client, site):
        result = post(client, "/folder/rename", namespace="files", parent="images", oldname="/", newname="../moved")
        assert result["error"] == "invalid_path"
        assert (site / "files" / "images" / "banner.jpg").exists()
        assert not (site / "files" / "moved").exists()

    def test_rename_new_name_cannot_leave_the_parent(self, client, site):
        result = post(client, "/folder/rename", namespace="files", parent="images", oldname="2024", newname="../2024")
        assert result["error"] == "invalid_path"
        assert (site / "files" / "images" / "2024" / "logo.png").exists()
