"""Tests for FakeGitTagOps."""

import subprocess
from pathlib import Path

import pytest

from gittag.gateway.tag_ops.fake import FakeGitTagOps

REPO = Path("/repo")


class TestListTags:
    def test_matches_glob_and_sorts(self) -> None:
        ops = FakeGitTagOps(existing_tags={"v1.1.0": "", "v1.0.0": "", "v2.0.0": ""})
        assert ops.list_tags(REPO, "v1.*") == ["v1.0.0", "v1.1.0"]

    def test_returns_empty_list_without_matches(self) -> None:
        assert FakeGitTagOps().list_tags(REPO, "*") == []

    def test_raises_configured_error(self) -> None:
        ops = FakeGitTagOps(list_tags_raises=RuntimeError("boom"))
        with pytest.raises(RuntimeError, match="boom"):
            ops.list_tags(REPO, "*")


class TestCreateTag:
    def test_tracks_created_tag(self) -> None:
        ops = FakeGitTagOps()
        ops.create_tag(REPO, "v1.0.0", "Release")
        assert ops.created_tags == [("v1.0.0", "Release")]
        assert ops.local_tags == {"v1.0.0": "Release"}

    def test_existing_tag_raises(self) -> None:
        ops = FakeGitTagOps(existing_tags={"v1.0.0": "old"})
        with pytest.raises(RuntimeError, match="already exists"):
            ops.create_tag(REPO, "v1.0.0", "new")
        assert ops.created_tags == []

    def test_wraps_called_process_error(self) -> None:
        error = subprocess.CalledProcessError(128, ["git", "tag"])
        ops = FakeGitTagOps(create_tag_raises={"v1.0.0": error})
        with pytest.raises(RuntimeError) as exc_info:
            ops.create_tag(REPO, "v1.0.0", "Release")
        assert exc_info.value.__cause__ is error


class TestPushTag:
    def test_adds_tag_to_remote(self) -> None:
        ops = FakeGitTagOps(existing_tags={"v1.0.0": ""})
        ops.push_tag(REPO, "origin", "v1.0.0")
        assert ops.pushed_tags == [("origin", "v1.0.0")]
        assert ops.tags_on_remote("origin") == {"v1.0.0"}

    def test_unknown_remote_raises(self) -> None:
        ops = FakeGitTagOps(existing_tags={"v1.0.0": ""}, remote_tags={})
        with pytest.raises(RuntimeError):
            ops.push_tag(REPO, "origin", "v1.0.0")
        assert ops.pushed_tags == []

    def test_missing_local_tag_raises(self) -> None:
        with pytest.raises(RuntimeError, match="does not match any"):
            FakeGitTagOps().push_tag(REPO, "origin", "v1.0.0")


class TestDeleteTags:
    def test_delete_tag_tracks_deletion(self) -> None:
        ops = FakeGitTagOps(existing_tags={"v1.0.0": ""})
        ops.delete_tag(REPO, "v1.0.0")
        assert ops.deleted_tags == ["v1.0.0"]
        assert ops.local_tags == {}

    def test_delete_missing_tag_raises(self) -> None:
        with pytest.raises(RuntimeError, match="not found"):
            FakeGitTagOps().delete_tag(REPO, "v1.0.0")

    def test_delete_remote_tag_tracks_deletion(self) -> None:
        ops = FakeGitTagOps(remote_tags={"origin": {"v1.0.0"}})
        ops.delete_remote_tag(REPO, "origin", "v1.0.0")
        assert ops.deleted_remote_tags == [("origin", "v1.0.0")]
        assert ops.tags_on_remote("origin") == set()

    def test_delete_missing_remote_tag_raises(self) -> None:
        with pytest.raises(RuntimeError, match="remote ref does not exist"):
            FakeGitTagOps().delete_remote_tag(REPO, "origin", "v1.0.0")

    def test_configured_error_is_raised_as_is(self) -> None:
        error = ValueError("unexpected")
        ops = FakeGitTagOps(
            remote_tags={"origin": {"v1.0.0"}}, delete_remote_tag_raises={"v1.0.0": error}
        )
        with pytest.raises(ValueError):
            ops.delete_remote_tag(REPO, "origin", "v1.0.0")
        assert ops.tags_on_remote("origin") == {"v1.0.0"}


def test_tracking_properties_return_copies() -> None:
    ops = FakeGitTagOps()
    ops.create_tag(REPO, "v1.0.0", "m")
    ops.created_tags.clear()
    ops.local_tags.clear()
    assert ops.created_tags == [("v1.0.0", "m")]
    assert ops.local_tags == {"v1.0.0": "m"}
