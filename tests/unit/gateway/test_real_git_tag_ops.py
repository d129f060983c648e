"""Tests for RealGitTagOps command construction.

subprocess.run is patched, so no git process is started.
"""

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from gittag.gateway.tag_ops.real import RealGitTagOps

REPO = Path("/repo")
RUN = "gittag.subprocess_utils.subprocess.run"


def _ok(stdout: str = "") -> MagicMock:
    return MagicMock(returncode=0, stdout=stdout, stderr="")


def test_create_tag_runs_annotated_tag() -> None:
    with patch(RUN, return_value=_ok()) as mock_run:
        RealGitTagOps().create_tag(REPO, "v1.0.0", "chore(release): v1.0.0")

    args, kwargs = mock_run.call_args
    assert args[0] == ["git", "tag", "-a", "v1.0.0", "-m", "chore(release): v1.0.0"]
    assert kwargs["cwd"] == REPO
    assert kwargs["check"] is True


def test_push_tag_runs_push_without_prompting() -> None:
    with patch(RUN, return_value=_ok()) as mock_run:
        RealGitTagOps().push_tag(REPO, "origin", "v1.0.0")

    args, kwargs = mock_run.call_args
    assert args[0] == ["git", "push", "origin", "v1.0.0"]
    assert kwargs["env"]["GIT_TERMINAL_PROMPT"] == "0"


def test_delete_tag_runs_tag_delete() -> None:
    with patch(RUN, return_value=_ok()) as mock_run:
        RealGitTagOps().delete_tag(REPO, "v1.0.0")

    assert mock_run.call_args.args[0] == ["git", "tag", "-d", "v1.0.0"]


def test_delete_remote_tag_runs_push_delete() -> None:
    with patch(RUN, return_value=_ok()) as mock_run:
        RealGitTagOps().delete_remote_tag(REPO, "origin", "v1.0.0")

    assert mock_run.call_args.args[0] == ["git", "push", "origin", "--delete", "v1.0.0"]


def test_list_tags_parses_output() -> None:
    with patch(RUN, return_value=_ok("v1.0.0\n  v1.1.0 \nv1.2.0\n")) as mock_run:
        tags = RealGitTagOps().list_tags(REPO, "v1.*")

    assert mock_run.call_args.args[0] == ["git", "tag", "-l", "v1.*"]
    assert tags == ["v1.0.0", "v1.1.0", "v1.2.0"]


def test_list_tags_returns_empty_list_for_blank_output() -> None:
    with patch(RUN, return_value=_ok("\n  \n")):
        assert RealGitTagOps().list_tags(REPO, "v9.*") == []


def test_failure_raises_runtime_error_with_cause() -> None:
    error = subprocess.CalledProcessError(
        128, ["git", "tag", "-d", "v1.0.0"], stderr="error: tag 'v1.0.0' not found."
    )
    with patch(RUN, side_effect=error):
        with pytest.raises(RuntimeError) as exc_info:
            RealGitTagOps().delete_tag(REPO, "v1.0.0")

    assert exc_info.value.__cause__ is error
    assert "Failed to delete tag 'v1.0.0'" in str(exc_info.value)
