"""Integration tests for resolving the repository root from a subdirectory."""

import shutil
from pathlib import Path

import pytest
from click.testing import CliRunner

from gittag.cli.cli import cli
from gittag.context import create_context

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed"),
]


def test_config_is_found_from_subdirectory(local_repo: Path) -> None:
    (local_repo / ".gittag.toml").write_text('remote = "upstream"\n', encoding="utf-8")
    subdir = local_repo / "sub" / "dir"
    subdir.mkdir(parents=True)

    ctx = create_context(cwd=subdir, dry_run=False, verbose=False)

    assert ctx.repo_root.resolve() == local_repo.resolve()
    assert ctx.tag_manager.remote == "upstream"


def test_cli_from_subdirectory_tags_the_repository(local_repo: Path) -> None:
    subdir = local_repo / "sub"
    subdir.mkdir()

    result = CliRunner().invoke(cli, ["-C", str(subdir), "create", "v1.0.0", "--local-only"])
    assert result.exit_code == 0, result.output

    result = CliRunner().invoke(cli, ["-C", str(local_repo), "find", "v1.*"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "v1.0.0"
