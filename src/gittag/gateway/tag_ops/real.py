"""Production Git tag operations using subprocess."""

from pathlib import Path

from gittag.gateway.tag_ops.abc import GitTagOps, parse_tag_listing
from gittag.subprocess_utils import copied_env_for_git_subprocess, run_subprocess_with_context


class RealGitTagOps(GitTagOps):
    """Production implementation of Git tag operations using subprocess."""

    # ============================================================================
    # Query Operations
    # ============================================================================

    def list_tags(self, repo_root: Path, pattern: str) -> list[str]:
        """List local tags matching a glob pattern."""
        result = run_subprocess_with_context(
            cmd=["git", "tag", "-l", pattern],
            operation_context=f"list tags matching '{pattern}'",
            cwd=repo_root,
        )
        return parse_tag_listing(result.stdout)

    # ============================================================================
    # Mutation Operations
    # ============================================================================

    def create_tag(self, repo_root: Path, tag_name: str, message: str) -> None:
        """Create an annotated git tag."""
        run_subprocess_with_context(
            cmd=["git", "tag", "-a", tag_name, "-m", message],
            operation_context=f"create tag '{tag_name}'",
            cwd=repo_root,
        )

    def push_tag(self, repo_root: Path, remote: str, tag_name: str) -> None:
        """Push a tag to a remote."""
        run_subprocess_with_context(
            cmd=["git", "push", remote, tag_name],
            operation_context=f"push tag '{tag_name}' to remote '{remote}'",
            cwd=repo_root,
            env=copied_env_for_git_subprocess(),
        )

    def delete_tag(self, repo_root: Path, tag_name: str) -> None:
        """Delete a local tag."""
        run_subprocess_with_context(
            cmd=["git", "tag", "-d", tag_name],
            operation_context=f"delete tag '{tag_name}'",
            cwd=repo_root,
        )

    def delete_remote_tag(self, repo_root: Path, remote: str, tag_name: str) -> None:
        """Delete a tag from a remote."""
        run_subprocess_with_context(
            cmd=["git", "push", remote, "--delete", tag_name],
            operation_context=f"delete tag '{tag_name}' from remote '{remote}'",
            cwd=repo_root,
            env=copied_env_for_git_subprocess(),
        )
