"""No-op Git tag operations wrapper for dry-run mode.

This module provides a wrapper that prevents execution of destructive
tag operations while delegating read-only operations to the wrapped implementation.
"""

from pathlib import Path

from gittag.gateway.tag_ops.abc import GitTagOps
from gittag.output import user_output


class DryRunGitTagOps(GitTagOps):
    """No-op wrapper that prevents execution of destructive tag operations.

    Mutations print the git command that would run. list_tags is delegated
    to the wrapped implementation, so pattern-based deletions report the
    tags they would actually touch.

    Usage:
        real_ops = RealGitTagOps()
        noop_ops = DryRunGitTagOps(real_ops)

        # Query operations work normally
        tags = noop_ops.list_tags(repo_root, "v1.*")

        # Mutation operations print dry-run message
        noop_ops.delete_tag(repo_root, "v1.0.0")
    """

    def __init__(self, wrapped: GitTagOps) -> None:
        """Create a dry-run wrapper around a GitTagOps implementation.

        Args:
            wrapped: The GitTagOps implementation to wrap (usually RealGitTagOps)
        """
        self._wrapped = wrapped

    # ============================================================================
    # Query Operations (delegate to wrapped implementation)
    # ============================================================================

    def list_tags(self, repo_root: Path, pattern: str) -> list[str]:
        """List tags (read-only, delegates to wrapped)."""
        return self._wrapped.list_tags(repo_root, pattern)

    # ============================================================================
    # Mutation Operations (print dry-run message)
    # ============================================================================

    def create_tag(self, repo_root: Path, tag_name: str, message: str) -> None:
        """Print dry-run message instead of creating tag."""
        user_output(f"[DRY RUN] Would run: git tag -a {tag_name} -m '{message}'")

    def push_tag(self, repo_root: Path, remote: str, tag_name: str) -> None:
        """Print dry-run message instead of pushing tag."""
        user_output(f"[DRY RUN] Would run: git push {remote} {tag_name}")

    def delete_tag(self, repo_root: Path, tag_name: str) -> None:
        """Print dry-run message instead of deleting tag."""
        user_output(f"[DRY RUN] Would run: git tag -d {tag_name}")

    def delete_remote_tag(self, repo_root: Path, remote: str, tag_name: str) -> None:
        """Print dry-run message instead of deleting remote tag."""
        user_output(f"[DRY RUN] Would run: git push {remote} --delete {tag_name}")
