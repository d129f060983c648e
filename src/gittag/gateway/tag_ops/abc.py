"""Abstract base class for Git tag operations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


def parse_tag_listing(stdout: str) -> list[str]:
    """Parse the output of ``git tag -l`` into tag names.

    The whole output is trimmed first; empty output means no tags.
    Otherwise it is split on newlines and every entry is trimmed.
    Order is preserved as git printed it.
    """
    text = stdout.strip()
    if not text:
        return []
    return [line.strip() for line in text.split("\n")]


class GitTagOps(ABC):
    """Abstract interface for Git tag operations.

    All implementations (real, fake, dry-run, printing) must implement this interface.
    Failed git invocations raise RuntimeError, with the underlying
    subprocess.CalledProcessError available via __cause__.
    """

    # ============================================================================
    # Query Operations
    # ============================================================================

    @abstractmethod
    def list_tags(self, repo_root: Path, pattern: str) -> list[str]:
        """List local tags matching a glob pattern.

        Args:
            repo_root: Path to the repository root
            pattern: Glob pattern understood by ``git tag -l`` (e.g., 'v1.*')

        Returns:
            Matching tag names in git's listing order (empty if none match)

        Raises:
            RuntimeError: If git command fails
        """
        ...

    # ============================================================================
    # Mutation Operations
    # ============================================================================

    @abstractmethod
    def create_tag(self, repo_root: Path, tag_name: str, message: str) -> None:
        """Create an annotated git tag.

        Args:
            repo_root: Path to the repository root
            tag_name: Tag name to create (e.g., 'v1.0.0')
            message: Tag message

        Raises:
            RuntimeError: If git command fails
        """
        ...

    @abstractmethod
    def push_tag(self, repo_root: Path, remote: str, tag_name: str) -> None:
        """Push a tag to a remote.

        Args:
            repo_root: Path to the repository root
            remote: Remote name (e.g., 'origin')
            tag_name: Tag name to push

        Raises:
            RuntimeError: If git command fails
        """
        ...

    @abstractmethod
    def delete_tag(self, repo_root: Path, tag_name: str) -> None:
        """Delete a local tag by exact name.

        Args:
            repo_root: Path to the repository root
            tag_name: Tag name to delete

        Raises:
            RuntimeError: If git command fails (including when the tag does not exist)
        """
        ...

    @abstractmethod
    def delete_remote_tag(self, repo_root: Path, remote: str, tag_name: str) -> None:
        """Delete a tag from a remote.

        Args:
            repo_root: Path to the repository root
            remote: Remote name (e.g., 'origin')
            tag_name: Tag name to delete on the remote

        Raises:
            RuntimeError: If git command fails
        """
        ...
