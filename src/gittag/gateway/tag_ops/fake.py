"""Fake implementation of Git tag operations for testing."""

from __future__ import annotations

import fnmatch
import subprocess
from pathlib import Path

from gittag.gateway.tag_ops.abc import GitTagOps


class FakeGitTagOps(GitTagOps):
    """In-memory fake implementation of Git tag operations.

    This fake accepts pre-configured state in its constructor and tracks
    mutations for test assertions. It fails where git would fail: creating a
    tag that exists, deleting a tag that does not, pushing a tag that only
    exists remotely, or talking to an unknown remote.

    Constructor Injection:
    ---------------------
    - existing_tags: Mapping of local tag name to annotation message
    - remote_tags: Mapping of remote name to the tag names it holds.
      Defaults to an empty "origin"; pass {} to simulate a missing remote.
    - <operation>_raises: Mapping of tag name to the exception raised when
      that operation is applied to that tag. CalledProcessError is wrapped
      in RuntimeError to match run_subprocess_with_context.
    - list_tags_raises: Exception raised by every list_tags() call

    Mutation Tracking:
    -----------------
    - created_tags: List of (tag_name, message) tuples from create_tag()
    - pushed_tags: List of (remote, tag_name) tuples from push_tag()
    - deleted_tags: List of tag names from delete_tag()
    - deleted_remote_tags: List of (remote, tag_name) tuples from delete_remote_tag()
    """

    def __init__(
        self,
        *,
        existing_tags: dict[str, str] | None = None,
        remote_tags: dict[str, set[str]] | None = None,
        create_tag_raises: dict[str, Exception] | None = None,
        push_tag_raises: dict[str, Exception] | None = None,
        delete_tag_raises: dict[str, Exception] | None = None,
        delete_remote_tag_raises: dict[str, Exception] | None = None,
        list_tags_raises: Exception | None = None,
    ) -> None:
        self._existing_tags: dict[str, str] = (
            dict(existing_tags) if existing_tags is not None else {}
        )
        self._remote_tags: dict[str, set[str]] = (
            {remote: set(tags) for remote, tags in remote_tags.items()}
            if remote_tags is not None
            else {"origin": set()}
        )
        self._create_tag_raises = create_tag_raises or {}
        self._push_tag_raises = push_tag_raises or {}
        self._delete_tag_raises = delete_tag_raises or {}
        self._delete_remote_tag_raises = delete_remote_tag_raises or {}
        self._list_tags_raises = list_tags_raises

        # Mutation tracking
        self._created_tags: list[tuple[str, str]] = []  # (tag_name, message)
        self._pushed_tags: list[tuple[str, str]] = []  # (remote, tag_name)
        self._deleted_tags: list[str] = []
        self._deleted_remote_tags: list[tuple[str, str]] = []  # (remote, tag_name)

    # ============================================================================
    # Query Operations
    # ============================================================================

    def list_tags(self, repo_root: Path, pattern: str) -> list[str]:
        """List tags matching a glob pattern, sorted by name like git."""
        if self._list_tags_raises is not None:
            _raise_injected(self._list_tags_raises, f"list tags matching '{pattern}'")
        return sorted(tag for tag in self._existing_tags if fnmatch.fnmatchcase(tag, pattern))

    # ============================================================================
    # Mutation Operations
    # ============================================================================

    def create_tag(self, repo_root: Path, tag_name: str, message: str) -> None:
        """Create an annotated git tag (mutates internal state)."""
        if tag_name in self._create_tag_raises:
            _raise_injected(self._create_tag_raises[tag_name], f"create tag '{tag_name}'")
        if tag_name in self._existing_tags:
            raise RuntimeError(f"fatal: tag '{tag_name}' already exists")
        self._existing_tags[tag_name] = message
        self._created_tags.append((tag_name, message))

    def push_tag(self, repo_root: Path, remote: str, tag_name: str) -> None:
        """Push a tag to a remote (mutates remote state)."""
        if tag_name in self._push_tag_raises:
            _raise_injected(self._push_tag_raises[tag_name], f"push tag '{tag_name}'")
        if remote not in self._remote_tags:
            raise RuntimeError(f"fatal: '{remote}' does not appear to be a git repository")
        if tag_name not in self._existing_tags:
            raise RuntimeError(f"error: src refspec {tag_name} does not match any")
        self._remote_tags[remote].add(tag_name)
        self._pushed_tags.append((remote, tag_name))

    def delete_tag(self, repo_root: Path, tag_name: str) -> None:
        """Delete a local tag (mutates internal state)."""
        if tag_name in self._delete_tag_raises:
            _raise_injected(self._delete_tag_raises[tag_name], f"delete tag '{tag_name}'")
        if tag_name not in self._existing_tags:
            raise RuntimeError(f"error: tag '{tag_name}' not found.")
        del self._existing_tags[tag_name]
        self._deleted_tags.append(tag_name)

    def delete_remote_tag(self, repo_root: Path, remote: str, tag_name: str) -> None:
        """Delete a tag from a remote (mutates remote state)."""
        if tag_name in self._delete_remote_tag_raises:
            _raise_injected(
                self._delete_remote_tag_raises[tag_name], f"delete remote tag '{tag_name}'"
            )
        if remote not in self._remote_tags:
            raise RuntimeError(f"fatal: '{remote}' does not appear to be a git repository")
        if tag_name not in self._remote_tags[remote]:
            raise RuntimeError(f"error: unable to delete '{tag_name}': remote ref does not exist")
        self._remote_tags[remote].discard(tag_name)
        self._deleted_remote_tags.append((remote, tag_name))

    # ============================================================================
    # State Inspection Properties
    # ============================================================================

    @property
    def local_tags(self) -> dict[str, str]:
        """Current local tags mapped to their annotation messages."""
        return dict(self._existing_tags)

    def tags_on_remote(self, remote: str) -> set[str]:
        """Current tags held by a remote (empty for an unknown remote)."""
        return set(self._remote_tags.get(remote, set()))

    # ============================================================================
    # Mutation Tracking Properties
    # ============================================================================

    @property
    def created_tags(self) -> list[tuple[str, str]]:
        """Get list of tags created during test.

        Returns list of (tag_name, message) tuples.
        This property is for test assertions only.
        """
        return self._created_tags.copy()

    @property
    def pushed_tags(self) -> list[tuple[str, str]]:
        """Get list of tags pushed during test.

        Returns list of (remote, tag_name) tuples.
        This property is for test assertions only.
        """
        return self._pushed_tags.copy()

    @property
    def deleted_tags(self) -> list[str]:
        """Get list of local tags deleted during test, in deletion order."""
        return self._deleted_tags.copy()

    @property
    def deleted_remote_tags(self) -> list[tuple[str, str]]:
        """Get list of (remote, tag_name) tuples deleted from remotes during test."""
        return self._deleted_remote_tags.copy()


def _raise_injected(exc: Exception, operation_context: str) -> None:
    # Wrap CalledProcessError in RuntimeError to match run_subprocess_with_context
    if isinstance(exc, subprocess.CalledProcessError):
        raise RuntimeError(f"Failed to {operation_context}") from exc
    raise exc
