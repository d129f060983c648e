"""Tag management operations over the git tag gateway.

TagManager turns tag intents (create, push, delete, find) into git
invocations through a GitTagOps gateway and maps failed invocations to the
errors in gittag.errors. Composite operations run their steps in order and
stop at the first failure; nothing is rolled back.
"""

import logging
from pathlib import Path

from gittag.config import GitTagConfig
from gittag.errors import (
    BulkDeletionError,
    CreationError,
    DeletionError,
    NotFoundError,
    PushError,
    RemoteDeletionError,
)
from gittag.gateway.tag_ops.abc import GitTagOps

logger = logging.getLogger(__name__)

ALL_TAGS_PATTERN = "*"


class TagManager:
    """Create, delete and find tags locally and on the configured remote."""

    def __init__(self, tag_ops: GitTagOps, repo_root: Path, config: GitTagConfig) -> None:
        self._tag_ops = tag_ops
        self._repo_root = repo_root
        self._config = config

    @property
    def remote(self) -> str:
        return self._config.remote

    def default_message(self, tag_name: str) -> str:
        """Annotation used when a tag is created without a message."""
        return self._config.message_prefix + tag_name

    # ============================================================================
    # Creation
    # ============================================================================

    def create_local(self, tag_name: str, message: str | None = None) -> None:
        """Create an annotated local tag.

        Args:
            tag_name: Tag to create, passed to git as-is
            message: Annotation; None or "" uses the default message

        Raises:
            CreationError: If git fails to create the tag
        """
        tag_message = message if message else self.default_message(tag_name)
        try:
            self._tag_ops.create_tag(self._repo_root, tag_name, tag_message)
        except RuntimeError as e:
            raise CreationError(tag_name) from e

    def create_remote(self, tag_name: str) -> None:
        """Push an existing local tag to the remote.

        Raises:
            PushError: If git fails to push the tag
        """
        try:
            self._tag_ops.push_tag(self._repo_root, self.remote, tag_name)
        except RuntimeError as e:
            raise PushError(tag_name, self.remote) from e

    def create_tag(self, tag_name: str, message: str | None = None) -> None:
        """Create a local tag, then push it.

        If the push fails the local tag is kept.

        Raises:
            CreationError: If the local tag could not be created (nothing is pushed)
            PushError: If the push failed
        """
        self.create_local(tag_name, message)
        self.create_remote(tag_name)

    # ============================================================================
    # Deletion
    # ============================================================================

    def delete_local(self, tag_name: str) -> None:
        """Delete a local tag by exact name.

        Raises:
            DeletionError: If git fails, including when the tag does not exist
        """
        try:
            self._tag_ops.delete_tag(self._repo_root, tag_name)
        except RuntimeError as e:
            raise DeletionError(tag_name) from e

    def delete_remote(self, tag_name: str) -> None:
        """Delete a tag from the remote by exact name.

        Raises:
            RemoteDeletionError: If git fails to delete the remote tag
        """
        try:
            self._tag_ops.delete_remote_tag(self._repo_root, self.remote, tag_name)
        except RuntimeError as e:
            raise RemoteDeletionError(tag_name, self.remote) from e

    def delete_tag(self, tag_name: str) -> None:
        """Delete a local tag, then delete it from the remote.

        Raises:
            DeletionError: If the local deletion failed (the remote is untouched)
            RemoteDeletionError: If the remote deletion failed
        """
        self.delete_local(tag_name)
        self.delete_remote(tag_name)

    def delete_local_all(self, pattern: str) -> None:
        """Delete every local tag matching a pattern.

        A pattern that matches nothing is not an error. Tags are deleted in
        listing order and the first failure stops the remaining deletions.

        Raises:
            BulkDeletionError: If deleting one of the matched tags failed
        """
        for tag_name in self._resolve_for_deletion(pattern):
            try:
                self.delete_local(tag_name)
            except DeletionError as e:
                raise BulkDeletionError(tag_name, e) from e

    def delete_remote_all(self, pattern: str) -> None:
        """Delete from the remote every tag matching a pattern.

        Names are resolved against the LOCAL tag list; tags that only exist
        on the remote are not seen. Same no-match and abort policy as
        delete_local_all().

        Raises:
            BulkDeletionError: If deleting one of the matched tags failed
        """
        for tag_name in self._resolve_for_deletion(pattern):
            try:
                self.delete_remote(tag_name)
            except RemoteDeletionError as e:
                raise BulkDeletionError(tag_name, e) from e

    def delete_all_tags(self) -> None:
        """Delete all local tags, then all remote tags resolved from the local list.

        Raises:
            BulkDeletionError: If any single deletion failed
        """
        self.delete_local_all(ALL_TAGS_PATTERN)
        self.delete_remote_all(ALL_TAGS_PATTERN)

    def _resolve_for_deletion(self, pattern: str) -> list[str]:
        try:
            tags = self.find_many(pattern)
        except NotFoundError:
            logger.debug("No tags match '%s'; nothing to delete", pattern)
            return []
        logger.debug("Tags matching '%s': %s", pattern, tags)
        return tags

    # ============================================================================
    # Lookup
    # ============================================================================

    def find_one(self, pattern: str) -> str:
        """Return the first local tag matching a pattern, in git's listing order.

        Raises:
            NotFoundError: If nothing matches or listing fails
        """
        return self.find_many(pattern)[0]

    def find_many(self, pattern: str) -> list[str]:
        """Return all local tags matching a pattern, in git's listing order.

        Raises:
            NotFoundError: If nothing matches or listing fails
        """
        try:
            tags = self._tag_ops.list_tags(self._repo_root, pattern)
        except RuntimeError as e:
            raise NotFoundError(pattern) from e
        if not tags:
            raise NotFoundError(pattern)
        return tags
