"""Errors raised by TagManager operations.

Every error derives from TagError. Errors caused by a failed git invocation
are chained to the gateway's RuntimeError, so the git exit code and stderr
stay reachable through ``__cause__`` without being part of the message.
"""


class TagError(Exception):
    """Base class for all tag operation failures."""


class CreationError(TagError):
    """Raised when creating a local tag fails."""

    def __init__(self, tag_name: str) -> None:
        super().__init__(f"Failed to create local tag '{tag_name}'")
        self.tag_name = tag_name


class PushError(TagError):
    """Raised when pushing a tag to the remote fails."""

    def __init__(self, tag_name: str, remote: str) -> None:
        super().__init__(f"Failed to push tag '{tag_name}' to remote '{remote}'")
        self.tag_name = tag_name
        self.remote = remote


class DeletionError(TagError):
    """Raised when deleting a local tag fails (including a missing tag)."""

    def __init__(self, tag_name: str) -> None:
        super().__init__(f"Failed to delete local tag '{tag_name}'")
        self.tag_name = tag_name


class RemoteDeletionError(TagError):
    """Raised when deleting a tag from the remote fails."""

    def __init__(self, tag_name: str, remote: str) -> None:
        super().__init__(f"Failed to delete tag '{tag_name}' from remote '{remote}'")
        self.tag_name = tag_name
        self.remote = remote


class NotFoundError(TagError):
    """Raised when no local tag matches a pattern, or listing tags fails."""

    def __init__(self, pattern: str) -> None:
        super().__init__(f"No tags found matching '{pattern}'")
        self.pattern = pattern


class BulkDeletionError(TagError):
    """Raised when one tag of a pattern-based deletion fails.

    Attributes:
        tag_name: The tag whose deletion failed
        error: The DeletionError or RemoteDeletionError for that tag
    """

    def __init__(self, tag_name: str, error: TagError) -> None:
        super().__init__(f"Failed to delete tag '{tag_name}': {error}")
        self.tag_name = tag_name
        self.error = error
