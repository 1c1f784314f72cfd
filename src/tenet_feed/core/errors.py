"""Error taxonomy shared by the feed services.

Every service operation reports failure by raising one of these. The API layer
maps them onto HTTP responses in ``tenet_feed.main``.
"""

from __future__ import annotations


class FeedError(RuntimeError):
    """Base exception for all feed operation failures."""


class ValidationRejected(FeedError):
    """Raised when content fails the content guard.

    Always raised before any write is attempted.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class Unauthenticated(FeedError):
    """Raised when a mutating operation has no resolved caller identity."""


class PostNotFound(FeedError):
    """Raised when operating on a post that does not exist."""

    def __init__(self, post_id: str) -> None:
        super().__init__(f"Post {post_id} not found")
        self.post_id = post_id


class StoreUnavailable(FeedError):
    """Raised when the underlying store call fails.

    The session has already been rolled back when this is raised, so the
    caller may retry the same operation.
    """
