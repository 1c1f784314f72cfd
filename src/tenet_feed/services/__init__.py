"""Business logic services for the Tenet Feed service."""

from . import content_guard, echoes, feed, post_lifecycle, replies, scoring

__all__ = [
    "content_guard",
    "echoes",
    "feed",
    "post_lifecycle",
    "replies",
    "scoring",
]
