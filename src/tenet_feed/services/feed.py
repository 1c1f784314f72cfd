"""Read-side helpers: feed pages, search and per-viewer state."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

from sqlalchemy.orm import Session

from tenet_feed.core.settings import settings
from tenet_feed.models import Post, Reply
from tenet_feed.repositories.post_repo import PostRepository
from tenet_feed.services import echoes, replies, scoring


@dataclass(frozen=True)
class ViewerState:
    """What the signed-in viewer has already done on a post."""

    has_echoed: bool
    my_score: int | None
    has_replied: bool


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def list_feed(db: Session, limit: int | None = None, before: datetime | None = None) -> list[Post]:
    """Return a page of posts, newest first.

    Args:
        db: Database session.
        limit: Page size, defaults to ``FEED_PAGE_SIZE``.
        before: Creation time of the last post already shown; only older
            posts are returned.
    """
    if limit is None:
        limit = settings.feed_page_size
    if before is not None:
        before = _as_utc(before)
    return PostRepository(db).list_recent(limit, before)


def search_posts(db: Session, text: str) -> list[Post]:
    """Return recent public posts whose content or author handle contains ``text``."""
    needle = text.strip().lower()
    if not needle:
        return []
    candidates = PostRepository(db).list_public(settings.search_scan_limit)
    return [
        post
        for post in candidates
        if needle in post.content.lower() or needle in post.author_handle.lower()
    ]


def get_post_with_replies(db: Session, post_id: str) -> tuple[Post, list[Reply]]:
    """Return a post and its replies in display order.

    Raises:
        PostNotFound: If the post does not exist.
    """
    post = PostRepository(db).require(post_id)
    return post, replies.list_replies(db, post_id)


def viewer_state(db: Session, post_id: str, user_id: str) -> ViewerState:
    """Return the viewer's echo, score and reply state for a post.

    Raises:
        PostNotFound: If the post does not exist.
    """
    PostRepository(db).require(post_id)
    return ViewerState(
        has_echoed=echoes.has_echoed(db, post_id, user_id),
        my_score=scoring.get_score(db, post_id, user_id),
        has_replied=replies.has_replied(db, post_id, user_id),
    )
