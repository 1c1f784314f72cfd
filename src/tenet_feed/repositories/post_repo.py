"""Data access helpers for working with posts and their sub-entities."""
from __future__ import annotations

from datetime import datetime

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from tenet_feed.core.errors import PostNotFound
from tenet_feed.models import AgreementScore, Echo, Post, Reply

__all__ = ["PostRepository", "COUNTER_COLUMNS"]

COUNTER_COLUMNS = frozenset({"echo_count", "reply_count"})


class PostRepository:
    """Thin wrapper around database access for post entities."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def get_by_id(self, post_id: str) -> Post | None:
        """Return a post by identifier."""
        return self.session.get(Post, post_id)

    def require(self, post_id: str) -> Post:
        """Return a post by identifier or raise ``PostNotFound``."""
        post = self.get_by_id(post_id)
        if post is None:
            raise PostNotFound(post_id)
        return post

    def list_recent(self, limit: int, before: datetime | None = None) -> list[Post]:
        """Return posts sorted newest first, optionally older than ``before``."""
        stmt = select(Post)
        if before is not None:
            stmt = stmt.where(Post.created_at < before)
        stmt = stmt.order_by(Post.created_at.desc(), Post.id.desc()).limit(limit)
        return list(self.session.scalars(stmt))

    def list_public(self, limit: int) -> list[Post]:
        """Return the most recent public posts."""
        stmt = (
            select(Post)
            .where(Post.visibility == "public")
            .order_by(Post.created_at.desc(), Post.id.desc())
            .limit(limit)
        )
        return list(self.session.scalars(stmt))

    def add_to_counter(self, post_id: str, column: str, delta: int) -> None:
        """Atomically add ``delta`` to one of the post's counters.

        The update is issued as ``column = column + delta`` so concurrent
        writers never overwrite each other's increments.
        """
        if column not in COUNTER_COLUMNS:
            raise ValueError(f"Unknown counter column: {column}")
        self.session.execute(
            update(Post)
            .where(Post.id == post_id)
            .values({column: getattr(Post, column) + delta})
        )

    def set_average(self, post_id: str, value: int) -> None:
        """Overwrite the cached agreement average."""
        self.session.execute(
            update(Post).where(Post.id == post_id).values(avg_agreement_score=value)
        )

    def delete_cascade(self, post_id: str) -> bool:
        """Delete every score, echo and reply of a post, then the post itself.

        Returns:
            True if a post row was removed, False if it was already gone.
        """
        for model in (AgreementScore, Echo, Reply):
            self.session.execute(delete(model).where(model.post_id == post_id))
        result = self.session.execute(delete(Post).where(Post.id == post_id))
        return bool(result.rowcount)
