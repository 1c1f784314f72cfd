# src/tenet_feed/models/post.py
"""SQLAlchemy models for posts and their denormalized aggregates."""

import uuid
from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Index, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from tenet_feed.db.session import Base


def _new_post_id() -> str:
    return uuid.uuid4().hex


class Post(Base):
    """Primary content entity produced by users.

    The counters are cached projections of the post's sub-entities and are only
    ever changed through atomic ``column = column + n`` updates.
    """

    __tablename__ = "post"
    __table_args__ = (
        CheckConstraint("echo_count >= 0", name="ck_post_echo_count"),
        CheckConstraint("reply_count >= 0", name="ck_post_reply_count"),
        CheckConstraint(
            "avg_agreement_score BETWEEN 0 AND 100",
            name="ck_post_avg_agreement_score",
        ),
        CheckConstraint(
            "visibility IN ('public', 'private', 'followers')",
            name="ck_post_visibility",
        ),
        Index("ix_post_created_at", "created_at"),
    )

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=_new_post_id)

    author_uid: Mapped[str] = mapped_column(String(128), nullable=False)
    author_did: Mapped[str] = mapped_column(Text, nullable=False)
    author_handle: Mapped[str] = mapped_column(Text, nullable=False)

    content: Mapped[str] = mapped_column(Text, nullable=False)
    # Both set or both null; enforced by the content guard.
    source_title: Mapped[str | None] = mapped_column(Text, nullable=True)
    source_url: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    echo_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    reply_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    avg_agreement_score: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    visibility: Mapped[str] = mapped_column(String(16), nullable=False, default="public")
    # Reserved; replies live in their own table and are never posts.
    parent_id: Mapped[str | None] = mapped_column(String(32), nullable=True)
