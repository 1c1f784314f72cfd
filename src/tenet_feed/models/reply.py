# src/tenet_feed/models/reply.py
"""Models for flat, one-per-user replies."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from tenet_feed.db.session import Base


class Reply(Base):
    """A user's single reply to a post.

    The replying user's id is the reply's identity within the post, so a user
    can never hold two replies on the same post. Replies cannot be replied to.
    """

    __tablename__ = "reply"
    __table_args__ = (Index("ix_reply_post_id_created_at", "post_id", "created_at"),)

    post_id: Mapped[str] = mapped_column(
        String(32),
        ForeignKey("post.id", ondelete="CASCADE"),
        primary_key=True,
    )
    user_id: Mapped[str] = mapped_column(String(128), primary_key=True)

    author_handle: Mapped[str] = mapped_column(Text, nullable=False)
    reply_text: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
