# src/tenet_feed/models/echo.py
"""Models for echo (like/repost) membership."""

from sqlalchemy import Boolean, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from tenet_feed.db.session import Base


class Echo(Base):
    """Marker row recording that a user echoed a post.

    Row existence is the source of truth; ``Post.echo_count`` mirrors the
    number of rows per post.
    """

    __tablename__ = "echo"
    __table_args__ = (Index("ix_echo_post_id", "post_id"),)

    post_id: Mapped[str] = mapped_column(
        String(32),
        ForeignKey("post.id", ondelete="CASCADE"),
        primary_key=True,
    )
    user_id: Mapped[str] = mapped_column(String(128), primary_key=True)

    echoed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
