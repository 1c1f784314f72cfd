# src/tenet_feed/models/agreement.py
"""Models capturing per-user agreement scores on posts."""

from sqlalchemy import CheckConstraint, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from tenet_feed.db.session import Base


class AgreementScore(Base):
    """A viewer's 0-100 agreement rating of a post.

    Scores feed the post's community average and are replaced, not summed,
    when the same user rates again.
    """

    __tablename__ = "agreement_score"
    __table_args__ = (
        CheckConstraint("score BETWEEN 0 AND 100", name="ck_agreement_score_range"),
        Index("ix_agreement_score_post_id", "post_id"),
    )

    post_id: Mapped[str] = mapped_column(
        String(32),
        ForeignKey("post.id", ondelete="CASCADE"),
        primary_key=True,
    )
    # Composite primary key keeps one score per user per post.
    user_id: Mapped[str] = mapped_column(String(128), primary_key=True)

    score: Mapped[int] = mapped_column(Integer, nullable=False)
