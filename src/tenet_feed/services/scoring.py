"""Agreement score aggregation.

Each user holds one score per post; the post caches the rounded mean of all of
them. The average is recomputed from every stored score on each write rather
than adjusted incrementally, so it never drifts. Two concurrent writers on the
same post may race on the final average write; the later recompute wins and
the next write or read converges.
"""

from __future__ import annotations

import logging

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from tenet_feed.core.errors import ValidationRejected
from tenet_feed.models import AgreementScore
from tenet_feed.repositories.post_repo import PostRepository
from tenet_feed.services.store import store_operation

logger = logging.getLogger(__name__)

MIN_SCORE = 0
MAX_SCORE = 100


def rounded_mean(total: int, count: int) -> int:
    """Return ``total / count`` rounded half up, or 0 when ``count`` is 0."""
    if count <= 0:
        return 0
    return (2 * total + count) // (2 * count)


def compute_average(db: Session, post_id: str) -> int:
    """Recompute the agreement average for a post from its stored scores."""
    total, count = db.execute(
        select(
            func.coalesce(func.sum(AgreementScore.score), 0),
            func.count(AgreementScore.user_id),
        ).where(AgreementScore.post_id == post_id)
    ).one()
    return rounded_mean(int(total), int(count))


def get_score(db: Session, post_id: str, user_id: str) -> int | None:
    """Return a user's own score for a post, if they have rated it."""
    record = db.get(AgreementScore, (post_id, user_id))
    return record.score if record else None


def set_score(db: Session, post_id: str, user_id: str, score: int) -> int:
    """Store a user's agreement score and refresh the post's average.

    Args:
        db: Database session.
        post_id: Post being rated.
        user_id: Rating user; a later call replaces their earlier score.
        score: Integer in the range 0-100.

    Returns:
        The post's new ``avg_agreement_score``.

    Raises:
        ValidationRejected: If the score is out of range.
        PostNotFound: If the post does not exist.
        StoreUnavailable: If a store call fails.
    """
    if isinstance(score, bool) or not MIN_SCORE <= score <= MAX_SCORE:
        raise ValidationRejected("score out of range")

    repo = PostRepository(db)
    with store_operation(db, "set score"):
        repo.require(post_id)

        record = db.get(AgreementScore, (post_id, user_id))
        if record is None:
            db.add(AgreementScore(post_id=post_id, user_id=user_id, score=score))
        else:
            record.score = score
        db.flush()

        average = compute_average(db, post_id)
        repo.set_average(post_id, average)
        db.commit()

    logger.debug("Post %s agreement average is now %d", post_id, average)
    return average
