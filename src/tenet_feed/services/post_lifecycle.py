"""Service-level helpers for creating and deleting posts."""
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from tenet_feed.core.errors import Unauthenticated, ValidationRejected
from tenet_feed.models import Post, User
from tenet_feed.repositories.post_repo import PostRepository
from tenet_feed.schemas.post import PostCreate
from tenet_feed.services import content_guard
from tenet_feed.services.store import store_operation

logger = logging.getLogger(__name__)


def create_post(db: Session, author: User | None, data: PostCreate) -> Post:
    """Validate and persist a new post.

    Args:
        db: Database session.
        author: Authenticated author; supplies uid, did and handle.
        data: Submitted post fields.

    Returns:
        The persisted post with zeroed counters.

    Raises:
        Unauthenticated: If there is no author.
        ValidationRejected: If the content or source fields fail the content guard.
        StoreUnavailable: If the insert fails.
    """
    if author is None:
        raise Unauthenticated("Posting requires a signed-in user")

    verdict = content_guard.validate_post(data.content, data.source_title, data.source_url)
    if not verdict.allowed:
        logger.info("Post by %s rejected: %s", author.uid, verdict.reason)
        raise ValidationRejected(verdict.reason or "rejected")

    source_title = (data.source_title or "").strip() or None
    source_url = (data.source_url or "").strip() or None
    if source_url:
        source_url = content_guard.normalize_url(source_url)

    post = Post(
        author_uid=author.uid,
        author_did=author.did,
        author_handle=author.handle,
        content=data.content.strip(),
        source_title=source_title,
        source_url=source_url,
        echo_count=0,
        reply_count=0,
        avg_agreement_score=0,
        visibility=data.visibility,
        parent_id=None,
    )
    with store_operation(db, "create post"):
        db.add(post)
        db.commit()
        db.refresh(post)

    logger.info("Created post %s by %s", post.id, author.uid)
    return post


def delete_post(db: Session, post_id: str) -> bool:
    """Delete a post together with its scores, echoes and replies.

    Sub-entity deletes are issued before the post delete and everything
    commits as one transaction, so a failure leaves nothing half-deleted and
    the call can simply be retried.

    Returns:
        True if the post existed, False if it was already gone.

    Raises:
        StoreUnavailable: If a store call fails.
    """
    with store_operation(db, "delete post"):
        removed = PostRepository(db).delete_cascade(post_id)
        db.commit()

    if removed:
        logger.info("Deleted post %s and its dependents", post_id)
    return removed
