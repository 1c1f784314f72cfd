"""Reply register: one flat reply per user per post."""

from __future__ import annotations

import logging

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from tenet_feed.core.errors import Unauthenticated, ValidationRejected
from tenet_feed.models import Reply, User
from tenet_feed.repositories.post_repo import PostRepository
from tenet_feed.services import content_guard
from tenet_feed.services.store import store_operation

logger = logging.getLogger(__name__)


def has_replied(db: Session, post_id: str, user_id: str) -> bool:
    """Return True if the user already holds a reply on the post."""
    return db.get(Reply, (post_id, user_id)) is not None


def list_replies(db: Session, post_id: str) -> list[Reply]:
    """Return a post's replies, oldest first."""
    stmt = (
        select(Reply)
        .where(Reply.post_id == post_id)
        .order_by(Reply.created_at.asc(), Reply.user_id.asc())
    )
    return list(db.scalars(stmt))


def submit_reply(db: Session, post_id: str, caller: User | None, text: str) -> Reply:
    """Store the caller's reply to a post.

    The caller's uid is the reply's key within the post, so a second submit
    replaces the first reply's text and timestamp instead of adding another.
    Callers that want to refuse a second reply should check ``has_replied``
    before prompting for input.

    Raises:
        Unauthenticated: If there is no caller.
        ValidationRejected: If the text fails the content guard.
        PostNotFound: If the post does not exist.
        StoreUnavailable: If a store call fails.
    """
    if caller is None:
        raise Unauthenticated("Replying requires a signed-in user")

    verdict = content_guard.validate(text, min_length=1)
    if not verdict.allowed:
        logger.info("Reply to post %s rejected: %s", post_id, verdict.reason)
        raise ValidationRejected(verdict.reason or "rejected")
    reply_text = text.strip()

    repo = PostRepository(db)
    with store_operation(db, "submit reply"):
        repo.require(post_id)

        reply = db.get(Reply, (post_id, caller.uid))
        if reply is None:
            reply = Reply(
                post_id=post_id,
                user_id=caller.uid,
                author_handle=caller.handle,
                reply_text=reply_text,
            )
            db.add(reply)
            db.flush()
            repo.add_to_counter(post_id, "reply_count", 1)
        else:
            reply.author_handle = caller.handle
            reply.reply_text = reply_text
            reply.created_at = func.now()
        db.commit()

    return reply
