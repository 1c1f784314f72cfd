"""Echo membership toggling with a consistent cached counter."""

from __future__ import annotations

import logging

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from tenet_feed.core.errors import StoreUnavailable
from tenet_feed.models import Echo, Post
from tenet_feed.repositories.post_repo import PostRepository
from tenet_feed.services.store import store_operation

logger = logging.getLogger(__name__)

# One re-check after losing an insert race on the (post, user) key.
MAX_ATTEMPTS = 2


def has_echoed(db: Session, post_id: str, user_id: str) -> bool:
    """Return True if the user currently echoes the post."""
    return db.get(Echo, (post_id, user_id)) is not None


def _remove_echo(db: Session, repo: PostRepository, post_id: str, user_id: str) -> None:
    result = db.execute(
        delete(Echo).where(Echo.post_id == post_id, Echo.user_id == user_id)
    )
    # Another session may have removed it first; only count our own delete.
    if result.rowcount:
        repo.add_to_counter(post_id, "echo_count", -1)


def _add_echo(db: Session, repo: PostRepository, post_id: str, user_id: str) -> None:
    db.add(Echo(post_id=post_id, user_id=user_id, echoed=True))
    db.flush()
    repo.add_to_counter(post_id, "echo_count", 1)


def toggle_echo(db: Session, post_id: str, user_id: str) -> bool:
    """Flip a user's echo on a post.

    Returns:
        True if the post is echoed by the user after the toggle.
    """
    echoed, _ = toggle_echo_with_count(db, post_id, user_id)
    return echoed


def toggle_echo_with_count(db: Session, post_id: str, user_id: str) -> tuple[bool, int]:
    """Flip a user's echo on a post and report the resulting ``echo_count``.

    The membership write and the counter delta commit in the same transaction,
    so ``echo_count`` always matches the number of echo rows.

    Returns:
        ``(echoed, echo_count)`` as committed by the toggle's own transaction.

    Raises:
        PostNotFound: If the post does not exist.
        StoreUnavailable: If a store call fails.
    """
    repo = PostRepository(db)
    for attempt in range(1, MAX_ATTEMPTS + 1):
        try:
            with store_operation(db, "toggle echo"):
                repo.require(post_id)
                if has_echoed(db, post_id, user_id):
                    _remove_echo(db, repo, post_id, user_id)
                    echoed = False
                else:
                    _add_echo(db, repo, post_id, user_id)
                    echoed = True
                echo_count = db.scalar(select(Post.echo_count).where(Post.id == post_id))
                db.commit()
            return echoed, echo_count
        except StoreUnavailable as err:
            if not isinstance(err.__cause__, IntegrityError) or attempt == MAX_ATTEMPTS:
                raise
            logger.warning(
                "Echo insert raced for post %s user %s; re-checking membership",
                post_id,
                user_id,
            )
    raise AssertionError("unreachable")  # pragma: no cover
