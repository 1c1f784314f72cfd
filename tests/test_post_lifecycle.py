# tests/test_post_lifecycle.py
"""Tests for post creation and cascading deletion."""

from datetime import UTC, datetime

import pytest
from sqlalchemy.exc import OperationalError

from tenet_feed.core.errors import StoreUnavailable, Unauthenticated, ValidationRejected
from tenet_feed.models import AgreementScore, Echo, Post, Reply
from tenet_feed.schemas.post import PostCreate
from tenet_feed.services import echoes, post_lifecycle, replies, scoring


def test_create_post_trims_and_initializes(db_session, test_user) -> None:
    post = post_lifecycle.create_post(
        db_session,
        test_user,
        PostCreate(
            content="  Hello world, this is my post  ",
            source_title=" Title ",
            source_url=" example.com/story ",
        ),
    )

    assert post.id
    assert post.content == "Hello world, this is my post"
    assert post.source_title == "Title"
    assert post.source_url == "https://example.com/story"
    assert (post.echo_count, post.reply_count, post.avg_agreement_score) == (0, 0, 0)
    assert post.visibility == "public"
    assert post.parent_id is None
    assert post.author_handle == test_user.handle
    assert post.author_did == test_user.did
    assert post.created_at is not None


def test_create_post_without_source_stores_nulls(db_session, test_user) -> None:
    post = post_lifecycle.create_post(
        db_session, test_user, PostCreate(content="Nothing to cite here", visibility="followers")
    )
    assert post.source_title is None
    assert post.source_url is None
    assert post.visibility == "followers"


@pytest.mark.parametrize(
    ("fields", "reason"),
    [
        ({"content": "a" * 301}, "too long"),
        ({"content": "this is total shit news"}, "profanity"),
        ({"content": "too short"}, "too short"),
        ({"content": "A sourced post body", "source_title": "Only a title"}, "source title and link must both be set"),
        ({"content": "A sourced post body", "source_title": "Clips", "source_url": "xvideos.com"}, "unsafe link"),
    ],
)
def test_create_post_enforces_guard(db_session, test_user, fields, reason) -> None:
    with pytest.raises(ValidationRejected) as excinfo:
        post_lifecycle.create_post(db_session, test_user, PostCreate(**fields))
    assert excinfo.value.reason == reason
    assert db_session.query(Post).count() == 0


def test_create_post_requires_author(db_session) -> None:
    with pytest.raises(Unauthenticated):
        post_lifecycle.create_post(db_session, None, PostCreate(content="Hello world again"))


def test_create_post_store_failure(db_session, test_user, monkeypatch) -> None:
    """Store failures surface as StoreUnavailable instead of a null id."""

    def failing_commit() -> None:
        raise OperationalError("INSERT INTO post", {}, Exception("database is locked"))

    monkeypatch.setattr(db_session, "commit", failing_commit)
    with pytest.raises(StoreUnavailable):
        post_lifecycle.create_post(db_session, test_user, PostCreate(content="Hello world again"))


def test_delete_post_cascades(db_session, test_post, other_user) -> None:
    scoring.set_score(db_session, test_post.id, other_user.uid, 70)
    echoes.toggle_echo(db_session, test_post.id, other_user.uid)
    replies.submit_reply(db_session, test_post.id, other_user, "Nice one")
    post_id = test_post.id

    assert post_lifecycle.delete_post(db_session, post_id) is True

    assert db_session.get(Post, post_id) is None
    for model in (AgreementScore, Echo, Reply):
        assert db_session.query(model).filter_by(post_id=post_id).count() == 0


def test_delete_post_is_idempotent(db_session, test_post) -> None:
    post_id = test_post.id
    assert post_lifecycle.delete_post(db_session, post_id) is True
    assert post_lifecycle.delete_post(db_session, post_id) is False
    assert db_session.query(Post).count() == 0


def test_delete_leaves_other_posts_alone(db_session, test_user, other_user, post_factory) -> None:
    keep = post_factory(test_user, "Keep this one around")
    drop = post_factory(test_user, "Drop this one please")
    echoes.toggle_echo(db_session, keep.id, other_user.uid)
    echoes.toggle_echo(db_session, drop.id, other_user.uid)

    post_lifecycle.delete_post(db_session, drop.id)

    assert db_session.get(Post, keep.id) is not None
    assert echoes.has_echoed(db_session, keep.id, other_user.uid)


def test_create_post_timestamp_assigned_by_store(db_session, test_user) -> None:
    """created_at is filled in by the database on insert."""
    assert Post.__table__.c.created_at.server_default is not None
    started = datetime.now(UTC).replace(tzinfo=None, microsecond=0)

    post = post_lifecycle.create_post(db_session, test_user, PostCreate(content="Stamped by the store"))

    stamped = post.created_at.replace(tzinfo=None)
    assert started <= stamped <= datetime.now(UTC).replace(tzinfo=None)
