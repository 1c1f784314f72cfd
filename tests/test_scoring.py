# tests/test_scoring.py
"""Tests for agreement score aggregation."""

import pytest

from tenet_feed.core.errors import PostNotFound, ValidationRejected
from tenet_feed.models import AgreementScore
from tenet_feed.services import scoring


def test_rounded_mean_rounds_half_up() -> None:
    assert scoring.rounded_mean(0, 0) == 0
    assert scoring.rounded_mean(180, 2) == 90
    assert scoring.rounded_mean(1, 2) == 1
    assert scoring.rounded_mean(101, 2) == 51
    assert scoring.rounded_mean(100, 3) == 33
    assert scoring.rounded_mean(200, 3) == 67


def test_average_follows_latest_score_per_user(db_session, test_post) -> None:
    """Scores {u1: 80, u2: 100} average 90; u1 moving to 60 gives 80."""
    assert scoring.set_score(db_session, test_post.id, "u1", 80) == 80
    assert scoring.set_score(db_session, test_post.id, "u2", 100) == 90
    assert scoring.set_score(db_session, test_post.id, "u1", 60) == 80

    db_session.refresh(test_post)
    assert test_post.avg_agreement_score == 80
    rows = db_session.query(AgreementScore).filter_by(post_id=test_post.id).count()
    assert rows == 2


def test_get_score_returns_own_score(db_session, test_post) -> None:
    assert scoring.get_score(db_session, test_post.id, "u1") is None
    scoring.set_score(db_session, test_post.id, "u1", 42)
    assert scoring.get_score(db_session, test_post.id, "u1") == 42


def test_compute_average_without_scores(db_session, test_post) -> None:
    assert scoring.compute_average(db_session, test_post.id) == 0


@pytest.mark.parametrize("score", [-1, 101, True])
def test_out_of_range_score_rejected(db_session, test_post, score) -> None:
    with pytest.raises(ValidationRejected):
        scoring.set_score(db_session, test_post.id, "u1", score)
    assert db_session.query(AgreementScore).count() == 0


def test_score_on_missing_post(db_session) -> None:
    with pytest.raises(PostNotFound):
        scoring.set_score(db_session, "missing", "u1", 50)
