# mypy: ignore-errors
# tests/v1/test_replies.py
"""Tests for reply endpoints."""

from fastapi import status


def test_submit_reply(client, test_post, other_user, other_auth_token) -> None:
    response = client.post(
        f"/api/v1/posts/{test_post.id}/replies",
        json={"reply_text": "  Thanks for sharing  "},
        headers=other_auth_token,
    )
    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["reply_text"] == "Thanks for sharing"
    assert data["user_id"] == other_user.uid
    assert data["author_handle"] == other_user.handle


def test_second_reply_overwrites(client, test_post, other_auth_token) -> None:
    url = f"/api/v1/posts/{test_post.id}/replies"
    client.post(url, json={"reply_text": "First take"}, headers=other_auth_token)
    client.post(url, json={"reply_text": "Second take"}, headers=other_auth_token)

    response = client.get(url)
    assert response.status_code == status.HTTP_200_OK
    assert [r["reply_text"] for r in response.json()] == ["Second take"]
    assert client.get(f"/api/v1/posts/{test_post.id}").json()["reply_count"] == 1


def test_reply_profanity_rejected(client, test_post, other_auth_token) -> None:
    response = client.post(
        f"/api/v1/posts/{test_post.id}/replies",
        json={"reply_text": "What a load of shit"},
        headers=other_auth_token,
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["detail"] == "profanity"


def test_reply_empty_rejected(client, test_post, other_auth_token) -> None:
    response = client.post(
        f"/api/v1/posts/{test_post.id}/replies",
        json={"reply_text": "    "},
        headers=other_auth_token,
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["detail"] == "empty"


def test_reply_very_long_text_reports_reason(client, test_post, other_auth_token) -> None:
    response = client.post(
        f"/api/v1/posts/{test_post.id}/replies",
        json={"reply_text": "x" * 5001},
        headers=other_auth_token,
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["detail"] == "too long"


def test_reply_requires_auth(client, test_post) -> None:
    response = client.post(
        f"/api/v1/posts/{test_post.id}/replies",
        json={"reply_text": "Who am I"},
    )
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_list_replies_missing_post(client) -> None:
    response = client.get("/api/v1/posts/missing/replies")
    assert response.status_code == status.HTTP_404_NOT_FOUND
