# tests/test_health.py
from fastapi import status


def test_health(client) -> None:
    response = client.get("/health")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"status": "ok"}


def test_root(client) -> None:
    data = client.get("/").json()
    assert data["name"] == "Tenet Feed"
    assert data["docs"] == "/docs"


def test_read_me(client, test_user, auth_token) -> None:
    response = client.get("/api/v1/users/me", headers=auth_token)
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["uid"] == test_user.uid
    assert data["handle"] == "alice.tenetapp.space"
    assert data["provision_status"] == "provisioned"
