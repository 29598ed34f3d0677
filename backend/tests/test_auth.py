from datetime import timedelta
from uuid import uuid4

import pytest
from jose import jwt
from starlette.testclient import TestClient

from studyhub.core.security import InvalidToken, owner_id_from_token
from studyhub.main import app

from conftest import issue_token


def test_health_is_public():
    # с контекстным менеджером отрабатывает lifespan (логирование, create_all)
    with TestClient(app) as client:
        response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_owner_id_comes_from_subject():
    owner = uuid4()
    assert owner_id_from_token(issue_token({"sub": str(owner)})) == owner


def test_token_signed_with_other_secret_is_rejected():
    token = jwt.encode({"sub": str(uuid4())}, "some-other-secret", algorithm="HS256")
    with pytest.raises(InvalidToken):
        owner_id_from_token(token)


def test_garbage_token_is_rejected(client: TestClient):
    response = client.get("/api/decks/", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401


def test_missing_token_is_rejected(client: TestClient):
    response = client.get("/api/decks/")
    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"


def test_expired_token_is_rejected(client: TestClient):
    token = issue_token({"sub": str(uuid4())}, expires_in=timedelta(minutes=-5))
    response = client.get("/api/decks/", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


def test_non_uuid_subject_is_rejected(client: TestClient):
    token = issue_token({"sub": "student-42"})
    response = client.get("/api/decks/", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


def test_missing_subject_is_rejected(client: TestClient):
    token = issue_token({"role": "student"})
    response = client.get("/api/decks/", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401
