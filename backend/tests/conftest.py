"""Pytest fixtures - просто и надёжно."""
import os
import uuid as uuid_lib
from datetime import datetime, timedelta, timezone

import logging
import pytest
from fastapi.testclient import TestClient
from jose import jwt

# Отключаем ALL SQLAlchemy логирование
logging.getLogger('sqlalchemy').setLevel(logging.ERROR)
logging.getLogger('sqlalchemy.engine').setLevel(logging.ERROR)

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["ALGORITHM"] = "HS256"

from studyhub.main import app
from studyhub.api.deps import get_now
from studyhub.db.base import Base
from studyhub.db.session import SessionLocal, engine
from studyhub.models import Deck

FROZEN_NOW = datetime(2024, 1, 5, 9, 0, tzinfo=timezone.utc)


def issue_token(claims: dict, expires_in: timedelta = timedelta(minutes=30)) -> str:
    """Токен как от identity-провайдера: тот же секрет, HS256."""
    payload = {**claims, "exp": datetime.now(timezone.utc) + expires_in}
    return jwt.encode(payload, os.environ["SECRET_KEY"], algorithm=os.environ["ALGORITHM"])


class FrozenClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture(scope="function", autouse=True)
def schema():
    """Чистая схема на каждый тест."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def clock():
    frozen = FrozenClock(FROZEN_NOW)
    app.dependency_overrides[get_now] = frozen
    yield frozen
    app.dependency_overrides.pop(get_now, None)


@pytest.fixture(scope="function")
def client(clock) -> TestClient:
    return TestClient(app)


@pytest.fixture(scope="function")
def db():
    db = SessionLocal()
    yield db
    db.close()


@pytest.fixture(scope="function")
def user_id() -> uuid_lib.UUID:
    return uuid_lib.uuid4()


@pytest.fixture(scope="function")
def auth_headers(user_id) -> dict:
    token = issue_token({"sub": str(user_id)})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture(scope="function")
def other_headers() -> dict:
    token = issue_token({"sub": str(uuid_lib.uuid4())})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture(scope="function")
def test_deck(db, user_id) -> Deck:
    deck = Deck(owner_id=user_id, name="Biology", description="Cell structure")
    db.add(deck)
    db.commit()
    db.refresh(deck)
    return deck
