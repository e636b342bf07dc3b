"""Pytest configuration: an in-memory database seeded with the sample data."""

import os

# Configure the app before it is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import Base, build_engine, get_db, init_db
from app.core.security import create_token, get_user_payload
from app.core.seed import seed_database
from app.main import app
from app.users.models.user_model import User

ADMIN_EMAIL = "syntyche@gmail.com"
USER_EMAIL = "taqqiq@gmail.com"


@pytest.fixture
def engine():
    # One shared connection so every session sees the same in-memory database
    engine = build_engine("sqlite://", poolclass=StaticPool)
    init_db(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    seed_database(session)
    yield session
    session.close()


@pytest.fixture
def client(db, session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def bearer_for(db, email: str) -> dict:
    user = db.query(User).filter(User.email == email).first()
    return {"Authorization": f"Bearer {create_token(get_user_payload(user))}"}


@pytest.fixture
def admin_headers(db):
    return bearer_for(db, ADMIN_EMAIL)


@pytest.fixture
def user_headers(db):
    return bearer_for(db, USER_EMAIL)
