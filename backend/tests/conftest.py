"""Pytest configuration and shared fixtures."""

import os

# Settings are read at import time; configure the test environment first.
os.environ.setdefault("ENV", "test")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test_jwt_secret_key_change_in_production_min_32_chars")

from collections.abc import Generator  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402

from quizbank.db.base import Base  # noqa: E402
from quizbank.db.engine import create_db_engine  # noqa: E402
from quizbank.models.question_bank import QuestionBank  # noqa: E402
from quizbank.models.user import User  # noqa: E402
from tests.helpers.seed import create_test_bank, create_test_user  # noqa: E402

TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "sqlite://")


@pytest.fixture(scope="function")
def engine():
    """Fresh schema per test on its own engine."""
    test_engine = create_db_engine(TEST_DATABASE_URL)
    Base.metadata.create_all(bind=test_engine)
    try:
        yield test_engine
    finally:
        Base.metadata.drop_all(bind=test_engine)
        test_engine.dispose()


@pytest.fixture(scope="function")
def db(engine) -> Generator[Session, None, None]:
    """Database session; application code commits and rolls back for real."""
    session = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def test_user(db) -> User:
    return create_test_user(db, username="alice")


@pytest.fixture
def other_user(db) -> User:
    return create_test_user(db, username="mallory")


@pytest.fixture
def bank(db, test_user) -> QuestionBank:
    return create_test_bank(db, test_user, name="Geography")


@pytest.fixture
def client(db) -> Generator[TestClient, None, None]:
    """FastAPI test client bound to the test session."""
    from quizbank.db.session import get_db
    from quizbank.main import app

    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app, raise_server_exceptions=False)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(test_user) -> dict[str, str]:
    """Authorization header for test_user."""
    from quizbank.core.security import create_access_token

    return {"Authorization": f"Bearer {create_access_token(test_user.id)}"}


@pytest.fixture
def other_auth_headers(other_user) -> dict[str, str]:
    from quizbank.core.security import create_access_token

    return {"Authorization": f"Bearer {create_access_token(other_user.id)}"}
