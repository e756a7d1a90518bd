"""
Test configuration and fixtures.

Runs the app against an in-memory SQLite database shared through a
StaticPool, swapped in via ``app.dependency_overrides[get_db]``.
"""
import os
from collections.abc import Callable, Generator

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key-for-testing-only"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.auth import create_access_token, hash_password, pwd_context
from app.core.database import Base, get_db
from app.main import app
from app.models.user import User

test_engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestSessionLocal = sessionmaker(bind=test_engine, autoflush=False)

DEFAULT_PASSWORD = "s3cret-pass"

# Minimum bcrypt cost keeps the suite fast
pwd_context.update(bcrypt__default_rounds=4)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    Base.metadata.create_all(bind=test_engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, None, None]:
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db_session: Session) -> Callable[..., User]:
    counter = {"n": 0}

    def _make(
        role: str = "moderator",
        permissions: list[dict] | None = None,
        email: str | None = None,
        password: str = DEFAULT_PASSWORD,
        name: str | None = None,
    ) -> User:
        counter["n"] += 1
        user = User(
            name=name or f"{role.title()} {counter['n']}",
            email=email or f"{role}{counter['n']}@academy.io",
            password_hash=hash_password(password),
            role=role,
            permissions=permissions or [],
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make


def auth_headers(user: User) -> dict[str, str]:
    token = create_access_token(user_id=user.id, role=user.role)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin(make_user) -> User:
    return make_user(role="admin", email="admin@academy.io", name="Ada Admin")


@pytest.fixture
def admin_headers(admin: User) -> dict[str, str]:
    return auth_headers(admin)
