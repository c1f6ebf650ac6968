import os

# Must be set before vacation_api is imported: settings are read at import time.
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, select
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from vacation_api.main import app
from vacation_api.db import get_session
from vacation_api.models.user import Base, User
from vacation_api.core.seed import DEMO_PASSWORD, seed_demo_data


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    with factory() as s:
        seed_demo_data(s)
    yield factory
    engine.dispose()


@pytest.fixture
def session(session_factory):
    with session_factory() as s:
        yield s


@pytest.fixture
def users(session) -> dict[str, User]:
    """Seeded users keyed by the local part of their email (employee, supervisor, admin, bob, charlie)."""
    return {u.email.split("@")[0]: u for u in session.scalars(select(User)).all()}


@pytest.fixture
def client(session_factory):
    def override_get_session():
        s = session_factory()
        try:
            yield s
        finally:
            s.close()

    app.dependency_overrides[get_session] = override_get_session
    yield TestClient(app)
    app.dependency_overrides.clear()


def login(client: TestClient, email: str, password: str = DEMO_PASSWORD) -> dict[str, str]:
    res = client.post("/auth/login", json={"email": email, "password": password})
    assert res.status_code == 200, res.text
    return {"Authorization": f"Bearer {res.json()['access_token']}"}


@pytest.fixture
def employee_headers(client):
    return login(client, "employee@example.com")


@pytest.fixture
def supervisor_headers(client):
    return login(client, "supervisor@example.com")


@pytest.fixture
def admin_headers(client):
    return login(client, "admin@example.com")
