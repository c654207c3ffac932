"""
Shared test fixtures.

Sets up an isolated SQLite database so tests never touch the
real one. Tables are created before each test and dropped
after, so no test data persists.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from paynote.main import app
from paynote.models.base import Base, get_db
from paynote.schemas.auth import RegisterRequest
from paynote.services.auth_service import AuthService


TEST_DATABASE_URL = "sqlite:///./test.db"

TEST_PASSWORD = "correct-horse-battery"

engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
)

TestSessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
)


@pytest.fixture(autouse=True)
def setup_database():
    """Create all tables before each test, drop them after."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    """Provide a database session for direct service testing."""
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


def make_user(db_session, email, name="Test User"):
    """Helper: register a user directly through the service."""
    user = AuthService(db_session).register(RegisterRequest(
        email=email, name=name, password=TEST_PASSWORD,
    ))
    db_session.commit()
    return user


@pytest.fixture
def owner(db_session):
    return make_user(db_session, "owner@example.com", "Owner")


@pytest.fixture
def other_owner(db_session):
    return make_user(db_session, "other@example.com", "Other")


@pytest.fixture
def client(db_session):
    """
    Provide a test client with the test database.

    get_db is overridden so the app uses the test session.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def login(client, email, password=TEST_PASSWORD):
    response = client.post("/auth/login", json={
        "email": email,
        "password": password,
    })
    assert response.status_code == 200
    return client


@pytest.fixture
def auth_client(client, owner):
    """A test client with an active session for `owner`."""
    return login(client, owner.email)


@pytest.fixture
def other_client(client, other_owner):
    """
    A second client, logged in as `other_owner`.

    It shares the app and test session with `client` but keeps
    its own cookie jar.
    """
    other = TestClient(app)
    return login(other, other_owner.email)
