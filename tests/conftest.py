"""
Pytest fixtures and configuration for PopcornPick tests
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from popcornpick import models  # noqa: F401
from popcornpick.core.config import Settings, get_settings
from popcornpick.core.gateway import UpstreamGateway
from popcornpick.core.interfaces import TMDBClientInterface, TMDBResponse
from popcornpick.core.tmdb_service import get_gateway
from popcornpick.db import Base, get_db
from popcornpick.main import app


class FakeTMDBClient(TMDBClientInterface):
    """In-memory TMDB client.

    ``responses`` maps an endpoint to a payload dict (200), an int status
    code (failed response) or an exception instance (raised). Unknown
    endpoints answer 404.
    """

    def __init__(self, responses=None):
        self.responses = responses or {}
        self.calls = []

    def make_request(self, endpoint, params=None):
        self.calls.append((endpoint, dict(params or {})))
        result = self.responses.get(endpoint)
        if isinstance(result, Exception):
            raise result
        if result is None:
            return TMDBResponse({}, 404, False)
        if isinstance(result, int):
            return TMDBResponse({}, result, False)
        return TMDBResponse(result, 200, True)

    def endpoints(self):
        return [endpoint for endpoint, _ in self.calls]


@pytest.fixture
def settings():
    return Settings(
        SECRET_KEY="test-secret-key",
        BCRYPT_ROUNDS=4,
        TMDB_API_KEY="test-api-key",
        TMDB_REGION="IN",
        AUTO_CREATE_TABLES=False,
    )


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def tmdb_client():
    return FakeTMDBClient()


@pytest.fixture
def gateway(tmdb_client, settings):
    return UpstreamGateway(tmdb_client, region=settings.TMDB_REGION)


@pytest.fixture
def client(db_session, settings, gateway):
    """TestClient wired to the in-memory database and fake TMDB client"""
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_gateway] = lambda: gateway
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(client):
    """Sign up a user and return bearer headers for them"""
    response = client.post(
        "/api/auth/signup",
        json={"name": "Ann", "email": "ann@x.com", "password": "secret123"},
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}
