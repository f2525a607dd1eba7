from collections.abc import Generator
from http.cookies import SimpleCookie
from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from wallet_users.config import settings
from wallet_users.database import Base, build_engine, get_db
from wallet_users.main import app
from wallet_users.routers.deps import get_user_service
from wallet_users.services.users import UserService


@pytest.fixture()
def db_session() -> Generator:
    engine = build_engine("sqlite://")
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine)

    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def client(db_session) -> Generator[TestClient, None, None]:
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    # Tests use an in-memory DB via dependency override; skip app startup side effects.
    original_startup = list(app.router.on_startup)
    app.router.on_startup.clear()
    with TestClient(app) as test_client:
        yield test_client
    app.router.on_startup[:] = original_startup
    app.dependency_overrides.clear()


@pytest.fixture()
def user_service() -> Mock:
    return Mock(spec=UserService)


@pytest.fixture()
def mocked_client(client, user_service) -> TestClient:
    app.dependency_overrides[get_user_service] = lambda: user_service
    return client


@pytest.fixture()
def session_cookie():
    """Parse the auth cookie out of a response's Set-Cookie header, or None."""

    def parse(response):
        header = response.headers.get("set-cookie")
        if not header:
            return None
        cookie = SimpleCookie()
        cookie.load(header)
        return cookie.get(settings.cookie_name)

    return parse
