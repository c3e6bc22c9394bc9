import pytest
from fastapi.testclient import TestClient

from nem_recipes.app.core.config import Settings, get_settings
from nem_recipes.app.main import create_app

STATIC_TOKEN = "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9__NEM2024"
CLIENT_ID = "nem_2024"
CLIENT_SECRET = "super_secret_client_secret"


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def static_token():
    return STATIC_TOKEN


@pytest.fixture
def auth_header():
    return {"AUTHORIZATION": f"Bearer {STATIC_TOKEN}"}


@pytest.fixture
def credentials():
    return {"client_id": CLIENT_ID, "client_secret": CLIENT_SECRET}


@pytest.fixture
def jwt_settings():
    return Settings(TOKEN_MODE="jwt", AUTH_SECRET_KEY="test-signing-key", TOKEN_TTL_SECONDS=60)


@pytest.fixture
def jwt_client(app, jwt_settings):
    app.dependency_overrides[get_settings] = lambda: jwt_settings
    return TestClient(app)
