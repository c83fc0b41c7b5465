import pytest

from app import create_app
from services.country_api_client import CountryApiClient
from tests.fakes import FakeSession


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def api_client(session):
    return CountryApiClient("http://api.test", session=session, timeout=5)


@pytest.fixture
def app(api_client):
    app = create_app({
        "TESTING": True,
        "COUNTRY_API_BASE_URL": "http://api.test",
        "COUNTRY_API_CLIENT": api_client,
        "RESPONSE_RENDER_MODE": "table",
        "VALIDATE_UPDATES": False,
    })
    return app


@pytest.fixture
def client(app):
    return app.test_client()
