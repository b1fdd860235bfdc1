import pytest
from fastapi.testclient import TestClient

from contact_book_api.app.core.config import Settings
from contact_book_api.app.main import create_app


@pytest.fixture
def settings(tmp_path):
    return Settings(
        database_url=str(tmp_path / "contacts.db"),
        cors_origins="*",
        default_page_size=10,
        max_page_size=100,
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    # Entering the context runs the startup event, which opens the database.
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_contact(client):
    def _make(name="Ann", email="a@b.com", phone="1234567890"):
        response = client.post("/contacts", json={"name": name, "email": email, "phone": phone})
        assert response.status_code == 200, response.text
        return response.json()

    return _make
