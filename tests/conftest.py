import pytest
from fastapi.testclient import TestClient

from supplier_api.core.config import Settings
from supplier_api.main import create_app


@pytest.fixture
def client(tmp_path):
    """An app bound to a fresh SQLite file; startup creates the table."""
    settings = Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'suppliers.db'}",
        app_env="test",
    )
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def supplier_factory(client):
    def create_supplier(**kwargs):
        defaults = {
            "name": "Jo",
            "company_name": "Co",
            "product_name": "Pen",
            "contact_number": "1234567890",
            "email": "a@b.com",
        }
        defaults.update(kwargs)
        response = client.post("/CreateUser", json=defaults)
        assert response.status_code == 201, response.text
        return response.json()

    return create_supplier
