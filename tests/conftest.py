"""
Shared fixtures: in-memory SQLite database, app factory and auth helpers.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from app.infrastructure.database import Database
from app.main import create_app
from tests_support import make_settings

DEFAULT_PASSWORD = "senha-forte-123"


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def database():
    db = Database(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    db.create_all()
    yield db
    db.dispose()


@pytest.fixture
def app(settings, database):
    return create_app(settings, database)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def register(client):
    """Register a user through the API; every field can be overridden."""
    counter = {"n": 0}

    def _register(**overrides):
        counter["n"] += 1
        n = counter["n"]
        body = {
            "nome": f"Usuário {n}",
            "email": f"user{n}@safegate.com",
            "senha": DEFAULT_PASSWORD,
            "cpf": f"{n:011d}",
            "telefone": "65999990000",
            "tipo_usuario": "cliente",
        }
        body.update(overrides)
        response = client.post("/auth/register", json=body)
        return body, response

    return _register


@pytest.fixture
def login(client):
    def _login(email, senha=DEFAULT_PASSWORD):
        response = client.post("/auth/login", json={"email": email, "senha": senha})
        assert response.status_code == 200, response.text
        return response.json()["token"]

    return _login


@pytest.fixture
def auth_headers(register, login):
    """Register a user with the given role and return bearer headers for it."""
    def _auth_headers(tipo_usuario="cliente", **overrides):
        body, response = register(tipo_usuario=tipo_usuario, **overrides)
        assert response.status_code == 201, response.text
        return {"Authorization": f"Bearer {login(body['email'])}"}, body

    return _auth_headers
