"""
Shared fixtures: a fresh SQLite database file per test and a TestClient bound to it.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from taskflow.db.session import create_db_engine, get_db, init_db
from taskflow.main import app


@pytest.fixture()
def engine(tmp_path):
    engine = create_db_engine(f"sqlite:///{tmp_path / 'data' / 'tasks.db'}")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def registered_user(client):
    """Register an account through the API and return its public view."""
    response = client.post(
        "/api/auth/register",
        json={
            "email": "Owner@Example.com",
            "password": "secret123",
            "displayName": "Owner"
        }
    )
    assert response.status_code == 201
    return response.json()["user"]
