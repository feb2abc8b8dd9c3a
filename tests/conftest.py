# tests/conftest.py
import os
import tempfile

# must be set before bloomly.config is imported anywhere
_DB_DIR = tempfile.mkdtemp(prefix="bloomly-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_DB_DIR, 'bloomly.db')}"
os.environ["JWT_SECRET"] = "test-secret"

import pytest
from fastapi.testclient import TestClient

from bloomly.db import Base, SessionLocal, engine
from bloomly.main import app


@pytest.fixture(autouse=True)
def fresh_schema():
    Base.metadata.drop_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    # context manager runs the lifespan, i.e. the migration
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def register(client, email="a@x.com", password="pw123"):
    resp = client.post("/auth/register", json={"email": email, "password": password})
    assert resp.status_code == 200, resp.text
    return resp.json()["token"]


@pytest.fixture
def token(client):
    return register(client)


@pytest.fixture
def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}
