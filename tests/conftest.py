# tests/conftest.py

import os

# Must be set before cat_api reads its settings.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["SEED_SAMPLE_DATA"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from cat_api.database import get_db, init_db
from cat_api.main import app


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine, seed=True)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine):
    Session = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = Session()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client(engine):
    Session = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        db = Session()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    # No `with` block: the lifespan would run init_db against the real engine.
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_client(engine):
    """Independent clients (separate cookie jars) sharing one database."""
    Session = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        db = Session()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield lambda: TestClient(app)
    app.dependency_overrides.clear()


def register_and_login(client, username="alice", password="s3cret!", email=None):
    email = email or f"{username}@example.com"
    res = client.post("/signup", json={"username": username, "email": email, "password": password})
    assert res.status_code == 200, res.text
    res = client.post("/login", json={"username": username, "password": password})
    assert res.status_code == 200, res.text
    return res


@pytest.fixture
def auth_client(client):
    register_and_login(client)
    return client
