# tests/test_errors.py

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel
from sqlalchemy.exc import OperationalError
from cat_api.core.errors import (
    AuthError,
    ConflictError,
    InternalError,
    ValidationError,
    register_error_handlers,
)


class Payload(BaseModel):
    name: str


@pytest.fixture
def error_client():
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/raise/{kind}")
    def raise_error(kind: str):
        errors = {
            "validation": ValidationError("bad input"),
            "conflict": ConflictError(),
            "auth": AuthError(),
            "internal": InternalError(),
            "db": OperationalError("SELECT 1", {}, Exception("password=hunter2 leaked")),
        }
        raise errors[kind]

    @app.post("/payload")
    def payload(body: Payload):
        return {"name": body.name}

    return TestClient(app)


@pytest.mark.parametrize("kind,status_code,message", [
    ("validation", 400, "bad input"),
    ("conflict", 400, "Resource already exists"),
    ("auth", 401, "Unauthorized"),
    ("internal", 500, "Internal server error"),
])
def test_api_errors_become_json(error_client, kind, status_code, message):
    res = error_client.get(f"/raise/{kind}")
    assert res.status_code == status_code
    assert res.json() == {"error": message}


def test_database_errors_are_not_leaked(error_client):
    res = error_client.get("/raise/db")
    assert res.status_code == 500
    assert res.json() == {"error": "Internal server error"}
    assert "hunter2" not in res.text


def test_body_validation_maps_to_400(error_client):
    res = error_client.post("/payload", json={})
    assert res.status_code == 400
    assert res.json()["error"].startswith("name:")
