import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel, Field

from pizzeria.core.exceptions import (
    BadRequestDomainException,
    ConflictDomainException,
    DataBaseException,
    NotFoundDomainException,
    setup_exception_handlers,
)


class Body(BaseModel):
    name: str = Field(min_length=1)


@pytest.fixture(scope="module")
def client():
    app = FastAPI()
    setup_exception_handlers(app)

    @app.get("/missing")
    async def missing():
        raise NotFoundDomainException("nothing here")

    @app.get("/conflict")
    async def conflict():
        raise ConflictDomainException("in use")

    @app.get("/bad")
    async def bad():
        raise BadRequestDomainException("wrong")

    @app.get("/database")
    async def database():
        raise DataBaseException("down")

    @app.post("/validate")
    async def validate(body: Body):
        return body

    @app.get("/boom")
    async def boom():
        raise RuntimeError("boom")

    return TestClient(app, raise_server_exceptions=False)


def test_not_found_has_empty_body(client):
    response = client.get("/missing")
    assert response.status_code == 404
    assert response.content == b""


@pytest.mark.parametrize(
    "path, status, exception",
    [
        ("/conflict", 409, "ConflictDomainException"),
        ("/bad", 400, "BadRequestDomainException"),
        ("/database", 500, "DataBaseException"),
    ],
)
def test_application_exceptions(client, path, status, exception):
    response = client.get(path)
    body = response.json()
    assert response.status_code == status
    assert body["status"] == status
    assert body["exception"] == exception
    assert body["path"] == path
    assert "timestamp" in body


def test_validation_error(client):
    response = client.post("/validate", json={"name": ""})
    body = response.json()
    assert response.status_code == 422
    assert body["status"] == 422
    assert isinstance(body["message"], list)
    assert body["message"][0]["loc"] == ["body", "name"]


def test_unknown_route(client):
    response = client.get("/nope")
    assert response.status_code == 404
    assert response.json()["exception"] == "HTTPException"


def test_unhandled_exception(client):
    response = client.get("/boom")
    assert response.status_code == 500
    assert response.json()["message"] == "boom"
