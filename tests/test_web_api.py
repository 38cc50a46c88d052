import uuid

import pytest
from fastapi.testclient import TestClient

from idx.sources import unavailable_time
from idx.ulid import UlidGenerator
from idx.web_api import app, get_generator


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert body["ulidLength"] == 26
    assert body["randomSource"] == "default"


def test_ulid_default(client):
    resp = client.get("/ulid")
    assert resp.status_code == 200
    body = resp.json()
    assert body["kind"] == "ulid"
    assert len(body["ids"]) == 1
    assert len(body["ids"][0]) == 26


def test_ulid_with_time_and_count(client):
    resp = client.get("/ulid", params={"time": 1469918176.385, "count": 4})
    assert resp.status_code == 200
    ids = resp.json()["ids"]
    assert len(ids) == 4
    assert {i[:10] for i in ids} == {"01ARYZ6S41"}


def test_ulid_injected_generator(client, fixed_clock, zero_random):
    app.dependency_overrides[get_generator] = lambda: UlidGenerator(time_func=fixed_clock, random_func=zero_random)
    resp = client.get("/ulid")
    assert resp.json()["ids"] == ["01ARYZ6S41" + "0" * 16]


def test_ulid_negative_time(client):
    resp = client.get("/ulid", params={"time": -1})
    assert resp.status_code == 422


def test_ulid_unavailable_clock(client):
    app.dependency_overrides[get_generator] = lambda: UlidGenerator(time_func=unavailable_time)
    resp = client.get("/ulid")
    assert resp.status_code == 503
    assert "millisecond precision" in resp.json()["detail"]


def test_count_bounds(client, monkeypatch):
    monkeypatch.setenv("IDX_MAX_COUNT", "3")
    assert client.get("/ulid", params={"count": 0}).status_code == 422
    assert client.get("/ulid", params={"count": 4}).status_code == 422
    assert client.get("/uuid", params={"count": 3}).status_code == 200


def test_uuid(client):
    resp = client.get("/uuid", params={"count": 2})
    assert resp.status_code == 200
    body = resp.json()
    assert body["kind"] == "uuid"
    assert all(uuid.UUID(i).version == 4 for i in body["ids"])


@pytest.mark.parametrize("value", ["inf", "nan"])
def test_ulid_non_finite_time(client, value):
    resp = client.get("/ulid", params={"time": value})
    assert resp.status_code == 422
