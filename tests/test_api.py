from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from sqlmodel import SQLModel

import ranking_api.app as app_module
from ranking_api.services import StoreError

from .conftest import ADMIN_PASSWORD


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"ok": True}


def test_empty_rankings(client):
    response = client.get("/rankings")
    assert response.status_code == 200
    assert response.json() == []


def test_submission_flow(client):
    response = client.post("/rankings", json={"name": "alice", "score": 50})
    assert response.status_code == 201
    body = response.json()
    assert body["name"] == "alice"
    assert body["score"] == 50
    assert body["id"] is not None
    assert body["timestamp"].endswith("Z")

    response = client.post("/rankings", json={"name": "alice", "score": 30})
    assert response.status_code == 200
    assert response.json() == {"message": "not updated"}

    response = client.post("/rankings", json={"name": "alice", "score": 80})
    assert response.status_code == 200
    assert response.json()["score"] == 80
    assert response.json()["id"] == body["id"]

    client.post("/rankings", json={"name": "bob", "score": 60})
    response = client.get("/rankings")
    assert response.json() == [
        {"name": "alice", "score": 80},
        {"name": "bob", "score": 60},
    ]


def test_equal_score_is_not_an_update(client):
    client.post("/rankings", json={"name": "alice", "score": 50})
    response = client.post("/rankings", json={"name": "alice", "score": 50})
    assert response.status_code == 200
    assert response.json() == {"message": "not updated"}


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"name": "alice"},
        {"score": 10},
        {"name": "", "score": 10},
        {"name": "alice", "score": "10"},
        {"name": "alice", "score": 1.5},
        {"name": ["alice"], "score": 10},
        ["alice", 10],
        None,
    ],
)
def test_malformed_submission(client, payload):
    response = client.post("/rankings", json=payload)
    assert response.status_code == 400
    assert response.json() == {"detail": "Valid name and score are required."}
    assert client.get("/rankings").json() == []


def test_rankings_capped_at_ten(client):
    for index in range(12):
        client.post("/rankings", json={"name": f"p{index}", "score": index * 10})

    body = client.get("/rankings").json()
    assert len(body) == 10
    assert [row["score"] for row in body] == list(range(110, 10, -10))


def test_reset_wrong_password(client):
    client.post("/rankings", json={"name": "alice", "score": 80})

    response = client.post("/rankings/reset", json={"password": "nope"})
    assert response.status_code == 403
    assert response.json() == {"detail": "Incorrect password."}
    assert client.get("/rankings").json() == [{"name": "alice", "score": 80}]


def test_reset_missing_password(client):
    response = client.post("/rankings/reset", json={})
    assert response.status_code == 403


def test_reset_correct_password(client):
    client.post("/rankings", json={"name": "alice", "score": 80})

    response = client.post("/rankings/reset", json={"password": ADMIN_PASSWORD})
    assert response.status_code == 200
    assert response.json() == {"message": "Rankings have been reset."}
    assert client.get("/rankings").json() == []


def test_store_failures_map_to_500(app, client):
    SQLModel.metadata.drop_all(app.state.engine)

    response = client.get("/rankings")
    assert response.status_code == 500
    assert response.json() == {"detail": "Failed to fetch rankings"}

    response = client.post("/rankings", json={"name": "alice", "score": 1})
    assert response.status_code == 500
    assert response.json() == {"detail": "Failed to save ranking"}

    response = client.post("/rankings/reset", json={"password": ADMIN_PASSWORD})
    assert response.status_code == 500
    assert response.json() == {"detail": "Failed to reset rankings"}


def test_schema_failure_aborts_startup(app, monkeypatch):
    def fail(engine):
        raise StoreError("Could not create the rankings table")

    monkeypatch.setattr(app_module, "initialize", fail)

    with pytest.raises(StoreError):
        with TestClient(app):
            pass


def test_cors_allows_any_origin_by_default(client):
    response = client.get("/rankings", headers={"Origin": "https://game.example"})
    assert response.headers["access-control-allow-origin"] == "*"


@pytest.mark.parametrize(
    "path, detail",
    [
        ("/rankings", "Valid name and score are required."),
        ("/rankings/reset", "Malformed request body."),
    ],
)
def test_unparseable_json_is_a_bad_request(client, path, detail):
    response = client.post(
        path,
        content='{"name": "alice", "score": ',
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json() == {"detail": detail}


def test_names_are_not_trimmed(client):
    assert client.post("/rankings", json={"name": " alice", "score": 50}).status_code == 201

    response = client.post("/rankings", json={"name": "alice", "score": 80})
    assert response.status_code == 201
    assert response.json()["name"] == "alice"
    assert client.get("/rankings").json() == [
        {"name": "alice", "score": 80},
        {"name": " alice", "score": 50},
    ]


def test_out_of_range_score_is_a_store_failure(client):
    response = client.post("/rankings", json={"name": "alice", "score": 2**63})
    assert response.status_code == 500
    assert response.json() == {"detail": "Failed to save ranking"}
    assert client.get("/rankings").json() == []
