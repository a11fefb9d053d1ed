"""HTTP tests for the FastAPI server."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from aunty_app.app import OmanaAuntyApp
from logic.safety import CHAT_GREETING, CHAT_RETRY_MESSAGE, JUDGE_RETRY_MESSAGE
from server.api import create_app


@pytest.fixture()
def client(config, fake_generator) -> TestClient:
    return TestClient(create_app(OmanaAuntyApp(config=config, generator=fake_generator)))


def test_healthcheck(client: TestClient) -> None:
    response = client.get("/healthz")

    assert response.status_code == 200
    assert response.json()["service"] == "omana-aunty"


def test_detect_endpoint(client: TestClient) -> None:
    response = client.post("/outfit/detect", json={"image_uri": "my_blue_jeans_and_sneakers.jpg"})

    body = response.json()
    assert response.status_code == 200
    assert body["bottom"] == "Jeans"
    assert body["footwear"] == "Footwear"
    assert body["confidence"] == pytest.approx(0.51)
    assert "sensitive" in body["note"]


def test_detect_endpoint_accepts_empty_identifier(client: TestClient) -> None:
    response = client.post("/outfit/detect", json={"image_uri": ""})

    assert response.status_code == 200
    assert response.json()["confidence"] == pytest.approx(0.15)


def test_items_endpoint(client: TestClient) -> None:
    response = client.post("/outfit/items", json={"image_uri": "nothing_here.png"})

    assert response.json() == {"items": ["outfit"], "caption": None}


def test_judge_endpoint(client: TestClient) -> None:
    response = client.post("/outfit/judge", json={"image_uri": "saree.jpg", "address_as": "Female"})

    body = response.json()
    assert response.status_code == 200
    assert body["status"] == "ok"
    assert body["address_as"] == "female"
    assert body["detection"]["dress"] == "Saree"


def test_judge_endpoint_rejects_unknown_address(client: TestClient) -> None:
    response = client.post("/outfit/judge", json={"image_uri": "saree.jpg", "address_as": "aunty"})

    assert response.status_code == 422


def test_judge_endpoint_failure(config, failing_generator) -> None:
    client = TestClient(create_app(OmanaAuntyApp(config=config, generator=failing_generator)))

    response = client.post("/outfit/judge", json={"image_uri": "saree.jpg"})

    assert response.status_code == 502
    assert response.json()["detail"] == JUDGE_RETRY_MESSAGE


def test_chat_flow(client: TestClient) -> None:
    created = client.post("/chat/sessions", json={"user_id": "user-1"}).json()
    assert created["greeting"] == CHAT_GREETING

    response = client.post(f"/chat/{created['session_id']}/messages", json={"message": "Hi aunty"})

    assert response.status_code == 200
    assert response.json()["reply"] == "Aiyyo, nice choice mone!"


def test_chat_failure_keeps_in_character_reply(config, failing_generator) -> None:
    client = TestClient(create_app(OmanaAuntyApp(config=config, generator=failing_generator)))
    session_id = client.post("/chat/sessions", json={"user_id": "user-1"}).json()["session_id"]

    response = client.post(f"/chat/{session_id}/messages", json={"message": "Hi aunty"})

    assert response.status_code == 200
    assert response.json() == {"status": "error", "session_id": session_id, "reply": CHAT_RETRY_MESSAGE}


def test_chat_unknown_session_and_blank_message(client: TestClient) -> None:
    assert client.post("/chat/missing/messages", json={"message": "hi"}).status_code == 404

    session_id = client.post("/chat/sessions", json={"user_id": "user-1"}).json()["session_id"]
    assert client.post(f"/chat/{session_id}/messages", json={"message": "   "}).status_code == 422
