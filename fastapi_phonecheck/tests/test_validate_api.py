from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from phonecheck.db.session import get_db
from phonecheck.db.store import NumberStore, StoreUnavailableError
from phonecheck.models.domain import NumberValidation
from phonecheck.validator_main import app


@pytest.fixture
def client(override_get_db):
    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_valid_number(client: TestClient):
    response = client.post("/api/validate", json={"numbers": ["+14155552671"]})

    assert response.status_code == 200
    item = response.json()["numbers"][0]
    assert item["is_valid"] is True
    assert item["country_code"] == "+1"


def test_invalid_number(client: TestClient):
    response = client.post("/api/validate", json={"numbers": ["invalid123"]})

    assert response.status_code == 200
    body = response.json()
    assert set(body["numbers"][0]) == {"number", "error"}
    assert body["numbers"][0]["number"] == "invalid123"
    assert body["valid_count"] == 0


def test_batch_validation(client: TestClient):
    response = client.post("/validate", json={"numbers": ["+14155552671", "+442083661177"]})

    assert response.status_code == 200
    body = response.json()
    assert body["valid_count"] == 2
    assert [item["number"] for item in body["numbers"]] == ["+14155552671", "+442083661177"]
    assert body["numbers"][1]["country_code"] == "+44"


def test_missing_numbers_field(client: TestClient):
    response = client.post("/api/validate", json={})

    assert response.status_code == 200
    assert response.json() == {"numbers": [], "valid_count": 0}


def test_empty_body(client: TestClient):
    response = client.post("/validate")

    assert response.status_code == 200
    assert response.json() == {"numbers": [], "valid_count": 0}


def test_malformed_body_is_rejected(client: TestClient):
    response = client.post("/validate", json={"numbers": "+14155552671"})

    assert response.status_code == 422


def test_outcomes_are_persisted(client: TestClient, row_count):
    client.post("/validate", json={"numbers": ["+14155552671", "invalid123"]})
    client.post("/validate", json={"numbers": ["+14155552671"]})

    # 같은 번호 재검증 시 레코드가 중복으로 쌓인다
    assert row_count(NumberValidation) == 3


def test_store_unavailable_returns_503(client: TestClient, monkeypatch, row_count):
    def _unavailable(self):  # noqa: ARG001
        raise StoreUnavailableError("저장소에 연결할 수 없습니다")

    monkeypatch.setattr(NumberStore, "ping", _unavailable)

    response = client.post("/validate", json={"numbers": ["+14155552671"]})

    assert response.status_code == 503
    assert row_count(NumberValidation) == 0


def test_health(client: TestClient):
    assert client.get("/health/ping").json() == {"status": "ok"}
    assert client.get("/health/store").json() == {"status": "ok", "store": "sqlite"}
