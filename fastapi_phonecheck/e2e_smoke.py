from __future__ import annotations

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

from fastapi.testclient import TestClient  # noqa: E402

from phonecheck.validator_main import app  # noqa: E402


def run_smoke() -> None:
    with TestClient(app) as client:
        client.get("/health/ping").raise_for_status()
        resp = client.post("/validate", json={"numbers": ["+14155552671", "invalid123"]})
        resp.raise_for_status()
        body = resp.json()
        print("Smoke test completed. items=", len(body["numbers"]), "valid=", body["valid_count"])


if __name__ == "__main__":
    run_smoke()
