"""
Tests for `api/main.py` and `api/routers/timestamps.py`.

Covers contract rules:
- /AppVersion answers with the plain text application version.
- Timestamp normalization reports parse failures in the body, not as HTTP errors.
- Unknown precision names are client errors.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

import services.version_service as version_service
from api.main import app


@pytest.fixture
def client(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    path = tmp_path / "version.txt"
    path.write_text("v22.7.1 2022-07-27T16:38Z\n", encoding="utf-8")
    monkeypatch.setenv("APP_VERSION_FILE", str(path))
    version_service.reset_app_version()
    yield TestClient(app)
    version_service.reset_app_version()


def test_app_version(client: TestClient) -> None:
    """Verify /AppVersion returns the version as plain text."""

    response = client.get("/AppVersion")
    assert response.status_code == 200
    assert response.text == "2022-07-27T16:38Z v22.7.1"
    assert response.headers["content-type"].startswith("text/plain")


def test_health(client: TestClient) -> None:
    """Verify the health check includes the application version."""

    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {
        "status": "healthy",
        "version": "2022-07-27T16:38Z v22.7.1",
        "service": "zulu-timestamp-api",
    }


@pytest.mark.parametrize("which", ["a", "b"])
def test_simple_handlers(client: TestClient, which: str) -> None:
    """Verify the simple handlers answer "<which> Called"."""

    response = client.get(f"/{which}")
    assert response.status_code == 200
    assert response.text == f"{which} Called"


def test_normalize_timestamp(client: TestClient) -> None:
    """Verify a valid timestamp is normalized and adjusted to the requested precision."""

    response = client.get(
        "/api/v1/timestamps/normalize",
        params={"value": "2022-07-27T16:38:00.5+01:00", "precision": "nanos"},
    )
    assert response.status_code == 200
    assert response.json() == {
        "input": "2022-07-27T16:38:00.5+01:00",
        "value": "2022-07-27T17:38:00.500000000Z",
        "error": None,
        "precision": "NANOS",
    }


def test_normalize_timestamp_without_precision(client: TestClient) -> None:
    """Verify the parsed precision is kept when none is requested."""

    response = client.get("/api/v1/timestamps/normalize", params={"value": "2022-07-27T16:38Z"})
    assert response.status_code == 200
    assert response.json()["value"] == "2022-07-27T16:38:00Z"
    assert response.json()["precision"] is None


def test_normalize_timestamp_parse_error_is_reported_in_body(client: TestClient) -> None:
    """Verify parse failures are a 200 response carrying the error."""

    response = client.get("/api/v1/timestamps/normalize", params={"value": "2022-13-01T00:00Z"})
    assert response.status_code == 200
    body = response.json()
    assert body["value"] == "2022-13-01T00:00Z"
    assert body["error"] == "month date field of '13' -- exceeded max value of 12"


def test_normalize_timestamp_unknown_precision(client: TestClient) -> None:
    """Verify an unknown precision name is rejected with 400."""

    response = client.get(
        "/api/v1/timestamps/normalize",
        params={"value": "2022-07-27T16:38Z", "precision": "fortnight"},
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "unknown precision 'fortnight'"


def test_normalize_timestamp_requires_value(client: TestClient) -> None:
    """Verify the value query parameter is required."""

    response = client.get("/api/v1/timestamps/normalize")
    assert response.status_code == 422


def test_normalize_timestamp_oversized_field_is_reported_in_body(client: TestClient) -> None:
    """Verify a field too long for int conversion is a parse error, not a server error."""

    value = "2022-07-" + "0" * 5000 + "1T00:00Z"
    response = client.get("/api/v1/timestamps/normalize", params={"value": value})
    assert response.status_code == 200
    assert response.json()["error"] == "day date field of '" + "0" * 5000 + "1' -- parse error"
