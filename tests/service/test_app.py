"""Tests for the FastAPI service mode."""

from __future__ import annotations

import pytest

try:
    from fastapi.testclient import TestClient
except ModuleNotFoundError:  # pragma: no cover - optional dependency
    pytest.skip("fastapi not installed", allow_module_level=True)

from mdlink.config import ConfigError, LinkConfig
from mdlink.renderers import RenderError
from mdlink.service import create_app


def test_health_endpoint(config: LinkConfig) -> None:
    client = TestClient(create_app(lambda: config))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_convert_endpoint_returns_winner(config: LinkConfig) -> None:
    client = TestClient(create_app(lambda: config))

    response = client.post("/convert", json={"text": "PLAT-192"})

    assert response.status_code == 200
    payload = response.json()
    assert payload["markdown"] == "[PLAT-192](https://companycam.atlassian.net/browse/PLAT-192)"
    assert payload["kind"] == "jira_key"
    assert payload["renderer"] == "jira_key"
    assert payload["score"] == 95
    assert payload["detections"] == [
        {
            "kind": "jira_key",
            "confidence": 95,
            "attributes": {"issue_key": "PLAT-192", "project": "PLAT"},
        }
    ]


def test_convert_endpoint_accepts_tel_uri(config: LinkConfig) -> None:
    client = TestClient(create_app(lambda: config))

    response = client.post("/convert", json={"text": "tel:+18901234567"})

    assert response.status_code == 200
    assert response.json()["markdown"] == "[+1-890-123-4567](tel:+18901234567)"
    assert response.json()["kind"] == "phone_11"


def test_convert_endpoint_echoes_unrecognized_text(config: LinkConfig) -> None:
    client = TestClient(create_app(lambda: config))

    response = client.post("/convert", json={"text": "nothing to link"})

    payload = response.json()
    assert payload["markdown"] == "nothing to link"
    assert payload["kind"] is None
    assert payload["detections"] == []


def test_convert_endpoint_maps_render_errors(
    config: LinkConfig, monkeypatch: pytest.MonkeyPatch
) -> None:
    from mdlink.pipeline import Decision

    def broken_render(self: Decision) -> str:
        raise RenderError("missing tel_url in phone detection")

    monkeypatch.setattr(Decision, "render", broken_render)
    client = TestClient(create_app(lambda: config))

    response = client.post("/convert", json={"text": "890-123-4567"})

    assert response.status_code == 422
    assert response.json() == {"detail": "missing tel_url in phone detection"}


def test_convert_endpoint_requires_text(config: LinkConfig) -> None:
    client = TestClient(create_app(lambda: config))

    response = client.post("/convert", json={})

    assert response.status_code == 422


def test_convert_endpoint_reloads_config_per_request(config: LinkConfig) -> None:
    calls: list[int] = []

    def factory() -> LinkConfig:
        calls.append(1)
        return config

    client = TestClient(create_app(factory))
    client.post("/convert", json={"text": "PLAT-1"})
    client.post("/convert", json={"text": "PLAT-2"})

    assert len(calls) == 2


def test_convert_endpoint_maps_config_errors() -> None:
    def broken() -> LinkConfig:
        raise ConfigError("Failed to parse config.yaml: bad indent")

    client = TestClient(create_app(broken))

    response = client.post("/convert", json={"text": "PLAT-1"})

    assert response.status_code == 500
    assert response.json() == {
        "detail": "failed to load config: Failed to parse config.yaml: bad indent"
    }
