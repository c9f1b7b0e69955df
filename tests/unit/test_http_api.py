"""Unit tests for the FastAPI router."""

import pytest

pytest.importorskip("fastapi")
pytest.importorskip("httpx")

from fastapi import FastAPI
from fastapi.testclient import TestClient

from adaptogen.http.api import get_registry, router
from adaptogen.registry import ParserRegistry
from tests.helpers.mock_parsers import DemoParser


@pytest.fixture
def client():
    registry = ParserRegistry()
    registry.register_parser(DemoParser())

    app = FastAPI()
    app.include_router(router)
    app.dependency_overrides[get_registry] = lambda: registry
    return TestClient(app)


class TestHttpApi:

    def test_parse_success(self, client):
        response = client.post(
            "/parse",
            content='{"id":"msg_1","model":"demo","content":[{"type":"text","text":"hi"}]}'
        )

        assert response.status_code == 200
        assert response.json() == {
            "id": "msg_1",
            "model": "demo",
            "blocks": [{"type": "text", "text": "hi"}]
        }

    def test_parse_unsupported_model(self, client):
        response = client.post("/parse", content='{"id":"x","model":"unknown-xyz"}')

        assert response.status_code == 404
        assert response.json()["detail"] == {
            "kind": "unsupported_model",
            "message": "Unsupported model: unknown-xyz",
            "model": "unknown-xyz"
        }

    @pytest.mark.parametrize("body,kind", [
        ("not json", "invalid_json"),
        ('{"id":"x"}', "missing_field"),
        ('{"id":"x","model":"demo","content":[{"type":"audio"}]}', "structure"),
    ])
    def test_parse_errors(self, client, body, kind):
        response = client.post("/parse", content=body)

        assert response.status_code == 422
        assert response.json()["detail"]["kind"] == kind

    def test_parse_non_utf8_body(self, client):
        response = client.post("/parse", content=b"\xff\xfe\x00")

        assert response.status_code == 422
        assert response.json()["detail"]["kind"] == "invalid_json"

    def test_models(self, client):
        response = client.get("/models")

        assert response.status_code == 200
        assert response.json() == {"models": {"demo": "demo"}}
