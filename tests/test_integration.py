from dataclasses import replace

import pytest
from fastapi.testclient import TestClient

from src.brand_watch.exceptions import ConfigError
from src.brand_watch.fallback import canned_text
from src.brand_watch.orchestrator import GenerationOrchestrator

from backend.app import create_app
from tests.fakes import FakeLLMClient

CRM_ANSWER = "Salesforce is a leading CRM. Others include HubSpot."


@pytest.fixture
def fake():
    return FakeLLMClient({"model-a": CRM_ANSWER})


@pytest.fixture
def client(test_settings, fake):
    with TestClient(create_app(test_settings, fake)) as c:
        yield c


def test_docs_page_is_available(client):
    resp = client.get("/docs")
    assert resp.status_code == 200
    assert "Swagger UI" in resp.text or "swagger-ui" in resp.text.lower()


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {
        "status": "ok",
        "model": "model-a",
        "modelOptions": ["model-a", "model-b", "model-c"],
        "temperature": 0.7,
    }


@pytest.mark.parametrize("path", ["/check-brand", "/api/check-brand"])
def test_check_brand_mentioned(client, path):
    resp = client.post(path, json={"prompt": "best CRM", "brandName": "Salesforce"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["data"] == {
        "prompt": "best CRM",
        "brandName": "Salesforce",
        "mentioned": "Yes",
        "position": 1,
        "generatedText": CRM_ANSWER,
        "usedFallback": False,
        "errorOccurred": False,
    }


def test_check_brand_not_mentioned(client):
    resp = client.post("/check-brand", json={"prompt": "best CRM", "brandName": "Zylocorp"})
    data = resp.json()["data"]
    assert data["mentioned"] == "No"
    assert data["position"] is None


@pytest.mark.parametrize("payload", [
    {"prompt": "best CRM", "brandName": "   "},
    {"prompt": "", "brandName": "Salesforce"},
    {"prompt": "best CRM"},
    {},
])
def test_check_brand_validation_error(client, fake, payload):
    resp = client.post("/check-brand", json=payload)
    assert resp.status_code == 400
    body = resp.json()
    assert body["success"] is False
    assert body["error"]
    assert fake.calls == []


def test_check_brand_wrong_types_is_400(client, fake):
    resp = client.post("/check-brand", json={"prompt": ["a"], "brandName": 3})
    assert resp.status_code == 400
    assert resp.json()["success"] is False
    assert fake.calls == []


def test_all_models_down_still_answers(test_settings):
    with TestClient(create_app(test_settings, FakeLLMClient())) as c:
        resp = c.post("/check-brand", json={"prompt": "best CRM", "brandName": "Salesforce"})
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["usedFallback"] is True
    assert data["errorOccurred"] is False
    assert data["mentioned"] == "No"


def test_startup_refuses_missing_api_key(test_settings, fake):
    app = create_app(replace(test_settings, GEMINI_API_KEY=""), fake)
    with pytest.raises(ConfigError):
        with TestClient(app):
            pass


def test_pipeline_error_still_answers_200(test_settings, fake, monkeypatch):
    def explode(self, prompt, candidates, options):
        raise RuntimeError("unexpected")

    monkeypatch.setattr(GenerationOrchestrator, "generate", explode)
    with TestClient(create_app(test_settings, fake)) as c:
        resp = c.post("/check-brand", json={"prompt": "best CRM", "brandName": "Salesforce"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["data"]["errorOccurred"] is True
    assert body["data"]["usedFallback"] is True
    assert body["data"]["generatedText"] == canned_text()
    assert body["data"]["mentioned"] == "No"
