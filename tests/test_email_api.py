"""
Tests for the email generation HTTP API.

The generation client dependency is overridden with a pydantic-ai test
model, so no request leaves the process.

Run with:
    pytest tests/test_email_api.py -v
"""

import pytest
from fastapi.testclient import TestClient

from pydantic_ai.messages import ModelResponse, TextPart

from api.dependencies import get_generation_client
from config import settings
from main import app
from services.generation_client import GenerationClient


RESCHEDULE_CONTEXT = "Need to reschedule our meeting tomorrow due to a conflict"
RAW_EMAIL = (
    "Rescheduling Request\n"
    "Dear Team,\n"
    "I need to reschedule our meeting tomorrow due to a conflict"
)


@pytest.fixture
def api_client():
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture
def use_generation_client():
    def _use(generation_client: GenerationClient):
        app.dependency_overrides[get_generation_client] = lambda: generation_client
    return _use


# ===================================================================
# TESTS - POST /api/generate
# ===================================================================

def test_generate_success(api_client, use_generation_client, make_client):
    use_generation_client(make_client(RAW_EMAIL))

    response = api_client.post("/api/generate", json={
        "context": RESCHEDULE_CONTEXT,
        "purpose": "follow-up",
        "tone": "professional",
    })

    assert response.status_code == 200
    data = response.json()
    assert data["email"].startswith("Subject: Rescheduling Request\n\nDear Team,\n\n")
    assert data["subject"] == "Rescheduling Request"
    assert data["body"].startswith("Dear Team,")
    assert data["body"].endswith("Best regards")
    assert data["metadata"] == {"wordCount": 15, "estimatedReadTime": 1}


def test_generate_missing_fields(api_client, use_generation_client, make_client):
    use_generation_client(make_client(RAW_EMAIL))

    response = api_client.post("/api/generate", json={"purpose": "follow-up"})

    assert response.status_code == 400
    assert response.json() == {"error": "Missing required fields"}


def test_generate_short_context_never_calls_model(api_client, use_generation_client, make_client):
    calls = []

    def respond(messages, info):
        calls.append(messages)
        return ModelResponse(parts=[TextPart(RAW_EMAIL)])

    use_generation_client(make_client(function=respond))

    response = api_client.post("/api/generate", json={
        "context": "123456789",
        "purpose": "follow-up",
    })

    assert response.status_code == 400
    assert response.json() == {
        "error": "Please provide more context for your email (at least 10 characters)"
    }
    assert calls == []


def test_generate_context_too_long(api_client, use_generation_client, make_client):
    use_generation_client(make_client(RAW_EMAIL))

    response = api_client.post("/api/generate", json={
        "context": "x" * 2001,
        "purpose": "follow-up",
    })

    assert response.status_code == 400
    assert response.json()["error"] == "Context is too long. Please keep it under 2000 characters."


def test_generate_unsupported_purpose(api_client, use_generation_client, make_client):
    use_generation_client(make_client(RAW_EMAIL))

    response = api_client.post("/api/generate", json={
        "context": RESCHEDULE_CONTEXT,
        "purpose": "newsletter",
    })

    assert response.status_code == 400
    assert response.json() == {"error": "Unsupported email purpose"}


def test_generate_provider_failure_is_generic(api_client, use_generation_client, make_client):
    def explode(messages, info):
        raise ConnectionError("401 invalid key sk-or-secret")

    use_generation_client(make_client(function=explode))

    response = api_client.post("/api/generate", json={
        "context": RESCHEDULE_CONTEXT,
        "purpose": "follow-up",
    })

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to generate email"}
    assert "sk-or-secret" not in response.text


def test_generate_missing_credential(api_client, use_generation_client):
    use_generation_client(GenerationClient(api_key="", model_name="qwen/qwen3-0.6b-04-28:free"))

    response = api_client.post("/api/generate", json={
        "context": RESCHEDULE_CONTEXT,
        "purpose": "follow-up",
    })

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to generate email"}


# ===================================================================
# TESTS - Options / health
# ===================================================================

def test_options_lists_form_choices(api_client):
    response = api_client.get("/api/options")

    assert response.status_code == 200
    data = response.json()
    assert {"value": "thank-you", "label": "Thank You"} in data["purposes"]
    assert len(data["purposes"]) == 8
    assert [tone["value"] for tone in data["tones"]] == [
        "formal", "friendly", "professional", "humorous", "urgent", "casual"
    ]
    assert {"value": "english", "label": "English"} in data["languages"]


def test_health_reports_missing_key(api_client, monkeypatch):
    monkeypatch.setattr(settings, "openrouter_api_key", "")

    data = api_client.get("/health").json()

    assert data["status"] == "degraded"
    assert data["generation"] == "missing_api_key"


def test_health_with_key(api_client, monkeypatch):
    monkeypatch.setattr(settings, "openrouter_api_key", "sk-or-test")

    data = api_client.get("/health").json()

    assert data["status"] == "healthy"
    assert data["generation"] == "configured"


# ===================================================================
# TESTS - Unparseable request bodies
# ===================================================================

def test_generate_non_string_context(api_client, use_generation_client, make_client):
    use_generation_client(make_client(RAW_EMAIL))

    response = api_client.post("/api/generate", json={
        "context": 12345678901,
        "purpose": "follow-up",
    })

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid request"}
    assert "12345678901" not in response.text


def test_generate_malformed_json(api_client, use_generation_client, make_client):
    use_generation_client(make_client(RAW_EMAIL))

    response = api_client.post(
        "/api/generate",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid request"}
