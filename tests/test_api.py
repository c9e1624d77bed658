"""
Tests for the JSON summaries API. The provider is faked; sessions ride on
the TestClient cookie jar.
"""

import pytest

from conftest import LONG_TEXT, FakeProvider
from summarize_ai.ai import providers
from summarize_ai.ai.client import SummarizationClient
from summarize_ai.ai.errors import ProviderError
from summarize_ai.ai.translator import translate
from summarize_ai.api.deps import SESSION_COOKIE
from summarize_ai.core import config as core_config
from summarize_ai.main import app
from summarize_ai.schemas.summary import SummarizationConfig


def _summarize(client, text=LONG_TEXT, **config):
    return client.post("/api/v1/summaries", json={"text": text, "config": config})


def test_create_summary_happy_path(api_client, fake_provider):
    response = _summarize(api_client, length="brief", tone="casual", format="bullets")

    assert response.status_code == 200
    data = response.json()
    assert data["summary_text"] == "Fox jumps over dog."
    assert data["original_text"] == LONG_TEXT
    assert data["config"] == {"length": "brief", "tone": "casual", "format": "bullets"}
    assert data["stats"] == {"original_words": 16, "summary_words": 4, "reduction_percent": 75}
    assert SESSION_COOKIE in response.cookies

    instruction, content, temperature = fake_provider.calls[0]
    assert content == LONG_TEXT
    assert temperature == 0.7
    assert "as a structured bulleted list" in instruction


def test_current_and_history_follow_session_cookie(api_client):
    created = _summarize(api_client).json()

    current = api_client.get("/api/v1/summaries/current")
    history = api_client.get("/api/v1/summaries/history")

    assert current.json()["id"] == created["id"]
    assert [item["id"] for item in history.json()] == [created["id"]]


def test_history_keeps_ten_most_recent(api_client):
    ids = [_summarize(api_client).json()["id"] for _ in range(12)]

    history = api_client.get("/api/v1/summaries/history").json()

    assert [item["id"] for item in history] == list(reversed(ids[2:]))


def test_short_text_is_rejected_locally(api_client, fake_provider):
    response = _summarize(api_client, text="too short to bother")

    assert response.status_code == 400
    assert response.json()["error"] == "validation_error"
    assert fake_provider.calls == []


def test_invalid_option_is_unprocessable(api_client, fake_provider):
    response = _summarize(api_client, tone="sarcastic")

    assert response.status_code == 422
    assert fake_provider.calls == []


def test_missing_api_key_is_service_unavailable(api_client, monkeypatch):
    def boom(*args, **kwargs):
        raise AssertionError("provider must not be constructed without a key")

    app.state.summarization_client = None
    monkeypatch.setattr(core_config.settings, "API_KEY", None)
    monkeypatch.setattr(providers, "GeminiProvider", boom)
    monkeypatch.setattr(providers, "OpenAIProvider", boom)

    response = _summarize(api_client)

    assert response.status_code == 503
    assert response.json() == {"detail": "API Key is missing", "error": "configuration_error"}


def test_empty_generation_is_bad_gateway(api_client):
    app.state.summarization_client = SummarizationClient(FakeProvider(text=""))

    response = _summarize(api_client)

    assert response.status_code == 502
    assert response.json()["error"] == "generation_error"
    assert api_client.get("/api/v1/summaries/history").json() == []


def test_provider_failure_is_bad_gateway(api_client):
    failing = FakeProvider(error=ProviderError("OpenAI request failed: connection reset"))
    app.state.summarization_client = SummarizationClient(failing)

    response = _summarize(api_client)

    assert response.status_code == 502
    assert response.json() == {
        "detail": "OpenAI request failed: connection reset",
        "error": "provider_error",
    }


def test_timeout_is_gateway_timeout(api_client, monkeypatch):
    app.state.summarization_client = SummarizationClient(FakeProvider(delay=1))
    monkeypatch.setattr(core_config.settings, "SUMMARY_TIMEOUT_SECONDS", 0.01)

    response = _summarize(api_client)

    assert response.status_code == 504
    assert response.json()["error"] == "summary_timeout"


def test_reset_current_keeps_history(api_client):
    created = _summarize(api_client).json()

    response = api_client.delete("/api/v1/summaries/current")

    assert response.status_code == 204
    assert api_client.get("/api/v1/summaries/current").json() is None
    assert [item["id"] for item in api_client.get("/api/v1/summaries/history").json()] == [created["id"]]


def test_clear_history(api_client):
    _summarize(api_client)

    response = api_client.delete("/api/v1/summaries/history")

    assert response.status_code == 204
    assert api_client.get("/api/v1/summaries/history").json() == []


def test_load_from_history(api_client):
    first = _summarize(api_client, length="brief").json()
    _summarize(api_client, length="detailed")

    response = api_client.post(f"/api/v1/summaries/history/{first['id']}/load")

    assert response.status_code == 200
    assert response.json()["id"] == first["id"]
    assert api_client.get("/api/v1/summaries/current").json()["config"]["length"] == "brief"


def test_load_unknown_history_entry(api_client):
    response = api_client.post("/api/v1/summaries/history/nope/load")
    assert response.status_code == 404


@pytest.mark.parametrize("length, tone, fmt", [("brief", "simple", "paragraph"), ("detailed", "academic", "bullets")])
def test_instruction_preview(api_client, length, tone, fmt):
    response = api_client.post(
        "/api/v1/summaries/instruction",
        json={"length": length, "tone": tone, "format": fmt},
    )

    expected = translate(SummarizationConfig(length=length, tone=tone, format=fmt))
    assert response.status_code == 200
    assert response.json() == {"instruction": expected}


def test_stats_endpoint(api_client):
    response = api_client.post(
        "/api/v1/summaries/stats",
        json={
            "original_text": "one two three four five six seven eight nine ten",
            "summary_text": "one two three",
        },
    )

    assert response.json() == {"original_words": 10, "summary_words": 3, "reduction_percent": 70}


def test_health_and_root_redirect(api_client):
    assert api_client.get("/health").json() == {"status": "ok"}

    response = api_client.get("/", follow_redirects=False)
    assert response.status_code == 302
    assert response.headers["location"] == "/web/"


def test_session_cookie_is_only_set_for_new_sessions(api_client):
    first = api_client.get("/api/v1/summaries/history")
    second = api_client.get("/api/v1/summaries/history")

    assert SESSION_COOKIE in first.cookies
    assert SESSION_COOKIE not in second.cookies
    assert "set-cookie" not in second.headers
