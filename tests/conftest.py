import asyncio
from typing import Optional

import pytest
from fastapi.testclient import TestClient

LONG_TEXT = (
    "The quick brown fox jumps over the lazy dog while the farmer "
    "watches from the porch."
)


class FakeProvider:
    """Generation provider double that records every call."""

    model = "fake-model"

    def __init__(
        self,
        text: Optional[str] = "Fox jumps over dog.",
        error: Optional[Exception] = None,
        delay: float = 0,
    ) -> None:
        self.text = text
        self.error = error
        self.delay = delay
        self.calls = []

    async def generate(self, system_instruction, content, temperature):
        self.calls.append((system_instruction, content, temperature))
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error:
            raise self.error
        return self.text


@pytest.fixture(autouse=True)
def suppress_logging(monkeypatch):
    """Lower logging during tests to reduce noise."""
    import logging
    logging.getLogger().setLevel(logging.WARNING)
    yield


@pytest.fixture
def fake_provider():
    return FakeProvider()


@pytest.fixture
def api_client(fake_provider):
    """TestClient wired to a SummarizationClient over ``fake_provider``."""
    from summarize_ai.ai.client import SummarizationClient
    from summarize_ai.api.deps import session_store
    from summarize_ai.main import app

    session_store.sessions.clear()
    app.state.summarization_client = SummarizationClient(fake_provider)
    yield TestClient(app)
    app.state.summarization_client = None
    session_store.sessions.clear()
