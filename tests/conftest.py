"""Pytest configuration and fixtures."""

import json
import os

import pytest
from langchain_core.language_models.fake_chat_models import FakeListChatModel


def pytest_configure(config):
    """Set up test environment variables before tests run."""
    os.environ.setdefault("GEMINI_API_KEY", "test-api-key")
    os.environ.setdefault("LOG_LEVEL", "INFO")
    # Keep Secret Manager out of unit tests
    os.environ.pop("GOOGLE_PROJECT_ID", None)


ENGLISH_SPECS = "▪️ Battery: 20-hour playback.\n▪️ Rating: IPX7 waterproof."
ARABIC_SPECS = "▪️ البطارية: تشغيل لمدة 20 ساعة.\n▪️ التصنيف: مقاوم للماء IPX7."


class RecordingLLMFactory:
    """LLM factory that records API keys and returns canned responses."""

    def __init__(self, responses: list[str]):
        self.responses = responses
        self.api_keys: list[str] = []

    def __call__(self, api_key: str) -> FakeListChatModel:
        self.api_keys.append(api_key)
        return FakeListChatModel(responses=self.responses)


class ManualClock:
    """Monotonic clock advanced by hand."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def valid_body() -> str:
    """A well-formed response body."""
    return json.dumps({"englishSpecs": ENGLISH_SPECS, "arabicSpecs": ARABIC_SPECS})


@pytest.fixture
def make_chain():
    """Build a SpecGeneratorChain backed by canned responses."""
    from src.chains.spec_generator import SpecGeneratorChain

    def _make(*responses: str, credential_provider=lambda: "test-api-key"):
        factory = RecordingLLMFactory(list(responses))
        chain = SpecGeneratorChain(
            credential_provider=credential_provider,
            llm_factory=factory,
        )
        return chain, factory

    return _make


@pytest.fixture
def spec_result():
    """A sample SpecificationResult."""
    from src.chains.spec_generator import SpecificationResult

    return SpecificationResult(englishSpecs=ENGLISH_SPECS, arabicSpecs=ARABIC_SPECS)


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()
