import pytest

from src.brand_watch.config import Settings

from tests.fakes import FakeLLMClient


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        GEMINI_API_KEY="test-key",
        MODEL_OPTIONS=("model-a", "model-b", "model-c"),
        TEMPERATURE=0.7,
        MAX_OUTPUT_TOKENS=2048,
        TOP_P=0.95,
        TOP_K=40,
        CORS_ORIGINS=("*",),
        LOG_LEVEL="INFO",
    )


@pytest.fixture
def fake_client() -> FakeLLMClient:
    return FakeLLMClient()
