"""
Configuration for pytest tests.
"""

import os
import pytest
from unittest.mock import patch, MagicMock

# Configuration is read at import time, so keys must be set before the package loads
os.environ.setdefault("GOOGLE_API_KEY", "test_api_key")
os.environ.setdefault("GROQ_API_KEY", "test_groq_key")
os.environ.setdefault("ENVIRONMENT", "development")


@pytest.fixture
def mock_chat_model():
    """Fixture to mock the langchain chat model used by the prompt flows."""
    with patch('actionable_insights.core.flows.init_chat_model') as mock_init_model:
        mock_model = MagicMock()
        mock_init_model.return_value = mock_model
        yield mock_model


@pytest.fixture
def structured_llm(mock_chat_model):
    """The structured-output runnable returned by with_structured_output."""
    return mock_chat_model.with_structured_output.return_value


@pytest.fixture
def test_video_url():
    """Return a test YouTube video URL."""
    return "https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=42s"


@pytest.fixture
def transcription():
    """Fixture with a short transcription."""
    return (
        "Welcome back to the channel. Today we talk about habits. "
        "The key takeaway is simple: start small and stay consistent. "
        "Write down one habit tonight and track it every day for a week."
    )


@pytest.fixture
def audio_data_uri():
    """A tiny base64 encoded audio payload."""
    return "data:audio/mpeg;base64,SUQzBAAAAAAAI1RTU0UAAAAPAAADTGF2ZjU4Ljc2LjEwMAAAAAAAAAAAAAAA"
