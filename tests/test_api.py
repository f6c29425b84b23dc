"""
Tests for the FastAPI application.
"""

import pytest
from fastapi.testclient import TestClient
from unittest.mock import patch

from actionable_insights.api.app import app
from actionable_insights.models.schemas import (
    ActionableItemsOutput,
    ActionablePlanOutput,
    AnalyzeTranscriptionOutput,
    HighlightSegment,
    SummaryOutput,
    TranscriptionResult,
    TranscriptSource,
    VideoInsights,
)
from actionable_insights.utils.error_handling import TranscriptionError


@pytest.fixture
def client():
    return TestClient(app)


def test_root(client):
    """Test the root endpoint."""
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["name"] == "Actionable Insights"
    assert "X-Process-Time" in response.headers


def test_transcribe_video(client, test_video_url):
    """Test transcribing a video returns camelCase JSON."""
    result = TranscriptionResult(transcription="captions text", source=TranscriptSource.CAPTIONS)
    with patch('actionable_insights.actions.handle_transcribe_video', return_value=result) as mock_action:
        response = client.post("/api/v1/transcribe/video", json={"youtubeUrl": test_video_url})

    assert response.status_code == 200
    assert response.json() == {"transcription": "captions text", "source": "captions"}
    assert mock_action.call_args[0][0].youtube_url == test_video_url


def test_transcribe_video_invalid_url(client):
    """Test that an invalid URL is rejected with 400."""
    response = client.post("/api/v1/transcribe/video", json={"youtubeUrl": "https://example.com/clip"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid YouTube URL"


def test_transcribe_audio(client, audio_data_uri):
    """Test transcribing an uploaded audio data URI."""
    result = TranscriptionResult(transcription="uploaded text", source=TranscriptSource.UPLOAD)
    with patch('actionable_insights.actions.handle_transcribe_uploaded_audio', return_value=result):
        response = client.post("/api/v1/transcribe/audio", json={"audioDataUri": audio_data_uri})

    assert response.status_code == 200
    assert response.json()["transcription"] == "uploaded text"


def test_transcribe_audio_empty(client):
    """Test that an empty data URI is rejected with 400."""
    response = client.post("/api/v1/transcribe/audio", json={"audioDataUri": ""})

    assert response.status_code == 400


def test_transcribe_audio_failure(client, audio_data_uri):
    """Test that transcription failures map to 502."""
    error = TranscriptionError("Failed to transcribe uploaded audio: quota exceeded")
    with patch('actionable_insights.actions.handle_transcribe_uploaded_audio', side_effect=error):
        response = client.post("/api/v1/transcribe/audio", json={"audioDataUri": audio_data_uri})

    assert response.status_code == 502
    assert response.json()["detail"] == "Failed to transcribe uploaded audio: quota exceeded"


def test_summary(client, structured_llm, transcription):
    """Test the summary endpoint with a mocked model."""
    structured_llm.invoke.return_value = SummaryOutput(summary="Short summary.")

    response = client.post("/api/v1/summary", json={"transcript": transcription, "customInstruction": "Be brief"})

    assert response.status_code == 200
    assert response.json() == {"summary": "Short summary.", "error": None}


def test_summary_model_error(client, structured_llm, transcription):
    """Test that a model failure still returns 200 with the fallback."""
    structured_llm.invoke.side_effect = RuntimeError("model down")

    response = client.post("/api/v1/summary", json={"transcript": transcription})

    assert response.status_code == 200
    assert response.json()["error"] == "model down"


def test_actionable_items(client, structured_llm, transcription):
    """Test the actionable items endpoint uses camelCase keys."""
    structured_llm.invoke.return_value = ActionableItemsOutput(actionable_items=["Track one habit"])

    response = client.post("/api/v1/actionable-items", json={"transcription": transcription})

    assert response.status_code == 200
    assert response.json() == {"actionableItems": ["Track one habit"], "error": None}


def test_actionable_plan(client, structured_llm, transcription):
    """Test the actionable plan endpoint."""
    structured_llm.invoke.return_value = ActionablePlanOutput(actionable_plan="1. Start")

    response = client.post("/api/v1/actionable-plan", json={"transcription": transcription})

    assert response.status_code == 200
    assert response.json()["actionablePlan"] == "1. Start"


def test_highlights(client, structured_llm):
    """Test the highlights endpoint returns segments covering the text."""
    text = "Plain part. Key part."
    structured_llm.invoke.return_value = AnalyzeTranscriptionOutput(segments=[
        HighlightSegment(text="Plain part.", highlight=False),
        HighlightSegment(text="Key part.", highlight=True),
    ])

    response = client.post("/api/v1/highlights", json={"transcription": text})

    assert response.status_code == 200
    segments = response.json()["segments"]
    assert "".join(segment["text"] for segment in segments) == text
    assert segments[-1] == {"text": "Key part.", "highlight": True}


def test_highlights_empty(client, mock_chat_model):
    """Test that an empty transcription returns no segments."""
    response = client.post("/api/v1/highlights", json={"transcription": ""})

    assert response.status_code == 200
    assert response.json()["segments"] == []


def test_analyze(client, test_video_url):
    """Test the combined analysis endpoint."""
    insights = VideoInsights(
        video_id="dQw4w9WgXcQ",
        transcription="captions text",
        source=TranscriptSource.CAPTIONS,
        summary="A summary.",
        actionable_items=["Track one habit"],
        actionable_plan="1. Track one habit",
    )
    with patch('actionable_insights.actions.analyze_video', return_value=insights) as mock_action:
        response = client.post("/api/v1/analyze", json={"youtubeUrl": test_video_url, "summaryInstruction": "Be brief"})

    assert response.status_code == 200
    body = response.json()
    assert body["videoId"] == "dQw4w9WgXcQ"
    assert body["actionableItems"] == ["Track one habit"]
    mock_action.assert_called_once_with(test_video_url, summary_instruction="Be brief", action_items_instruction=None)


def test_analyze_invalid_url(client):
    """Test that the combined analysis rejects invalid URLs."""
    response = client.post("/api/v1/analyze", json={"youtubeUrl": "https://example.com/clip"})

    assert response.status_code == 400


def test_request_validation(client):
    """Test that missing fields are rejected by request validation."""
    response = client.post("/api/v1/summary", json={})

    assert response.status_code == 422


def test_transcribe_audio_malformed_uri(client):
    """Test that a malformed data URI is rejected with 400."""
    response = client.post("/api/v1/transcribe/audio", json={"audioDataUri": "not-a-data-uri"})

    assert response.status_code == 400
    assert response.json()["detail"].startswith("Expected a data URI")


def test_unhandled_error(test_video_url):
    """Test that unhandled errors are turned into a 500 JSON response."""
    client = TestClient(app, raise_server_exceptions=False)
    with patch('actionable_insights.actions.analyze_video', side_effect=RuntimeError("kaboom")):
        response = client.post("/api/v1/analyze", json={"youtubeUrl": test_video_url})

    assert response.status_code == 500
    assert response.json()["detail"] == "An unexpected error occurred: kaboom"
