"""
API routes for the Actionable Insights application.
"""

from fastapi import APIRouter, HTTPException

from actionable_insights import actions
from actionable_insights.api.schemas import (
    ActionableItemsRequest,
    AnalyzeVideoRequest,
    SummaryRequest,
    TranscribeAudioRequest,
    TranscribeVideoRequest,
    TranscriptionRequest,
)
from actionable_insights.core.youtube_service import get_video_id
from actionable_insights.models.schemas import (
    ActionableItemsResult,
    ActionablePlanResult,
    AnalyzeTranscriptionResult,
    SummaryResult,
    TranscriptionResult,
    VideoInsights,
)
from actionable_insights.utils.error_handling import InvalidYouTubeURLError, TranscriptionError
from actionable_insights.utils.logger import logging

router = APIRouter(prefix="/api/v1", tags=["insights"])


@router.post("/transcribe/video", response_model=TranscriptionResult)
def transcribe_video(request: TranscribeVideoRequest):
    """
    Transcribe a YouTube video by URL.

    - Uses the video's captions when available
    - Otherwise transcribes the downloaded audio
    - Returns a placeholder message when neither is possible
    """
    if not get_video_id(request.youtube_url):
        raise HTTPException(status_code=400, detail="Invalid YouTube URL")

    return actions.handle_transcribe_video(request)


@router.post("/transcribe/audio", response_model=TranscriptionResult)
def transcribe_audio(request: TranscribeAudioRequest):
    """Transcribe an uploaded audio file given as a base64 data URI."""
    if not request.audio_data_uri:
        raise HTTPException(status_code=400, detail="No audio data URI provided.")

    try:
        return actions.handle_transcribe_uploaded_audio(request)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except TranscriptionError as e:
        raise HTTPException(status_code=502, detail=str(e))


@router.post("/summary", response_model=SummaryResult)
def generate_summary(request: SummaryRequest):
    """Summarize a transcript, optionally following a custom instruction."""
    return actions.handle_generate_summary(request)


@router.post("/actionable-items", response_model=ActionableItemsResult)
def extract_action_items(request: ActionableItemsRequest):
    """Extract actionable items from a transcription."""
    return actions.handle_extract_action_items(request)


@router.post("/actionable-plan", response_model=ActionablePlanResult)
def create_actionable_plan(request: TranscriptionRequest):
    """Convert a transcription into an actionable plan."""
    return actions.handle_create_actionable_plan(request)


@router.post("/highlights", response_model=AnalyzeTranscriptionResult)
def analyze_transcription(request: TranscriptionRequest):
    """Split a transcription into segments flagged for highlighting."""
    return actions.handle_analyze_transcription(request)


@router.post("/analyze", response_model=VideoInsights)
def analyze_video(request: AnalyzeVideoRequest):
    """Transcribe a YouTube video and derive every insight from it."""
    try:
        insights = actions.analyze_video(
            request.youtube_url,
            summary_instruction=request.summary_instruction,
            action_items_instruction=request.action_items_instruction,
        )
    except InvalidYouTubeURLError:
        raise HTTPException(status_code=400, detail="Invalid YouTube URL")

    if insights.errors:
        logging.warning(f"Analysis of video {insights.video_id} finished with errors: {sorted(insights.errors)}")
    return insights
