"""
Server actions: one handler per user trigger.

Handlers wrap the flows and apply the boundary error policy. Transcribing a
video never raises (errors come back as an "Error: ..." transcription), while
derived artifacts fall back to their defaults.
"""

from typing import Optional

from actionable_insights.api.schemas import (
    ActionableItemsRequest,
    SummaryRequest,
    TranscribeAudioRequest,
    TranscribeVideoRequest,
    TranscriptionRequest,
)
from actionable_insights.core.action_items import extract_actionable_items
from actionable_insights.core.highlighter import analyze_transcription, unhighlighted
from actionable_insights.core.planner import ACTIONABLE_PLAN_FALLBACK, convert_to_plan
from actionable_insights.core.summarizer import SUMMARY_FALLBACK, generate_video_summary
from actionable_insights.core.video_transcription import transcribe_uploaded_audio, transcribe_youtube_video
from actionable_insights.core.youtube_service import get_video_id
from actionable_insights.models.schemas import (
    ActionableItemsResult,
    ActionablePlanResult,
    AnalyzeTranscriptionResult,
    SummaryResult,
    TranscriptionResult,
    TranscriptSource,
    VideoInsights,
)
from actionable_insights.utils.error_handling import (
    InvalidYouTubeURLError,
    TranscriptionError,
    error_message,
    log_diagnostic_info,
)
from actionable_insights.utils.helpers import count_words
from actionable_insights.utils.logger import logging


def handle_transcribe_video(request: TranscribeVideoRequest) -> TranscriptionResult:
    try:
        result = transcribe_youtube_video(request.youtube_url)
    except Exception as e:
        logging.error(f"Error in handle_transcribe_video: {str(e)}")
        message = error_message(e, "An unknown error occurred during YouTube video transcription.")
        return TranscriptionResult(transcription=f"Error: {message}", source=TranscriptSource.ERROR)

    logging.info(f"Transcription ready from {result.source.value}: {count_words(result.transcription)} words")
    return result


def handle_transcribe_uploaded_audio(request: TranscribeAudioRequest) -> TranscriptionResult:
    try:
        return transcribe_uploaded_audio(request.audio_data_uri)
    except ValueError as e:
        logging.warning(f"Rejected uploaded audio: {str(e)}")
        raise
    except Exception as e:
        logging.error(f"Error in handle_transcribe_uploaded_audio: {str(e)}")
        message = error_message(e, "An unknown error occurred during uploaded audio transcription.")
        raise TranscriptionError(f"Failed to transcribe uploaded audio: {message}") from e


def handle_generate_summary(request: SummaryRequest) -> SummaryResult:
    try:
        return generate_video_summary(request.transcript, request.custom_instruction)
    except Exception as e:
        logging.error(f"Error in handle_generate_summary: {str(e)}")
        return SummaryResult(summary=SUMMARY_FALLBACK, error=f"Failed to generate summary: {error_message(e)}")


def handle_extract_action_items(request: ActionableItemsRequest) -> ActionableItemsResult:
    try:
        return extract_actionable_items(request.transcription, request.custom_instruction)
    except Exception as e:
        logging.error(f"Error in handle_extract_action_items: {str(e)}")
        return ActionableItemsResult(actionable_items=[], error=f"Failed to extract action items: {error_message(e)}")


def handle_create_actionable_plan(request: TranscriptionRequest) -> ActionablePlanResult:
    try:
        return convert_to_plan(request.transcription)
    except Exception as e:
        logging.error(f"Error in handle_create_actionable_plan: {str(e)}")
        return ActionablePlanResult(
            actionable_plan=ACTIONABLE_PLAN_FALLBACK,
            error=f"Failed to create actionable plan: {error_message(e)}",
        )


def handle_analyze_transcription(request: TranscriptionRequest) -> AnalyzeTranscriptionResult:
    try:
        return analyze_transcription(request.transcription)
    except Exception as e:
        logging.error(f"Error in handle_analyze_transcription: {str(e)}")
        segments = unhighlighted(request.transcription) if request.transcription.strip() else []
        return AnalyzeTranscriptionResult(
            segments=segments,
            error=f"Failed to analyze transcription: {error_message(e)}",
        )


def derive_insights(transcription: TranscriptionResult, video_id: Optional[str] = None,
                    summary_instruction: Optional[str] = None,
                    action_items_instruction: Optional[str] = None) -> VideoInsights:
    """
    Run every derived flow on a transcription.

    Args:
        transcription: Result of a transcription flow
        video_id: YouTube video ID, if the transcription came from a video
        summary_instruction: Optional custom instruction for the summary
        action_items_instruction: Optional custom instruction for the actionable items

    Returns:
        The collected insights; only the transcription is set when it is not usable
    """
    insights = VideoInsights(
        video_id=video_id,
        transcription=transcription.transcription,
        source=transcription.source,
    )

    if not transcription.is_usable:
        logging.warning(f"Skipping derived flows, transcription source is {transcription.source.value}")
        return insights

    text = transcription.transcription

    highlights = handle_analyze_transcription(TranscriptionRequest(transcription=text))
    insights.segments = highlights.segments
    if highlights.error:
        insights.errors["analysis"] = highlights.error

    summary = handle_generate_summary(SummaryRequest(transcript=text, custom_instruction=summary_instruction))
    insights.summary = summary.summary
    if summary.error:
        insights.errors["summary"] = summary.error

    items = handle_extract_action_items(
        ActionableItemsRequest(transcription=text, custom_instruction=action_items_instruction)
    )
    insights.actionable_items = items.actionable_items
    if items.error:
        insights.errors["actionableItems"] = items.error

    plan = handle_create_actionable_plan(TranscriptionRequest(transcription=text))
    insights.actionable_plan = plan.actionable_plan
    if plan.error:
        insights.errors["actionablePlan"] = plan.error

    log_diagnostic_info({
        "video_id": video_id,
        "source": transcription.source.value,
        "words": count_words(text),
        "segments": len(insights.segments),
        "actionable_items": len(insights.actionable_items),
        "errors": insights.errors,
    })
    return insights


def analyze_video(youtube_url: str, summary_instruction: Optional[str] = None,
                  action_items_instruction: Optional[str] = None) -> VideoInsights:
    """
    Transcribe a YouTube video and derive every insight from the transcription.

    Raises:
        InvalidYouTubeURLError: If no video ID can be extracted from the URL
    """
    video_id = get_video_id(youtube_url)
    if not video_id:
        raise InvalidYouTubeURLError()

    transcription = handle_transcribe_video(TranscribeVideoRequest(youtube_url=youtube_url))
    insights = derive_insights(transcription, video_id, summary_instruction, action_items_instruction)
    if transcription.source == TranscriptSource.ERROR:
        insights.errors["transcribe"] = transcription.transcription
    return insights
