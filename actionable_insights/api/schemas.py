from typing import Optional

from actionable_insights.models.schemas import CamelModel


class TranscribeVideoRequest(CamelModel):
    """Model for requesting a YouTube video transcription."""
    youtube_url: str


class TranscribeAudioRequest(CamelModel):
    """Model for requesting an uploaded audio transcription."""
    audio_data_uri: str


class SummaryRequest(CamelModel):
    """Model for summary requests."""
    transcript: str
    custom_instruction: Optional[str] = None


class ActionableItemsRequest(CamelModel):
    """Model for actionable item extraction requests."""
    transcription: str
    custom_instruction: Optional[str] = None


class TranscriptionRequest(CamelModel):
    """Model for requests that only carry a transcription."""
    transcription: str


class AnalyzeVideoRequest(CamelModel):
    """Model for running the whole pipeline on a YouTube video."""
    youtube_url: str
    summary_instruction: Optional[str] = None
    action_items_instruction: Optional[str] = None
