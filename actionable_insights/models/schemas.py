"""
Data models for the Actionable Insights application.
"""
import time
from enum import Enum
from typing import Optional, List, Dict
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialized with camelCase field names."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TranscriptSource(str, Enum):
    """Where a transcription came from."""
    CAPTIONS = "captions"
    AUDIO = "audio"
    UPLOAD = "upload"
    PLACEHOLDER = "placeholder"
    ERROR = "error"


class TranscriptionResult(CamelModel):
    """Transcription of a YouTube video or an uploaded audio file."""
    transcription: str
    source: TranscriptSource = TranscriptSource.CAPTIONS

    @property
    def is_usable(self) -> bool:
        """Whether the text is real speech content that flows can work on."""
        return bool(self.transcription.strip()) and self.source in (
            TranscriptSource.CAPTIONS,
            TranscriptSource.AUDIO,
            TranscriptSource.UPLOAD,
        )


# Structured outputs requested from the model

class HighlightSegment(CamelModel):
    """A segment of the transcription and whether it should be highlighted."""
    text: str = Field(description="A segment of the transcription text.")
    highlight: bool = Field(description="Whether this segment should be highlighted (e.g., bolded).")


class AnalyzeTranscriptionOutput(CamelModel):
    """Transcription split into contiguous segments with highlight flags."""
    segments: List[HighlightSegment] = Field(
        description="An array of transcription segments, each with a highlight flag."
    )


class SummaryOutput(CamelModel):
    """Summary of a video."""
    summary: str = Field(description="The summary of the video.")


class ActionableItemsOutput(CamelModel):
    """Actionable items extracted from a transcription."""
    actionable_items: List[str] = Field(
        description="A list of actionable items extracted from the transcription."
    )


class ActionablePlanOutput(CamelModel):
    """Actionable plan derived from a transcription."""
    actionable_plan: str = Field(
        description=(
            "A structured, actionable plan derived from the video transcription, "
            "including practical tips and a SMART goal if possible."
        )
    )


# Flow results: the structured output plus the flow's own error state

class AnalyzeTranscriptionResult(AnalyzeTranscriptionOutput):
    error: Optional[str] = None


class SummaryResult(SummaryOutput):
    error: Optional[str] = None


class ActionableItemsResult(ActionableItemsOutput):
    error: Optional[str] = None


class ActionablePlanResult(ActionablePlanOutput):
    error: Optional[str] = None


class VideoInsights(CamelModel):
    """Everything derived from a single video or audio submission."""
    video_id: Optional[str] = None
    transcription: str
    source: TranscriptSource
    segments: List[HighlightSegment] = []
    summary: Optional[str] = None
    actionable_items: List[str] = []
    actionable_plan: Optional[str] = None
    errors: Dict[str, str] = {}
    created_at: str = Field(default_factory=lambda: time.strftime("%Y-%m-%d %H:%M:%S"))
