"""
Module for splitting a transcription into highlighted segments.

The model is asked to return contiguous segments covering the whole
transcription, but models tend to trim whitespace between segments. Returned
segments are therefore aligned back onto the original text so that the final
segments always concatenate to exactly the input transcription.
"""

from typing import Any, Dict, List, Optional

from langchain_core.prompts import ChatPromptTemplate

from actionable_insights.core.flows import PromptFlow
from actionable_insights.core.prompts import highlight_template
from actionable_insights.models.schemas import (
    AnalyzeTranscriptionOutput,
    AnalyzeTranscriptionResult,
    HighlightSegment,
)
from actionable_insights.utils.logger import logging


def merge_segments(segments: List[HighlightSegment]) -> List[HighlightSegment]:
    """Merge neighbouring segments that share a highlight flag and drop empty ones."""
    merged: List[HighlightSegment] = []
    for segment in segments:
        if not segment.text:
            continue
        if merged and merged[-1].highlight == segment.highlight:
            merged[-1] = HighlightSegment(text=merged[-1].text + segment.text, highlight=segment.highlight)
        else:
            merged.append(segment)
    return merged


def align_segments(transcription: str, segments: List[HighlightSegment]) -> Optional[List[HighlightSegment]]:
    """
    Map model segments onto the original transcription.

    Each segment's stripped text is searched for, in order, starting where the
    previous one ended. Text between matches (and after the last match) is kept
    as non-highlighted segments.

    Args:
        transcription: The original transcription
        segments: Segments returned by the model

    Returns:
        Segments whose texts concatenate to the transcription, or None if a
        segment does not occur in the remaining text
    """
    aligned: List[HighlightSegment] = []
    cursor = 0

    for segment in segments:
        needle = segment.text.strip()
        if not needle:
            continue

        start = transcription.find(needle, cursor)
        if start == -1:
            logging.warning(f"Highlight segment not found in transcription after offset {cursor}")
            return None

        if start > cursor:
            aligned.append(HighlightSegment(text=transcription[cursor:start], highlight=False))

        end = start + len(needle)
        aligned.append(HighlightSegment(text=transcription[start:end], highlight=segment.highlight))
        cursor = end

    if cursor < len(transcription):
        aligned.append(HighlightSegment(text=transcription[cursor:], highlight=False))

    return merge_segments(aligned)


def unhighlighted(transcription: str) -> List[HighlightSegment]:
    """The whole transcription as a single non-highlighted segment."""
    return [HighlightSegment(text=transcription, highlight=False)]


class TranscriptionHighlighter(PromptFlow[AnalyzeTranscriptionOutput, AnalyzeTranscriptionResult]):
    """Identifies the key segments of a transcription for highlighting."""

    name = "analyzeTranscriptionFlow"
    output_schema = AnalyzeTranscriptionOutput
    result_schema = AnalyzeTranscriptionResult

    def __init__(self, llm=None):
        prompt = ChatPromptTemplate.from_messages([
            ("human", highlight_template)
        ])
        super().__init__(prompt, llm=llm)

    def to_result(self, output: AnalyzeTranscriptionOutput, inputs: Dict[str, Any]) -> Optional[AnalyzeTranscriptionResult]:
        segments = align_segments(inputs["transcription"], output.segments)
        if segments is None:
            return None
        return AnalyzeTranscriptionResult(segments=segments)

    def fallback(self, inputs: Dict[str, Any], error: str) -> AnalyzeTranscriptionResult:
        return AnalyzeTranscriptionResult(segments=unhighlighted(inputs["transcription"]), error=error)

    def analyze(self, transcription: str) -> AnalyzeTranscriptionResult:
        """
        Segment a transcription and flag the parts worth highlighting.

        Args:
            transcription: The transcription text

        Returns:
            Segments covering the transcription; empty for empty input
        """
        if not transcription or not transcription.strip():
            return AnalyzeTranscriptionResult(segments=[])
        return self.run({"transcription": transcription})


def analyze_transcription(transcription: str, llm=None) -> AnalyzeTranscriptionResult:
    """Split a transcription into segments with highlight flags."""
    return TranscriptionHighlighter(llm=llm).analyze(transcription)
