"""
Module for summarizing transcripts using LLM models.
"""

from typing import Any, Dict, Optional

from langchain_core.prompts import ChatPromptTemplate

from actionable_insights.core.flows import PromptFlow
from actionable_insights.core.prompts import (
    summary_template,
    summary_instruction_template,
    summary_transcript_template,
)
from actionable_insights.models.schemas import SummaryOutput, SummaryResult

SUMMARY_FALLBACK = "A summary could not be generated for this transcript."


def build_summary_prompt(custom_instruction: Optional[str] = None) -> ChatPromptTemplate:
    """
    Construct the summary prompt, adding the custom instruction when given.

    Args:
        custom_instruction: Optional instruction for the summarization

    Returns:
        Chat prompt expecting `transcript` (and `custom_instruction` if given)
    """
    prompt = summary_template

    if custom_instruction and custom_instruction.strip():
        prompt += summary_instruction_template

    prompt += summary_transcript_template

    return ChatPromptTemplate.from_messages([
        ("human", prompt)
    ])


class TranscriptSummarizer(PromptFlow[SummaryOutput, SummaryResult]):
    """Class to handle transcript summarization operations."""

    name = "generateVideoSummaryFlow"
    output_schema = SummaryOutput
    result_schema = SummaryResult

    def __init__(self, custom_instruction: Optional[str] = None, llm=None):
        self.custom_instruction = custom_instruction.strip() if custom_instruction else None
        super().__init__(build_summary_prompt(self.custom_instruction), llm=llm)

    def fallback(self, inputs: Dict[str, Any], error: str) -> SummaryResult:
        return SummaryResult(summary=SUMMARY_FALLBACK, error=error)

    def summarize(self, transcript: str) -> SummaryResult:
        """
        Summarize a transcript text.

        Args:
            transcript: Full transcript text to summarize

        Returns:
            Summary result, or the fallback summary with its error set
        """
        inputs = {"transcript": transcript}
        if self.custom_instruction:
            inputs["custom_instruction"] = self.custom_instruction
        return self.run(inputs)


def generate_video_summary(transcript: str, custom_instruction: Optional[str] = None, llm=None) -> SummaryResult:
    """Summarize a video transcript, optionally following a custom instruction."""
    return TranscriptSummarizer(custom_instruction, llm=llm).summarize(transcript)
