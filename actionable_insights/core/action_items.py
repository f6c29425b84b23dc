"""
Module for extracting actionable items from transcripts.
"""

from typing import Any, Dict, Optional

from langchain_core.prompts import ChatPromptTemplate

from actionable_insights.core.flows import PromptFlow
from actionable_insights.core.prompts import (
    actionable_items_template,
    actionable_items_instruction_template,
    actionable_items_transcript_template,
)
from actionable_insights.models.schemas import ActionableItemsOutput, ActionableItemsResult


def build_actionable_items_prompt(custom_instruction: Optional[str] = None) -> ChatPromptTemplate:
    prompt = actionable_items_template
    if custom_instruction and custom_instruction.strip():
        prompt += actionable_items_instruction_template
    prompt += actionable_items_transcript_template

    return ChatPromptTemplate.from_messages([
        ("human", prompt)
    ])


class ActionableItemsExtractor(PromptFlow[ActionableItemsOutput, ActionableItemsResult]):
    """Extracts a list of actionable items from a transcription."""

    name = "extractActionableItemsFlow"
    output_schema = ActionableItemsOutput
    result_schema = ActionableItemsResult

    def __init__(self, custom_instruction: Optional[str] = None, llm=None):
        self.custom_instruction = custom_instruction.strip() if custom_instruction else None
        super().__init__(build_actionable_items_prompt(self.custom_instruction), llm=llm)

    def to_result(self, output: ActionableItemsOutput, inputs: Dict[str, Any]) -> ActionableItemsResult:
        items = [item.strip() for item in output.actionable_items if item and item.strip()]
        return ActionableItemsResult(actionable_items=items)

    def fallback(self, inputs: Dict[str, Any], error: str) -> ActionableItemsResult:
        return ActionableItemsResult(actionable_items=[], error=error)

    def extract(self, transcription: str) -> ActionableItemsResult:
        inputs = {"transcription": transcription}
        if self.custom_instruction:
            inputs["custom_instruction"] = self.custom_instruction
        return self.run(inputs)


def extract_actionable_items(transcription: str, custom_instruction: Optional[str] = None, llm=None) -> ActionableItemsResult:
    """Extract actionable items from a transcription; empty list on failure."""
    return ActionableItemsExtractor(custom_instruction, llm=llm).extract(transcription)
