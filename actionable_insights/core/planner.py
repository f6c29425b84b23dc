"""
Module for converting transcripts into actionable plans.
"""

from typing import Any, Dict

from langchain_core.prompts import ChatPromptTemplate

from actionable_insights.core.flows import PromptFlow
from actionable_insights.core.prompts import actionable_plan_template
from actionable_insights.models.schemas import ActionablePlanOutput, ActionablePlanResult

ACTIONABLE_PLAN_FALLBACK = "An actionable plan could not be created for this transcript."


class ActionablePlanner(PromptFlow[ActionablePlanOutput, ActionablePlanResult]):
    """Converts a transcription into a structured, prioritized plan."""

    name = "convertToPlanFlow"
    output_schema = ActionablePlanOutput
    result_schema = ActionablePlanResult

    def __init__(self, llm=None):
        prompt = ChatPromptTemplate.from_messages([
            ("human", actionable_plan_template)
        ])
        super().__init__(prompt, llm=llm)

    def fallback(self, inputs: Dict[str, Any], error: str) -> ActionablePlanResult:
        return ActionablePlanResult(actionable_plan=ACTIONABLE_PLAN_FALLBACK, error=error)


def convert_to_plan(transcription: str, llm=None) -> ActionablePlanResult:
    """Convert a transcription into an actionable plan."""
    return ActionablePlanner(llm=llm).run({"transcription": transcription})
