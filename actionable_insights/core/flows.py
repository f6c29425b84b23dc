"""
Prompt flows: a prompt template paired with a validated structured output.

Every flow fills its template, asks the chat model for a result shaped like
its output schema and validates that result. A flow never raises to its
caller: a thrown error or a malformed result is replaced by the flow's
fallback, which records what went wrong in its ``error`` field.
"""

import os
from typing import Any, Dict, Generic, Optional, Type, TypeVar

from langchain.chat_models import init_chat_model
from langchain_core.prompts import ChatPromptTemplate
from pydantic import BaseModel, ValidationError

from actionable_insights.config import config
from actionable_insights.utils.error_handling import error_message, log_flow_error
from actionable_insights.utils.logger import logging

OutputT = TypeVar("OutputT", bound=BaseModel)
ResultT = TypeVar("ResultT", bound=BaseModel)

MALFORMED_RESULT_ERROR = "The model returned no usable result."


def init_llm(model: Optional[str] = None, temperature: Optional[float] = None):
    """
    Create the chat model used by the text flows.

    Args:
        model: Model name (if None, uses TEXT_MODEL)
        temperature: Sampling temperature (if None, uses LLM_TEMPERATURE)
    """
    if config.LLM_PROVIDER == "google_genai" and config.GOOGLE_API_KEY:
        os.environ["GOOGLE_API_KEY"] = config.GOOGLE_API_KEY

    return init_chat_model(
        model=model or config.TEXT_MODEL,
        model_provider=config.LLM_PROVIDER,
        temperature=config.LLM_TEMPERATURE if temperature is None else temperature,
    )


class PromptFlow(Generic[OutputT, ResultT]):
    """Base class for a single prompt-templated model call."""

    name: str = "promptFlow"
    output_schema: Type[OutputT]
    result_schema: Type[ResultT]

    def __init__(self, prompt: ChatPromptTemplate, llm=None):
        """
        Initialize the flow.

        Args:
            prompt: Template filled with the flow inputs
            llm: Chat model to use (if None, created from config on first call)
        """
        self.prompt = prompt
        self._llm = llm

    @property
    def llm(self):
        if self._llm is None:
            self._llm = init_llm()
        return self._llm

    def generate(self, inputs: Dict[str, Any]) -> Optional[OutputT]:
        """
        Fill the prompt, call the model and validate its structured result.

        Args:
            inputs: Template variables

        Returns:
            The validated output, or None if the result has the wrong shape
        """
        structured_llm = self.llm.with_structured_output(self.output_schema)
        messages = self.prompt.invoke(inputs)
        return self.validate(structured_llm.invoke(messages))

    def validate(self, result: Any) -> Optional[OutputT]:
        """Coerce a raw model result into the output schema."""
        if result is None:
            return None
        if isinstance(result, self.output_schema):
            return result
        if isinstance(result, BaseModel):
            result = result.model_dump(by_alias=True)

        try:
            return self.output_schema.model_validate(result)
        except ValidationError as e:
            logging.warning(f"{self.name} result did not match {self.output_schema.__name__}: {e.error_count()} errors")
            return None

    def to_result(self, output: OutputT, inputs: Dict[str, Any]) -> Optional[ResultT]:
        """Turn a validated output into the flow result, or None to use the fallback."""
        return self.result_schema.model_validate(output.model_dump())

    def fallback(self, inputs: Dict[str, Any], error: str) -> ResultT:
        raise NotImplementedError

    def run(self, inputs: Dict[str, Any]) -> ResultT:
        """
        Run the flow, substituting the fallback on any failure.

        Args:
            inputs: Template variables

        Returns:
            The flow result or its fallback
        """
        logging.info(f"Running {self.name}")
        try:
            output = self.generate(inputs)
            result = self.to_result(output, inputs) if output is not None else None
        except Exception as e:
            log_flow_error(self.name, e)
            return self.fallback(inputs, error_message(e))

        if result is None:
            logging.warning(f"{self.name} returned a malformed result, using fallback")
            return self.fallback(inputs, MALFORMED_RESULT_ERROR)

        logging.info(f"{self.name} complete")
        return result
