"""
Tests for the prompt flows: summary, actionable items, plan and highlighting.
"""

import pytest
from unittest.mock import patch

from actionable_insights.core.action_items import extract_actionable_items
from actionable_insights.core.flows import MALFORMED_RESULT_ERROR
from actionable_insights.core.highlighter import align_segments, analyze_transcription, merge_segments
from actionable_insights.core.planner import ACTIONABLE_PLAN_FALLBACK, convert_to_plan
from actionable_insights.core.summarizer import SUMMARY_FALLBACK, build_summary_prompt, generate_video_summary
from actionable_insights.models.schemas import (
    ActionableItemsOutput,
    ActionablePlanOutput,
    AnalyzeTranscriptionOutput,
    HighlightSegment,
    SummaryOutput,
)


def prompt_text(structured_llm) -> str:
    """The rendered prompt the model was invoked with."""
    return structured_llm.invoke.call_args[0][0].to_string()


def test_generate_summary(mock_chat_model, structured_llm, transcription):
    """Test summarizing a transcript."""
    structured_llm.invoke.return_value = SummaryOutput(summary="Start small and stay consistent.")

    result = generate_video_summary(transcription)

    assert result.summary == "Start small and stay consistent."
    assert result.error is None
    mock_chat_model.with_structured_output.assert_called_once_with(SummaryOutput)
    assert transcription in prompt_text(structured_llm)
    assert "Additionally" not in prompt_text(structured_llm)


def test_generate_summary_with_custom_instruction(structured_llm, transcription):
    """Test that a custom instruction is added to the prompt."""
    structured_llm.invoke.return_value = SummaryOutput(summary="- habits\n- consistency")

    generate_video_summary(transcription, custom_instruction="Use bullet points")

    assert "Additionally, follow this specific instruction: Use bullet points" in prompt_text(structured_llm)


def test_build_summary_prompt_variables():
    """Test the prompt variables with and without a custom instruction."""
    assert set(build_summary_prompt().input_variables) == {"transcript"}
    assert set(build_summary_prompt("Be brief").input_variables) == {"transcript", "custom_instruction"}
    assert set(build_summary_prompt("   ").input_variables) == {"transcript"}


def test_generate_summary_accepts_dict_result(structured_llm, transcription):
    """Test that a dict result is validated against the output schema."""
    structured_llm.invoke.return_value = {"summary": "A dict summary"}

    result = generate_video_summary(transcription)

    assert result.summary == "A dict summary"
    assert result.error is None


def test_generate_summary_model_error(structured_llm, transcription):
    """Test that a model error falls back without raising."""
    structured_llm.invoke.side_effect = RuntimeError("503 model overloaded")

    result = generate_video_summary(transcription)

    assert result.summary == SUMMARY_FALLBACK
    assert result.error == "503 model overloaded"


def test_generate_summary_malformed_result(structured_llm, transcription):
    """Test that a malformed result falls back without raising."""
    structured_llm.invoke.return_value = {"text": "wrong shape"}

    result = generate_video_summary(transcription)

    assert result.summary == SUMMARY_FALLBACK
    assert result.error == MALFORMED_RESULT_ERROR


def test_generate_summary_model_init_error(transcription):
    """Test that failing to create the model falls back without raising."""
    with patch('actionable_insights.core.flows.init_chat_model', side_effect=ValueError("API key required")):
        result = generate_video_summary(transcription)

    assert result.summary == SUMMARY_FALLBACK
    assert result.error == "API key required"


def test_extract_actionable_items(mock_chat_model, structured_llm, transcription):
    """Test extracting actionable items."""
    structured_llm.invoke.return_value = ActionableItemsOutput(
        actionable_items=["Write down one habit tonight", "  ", "Track it daily for a week "]
    )

    result = extract_actionable_items(transcription)

    assert result.actionable_items == ["Write down one habit tonight", "Track it daily for a week"]
    assert result.error is None
    mock_chat_model.with_structured_output.assert_called_once_with(ActionableItemsOutput)


def test_extract_actionable_items_with_custom_instruction(structured_llm, transcription):
    """Test that a custom instruction is added to the prompt."""
    structured_llm.invoke.return_value = ActionableItemsOutput(actionable_items=["Track it"])

    extract_actionable_items(transcription, custom_instruction="Only list daily tasks")

    assert "Only list daily tasks" in prompt_text(structured_llm)


def test_extract_actionable_items_camel_case_dict(structured_llm, transcription):
    """Test that camelCase model output is accepted."""
    structured_llm.invoke.return_value = {"actionableItems": ["Track it"]}

    assert extract_actionable_items(transcription).actionable_items == ["Track it"]


def test_extract_actionable_items_model_error(structured_llm, transcription):
    """Test that a model error falls back to an empty list."""
    structured_llm.invoke.side_effect = RuntimeError("boom")

    result = extract_actionable_items(transcription)

    assert result.actionable_items == []
    assert result.error == "boom"


def test_convert_to_plan(structured_llm, transcription):
    """Test converting a transcription into a plan."""
    structured_llm.invoke.return_value = ActionablePlanOutput(actionable_plan="1. Pick a habit\n2. Track it")

    result = convert_to_plan(transcription)

    assert result.actionable_plan == "1. Pick a habit\n2. Track it"
    assert "SMART goal" in prompt_text(structured_llm)


def test_convert_to_plan_no_result(structured_llm, transcription):
    """Test that a missing result falls back to the placeholder plan."""
    structured_llm.invoke.return_value = None

    result = convert_to_plan(transcription)

    assert result.actionable_plan == ACTIONABLE_PLAN_FALLBACK
    assert result.error == MALFORMED_RESULT_ERROR


def test_analyze_transcription(structured_llm):
    """Test highlighting a transcription whose segments already match."""
    text = "Intro words. The key point is this. Outro."
    structured_llm.invoke.return_value = AnalyzeTranscriptionOutput(segments=[
        HighlightSegment(text="Intro words. ", highlight=False),
        HighlightSegment(text="The key point is this.", highlight=True),
        HighlightSegment(text=" Outro.", highlight=False),
    ])

    result = analyze_transcription(text)

    assert result.error is None
    assert [segment.highlight for segment in result.segments] == [False, True, False]
    assert "".join(segment.text for segment in result.segments) == text


def test_analyze_transcription_repairs_whitespace(structured_llm):
    """Test that segments with trimmed whitespace are aligned onto the original text."""
    text = "Intro words.  The key point is this.\nOutro."
    structured_llm.invoke.return_value = AnalyzeTranscriptionOutput(segments=[
        HighlightSegment(text="Intro words.", highlight=False),
        HighlightSegment(text="The key point is this.", highlight=True),
        HighlightSegment(text="Outro.", highlight=False),
    ])

    result = analyze_transcription(text)

    assert result.error is None
    assert "".join(segment.text for segment in result.segments) == text
    assert [segment.text for segment in result.segments if segment.highlight] == ["The key point is this."]


def test_analyze_transcription_rephrased_segment(structured_llm, transcription):
    """Test that segments not found in the transcription fall back to plain text."""
    structured_llm.invoke.return_value = AnalyzeTranscriptionOutput(segments=[
        HighlightSegment(text="A paraphrase that never occurs.", highlight=True),
    ])

    result = analyze_transcription(transcription)

    assert result.segments == [HighlightSegment(text=transcription, highlight=False)]
    assert result.error == MALFORMED_RESULT_ERROR


def test_analyze_transcription_model_error(structured_llm, transcription):
    """Test that a model error returns the transcription as one plain segment."""
    structured_llm.invoke.side_effect = RuntimeError("boom")

    result = analyze_transcription(transcription)

    assert result.segments == [HighlightSegment(text=transcription, highlight=False)]
    assert result.error == "boom"


@pytest.mark.parametrize("text", ["", "   ", "\n\t"])
def test_analyze_transcription_empty(mock_chat_model, text):
    """Test that empty input returns no segments without calling the model."""
    result = analyze_transcription(text)

    assert result.segments == []
    mock_chat_model.with_structured_output.assert_not_called()


@pytest.mark.parametrize("text, segments", [
    ("one two three", [("one", True), ("three", False)]),
    ("one two three", []),
    ("  padded text  ", [("padded", True), ("text", True)]),
    ("repeat repeat repeat", [("repeat", False), ("repeat", True), ("repeat", False)]),
    ("a {brace} b", [("{brace}", True)]),
])
def test_align_segments_concatenates_to_original(text, segments):
    """Test that aligned segments always reproduce the original text."""
    aligned = align_segments(text, [HighlightSegment(text=t, highlight=h) for t, h in segments])

    assert "".join(segment.text for segment in aligned) == text


def test_align_segments_out_of_order():
    """Test that segments returned out of order cannot be aligned."""
    segments = [HighlightSegment(text="three", highlight=True), HighlightSegment(text="one", highlight=False)]

    assert align_segments("one two three", segments) is None


def test_merge_segments():
    """Test merging neighbouring segments with the same flag."""
    merged = merge_segments([
        HighlightSegment(text="a ", highlight=False),
        HighlightSegment(text="", highlight=True),
        HighlightSegment(text="b ", highlight=False),
        HighlightSegment(text="c", highlight=True),
    ])

    assert merged == [HighlightSegment(text="a b ", highlight=False), HighlightSegment(text="c", highlight=True)]
