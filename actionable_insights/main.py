"""
Command line entry point for the Actionable Insights application.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from actionable_insights.actions import analyze_video, derive_insights, handle_transcribe_uploaded_audio
from actionable_insights.api.schemas import TranscribeAudioRequest
from actionable_insights.core.youtube_service import file_to_data_uri
from actionable_insights.models.schemas import VideoInsights
from actionable_insights.utils.error_handling import InvalidYouTubeURLError, TranscriptionError
from actionable_insights.utils.helpers import save_json, truncate_text
from actionable_insights.utils.logger import logging


def save_insights(insights: VideoInsights, output_file: str) -> Path:
    """Save the insights to a JSON file."""
    output_path = Path(output_file)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    save_json(insights.model_dump(by_alias=True, mode="json"), str(output_path))
    logging.info(f"Insights saved to: {output_path}")
    return output_path


def process_audio_file(
    audio_file: str,
    summary_instruction: Optional[str] = None,
    action_items_instruction: Optional[str] = None,
) -> VideoInsights:
    """
    Transcribe a local audio file and derive every insight from it.

    Args:
        audio_file: Path to the audio file
        summary_instruction: Optional custom instruction for the summary
        action_items_instruction: Optional custom instruction for the actionable items

    Returns:
        VideoInsights object
    """
    logging.info(f"Transcribing audio file: {audio_file}")
    transcription = handle_transcribe_uploaded_audio(
        TranscribeAudioRequest(audio_data_uri=file_to_data_uri(audio_file))
    )
    logging.info(f"Transcription: {truncate_text(transcription.transcription)}")
    return derive_insights(
        transcription,
        summary_instruction=summary_instruction,
        action_items_instruction=action_items_instruction,
    )


def format_insights(insights: VideoInsights) -> str:
    """Render insights as plain text for the terminal."""
    lines = ["=" * 80]
    if insights.video_id:
        lines.append(f"Video: {insights.video_id} (transcript from {insights.source.value})")
    lines.extend(["=" * 80, "", "Transcription:", insights.transcription])

    if insights.segments:
        highlighted = [segment.text.strip() for segment in insights.segments if segment.highlight]
        lines.extend(["", "Highlights:"])
        lines.extend(f"  * {text}" for text in highlighted)

    if insights.summary is not None:
        lines.extend(["", "Summary:", insights.summary])

    if insights.actionable_items:
        lines.extend(["", "Actionable items:"])
        lines.extend(f"  {index}. {item}" for index, item in enumerate(insights.actionable_items, start=1))

    if insights.actionable_plan is not None:
        lines.extend(["", "Actionable plan:", insights.actionable_plan])

    for name, error in insights.errors.items():
        lines.append(f"[{name}] {error}")

    lines.append("=" * 80)
    return "\n".join(lines)


def main(argv=None):
    """Main function to run the application from command line."""
    parser = argparse.ArgumentParser(description="Actionable Insights from YouTube videos and audio")
    parser.add_argument("url", nargs="?", help="YouTube video URL")
    parser.add_argument("--audio-file", help="Local audio file to transcribe instead of a YouTube video")
    parser.add_argument("--summary-instruction", help="Custom instruction for the summary")
    parser.add_argument("--action-items-instruction", help="Custom instruction for the actionable items")
    parser.add_argument("--output", help="Output file path for the insights (JSON)")
    parser.add_argument("--json", action="store_true", help="Print the insights as JSON")

    args = parser.parse_args(argv)

    if not args.url and not args.audio_file:
        parser.error("either a YouTube URL or --audio-file is required")

    try:
        if args.audio_file:
            insights = process_audio_file(args.audio_file, args.summary_instruction, args.action_items_instruction)
        else:
            insights = analyze_video(args.url, args.summary_instruction, args.action_items_instruction)
    except (InvalidYouTubeURLError, TranscriptionError, FileNotFoundError) as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        return 1

    if args.output:
        save_insights(insights, args.output)

    if args.json:
        print(json.dumps(insights.model_dump(by_alias=True, mode="json"), indent=2, ensure_ascii=False))
    else:
        print(format_insights(insights))

    return 0


if __name__ == "__main__":
    sys.exit(main())
