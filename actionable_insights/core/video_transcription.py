"""
Transcription of YouTube videos and uploaded audio.

A YouTube transcription is resolved in order from the video's captions, then
from model-based speech-to-text over the downloaded audio, and finally from a
placeholder message explaining why no transcription is available.
"""

from typing import Optional

from actionable_insights.config import config
from actionable_insights.core import youtube_service
from actionable_insights.core.prompts import TRANSCRIBE_AUDIO_PROMPT, TRANSCRIBE_VIDEO_AUDIO_PROMPT
from actionable_insights.core.transcriber import AudioTranscriber
from actionable_insights.models.schemas import TranscriptionResult, TranscriptSource
from actionable_insights.utils.error_handling import (
    InvalidYouTubeURLError,
    TranscriptionError,
    error_message,
)
from actionable_insights.utils.logger import logging

EMPTY_AUDIO_TRANSCRIPT = "AI speech-to-text for video {video_id} resulted in an empty transcript."
AUDIO_TRANSCRIPTION_FAILED = "AI speech-to-text transcription failed for video {video_id}. Error: {error}"
AUDIO_UNAVAILABLE = (
    "Audio for video {video_id} could not be downloaded for AI transcription. "
    "Manual audio download and AI processing would be required."
)


def transcribe_youtube_video(youtube_url: str, transcriber: Optional[AudioTranscriber] = None) -> TranscriptionResult:
    """
    Transcribe a YouTube video.

    Args:
        youtube_url: URL of the video
        transcriber: Audio transcriber for videos without captions
            (if None, one is created from config when needed)

    Returns:
        Transcription result; placeholder text when neither captions nor
        audio transcription are available

    Raises:
        InvalidYouTubeURLError: If no video ID can be extracted from the URL
    """
    video_id = youtube_service.get_video_id(youtube_url)
    if not video_id:
        raise InvalidYouTubeURLError()

    transcription = youtube_service.get_transcript(video_id)
    if transcription:
        logging.info(f"Using caption transcript for video {video_id} ({len(transcription)} characters)")
        return TranscriptionResult(transcription=transcription, source=TranscriptSource.CAPTIONS)

    logging.warning(f"No pre-existing transcript found for video {video_id}. Attempting AI transcription.")

    audio_data_uri = youtube_service.download_audio(video_id) if config.ENABLE_AUDIO_FALLBACK else None
    if not audio_data_uri:
        return TranscriptionResult(
            transcription=AUDIO_UNAVAILABLE.format(video_id=video_id),
            source=TranscriptSource.PLACEHOLDER,
        )

    try:
        transcriber = transcriber or AudioTranscriber()
        text = transcriber.transcribe(audio_data_uri, prompt=TRANSCRIBE_VIDEO_AUDIO_PROMPT)
    except Exception as e:
        logging.error(f"AI transcription error for video {video_id}: {str(e)}")
        return TranscriptionResult(
            transcription=AUDIO_TRANSCRIPTION_FAILED.format(video_id=video_id, error=error_message(e)),
            source=TranscriptSource.PLACEHOLDER,
        )

    if not text or not text.strip():
        return TranscriptionResult(
            transcription=EMPTY_AUDIO_TRANSCRIPT.format(video_id=video_id),
            source=TranscriptSource.PLACEHOLDER,
        )

    return TranscriptionResult(transcription=text, source=TranscriptSource.AUDIO)


def transcribe_uploaded_audio(audio_data_uri: str, transcriber: Optional[AudioTranscriber] = None) -> TranscriptionResult:
    """
    Transcribe an uploaded audio file.

    Args:
        audio_data_uri: Audio as 'data:<mimetype>;base64,<encoded_data>'
        transcriber: Audio transcriber (if None, one is created from config)

    Returns:
        Transcription result

    Raises:
        ValueError: If no audio data URI is provided or it is not a base64 data URI
        TranscriptionError: If the audio could not be transcribed
    """
    if not audio_data_uri:
        raise ValueError("No audio data URI provided.")
    youtube_service.parse_data_uri(audio_data_uri)

    try:
        transcriber = transcriber or AudioTranscriber()
        text = transcriber.transcribe(audio_data_uri, prompt=TRANSCRIBE_AUDIO_PROMPT)
        if text is None:
            raise TranscriptionError("AI transcription resulted in an empty transcript.")
    except Exception as e:
        logging.error(f"AI transcription error for uploaded audio: {str(e)}")
        raise TranscriptionError(
            f"AI transcription failed for uploaded audio. Error: {error_message(e)}"
        ) from e

    return TranscriptionResult(transcription=text, source=TranscriptSource.UPLOAD)
