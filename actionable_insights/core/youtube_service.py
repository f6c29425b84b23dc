"""
YouTube service utilities.

- get_video_id: extracts the YouTube video ID from a URL.
- get_transcript: fetches a caption transcript with youtube-transcript-api.
- download_audio: downloads the audio of a video with pytubefix as a data URI.
"""

import base64
import io
import mimetypes
import re
from pathlib import Path
from typing import List, Optional, Tuple

from pytubefix import YouTube
from youtube_transcript_api import YouTubeTranscriptApi

from actionable_insights.config import config
from actionable_insights.utils.logger import logging

VIDEO_ID_PATTERNS = [
    re.compile(r"(?:https?://)?(?:www\.)?youtube\.com/watch\?v=([^&]+)"),
    re.compile(r"(?:https?://)?(?:www\.)?youtu\.be/([^?]+)"),
    re.compile(r"(?:https?://)?(?:www\.)?youtube\.com/embed/([^?]+)"),
    re.compile(r"(?:https?://)?(?:www\.)?youtube\.com/v/([^?]+)"),
]

VALID_VIDEO_ID = re.compile(r"^[0-9A-Za-z_-]{11}$")

DATA_URI_PATTERN = re.compile(r"^data:(?P<mime>[^;,]+)?(?:;[^;,]+=[^;,]+)*;base64,(?P<data>.*)$", re.DOTALL)

DEFAULT_AUDIO_MIME_TYPE = "audio/mp3"


def get_video_id(url: Optional[str]) -> Optional[str]:
    """
    Extract the YouTube video ID from the supported URL formats.

    Args:
        url: YouTube URL

    Returns:
        Video ID or None if the URL is not recognized
    """
    if not url:
        return None

    for pattern in VIDEO_ID_PATTERNS:
        match = pattern.search(url)
        if match and match.group(1):
            return match.group(1)

    return None


def get_transcript(video_id: str, languages: Optional[List[str]] = None) -> Optional[str]:
    """
    Fetch the caption transcript of a video.

    Args:
        video_id: YouTube video ID
        languages: Preferred caption languages, defaults to the configured ones

    Returns:
        Caption texts joined by spaces, or None if no transcript is available
    """
    if not video_id:
        logging.error("youtube-service: No video_id provided to get_transcript.")
        return None

    languages = languages or config.TRANSCRIPT_LANGUAGES

    try:
        fetched = YouTubeTranscriptApi().fetch(video_id, languages=languages)
        texts = [snippet.text for snippet in fetched]
    except Exception as e:
        # The library raises when captions are disabled, missing or the video does not exist
        logging.warning(f"youtube-service: Failed to fetch transcript for video_id {video_id}. Error: {str(e)}")
        return None

    if not texts:
        logging.warning(f"youtube-service: No transcript items found for video_id: {video_id}")
        return None

    return " ".join(texts)


def download_audio(video_id: str) -> Optional[str]:
    """
    Download the audio of a video and return it as a data URI.

    Args:
        video_id: YouTube video ID

    Returns:
        Audio data URI or None if the download fails
    """
    if not video_id:
        logging.error("youtube-service: No video_id provided to download_audio.")
        return None

    if not VALID_VIDEO_ID.match(video_id):
        logging.error(f"youtube-service: Invalid video_id for audio download: {video_id}")
        return None

    logging.info(f"youtube-service: Attempting to download audio for video_id {video_id}.")
    try:
        yt = YouTube(f"https://www.youtube.com/watch?v={video_id}")
        audio_stream = yt.streams.filter(only_audio=True).order_by('abr').last()

        if audio_stream is None:
            logging.error(f"youtube-service: No audio-only stream found for video_id: {video_id}")
            return None

        logging.info(f"youtube-service: Selected audio stream for {video_id}: itag={audio_stream.itag} mime_type={audio_stream.mime_type}")

        buffer = io.BytesIO()
        audio_stream.stream_to_buffer(buffer)
        audio_bytes = buffer.getvalue()
    except Exception as e:
        logging.error(f"youtube-service: Error downloading audio for video_id {video_id}: {str(e)}")
        return None

    if not audio_bytes:
        logging.error(f"youtube-service: Audio download for video_id {video_id} resulted in empty data.")
        return None

    mime_type = (audio_stream.mime_type or "").split(";")[0].strip() or DEFAULT_AUDIO_MIME_TYPE
    audio_data_uri = to_data_uri(audio_bytes, mime_type)
    logging.info(f"youtube-service: Audio for video_id {video_id} downloaded. Data URI length: {len(audio_data_uri)}")
    return audio_data_uri


def to_data_uri(data: bytes, mime_type: str) -> str:
    """Encode bytes as a base64 data URI."""
    return f"data:{mime_type};base64,{base64.b64encode(data).decode('ascii')}"


def parse_data_uri(data_uri: str) -> Tuple[str, bytes]:
    """
    Split a base64 data URI into its MIME type and decoded payload.

    Args:
        data_uri: URI of the form 'data:<mimetype>;base64,<encoded_data>'

    Returns:
        Tuple of MIME type and raw bytes

    Raises:
        ValueError: If the URI is not a base64 data URI
    """
    match = DATA_URI_PATTERN.match(data_uri.strip())
    if not match:
        raise ValueError("Expected a data URI of the form 'data:<mimetype>;base64,<encoded_data>'.")

    mime_type = match.group("mime") or DEFAULT_AUDIO_MIME_TYPE
    try:
        data = base64.b64decode(match.group("data"), validate=True)
    except ValueError as e:
        raise ValueError(f"Data URI payload is not valid base64: {str(e)}") from e

    return mime_type, data


def file_to_data_uri(file_path: str) -> str:
    """
    Read a local audio file as a data URI.

    Args:
        file_path: Path to the audio file

    Returns:
        Audio data URI
    """
    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(f"Audio file not found at {file_path}")

    mime_type, _ = mimetypes.guess_type(path.name)
    return to_data_uri(path.read_bytes(), mime_type or DEFAULT_AUDIO_MIME_TYPE)
