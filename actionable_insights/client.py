"""
API client for communicating with the Actionable Insights backend.
"""

import requests
from typing import Dict, Any, Optional

from actionable_insights.config import config
from actionable_insights.core.youtube_service import get_video_id


class ApiClient:
    """Client for interacting with the Actionable Insights API."""

    def __init__(self, base_url: str = config.PUBLIC_URL, timeout: float = 300):
        """
        Initialize the API client.

        Args:
            base_url: Base URL of the API
            timeout: Seconds to wait for a response
        """
        self.base_url = base_url
        self.api_base = base_url.rstrip("/") + "/api/v1/"
        self.timeout = timeout

    def _url(self, endpoint: str) -> str:
        """Get the full URL for an endpoint."""
        return self.api_base + endpoint.lstrip("/")

    def _post(self, endpoint: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        response = requests.post(self._url(endpoint), json=payload, timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def transcribe_video(self, youtube_url: str) -> Dict[str, Any]:
        """
        Request a YouTube video transcription.

        Args:
            youtube_url: YouTube video URL

        Returns:
            Dictionary with the transcription and its source
        """
        return self._post("transcribe/video", {"youtubeUrl": youtube_url})

    def transcribe_audio(self, audio_data_uri: str) -> Dict[str, Any]:
        """Request a transcription of audio given as a base64 data URI."""
        return self._post("transcribe/audio", {"audioDataUri": audio_data_uri})

    def generate_summary(self, transcript: str, custom_instruction: Optional[str] = None) -> Dict[str, Any]:
        payload = {"transcript": transcript}
        if custom_instruction:
            payload["customInstruction"] = custom_instruction
        return self._post("summary", payload)

    def extract_action_items(self, transcription: str, custom_instruction: Optional[str] = None) -> Dict[str, Any]:
        payload = {"transcription": transcription}
        if custom_instruction:
            payload["customInstruction"] = custom_instruction
        return self._post("actionable-items", payload)

    def create_actionable_plan(self, transcription: str) -> Dict[str, Any]:
        return self._post("actionable-plan", {"transcription": transcription})

    def analyze_transcription(self, transcription: str) -> Dict[str, Any]:
        return self._post("highlights", {"transcription": transcription})

    def analyze_video(self, youtube_url: str, summary_instruction: Optional[str] = None,
                      action_items_instruction: Optional[str] = None) -> Dict[str, Any]:
        """
        Run the whole pipeline on a YouTube video.

        Args:
            youtube_url: YouTube video URL
            summary_instruction: Optional custom instruction for the summary
            action_items_instruction: Optional custom instruction for the actionable items

        Returns:
            Dictionary with the transcription and every derived insight
        """
        payload = {"youtubeUrl": youtube_url}
        if summary_instruction:
            payload["summaryInstruction"] = summary_instruction
        if action_items_instruction:
            payload["actionItemsInstruction"] = action_items_instruction
        return self._post("analyze", payload)

    def extract_video_id(self, url: str) -> Optional[str]:
        """
        Extract YouTube video ID from a URL.

        Args:
            url: YouTube URL

        Returns:
            Video ID or None if extraction fails
        """
        return get_video_id(url)
