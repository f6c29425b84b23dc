"""
Module for transcribing audio with speech-capable models.
"""

import mimetypes
from typing import Optional

from google import genai
from google.genai import types
from groq import Groq

from actionable_insights.config import config
from actionable_insights.core.prompts import TRANSCRIBE_AUDIO_PROMPT
from actionable_insights.core.youtube_service import parse_data_uri
from actionable_insights.utils.logger import logging

SAFETY_CATEGORIES = [
    types.HarmCategory.HARM_CATEGORY_HARASSMENT,
    types.HarmCategory.HARM_CATEGORY_HATE_SPEECH,
    types.HarmCategory.HARM_CATEGORY_SEXUALLY_EXPLICIT,
    types.HarmCategory.HARM_CATEGORY_DANGEROUS_CONTENT,
]

SUPPORTED_PROVIDERS = ("gemini", "groq")


class AudioTranscriber:
    """Class to handle audio transcription operations."""

    def __init__(self, provider: Optional[str] = None, api_key: Optional[str] = None):
        """
        Initialize the transcriber for a provider.

        Args:
            provider: "gemini" or "groq" (if None, uses TRANSCRIPTION_PROVIDER)
            api_key: Provider API key (if None, will try to get from config)
        """
        self.provider = (provider or config.TRANSCRIPTION_PROVIDER).lower()
        if self.provider not in SUPPORTED_PROVIDERS:
            raise ValueError(f"Unsupported transcription provider: {self.provider}")

        if self.provider == "groq":
            self.api_key = api_key or config.GROQ_API_KEY
            if not self.api_key:
                raise ValueError("Groq API key is required. Set it in .env file or pass directly.")
            self.client = Groq(api_key=self.api_key)
        else:
            self.api_key = api_key or config.GOOGLE_API_KEY
            if not self.api_key:
                raise ValueError("Google API key is required. Set GOOGLE_API_KEY or GEMINI_API_KEY.")
            self.client = genai.Client(api_key=self.api_key)

    def transcribe(self, audio_data_uri: str, prompt: str = TRANSCRIBE_AUDIO_PROMPT) -> Optional[str]:
        """
        Transcribe audio given as a base64 data URI.

        Args:
            audio_data_uri: Audio as 'data:<mimetype>;base64,<encoded_data>'
            prompt: Instruction sent alongside the audio

        Returns:
            The transcribed text, or None if the model returned no text
        """
        mime_type, audio_bytes = parse_data_uri(audio_data_uri)
        logging.info(f"Transcribing {len(audio_bytes)} bytes of {mime_type} audio with {self.provider}")

        if self.provider == "groq":
            text = self._transcribe_with_groq(audio_bytes, mime_type, prompt)
        else:
            text = self._transcribe_with_gemini(audio_bytes, mime_type, prompt)

        if text is None:
            logging.warning("Transcription returned no text.")
            return None

        logging.info("Transcription complete.")
        return text

    def _transcribe_with_gemini(self, audio_bytes: bytes, mime_type: str, prompt: str) -> Optional[str]:
        response = self.client.models.generate_content(
            model=config.AUDIO_TRANSCRIPTION_MODEL,
            contents=[
                types.Part.from_bytes(data=audio_bytes, mime_type=mime_type),
                types.Part(text=prompt),
            ],
            config=types.GenerateContentConfig(
                safety_settings=[
                    types.SafetySetting(
                        category=category,
                        threshold=types.HarmBlockThreshold.BLOCK_MEDIUM_AND_ABOVE,
                    )
                    for category in SAFETY_CATEGORIES
                ]
            ),
        )
        return response.text

    def _transcribe_with_groq(self, audio_bytes: bytes, mime_type: str, prompt: str) -> Optional[str]:
        # Whisper's prompt is spelling context, not an instruction
        extension = mimetypes.guess_extension(mime_type) or ".mp3"
        transcription = self.client.audio.transcriptions.create(
            file=(f"audio{extension}", audio_bytes),
            model=config.GROQ_TRANSCRIPTION_MODEL,
            response_format="json",
            temperature=0.0,
        )
        return transcription.text
