"""
Configuration settings for the Actionable Insights application.
"""

import os
from typing import Dict, Any, List
from dotenv import load_dotenv


# Ensure environment variables are loaded
load_dotenv()


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Base configuration class."""

    # Application info
    APP_NAME = "Actionable Insights"
    APP_VERSION = "0.2.0"

    # API keys
    GOOGLE_API_KEY = os.getenv("GOOGLE_API_KEY") or os.getenv("GEMINI_API_KEY")
    GROQ_API_KEY = os.getenv("GROQ_API_KEY")

    # Text flows (summary, actionable items, plan, highlighting)
    LLM_PROVIDER = os.getenv("LLM_PROVIDER", "google_genai")
    TEXT_MODEL = os.getenv("TEXT_MODEL", "gemini-2.0-flash")
    LLM_TEMPERATURE = float(os.getenv("LLM_TEMPERATURE", "0.2"))

    # Speech-to-text
    TRANSCRIPTION_PROVIDER = os.getenv("TRANSCRIPTION_PROVIDER", "gemini")
    AUDIO_TRANSCRIPTION_MODEL = os.getenv("AUDIO_TRANSCRIPTION_MODEL", "gemini-2.0-flash")
    GROQ_TRANSCRIPTION_MODEL = os.getenv("GROQ_TRANSCRIPTION_MODEL", "whisper-large-v3-turbo")

    # YouTube
    TRANSCRIPT_LANGUAGES: List[str] = [
        lang.strip() for lang in os.getenv("TRANSCRIPT_LANGUAGES", "en").split(",") if lang.strip()
    ]
    ENABLE_AUDIO_FALLBACK = _env_flag("ENABLE_AUDIO_FALLBACK", True)

    PUBLIC_URL = os.getenv("PUBLIC_URL", "http://localhost:8000")

    @classmethod
    def initialize(cls):
        """Initialize the application configuration."""
        # Validate required environment variables
        if not cls.GOOGLE_API_KEY:
            print("WARNING: GOOGLE_API_KEY or GEMINI_API_KEY environment variable is not set.")
            print("Flows using Google AI will fail and fall back to their default results.")
            print("Please set it in the .env file or environment variables.")

    @classmethod
    def get_model_settings(cls) -> Dict[str, Any]:
        """Get the model settings used by the flows."""
        return {
            "llm_provider": cls.LLM_PROVIDER,
            "text_model": cls.TEXT_MODEL,
            "temperature": cls.LLM_TEMPERATURE,
            "transcription_provider": cls.TRANSCRIPTION_PROVIDER,
            "audio_transcription_model": cls.AUDIO_TRANSCRIPTION_MODEL,
        }


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True
    LOG_LEVEL = "DEBUG"


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False
    LOG_LEVEL = "INFO"


# Determine which configuration to use based on environment
def get_config():
    """Get the appropriate configuration based on environment."""
    env = os.getenv("ENVIRONMENT", "development").lower()
    if env == "production":
        return ProductionConfig
    else:
        return DevelopmentConfig


# Create a config instance
config = get_config()
config.initialize()
