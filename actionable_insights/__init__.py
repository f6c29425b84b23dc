"""
Actionable Insights Application.

This application transcribes YouTube videos or uploaded audio and turns the
transcription into a summary, actionable items, an actionable plan, and a
highlighted version of the text using LLM models.
"""

from actionable_insights.config import config

__version__ = config.APP_VERSION
