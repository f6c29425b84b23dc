"""
Centralized error handling for the application.
"""

import traceback
from typing import Dict, Any

from actionable_insights.config import config
from actionable_insights.utils.logger import logging


class InsightsError(Exception):
    """Base class for application errors."""


class InvalidYouTubeURLError(InsightsError, ValueError):
    """Raised when no video ID can be extracted from a URL."""

    def __init__(self, message: str = "Invalid YouTube URL provided."):
        super().__init__(message)


class TranscriptionError(InsightsError):
    """Raised when audio could not be transcribed."""


def error_message(error: BaseException, default: str = "An unknown error occurred.") -> str:
    """
    Get a human readable message for an exception.

    Args:
        error: The exception that occurred
        default: Message used when the exception carries none

    Returns:
        The exception message or the default
    """
    message = str(error).strip()
    return message or default


def log_flow_error(flow_name: str, error: BaseException) -> None:
    """
    Log a failed flow invocation with its traceback.

    Args:
        flow_name: Name of the flow that failed
        error: The exception that occurred
    """
    logging.error(f"Error in {flow_name}: {error_message(error)}")
    logging.debug("".join(traceback.format_exception(type(error), error, error.__traceback__)))


def log_diagnostic_info(context: Dict[str, Any]):
    """
    Log diagnostic information for debugging.

    Args:
        context: Dictionary of diagnostic information
    """
    if not config.DEBUG:
        return

    try:
        import json
        logging.info(f"Diagnostic info: {json.dumps(context, default=str)}")
    except (TypeError, ValueError) as e:
        logging.error(f"Error logging diagnostic info: {str(e)}")
