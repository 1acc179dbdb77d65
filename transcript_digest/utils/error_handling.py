"""
Centralized error handling for the application.
"""

import json
from enum import Enum
from typing import Any, Dict

from transcript_digest.config import config
from transcript_digest.utils.logger import logging


class ErrorType(str, Enum):
    """Kinds of failures surfaced to users."""
    NO_TRANSCRIPT = "NO_TRANSCRIPT"
    SUMMARIZATION_ERROR = "SUMMARIZATION_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class AppError(Exception):
    """Base exception carrying an ErrorType."""

    def __init__(self, message: str, error_type: ErrorType = ErrorType.UNKNOWN_ERROR):
        super().__init__(message)
        self.message = message
        self.error_type = error_type


class SummarizationError(AppError):
    """Raised when a summarizer fails for any reason."""

    def __init__(self, message: str = "Failed to summarize video"):
        super().__init__(message, ErrorType.SUMMARIZATION_ERROR)


def create_error(message: str, error_type: ErrorType) -> AppError:
    """Create an AppError of the matching subclass for the given type."""
    if error_type == ErrorType.SUMMARIZATION_ERROR:
        return SummarizationError(message)
    return AppError(message, error_type)


def format_error_response(error: Exception) -> str:
    """
    Turn an exception into a message suitable for end users.

    Args:
        error: The exception that occurred

    Returns:
        Human readable error message
    """
    if isinstance(error, AppError):
        if error.error_type == ErrorType.NO_TRANSCRIPT:
            return (
                "No transcript text was provided. This could be because:\n"
                "- The video does not have captions\n"
                "- The transcript file is empty or malformed\n\n"
                "Try a different transcript."
            )

        if error.error_type == ErrorType.SUMMARIZATION_ERROR:
            return (
                f"An error occurred while summarizing the video: {error.message}\n\n"
                "Please try again or try a different video."
            )

        return f"An unexpected error occurred: {error.message}"

    return f"An unexpected error occurred: {str(error) or 'Unknown error'}"


def log_diagnostic_info(context: Dict[str, Any]):
    """
    Log diagnostic information for debugging.

    Args:
        context: Dictionary of diagnostic information
    """
    if not config.DEBUG:
        return

    try:
        logging.debug(f"Diagnostic info: {json.dumps(context, default=str)}")
    except (TypeError, ValueError) as e:
        logging.error(f"Error logging diagnostic info: {str(e)}")
