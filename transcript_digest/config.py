"""
Configuration settings for the transcript digest application.
"""

import os
from pathlib import Path
from dotenv import load_dotenv


# Ensure environment variables are loaded
load_dotenv()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def resolve_log_level(default: str) -> str:
    """Read LOG_LEVEL from the environment, falling back to default for unknown names."""
    level = os.getenv("LOG_LEVEL", default).upper()
    return level if level in LOG_LEVELS else default


class Config:
    """Base configuration class."""

    # Application info
    APP_NAME = "Transcript Digest"
    APP_VERSION = "0.1.0"

    # Data directories
    BASE_DIR = Path(__file__).resolve().parent.parent.absolute()
    DATA_DIR = Path(os.getenv("DATA_DIR", BASE_DIR / "data"))
    SUMMARIES_DIR = Path(os.getenv("SUMMARIES_DIR", DATA_DIR / "summaries"))

    # API keys
    GROQ_API_KEY = os.getenv("GROQ_API_KEY")

    # Summarizer selection
    DEFAULT_SUMMARIZER = os.getenv("DEFAULT_SUMMARIZER", "advanced")

    # Remote model settings
    DEFAULT_LLM_MODEL = os.getenv("DEFAULT_LLM_MODEL", "llama-3.3-70b-versatile")
    LLM_TEMPERATURE = float(os.getenv("LLM_TEMPERATURE", "0.3"))
    LLM_MAX_TOKENS = int(os.getenv("LLM_MAX_TOKENS", "1000"))
    LLM_MAX_TRANSCRIPT_CHARS = int(os.getenv("LLM_MAX_TRANSCRIPT_CHARS", "15000"))

    @classmethod
    def initialize(cls):
        """Initialize the application configuration."""
        from transcript_digest.utils.logger import logging

        cls.SUMMARIES_DIR.mkdir(parents=True, exist_ok=True)

        # Only the llm summarizer needs a key
        if not os.getenv("GROQ_API_KEY"):
            logging.warning(
                "GROQ_API_KEY environment variable not set. "
                "The llm summarizer will fall back to the advanced summarizer."
            )


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True
    LOG_LEVEL = resolve_log_level("DEBUG")


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False
    LOG_LEVEL = resolve_log_level("INFO")


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
