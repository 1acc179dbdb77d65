"""
Data models for the transcript digest application.
"""
from enum import Enum
from typing import Optional, List
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from transcript_digest.config import config


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys, populated by either name."""

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class SummarizerType(str, Enum):
    """Available summarizer implementations."""
    BASIC = "basic"
    ADVANCED = "advanced"
    LLM = "llm"


class VideoMetadata(CamelModel):
    """Metadata describing the video a transcript belongs to."""
    title: str
    duration: float = 0  # seconds
    description: Optional[str] = None
    channel_name: Optional[str] = None
    publish_date: Optional[str] = None
    thumbnail_url: Optional[str] = None
    view_count: Optional[int] = None


class TranscriptSegment(CamelModel):
    """A single timed caption."""
    text: str
    start: float
    duration: float


class VideoTranscript(CamelModel):
    """Full transcript text plus the timed caption segments it came from."""
    text: str
    segments: List[TranscriptSegment] = Field(default_factory=list)


class SummaryResult(CamelModel):
    """Summary produced by a summarizer."""
    title: str
    original_video_url: str
    summary_text: str
    key_points: List[str]
    duration_in_minutes: int
    transcript_length: int

    model_config = {**CamelModel.model_config, "frozen": True}


class LLMSummaryConfig(BaseModel):
    """Configuration for remote model summarization."""
    model: str = config.DEFAULT_LLM_MODEL
    temperature: float = config.LLM_TEMPERATURE
    max_tokens: int = config.LLM_MAX_TOKENS
    max_transcript_chars: int = config.LLM_MAX_TRANSCRIPT_CHARS
