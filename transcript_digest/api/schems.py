from typing import List

from pydantic import BaseModel

from transcript_digest.config import config
from transcript_digest.models.schemas import (
    CamelModel,
    SummarizerType,
    SummaryResult,
    VideoMetadata,
    VideoTranscript,
)


class SummarizeRequest(CamelModel):
    """Model for requesting transcript summarization."""
    url: str
    metadata: VideoMetadata
    transcript: VideoTranscript
    summarizer_type: SummarizerType = SummarizerType(config.DEFAULT_SUMMARIZER)


class SummaryResponse(BaseModel):
    """Model for summary responses."""
    summary: SummaryResult
    markdown: str


class SummarizersResponse(BaseModel):
    """Model listing the available summarizers."""
    summarizers: List[str]
