"""
Module for summarizing transcripts with a hosted chat model.
"""

import os
import re
import traceback
from typing import List, Optional, Tuple

from langchain_core.prompts import ChatPromptTemplate
from langchain.chat_models import init_chat_model

from transcript_digest.core.prompts import summary_template, truncation_marker
from transcript_digest.core.summarizer import BaseSummarizer, build_summary_result, minutes_from_seconds
from transcript_digest.core.text_stats import split_sentences, split_words
from transcript_digest.models.schemas import (
    LLMSummaryConfig,
    SummaryResult,
    VideoMetadata,
    VideoTranscript,
)
from transcript_digest.utils.error_handling import SummarizationError
from transcript_digest.utils.logger import logging


KEY_POINTS_PATTERN = re.compile(r"key\s*points?:?(.*?)(?:\n\n|$)", re.IGNORECASE | re.DOTALL)
BULLET_PATTERN = re.compile(r"^[•\-*\d.\s]+")


def truncate_transcript(text: str, max_chars: int) -> str:
    """Cut text to max_chars characters and mark the cut."""
    if len(text) > max_chars:
        return text[:max_chars] + truncation_marker
    return text


def parse_model_reply(content: str) -> Tuple[str, List[str]]:
    """
    Split a model reply into summary text and key points.

    Args:
        content: Raw reply from the model

    Returns:
        Tuple of (summary text, key points)
    """
    match = KEY_POINTS_PATTERN.search(content)
    key_points = []

    if match and match.group(1).strip():
        lines = re.split(r"\n+", match.group(1).strip())
        key_points = [BULLET_PATTERN.sub("", line).strip() for line in lines]
        key_points = [point for point in key_points if point]

    if not key_points:
        key_points = [sentence.strip() for sentence in split_sentences(content)[:3]]

    summary_text = content
    if match:
        summary_text = content.replace(match.group(0), "", 1).strip()

    return summary_text, key_points


class LLMSummarizer(BaseSummarizer):
    """Summarizer that forwards the transcript to a Groq-hosted chat model."""

    name = "llm"

    def __init__(self, summary_config: Optional[LLMSummaryConfig] = None, api_key: Optional[str] = None):
        """
        Initialize the summarizer with API key.

        Args:
            summary_config: Model settings (defaults come from the app config)
            api_key: Groq API key (if None, will try to get from environment)
        """
        self.summary_config = summary_config or LLMSummaryConfig()
        self.api_key = api_key or os.getenv("GROQ_API_KEY")
        if not self.api_key:
            raise ValueError("Groq API key is required. Set it in .env file or pass directly.")

        os.environ["GROQ_API_KEY"] = self.api_key

    def summarize(self, video_url: str, metadata: VideoMetadata, transcript: VideoTranscript) -> SummaryResult:
        try:
            messages = self._build_messages(metadata, transcript.text)

            logging.info(f"Requesting summary from {self.summary_config.model}")
            response = self._create_model().invoke(messages)

            return self._build_result(video_url, metadata, transcript, response.content)
        except Exception as e:
            logging.error(f"Error in llm summarization: {str(e)}")
            logging.error(traceback.format_exc())
            raise SummarizationError("Failed to summarize video using the language model") from None

    async def summarize_video(
        self, video_url: str, metadata: VideoMetadata, transcript: VideoTranscript
    ) -> SummaryResult:
        """Same as summarize, but awaits the model so the event loop stays free."""
        try:
            messages = self._build_messages(metadata, transcript.text)

            logging.info(f"Requesting summary from {self.summary_config.model}")
            response = await self._create_model().ainvoke(messages)

            return self._build_result(video_url, metadata, transcript, response.content)
        except Exception as e:
            logging.error(f"Error in llm summarization: {str(e)}")
            logging.error(traceback.format_exc())
            raise SummarizationError("Failed to summarize video using the language model") from None

    def _create_model(self):
        return init_chat_model(
            model=self.summary_config.model,
            model_provider="groq",
            temperature=self.summary_config.temperature,
            max_tokens=self.summary_config.max_tokens,
        )

    def _build_messages(self, metadata: VideoMetadata, full_text: str):
        prompt = ChatPromptTemplate.from_messages([("user", summary_template)])
        return prompt.format_messages(
            title=metadata.title,
            channel=metadata.channel_name or "Unknown",
            duration=minutes_from_seconds(metadata.duration),
            transcript=truncate_transcript(full_text, self.summary_config.max_transcript_chars),
        )

    def _build_result(
        self, video_url: str, metadata: VideoMetadata, transcript: VideoTranscript, content: Optional[str]
    ) -> SummaryResult:
        summary_text, key_points = parse_model_reply(content or "")
        transcript_length = len(split_words(transcript.text))
        return build_summary_result(video_url, metadata, summary_text, key_points, transcript_length)
