"""
Factory for picking a summarizer implementation.
"""

import os
from typing import Union

from transcript_digest.core.summarizer import AdvancedSummarizer, BaseSummarizer, BasicSummarizer
from transcript_digest.models.schemas import SummarizerType
from transcript_digest.utils.logger import logging


def create_summarizer(summarizer_type: Union[SummarizerType, str] = SummarizerType.BASIC) -> BaseSummarizer:
    """
    Create a summarizer for the requested type.

    The llm summarizer needs GROQ_API_KEY; without it the advanced
    summarizer is returned instead.

    Args:
        summarizer_type: SummarizerType member or its string value

    Returns:
        Summarizer instance

    Raises:
        ValueError: If the type is unknown
    """
    summarizer_type = SummarizerType(summarizer_type)

    if summarizer_type == SummarizerType.LLM:
        if os.getenv("GROQ_API_KEY"):
            from transcript_digest.core.llm_summarizer import LLMSummarizer
            return LLMSummarizer()

        logging.warning("GROQ_API_KEY not found, falling back to advanced summarizer")
        return AdvancedSummarizer()

    if summarizer_type == SummarizerType.ADVANCED:
        return AdvancedSummarizer()

    return BasicSummarizer()
