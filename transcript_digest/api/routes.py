"""
API routes for the transcript digest application.
"""

from fastapi import APIRouter, HTTPException

from transcript_digest.api.schems import (
    SummarizeRequest,
    SummaryResponse,
    SummarizersResponse,
)
from transcript_digest.core.factory import create_summarizer
from transcript_digest.models.schemas import SummarizerType
from transcript_digest.utils.error_handling import AppError, format_error_response
from transcript_digest.utils.helpers import format_summary_markdown
from transcript_digest.utils.logger import logging

router = APIRouter(prefix="/api/v1", tags=["summaries"])


@router.post("/summarize", response_model=SummaryResponse)
async def summarize_transcript(request: SummarizeRequest):
    """
    Summarize a transcript.

    - Picks the summarizer named by summarizerType
    - Returns the structured summary and its Markdown rendering
    """
    summarizer = create_summarizer(request.summarizer_type)
    logging.info(f"Summarizing {request.url} with the {summarizer.name} summarizer")

    try:
        summary = await summarizer.summarize_video(request.url, request.metadata, request.transcript)
    except AppError as e:
        logging.error(f"Error summarizing {request.url}: {e.message}")
        raise HTTPException(status_code=500, detail=format_error_response(e))

    return SummaryResponse(summary=summary, markdown=format_summary_markdown(summary))


@router.get("/summarizers", response_model=SummarizersResponse)
async def list_summarizers():
    """List the summarizer types accepted by /summarize."""
    return SummarizersResponse(summarizers=[t.value for t in SummarizerType])
