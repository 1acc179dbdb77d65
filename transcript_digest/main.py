"""
Main entry point for the transcript digest application.
"""

import argparse
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from transcript_digest.models.schemas import (
    SummarizerType,
    SummaryResult,
    VideoMetadata,
    VideoTranscript,
)
from transcript_digest.core.factory import create_summarizer
from transcript_digest.config import config
from transcript_digest.utils.error_handling import AppError, ErrorType, create_error, format_error_response
from transcript_digest.utils.helpers import (
    format_summary_markdown,
    get_timestamp,
    load_json,
    sanitize_filename,
    save_json,
)
from transcript_digest.utils.logger import logging


def load_transcript(transcript_path: str) -> VideoTranscript:
    """
    Load a transcript from disk.

    JSON files must hold a ``text`` field and may hold ``segments``; any
    other file is read as plain text.
    """
    path = Path(transcript_path)

    if path.suffix.lower() == ".json":
        data = load_json(str(path))
        if not isinstance(data, dict) or not data.get("text"):
            raise create_error(f"No transcript text found in {path}", ErrorType.NO_TRANSCRIPT)
        return VideoTranscript.model_validate(data)

    return VideoTranscript(text=path.read_text(encoding="utf-8"))


def save_summary(summary: SummaryResult, output_file: str = None) -> Path:
    """Save the summary to a JSON file."""
    if output_file is None:
        output_dir = Path(config.SUMMARIES_DIR)
        output_dir.mkdir(parents=True, exist_ok=True)
        output_file = output_dir / f"{sanitize_filename(summary.title)}_{get_timestamp()}_summary.json"
    else:
        output_file = Path(output_file)

    save_json(summary.model_dump(by_alias=True), str(output_file))

    logging.info(f"Summary saved to: {output_file}")
    return output_file


def summarize_transcript_file(
    transcript_path: str,
    url: str,
    title: str,
    duration: float = 0,
    summarizer_type: str = config.DEFAULT_SUMMARIZER,
    output_file: Optional[str] = None,
) -> SummaryResult:
    """
    Summarize a transcript stored on disk.

    Args:
        transcript_path: Path to a .json or plain-text transcript
        url: URL of the video the transcript belongs to
        title: Video title
        duration: Video duration in seconds
        summarizer_type: One of basic, advanced or llm
        output_file: Optional file path to save the summary

    Returns:
        SummaryResult object
    """
    transcript = load_transcript(transcript_path)
    metadata = VideoMetadata(title=title, duration=duration)

    summarizer = create_summarizer(summarizer_type)
    logging.info(f"Summarizing {transcript_path} with the {summarizer.name} summarizer")

    summary = summarizer.summarize(url, metadata, transcript)

    save_summary(summary, output_file)

    return summary


def main():
    """Main function to run the application from command line."""
    parser = argparse.ArgumentParser(description="Transcript Digest")
    parser.add_argument("transcript", help="Transcript file (.json with a 'text' field, or plain text)")
    parser.add_argument("--url", default="", help="URL of the original video")
    parser.add_argument("--title", default="Untitled video", help="Title of the video")
    parser.add_argument("--duration", type=float, default=0, help="Video duration in seconds")
    parser.add_argument("--summarizer", default=config.DEFAULT_SUMMARIZER,
                        choices=[t.value for t in SummarizerType],
                        help="Summarizer to use")
    parser.add_argument("--output", help="Output file path for the summary")

    args = parser.parse_args()

    # Load environment variables
    load_dotenv()
    config.initialize()

    try:
        summary = summarize_transcript_file(
            args.transcript,
            url=args.url,
            title=args.title,
            duration=args.duration,
            summarizer_type=args.summarizer,
            output_file=args.output,
        )
    except AppError as e:
        print(format_error_response(e))
        return 1

    print("\n" + "=" * 80)
    print(format_summary_markdown(summary))
    print("=" * 80)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
