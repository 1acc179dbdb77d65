"""
Helper utility functions for the transcript digest application.
"""

import json
import re
import time
from typing import Dict, Any

from transcript_digest.models.schemas import SummaryResult


def sanitize_filename(filename: str) -> str:
    """
    Sanitize a string to be used as a filename.

    Args:
        filename: The filename to sanitize

    Returns:
        Sanitized filename
    """
    # Remove invalid characters
    sanitized = re.sub(r'[\\/*?:"<>|]', "_", filename)
    # Replace spaces with underscores
    sanitized = sanitized.replace(" ", "_")
    # Limit length
    if len(sanitized) > 100:
        sanitized = sanitized[:100]
    return sanitized


def get_timestamp() -> str:
    """
    Get the current timestamp in a readable format.

    Returns:
        Formatted timestamp string
    """
    return time.strftime("%Y%m%d_%H%M%S")


def save_json(data: Dict[str, Any], filepath: str, pretty: bool = True) -> None:
    """
    Save data to a JSON file.

    Args:
        data: Data to save
        filepath: Path to save the file
        pretty: Whether to format the JSON for readability
    """
    with open(filepath, 'w', encoding='utf-8') as f:
        if pretty:
            json.dump(data, f, indent=2, ensure_ascii=False)
        else:
            json.dump(data, f, ensure_ascii=False)


def load_json(filepath: str) -> Dict[str, Any]:
    """
    Load data from a JSON file.

    Args:
        filepath: Path to the JSON file

    Returns:
        Loaded JSON data
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        return json.load(f)


def format_summary_markdown(summary: SummaryResult) -> str:
    """
    Render a summary as Markdown.

    Args:
        summary: SummaryResult to render

    Returns:
        Markdown document
    """
    lines = [
        f"# Summary of: {summary.title}",
        f"\nOriginal video: {summary.original_video_url}",
        f"\nVideo length: {summary.duration_in_minutes} minutes",
        "\n## Summary",
        f"\n{summary.summary_text}",
        "\n## Key Points",
    ]
    lines.extend(f"\n- {point}" for point in summary.key_points)
    lines.append(f"\n\n*Transcript length: {summary.transcript_length} words*")
    return "".join(lines)
