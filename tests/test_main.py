"""
Tests for the command line entry point.
"""

import json
import pytest
from unittest.mock import patch

from transcript_digest.main import load_transcript, main, save_summary, summarize_transcript_file
from transcript_digest.core.summarizer import build_summary_result
from transcript_digest.utils.error_handling import AppError, ErrorType


def test_load_plain_text_transcript(tmp_path):
    """Test reading a plain text transcript."""
    path = tmp_path / "talk.txt"
    path.write_text("Hello there. General Kenobi.", encoding="utf-8")

    transcript = load_transcript(str(path))

    assert transcript.text == "Hello there. General Kenobi."
    assert transcript.segments == []


def test_load_json_transcript(tmp_path):
    """Test reading a JSON transcript with segments."""
    path = tmp_path / "talk.json"
    path.write_text(json.dumps({
        "text": "Hello there.",
        "segments": [{"text": "Hello there.", "start": 0, "duration": 1.5}],
    }), encoding="utf-8")

    transcript = load_transcript(str(path))

    assert transcript.text == "Hello there."
    assert transcript.segments[0].duration == 1.5


def test_load_json_transcript_without_text(tmp_path):
    """Test that JSON transcripts need a text field."""
    path = tmp_path / "talk.json"
    path.write_text(json.dumps({"segments": []}), encoding="utf-8")

    with pytest.raises(AppError) as exc_info:
        load_transcript(str(path))

    assert exc_info.value.error_type == ErrorType.NO_TRANSCRIPT


def test_summarize_transcript_file(tmp_path, video_url, long_transcript):
    """Test summarizing a file and saving the result."""
    transcript_path = tmp_path / "talk.txt"
    transcript_path.write_text(long_transcript.text, encoding="utf-8")
    output_path = tmp_path / "summary.json"

    summary = summarize_transcript_file(
        str(transcript_path),
        url=video_url,
        title="Pipelines",
        duration=120,
        summarizer_type="advanced",
        output_file=str(output_path),
    )

    saved = json.loads(output_path.read_text(encoding="utf-8"))
    assert saved["summaryText"] == summary.summary_text
    assert saved["keyPoints"] == summary.key_points
    assert saved["durationInMinutes"] == 2


def test_save_summary_default_location(video_url, metadata):
    """Test that summaries default to the summaries directory."""
    summary = build_summary_result(video_url, metadata, "Summary.", ["Point."], 2)

    output_file = save_summary(summary)

    assert output_file.exists()
    assert output_file.name.startswith("Test_Video_")


def test_main(tmp_path, capsys, long_transcript):
    """Test the command line run end to end."""
    transcript_path = tmp_path / "talk.txt"
    transcript_path.write_text(long_transcript.text, encoding="utf-8")
    output_path = tmp_path / "summary.json"

    argv = [
        "transcript-digest", str(transcript_path),
        "--title", "Pipelines",
        "--duration", "600",
        "--summarizer", "basic",
        "--output", str(output_path),
    ]
    with patch("sys.argv", argv):
        exit_code = main()

    assert exit_code == 0
    assert output_path.exists()
    assert "# Summary of: Pipelines" in capsys.readouterr().out


def test_main_reports_errors(tmp_path, capsys):
    """Test that application errors are printed, not raised."""
    transcript_path = tmp_path / "talk.json"
    transcript_path.write_text("{}", encoding="utf-8")

    with patch("sys.argv", ["transcript-digest", str(transcript_path)]):
        exit_code = main()

    assert exit_code == 1
    assert "No transcript text was provided" in capsys.readouterr().out
