"""
Transcript Digest Application.

This application condenses long spoken-word transcripts into a short summary
and a handful of key points using extractive scoring, with an optional hosted
model summarizer.
"""

from transcript_digest.config import config

__version__ = config.APP_VERSION
