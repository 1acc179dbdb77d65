"""
Module for extractive summarization of transcripts.

Sentences are scored by lexical importance and the best ones are kept as the
summary. Two scorers are available: ``BasicSummarizer`` weighs sentences by
raw term frequency, ``AdvancedSummarizer`` by TF-IDF computed over synthetic
paragraphs.
"""

import math
import traceback
from abc import ABC, abstractmethod
from typing import Dict, List, Sequence, Tuple

from transcript_digest.core.text_stats import (
    Segmentation,
    build_paragraphs,
    document_frequency,
    segment_transcript,
    sentence_terms,
    split_words,
    term_frequency,
)
from transcript_digest.models.schemas import SummaryResult, VideoMetadata, VideoTranscript
from transcript_digest.utils.error_handling import SummarizationError, log_diagnostic_info
from transcript_digest.utils.logger import logging


# Below this many words statistical scoring is meaningless
MIN_WORDS_FOR_SCORING = 100
MAX_KEY_POINTS = 5


def minutes_from_seconds(seconds: float) -> int:
    return math.ceil(seconds / 60)


def build_summary_result(
    video_url: str,
    metadata: VideoMetadata,
    summary_text: str,
    key_points: List[str],
    transcript_length: int,
) -> SummaryResult:
    """
    Assemble the SummaryResult shared by every summarizer.

    Args:
        video_url: URL of the summarized video
        metadata: Video metadata (title and duration in seconds are used)
        summary_text: Final summary text
        key_points: Ordered key points
        transcript_length: Number of words in the transcript

    Returns:
        SummaryResult object
    """
    return SummaryResult(
        title=metadata.title,
        original_video_url=video_url,
        summary_text=summary_text,
        key_points=key_points,
        duration_in_minutes=minutes_from_seconds(metadata.duration),
        transcript_length=transcript_length,
    )


def rank_sentences(scores: Dict[int, float]) -> List[int]:
    """Sentence indexes by descending score; equal scores keep sentence order."""
    return [index for index, _ in sorted(scores.items(), key=lambda item: item[1], reverse=True)]


def select_summary(sentences: Sequence[str], ranked: List[int], count: int) -> Tuple[List[int], str]:
    """Take the top ``count`` ranked sentences and join them in transcript order."""
    selected = sorted(ranked[:count])
    return selected, " ".join(sentences[index] for index in selected)


def dedupe_trimmed(sentences: List[str]) -> List[str]:
    """Trim sentences and drop exact repeats, keeping the first occurrence."""
    seen = set()
    unique = []
    for sentence in sentences:
        trimmed = sentence.strip()
        if trimmed not in seen:
            seen.add(trimmed)
            unique.append(trimmed)
    return unique


class BaseSummarizer(ABC):
    """Interface shared by all summarizers."""

    name = "base"

    @abstractmethod
    def summarize(self, video_url: str, metadata: VideoMetadata, transcript: VideoTranscript) -> SummaryResult:
        """
        Summarize a video transcript.

        Args:
            video_url: URL of the video
            metadata: Video metadata
            transcript: Video transcript

        Returns:
            SummaryResult object

        Raises:
            SummarizationError: If summarization fails for any reason
        """

    async def summarize_video(
        self, video_url: str, metadata: VideoMetadata, transcript: VideoTranscript
    ) -> SummaryResult:
        """Async entry point for callers running in an event loop."""
        return self.summarize(video_url, metadata, transcript)


class ExtractiveSummarizer(BaseSummarizer):
    """Pipeline shared by the extractive scorers: segment, score, select, assemble."""

    summary_ratio = 0.2

    def summarize(self, video_url: str, metadata: VideoMetadata, transcript: VideoTranscript) -> SummaryResult:
        try:
            full_text = transcript.text
            document = segment_transcript(full_text)

            if document.word_count < MIN_WORDS_FOR_SCORING:
                logging.info(
                    f"Transcript has {document.word_count} words, returning it unsummarized"
                )
                return build_summary_result(
                    video_url, metadata, full_text, [full_text], document.word_count
                )

            scores = self.score_sentences(document)
            ranked = rank_sentences(scores)

            target_count = max(3, math.ceil(len(document.sentences) * self.summary_ratio))
            selected, summary_text = select_summary(document.sentences, ranked, target_count)
            key_points = self.extract_key_points(document, scores, ranked, selected)

            log_diagnostic_info({
                "summarizer": self.name,
                "words": document.word_count,
                "sentences": len(document.sentences),
                "summary_sentences": selected,
                "key_points": len(key_points),
            })

            return build_summary_result(
                video_url, metadata, summary_text, key_points, document.word_count
            )
        except Exception as e:
            logging.error(f"Error in {self.name} summarization: {str(e)}")
            logging.error(traceback.format_exc())
            raise SummarizationError("Failed to summarize video") from None

    @abstractmethod
    def score_sentences(self, document: Segmentation) -> Dict[int, float]:
        """Score every sentence of the document."""

    @abstractmethod
    def extract_key_points(
        self,
        document: Segmentation,
        scores: Dict[int, float],
        ranked: List[int],
        selected: List[int],
    ) -> List[str]:
        """Pick key points given sentence scores and the summary selection."""


class BasicSummarizer(ExtractiveSummarizer):
    """Scores sentences by the raw frequency of their terms."""

    name = "basic"
    summary_ratio = 0.2

    def score_sentences(self, document: Segmentation) -> Dict[int, float]:
        frequency = term_frequency(document.words)
        sentence_count = len(document.sentences)

        scores = {}
        for index, sentence in enumerate(document.sentences):
            word_count = len(split_words(sentence))
            score = sum(frequency[term] for term in sentence_terms(sentence))
            score /= max(1, word_count)

            # Opening and closing sentences tend to carry the topic
            if index < sentence_count * 0.2:
                score *= 1.2
            elif index > sentence_count * 0.8:
                score *= 1.1

            scores[index] = score

        return scores

    def extract_key_points(self, document, scores, ranked, selected):
        key_point_count = min(MAX_KEY_POINTS, math.ceil(len(document.sentences) * 0.1))
        return dedupe_trimmed([document.sentences[index] for index in ranked[:key_point_count]])


class AdvancedSummarizer(ExtractiveSummarizer):
    """
    Scores sentences by TF-IDF.

    Document frequency is counted over roughly ten paragraphs of consecutive
    sentences. Key points favour sentences whose terms the summary does not
    already cover.
    """

    name = "advanced"
    summary_ratio = 0.15

    def score_sentences(self, document: Segmentation) -> Dict[int, float]:
        paragraphs = build_paragraphs(document.sentences)
        frequency = term_frequency(document.words)
        doc_frequency = document_frequency(paragraphs)
        paragraph_count = len(paragraphs)
        sentence_count = len(document.sentences)

        scores = {}
        for index, sentence in enumerate(document.sentences):
            word_count = len(split_words(sentence))

            score = 0.0
            for term in sentence_terms(sentence):
                idf = math.log(paragraph_count / max(1, doc_frequency[term]))
                score += frequency[term] * idf
            score /= max(1, word_count)

            if index < sentence_count * 0.1:
                score *= 1.25
            elif index > sentence_count * 0.85:
                score *= 1.1

            # Penalize fragments
            if word_count < 5:
                score *= 0.7

            scores[index] = score

        return scores

    def extract_key_points(self, document, scores, ranked, selected):
        summary_words = set()
        for index in selected:
            summary_words.update(sentence_terms(document.sentences[index]))

        chosen = set(selected)
        key_point_scores = {}
        for index, sentence in enumerate(document.sentences):
            if index in chosen:
                continue

            terms = sentence_terms(sentence)
            unique_count = sum(1 for term in terms if term not in summary_words)
            unique_ratio = unique_count / max(1, len(terms))
            key_point_scores[index] = unique_ratio * scores[index]

        if key_point_scores:
            indexes = rank_sentences(key_point_scores)[:MAX_KEY_POINTS]
        else:
            # Every sentence made it into the summary
            indexes = ranked[:MAX_KEY_POINTS]

        return [document.sentences[index].strip() for index in indexes]
