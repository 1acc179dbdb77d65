"""
Sentence segmentation and term statistics used by the extractive summarizers.
"""

import math
import re
from collections import Counter
from typing import Iterable, List, NamedTuple, Sequence, Tuple


STOP_WORDS = frozenset({
    "the", "a", "an", "and", "or", "but", "is", "are", "was", "were",
    "in", "on", "at", "to", "for", "with", "by", "about", "like", "of",
    "this", "that", "i", "you", "he", "she", "they", "we", "it",
})

# Heuristic: abbreviations and decimals split too.
SENTENCE_PATTERN = re.compile(r"[^.!?]+[.!?]+")
NON_WORD_PATTERN = re.compile(r"[^A-Za-z0-9_]")

PARAGRAPH_TARGET_COUNT = 10


class Segmentation(NamedTuple):
    """Words and sentences of a transcript."""
    words: Tuple[str, ...]
    sentences: Tuple[str, ...]

    @property
    def word_count(self) -> int:
        return len(self.words)


def split_words(text: str) -> List[str]:
    """Split text into whitespace-delimited tokens."""
    return text.split()


def split_sentences(text: str) -> List[str]:
    """
    Split text into sentences ending in one or more of ``. ! ?``.

    Falls back to the whole text as a single sentence when nothing matches.
    Trailing text without a terminator is dropped.
    """
    return SENTENCE_PATTERN.findall(text) or [text]


def segment_transcript(text: str) -> Segmentation:
    """Split raw transcript text into words and sentences."""
    return Segmentation(tuple(split_words(text)), tuple(split_sentences(text)))


def normalize_term(word: str) -> str:
    """Lower-case a word and strip everything except ASCII letters, digits and underscores."""
    return NON_WORD_PATTERN.sub("", word.lower())


def is_term(normalized: str) -> bool:
    """Check whether a normalized word takes part in scoring."""
    return len(normalized) > 2 and normalized not in STOP_WORDS


def extract_terms(words: Iterable[str]) -> List[str]:
    """Normalize words and keep only the ones that qualify as terms."""
    terms = []
    for word in words:
        normalized = normalize_term(word)
        if is_term(normalized):
            terms.append(normalized)
    return terms


def sentence_terms(sentence: str) -> List[str]:
    return extract_terms(split_words(sentence))


def term_frequency(words: Iterable[str]) -> Counter:
    """Count term occurrences over a sequence of raw words."""
    return Counter(extract_terms(words))


def build_paragraphs(sentences: Sequence[str], target_count: int = PARAGRAPH_TARGET_COUNT) -> List[List[str]]:
    """
    Group consecutive sentences into roughly ``target_count`` paragraphs.

    Each paragraph holds ``ceil(len(sentences) / target_count)`` sentences,
    the last one possibly fewer.
    """
    if not sentences:
        return []

    chunk_size = math.ceil(len(sentences) / target_count)
    return [list(sentences[i:i + chunk_size]) for i in range(0, len(sentences), chunk_size)]


def document_frequency(paragraphs: Iterable[Sequence[str]]) -> Counter:
    """Count the number of paragraphs each term appears in."""
    frequency = Counter()
    for paragraph in paragraphs:
        seen = set()
        for sentence in paragraph:
            seen.update(sentence_terms(sentence))
        frequency.update(seen)
    return frequency
