"""Deterministic sentence splitter with abbreviation guard and short-sentence merging."""

from typing import AbstractSet, List, Optional
from ..config.schema import SplitConfig
from ..core.abc import Logger
from ..core.util import count_words
from .abbreviations import ABBREVIATIONS, is_abbreviation

TERMINATORS = ".!?"
CLOSING_PUNCTUATION = "\"')]}”’»"


def _preceding_word(text: str, end: int) -> str:
    """Return the maximal run of non-whitespace characters ending at ``end``."""
    start = end
    while start > 0 and not text[start - 1].isspace():
        start -= 1
    return text[start:end]


def find_sentence_candidates(text: str,
                             abbreviations: AbstractSet[str] = ABBREVIATIONS) -> List[str]:
    """
    First pass: cut text at confirmed sentence boundaries.

    A boundary is a terminator optionally followed by closing quotes or
    brackets, then whitespace or end of input. Periods ending a known
    abbreviation or a single initial are skipped.

    Args:
        text: Input text
        abbreviations: Abbreviation table for the guard

    Returns:
        List[str]: Trimmed, non-empty sentence candidates in input order
    """
    text = text.strip()
    candidates: List[str] = []
    n = len(text)
    start = 0
    i = 0

    while i < n:
        char = text[i]
        if char not in TERMINATORS:
            i += 1
            continue

        end = i + 1
        while end < n and text[end] in CLOSING_PUNCTUATION:
            end += 1

        if end < n and not text[end].isspace():
            i += 1
            continue

        if char == "." and is_abbreviation(_preceding_word(text, i + 1), abbreviations):
            i = end
            continue

        sentence = text[start:end].strip()
        if sentence:
            candidates.append(sentence)
        start = end
        i = end

    tail = text[start:].strip()
    if tail:
        candidates.append(tail)

    return candidates


def merge_short_sentences(candidates: List[str], min_words: int) -> List[str]:
    """
    Second pass: fold sentences below ``min_words`` into their neighbours.

    A candidate long enough on its own is always emitted on its own, after any
    pending short fragments. Short candidates accumulate forward until the
    accumulated text reaches the threshold. A remainder still short at the end
    is appended to the last emitted sentence.

    Args:
        candidates: Output of find_sentence_candidates
        min_words: Minimum words per sentence

    Returns:
        List[str]: Merged sentences
    """
    merged: List[str] = []
    pending: List[str] = []
    pending_words = 0

    for candidate in candidates:
        words = count_words(candidate)

        if words >= min_words:
            if pending:
                merged.append(" ".join(pending))
                pending, pending_words = [], 0
            merged.append(candidate)
            continue

        pending.append(candidate)
        pending_words += words
        if pending_words >= min_words:
            merged.append(" ".join(pending))
            pending, pending_words = [], 0

    if pending:
        remainder = " ".join(pending)
        if merged:
            merged[-1] = f"{merged[-1]} {remainder}"
        else:
            merged.append(remainder)

    return merged


class SentenceSplitter:
    """
    Rule-based sentence splitter tuned for transcribed speech and TTS requests.
    Stateless: one instance can be shared across threads.
    """

    def __init__(self, config: Optional[SplitConfig] = None, *,
                 abbreviations: AbstractSet[str] = ABBREVIATIONS,
                 logger: Optional[Logger] = None):
        """
        Initialize splitter.

        Args:
            config: Split configuration (defaults to SplitConfig())
            abbreviations: Immutable abbreviation table for the boundary guard
            logger: Optional structured logger
        """
        self.config = config or SplitConfig()
        self.abbreviations = frozenset(abbreviations)
        self.log = logger

    @property
    def min_words_per_sentence(self) -> int:
        return self.config.min_words_per_sentence

    def split(self, text: str) -> List[str]:
        """
        Split text into sentences of at least ``min_words_per_sentence`` words.

        Args:
            text: Input text, may be empty or whitespace-only

        Returns:
            List[str]: Ordered, trimmed, non-empty sentences; empty for blank input
        """
        if not text.strip():
            return []

        candidates = find_sentence_candidates(text, self.abbreviations)
        sentences = merge_short_sentences(candidates, self.min_words_per_sentence)

        if self.log:
            self.log.info("sentence_split",
                          candidates=len(candidates),
                          sentences=len(sentences),
                          min_words=self.min_words_per_sentence)
        return sentences

    def segment(self, text: str) -> List[str]:
        """Segmenter protocol entry point, same as split()."""
        return self.split(text)


def split_into_sentences(text: str, min_words_per_sentence: Optional[int] = 4) -> List[str]:
    """Split text with a one-off splitter; missing or non-positive thresholds use the default."""
    config = SplitConfig(min_words_per_sentence=min_words_per_sentence)
    return SentenceSplitter(config).split(text)
