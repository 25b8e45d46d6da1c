"""Text analyzer reporting sentences and their word counts."""

from typing import Optional
from ..config.schema import SplitConfig
from ..core.abc import Logger, Meter, Segmenter
from ..core.types import TextAnalysis
from ..core.util import count_words
from ..segmenters.sentence import SentenceSplitter

class TextAnalyzer:
    """
    Thin view over a segmenter that adds per-sentence word counts.
    Used by callers that size speech synthesis chunks.
    """

    def __init__(self, *, config: Optional[SplitConfig] = None,
                 segmenter: Optional[Segmenter] = None,
                 logger: Optional[Logger] = None, meter: Optional[Meter] = None):
        """
        Initialize analyzer.

        Args:
            config: Split configuration for the default SentenceSplitter
            segmenter: Optional segmenter (fallback to SentenceSplitter(config))
            logger: Optional structured logger
            meter: Optional metrics collector
        """
        self.segmenter = segmenter or SentenceSplitter(config, logger=logger)
        self.log = logger
        self.meter = meter

    def analyze(self, text: str) -> TextAnalysis:
        """
        Split text and count the words of each sentence.

        Args:
            text: Input text

        Returns:
            TextAnalysis: sentences identical to the segmenter output, with parallel word counts
        """
        sentences = self.segmenter.segment(text)
        word_counts = [count_words(sentence) for sentence in sentences]
        analysis = TextAnalysis(sentences=sentences, word_counts=word_counts)

        if self.meter:
            self.meter.inc("smartsplit.analyze_calls")
            self.meter.observe("smartsplit.sentences", analysis.sentence_count)
            self.meter.observe("smartsplit.words", analysis.total_words)
        if not sentences and self.log:
            self.log.info("no_sentences", text_length=len(text))

        return analysis

def analyze_text(text: str, min_words_per_sentence: Optional[int] = 4) -> TextAnalysis:
    """Analyze text with a one-off analyzer; missing or non-positive thresholds use the default."""
    config = SplitConfig(min_words_per_sentence=min_words_per_sentence)
    return TextAnalyzer(config=config).analyze(text)
