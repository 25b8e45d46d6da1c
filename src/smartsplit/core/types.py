"""Result structures for text analysis."""

from dataclasses import dataclass, field
from typing import List, Dict
import numpy as np

@dataclass
class TextAnalysis:
    """Sentences of a text together with their word counts."""
    sentences: List[str] = field(default_factory=list)
    word_counts: List[int] = field(default_factory=list)   # word_counts[i] belongs to sentences[i]
    
    @property
    def sentence_count(self) -> int:
        return len(self.sentences)
    
    @property
    def total_words(self) -> int:
        """Total number of words across all sentences."""
        return sum(self.word_counts)
    
    def summary(self) -> Dict[str, float]:
        """
        Words-per-sentence statistics for chunk sizing.
        
        Returns:
            Dict[str, float]: avg/min/max words per sentence, empty when there are no sentences
        """
        if not self.word_counts:
            return {}
        counts = np.asarray(self.word_counts, dtype=float)
        return {
            "avg_words": float(counts.mean()),
            "min_words": float(counts.min()),
            "max_words": float(counts.max()),
        }
