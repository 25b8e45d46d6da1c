"""
Smart Sentence Splitter - Rule-based sentence segmentation for speech text.

Splits transcripts and text-to-speech requests into sentences, skipping
abbreviations and merging fragments that are too short to be useful.
"""

from .segmenters.sentence import SentenceSplitter, split_into_sentences
from .runtime.analyzer import TextAnalyzer, analyze_text

__version__ = "0.1.0"

__all__ = ['SentenceSplitter', 'split_into_sentences', 'TextAnalyzer', 'analyze_text']
