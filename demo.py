#!/usr/bin/env python3
"""
Smart Sentence Splitter Demo - Shows sentence splitting for TTS chunking.
Compares thresholds on a short transcript and prints per-sentence word counts.
"""

import sys
from pathlib import Path

# Add src to path so we can import smartsplit
sys.path.insert(0, str(Path(__file__).parent / "src"))

from smartsplit.config.schema import SplitConfig
from smartsplit.runtime.analyzer import TextAnalyzer

class SimpleLogger:
    """Simple console logger for demo."""
    
    def info(self, msg: str, **kv):
        details = " ".join(f"{k}={v}" for k, v in kv.items())
        print(f"INFO: {msg} {details}")
        
    def warn(self, msg: str, **kv):
        details = " ".join(f"{k}={v}" for k, v in kv.items())
        print(f"WARN: {msg} {details}")
        
    def error(self, msg: str, **kv):
        details = " ".join(f"{k}={v}" for k, v in kv.items())
        print(f"ERROR: {msg} {details}")

TRANSCRIPT = (
    "Okay. So. Dr. Patel from the U.S. office joined the call at ten. "
    "She walked us through the Q3 numbers, i.e. revenue and churn. "
    "Any questions? None. "
    "We agreed that J. R. Smith will send the summary tomorrow morning. Thanks"
)

def main():
    logger = SimpleLogger()
    
    print("🗣️  Transcript:")
    print(f"   {TRANSCRIPT}\n")
    
    for min_words in (1, 4, 8):
        analyzer = TextAnalyzer(config=SplitConfig(min_words_per_sentence=min_words), logger=logger)
        analysis = analyzer.analyze(TRANSCRIPT)
        
        print(f"\n✂️  min_words_per_sentence={min_words}")
        for sentence, words in zip(analysis.sentences, analysis.word_counts):
            print(f"   [{words:>2}] {sentence}")
        print(f"   📊 {analysis.summary()}")

if __name__ == "__main__":
    main()
