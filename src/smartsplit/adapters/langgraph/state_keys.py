"""Default state key names for LangGraph integration."""

# Text to split, e.g. a transcript or a TTS request
TTS_TEXT = "tts_text"

# Keys written by the split node
SENTENCES = "sentences"
WORD_COUNTS = "word_counts"
