"""LangGraph node factories for sentence splitting."""

from langchain_core.runnables import RunnableLambda
from ...runtime.analyzer import TextAnalyzer
from .state_keys import TTS_TEXT, SENTENCES, WORD_COUNTS

def make_split_node(analyzer: TextAnalyzer, text_key: str = TTS_TEXT):
    """
    Create a LangGraph node that splits a state text field into sentences.
    
    Args:
        analyzer: Configured TextAnalyzer instance
        text_key: State key containing the text to split
        
    Returns:
        RunnableLambda: Node that adds sentences and word counts to state
    """
    def _split_text(state):
        text = state.get(text_key) or ""
        result = analyzer.analyze(text)
        return {SENTENCES: result.sentences, WORD_COUNTS: result.word_counts}
    
    return RunnableLambda(_split_text)
