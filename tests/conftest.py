"""Test configuration and fixtures."""

import pytest
from pathlib import Path
import tempfile

from smartsplit.config.schema import SplitConfig
from smartsplit.runtime.analyzer import TextAnalyzer
from smartsplit.segmenters.sentence import SentenceSplitter


@pytest.fixture
def splitter():
    """Provide a splitter with the default threshold."""
    return SentenceSplitter(SplitConfig())


@pytest.fixture
def analyzer():
    """Provide an analyzer with the default threshold."""
    return TextAnalyzer(config=SplitConfig())


@pytest.fixture
def sample_config_yaml():
    """Provide a sample splitter config YAML for testing."""
    return """
# Threshold tuned for paced speech synthesis
min_words_per_sentence: 6
"""


@pytest.fixture
def temp_config_file(sample_config_yaml):
    """Provide a temporary config file for testing."""
    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
        f.write(sample_config_yaml)
        temp_path = Path(f.name)
    
    yield temp_path
    
    # Cleanup
    if temp_path.exists():
        temp_path.unlink()


class SimpleTestLogger:
    """Simple logger for testing that captures messages."""
    
    def __init__(self):
        self.messages = []
    
    def info(self, msg: str, **kv):
        self.messages.append(('info', msg, kv))
    
    def warn(self, msg: str, **kv):
        self.messages.append(('warn', msg, kv))
    
    def error(self, msg: str, **kv):
        self.messages.append(('error', msg, kv))
    
    def clear(self):
        """Clear captured messages."""
        self.messages.clear()


class SimpleTestMeter:
    """Simple meter for testing that captures counters and observations."""
    
    def __init__(self):
        self.counters = {}
        self.observations = []
    
    def inc(self, name: str, amount: int = 1, **tags):
        self.counters[name] = self.counters.get(name, 0) + amount
    
    def observe(self, name: str, value: float, **tags):
        self.observations.append((name, value))


@pytest.fixture
def test_logger():
    """Provide a test logger that captures messages."""
    return SimpleTestLogger()


@pytest.fixture
def test_meter():
    """Provide a test meter that captures metrics."""
    return SimpleTestMeter()
