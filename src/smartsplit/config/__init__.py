"""Splitter configuration: pydantic schema and YAML loading."""

from .schema import SplitConfig, DEFAULT_MIN_WORDS_PER_SENTENCE
from .loader import load_config, load_config_from_string, ConfigLoadError

__all__ = ['SplitConfig', 'DEFAULT_MIN_WORDS_PER_SENTENCE',
           'load_config', 'load_config_from_string', 'ConfigLoadError']
