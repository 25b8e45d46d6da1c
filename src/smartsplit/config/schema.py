"""Pydantic schema for sentence splitting configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_MIN_WORDS_PER_SENTENCE = 4

class SplitConfig(BaseModel):
    """Tunables for the sentence splitter."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    min_words_per_sentence: int = Field(
        default=DEFAULT_MIN_WORDS_PER_SENTENCE,
        description="Sentences below this word count are merged with a neighbour",
    )

    @field_validator("min_words_per_sentence", mode="before")
    @classmethod
    def _default_if_missing(cls, value):
        if value is None:
            return DEFAULT_MIN_WORDS_PER_SENTENCE
        return value

    @field_validator("min_words_per_sentence")
    @classmethod
    def _default_if_not_positive(cls, value: int) -> int:
        # Non-positive thresholds fall back to the default instead of failing.
        if value <= 0:
            return DEFAULT_MIN_WORDS_PER_SENTENCE
        return value
