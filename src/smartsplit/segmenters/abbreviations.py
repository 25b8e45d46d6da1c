"""Static abbreviation table used by the sentence splitter."""

from typing import AbstractSet

# Case-sensitive tokens whose trailing period never ends a sentence.
ABBREVIATIONS: frozenset = frozenset({
    # Titles
    "Dr.", "Mr.", "Mrs.", "Ms.", "Prof.", "Sr.", "Jr.", "St.", "Rev.",
    "Gen.", "Capt.", "Lt.", "Sgt.", "Col.", "Gov.", "Sen.", "Rep.",
    # Organisations
    "Inc.", "Ltd.", "Co.", "Corp.", "Bros.",
    # Places
    "U.S.", "U.S.A.", "U.K.", "U.N.", "E.U.", "Mt.", "Ave.", "Blvd.", "Rd.",
    # Latin and common shorthand
    "vs.", "etc.", "e.g.", "i.e.", "approx.", "cf.", "al.", "Fig.", "Ph.D.",
    # Times of day
    "a.m.", "p.m.",
    # Months
    "Jan.", "Feb.", "Mar.", "Apr.", "Jun.", "Jul.", "Aug.", "Sep.", "Sept.",
    "Oct.", "Nov.", "Dec.",
})

# Opening punctuation that may precede an abbreviation, as in '("Dr.'.
OPENING_PUNCTUATION = "\"'([{“‘«"


def is_initial(word: str) -> bool:
    """True for a single uppercase letter followed by a period, e.g. ``"A."``."""
    return len(word) == 2 and word[1] == "." and word[0].isupper()


def is_abbreviation(word: str, abbreviations: AbstractSet[str] = ABBREVIATIONS) -> bool:
    """
    Check whether a word ending in a period is an abbreviation.

    Args:
        word: Whitespace-delimited token ending at the period
        abbreviations: Table to check against (case-sensitive)

    Returns:
        bool: True if the period must not be treated as a sentence terminator
    """
    word = word.lstrip(OPENING_PUNCTUATION)
    return word in abbreviations or is_initial(word)
