"""
Basic Text Statistics
=====================
Character, word, sentence and syllable counts plus the averages every
readability formula is built from.

All counts are pure functions of the text; syllables come from the
analyzer's hyphenator. Averages return 0.0 when their denominator is zero.
"""

import re
from decimal import Decimal, ROUND_HALF_UP
from typing import Any

from ..hyphenation import HYPHEN

# Everything that is not an ASCII letter or whitespace
_NON_LETTER = re.compile(r"[^a-zA-Z\s]", re.ASCII)

# Terminal punctuation, optional closing quotes/brackets, a separator and a
# capital letter. Abbreviations followed by lowercase ("Dr. smith") are not
# boundaries.
_SENTENCE_BOUNDARY = re.compile(r"[.?!]['\\)\]]*[ |\n][A-Z]")


def round_half_up(value: float, digits: int = 0) -> float:
    """
    Round half away from zero at a fixed number of decimals.

    The decimal literal of the float is rounded, so 23.25 -> 23.3 and
    2.675 -> 2.68 regardless of binary representation.
    """
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def ensure_text(text: Any):
    """Reject anything that is not a str."""
    if not isinstance(text, str):
        raise TypeError(f"text must be str, not {type(text).__name__}")


class BasicStatsMixin:
    """Counting operations; requires a ``hyphenator`` attribute."""

    def char_count(self, text: str, ignore_spaces: bool = True) -> int:
        """Number of characters, without space characters by default."""
        ensure_text(text)
        if ignore_spaces:
            text = text.replace(" ", "")
        return len(text)

    def lexicon_count(self, text: str, remove_punctuation: bool = True) -> int:
        """
        Number of whitespace-delimited words.

        With remove_punctuation, everything except ASCII letters and
        whitespace is deleted first, so "don't" counts once and a word made
        only of non-ASCII letters disappears.
        """
        ensure_text(text)
        if remove_punctuation:
            text = _NON_LETTER.sub("", text)
        return len(text.split())

    def sentence_count(self, text: str) -> int:
        """Sentence boundaries plus one; never less than 1."""
        ensure_text(text)
        return len(_SENTENCE_BOUNDARY.findall(text)) + 1

    def syllable_count(self, text: str, language: str = "en_us") -> int:
        """Sum of per-token syllables of the lower-cased text."""
        ensure_text(text)
        if not text:
            return 0
        return sum(self._word_syllables(word, language) for word in text.lower().split())

    def _word_syllables(self, word: str, language: str) -> int:
        return self.hyphenator.hyphenate(word, language).count(HYPHEN) + 1

    def polysyllab_count(self, text: str, language: str = "en_us") -> int:
        """Number of tokens with three or more syllables."""
        ensure_text(text)
        return sum(1 for word in text.split() if self.syllable_count(word, language) >= 3)

    def avg_sentence_length(self, text: str) -> float:
        try:
            return round_half_up(self.lexicon_count(text) / self.sentence_count(text), 1)
        except ZeroDivisionError:
            return 0.0

    def avg_syllables_per_word(self, text: str, language: str = "en_us") -> float:
        syllables = self.syllable_count(text, language)
        try:
            return round_half_up(syllables / self.lexicon_count(text), 1)
        except ZeroDivisionError:
            return 0.0

    def avg_letter_per_word(self, text: str) -> float:
        try:
            return round_half_up(self.char_count(text) / self.lexicon_count(text), 2)
        except ZeroDivisionError:
            return 0.0

    def avg_sentence_per_word(self, text: str) -> float:
        try:
            return round_half_up(self.sentence_count(text) / self.lexicon_count(text), 2)
        except ZeroDivisionError:
            return 0.0
