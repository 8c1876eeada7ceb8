"""
Difficult-word classification.

A difficult word is a token missing from the language's easy-word list with
more than one syllable. Tokens are the lower-cased text stripped of
everything but ASCII letters, digits and spaces.
"""

import re
from typing import List, Set, Union

from .basic_stats import ensure_text

_NON_WORD = re.compile(r"[^0-9a-z ]")


class DifficultWordsMixin:
    """Requires ``dictionaries`` and ``hyphenator`` attributes."""

    def difficult_words(
        self,
        text: str,
        language: str = "en_us",
        return_words: bool = False
    ) -> Union[int, Set[str]]:
        """
        Count the unique difficult words, or return them.

        Args:
            text: Text to analyze
            language: Dictionary and hyphenation language
            return_words: Return the set of words instead of its size

        Raises:
            DictionaryNotFoundError: no easy-word list for the language
        """
        words = self._difficult_word_set(text, language)
        return words if return_words else len(words)

    def difficult_words_list(self, text: str, language: str = "en_us") -> List[str]:
        """Difficult words in alphabetical order."""
        return sorted(self._difficult_word_set(text, language))

    def _difficult_word_set(self, text: str, language: str) -> Set[str]:
        ensure_text(text)
        easy_words = self.dictionaries.load(language)

        difficult = set()
        for word in _NON_WORD.sub("", text.lower()).split():
            if word in easy_words or word in difficult:
                continue
            if self._word_syllables(word, language) > 1:
                difficult.add(word)
        return difficult
