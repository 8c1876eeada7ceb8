"""
TextAnalyzer facade.

One object exposing every counting, classification, formula and consensus
operation, wired to its two collaborators:

- ``dictionaries``: anything with ``load(language) -> set of easy words``
  (normally a DictionaryCache)
- ``hyphenator``: anything with ``hyphenate(word, language) -> str`` where
  breaks are marked with ``-`` (normally a Hyphenator)

The analyzer keeps no other state, so one instance can serve any number of
threads.
"""

from typing import Optional

from ..dictionaries import DictionaryCache
from ..hyphenation import Hyphenator
from .basic_stats import BasicStatsMixin
from .difficult_words import DifficultWordsMixin
from .formulas import ReadabilityFormulasMixin
from .consensus import ConsensusMixin


class TextAnalyzer(
    BasicStatsMixin,
    DifficultWordsMixin,
    ReadabilityFormulasMixin,
    ConsensusMixin,
):
    """Readability metrics over injected dictionary and hyphenation caches."""

    def __init__(
        self,
        dictionaries: Optional[DictionaryCache] = None,
        hyphenator: Optional[Hyphenator] = None
    ):
        self.dictionaries = dictionaries if dictionaries is not None else DictionaryCache()
        self.hyphenator = hyphenator if hyphenator is not None else Hyphenator()

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(dictionaries={self.dictionaries!r}, "
                f"hyphenator={self.hyphenator!r})")
