"""
textmetrics
===========
Readability and text-complexity metrics.

Counts of characters, words, syllables and sentences; Flesch Reading Ease,
Flesch-Kincaid, SMOG, Coleman-Liau, ARI, Linsear Write, Dale-Chall, Gunning
Fog, LIX, FORCAST, Powers-Sumner-Kearl and SPACHE; and a consensus grade
level (text_standard) combining them.

The module-level functions run on a lazily created default TextAnalyzer.
Build your own TextAnalyzer to control the dictionary and hyphenation
caches (for example, one per test).

    >>> import textmetrics
    >>> textmetrics.lexicon_count("Hello, world!")
    2
"""

from typing import List, Optional, Set, Union
from pathlib import Path

from .config_logging import (
    TextMetricsError,
    DictionaryNotFoundError,
    UnsupportedLanguageError,
)
from .dictionaries import DictionaryCache
from .hyphenation import Hyphenator
from .readability.analyzer import TextAnalyzer

__version__ = "1.0.0"
__author__ = "textmetrics"

__all__ = [
    'TextAnalyzer', 'DictionaryCache', 'Hyphenator',
    'TextMetricsError', 'DictionaryNotFoundError', 'UnsupportedLanguageError',
    'get_analyzer', 'reset_analyzer', 'get_status',
    'load_dictionary', 'clear_dictionary_cache', 'get_dictionary_path',
    'set_dictionary_path', 'supported_languages',
    'char_count', 'lexicon_count', 'syllable_count', 'sentence_count',
    'polysyllab_count', 'avg_sentence_length', 'avg_syllables_per_word',
    'avg_letter_per_word', 'avg_sentence_per_word',
    'difficult_words', 'difficult_words_list',
    'flesch_reading_ease', 'flesch_kincaid_grade', 'smog_index',
    'coleman_liau_index', 'automated_readability_index',
    'linsear_write_formula', 'dale_chall_readability_score', 'gunning_fog',
    'lix', 'forcast', 'powers_sumner_kearl', 'spache', 'text_standard',
]

# Lazy default analyzer
_analyzer: Optional[TextAnalyzer] = None


def get_analyzer() -> TextAnalyzer:
    """Get the shared TextAnalyzer instance (lazy loaded)."""
    global _analyzer
    if _analyzer is None:
        _analyzer = TextAnalyzer()
    return _analyzer


def reset_analyzer():
    """Drop the shared analyzer and its caches (for testing)."""
    global _analyzer
    _analyzer = None
    from .readability import reset_calculator
    reset_calculator()


def get_status() -> dict:
    """Status of the default analyzer's collaborators."""
    analyzer = get_analyzer()
    return {
        'version': __version__,
        'dictionaries': analyzer.dictionaries.get_status(),
        'hyphenation': analyzer.hyphenator.get_status(),
    }


# =============================================================================
# DICTIONARIES
# =============================================================================

def load_dictionary(language: str) -> frozenset:
    """Easy-word set for a language (cached)."""
    return get_analyzer().dictionaries.load(language)


def clear_dictionary_cache():
    """Drop every cached easy-word set of the default analyzer."""
    get_analyzer().dictionaries.clear()


def get_dictionary_path() -> Path:
    return get_analyzer().dictionaries.path


def set_dictionary_path(path: Union[str, Path]):
    """Read easy-word lists from another directory (clears the cache)."""
    get_analyzer().dictionaries.path = path


def supported_languages() -> List[str]:
    """Languages with an easy-word list under the current dictionary path."""
    return get_analyzer().dictionaries.supported_languages()


# =============================================================================
# BASIC STATISTICS
# =============================================================================

def char_count(text: str, ignore_spaces: bool = True) -> int:
    return get_analyzer().char_count(text, ignore_spaces)


def lexicon_count(text: str, remove_punctuation: bool = True) -> int:
    return get_analyzer().lexicon_count(text, remove_punctuation)


def syllable_count(text: str, language: str = "en_us") -> int:
    return get_analyzer().syllable_count(text, language)


def sentence_count(text: str) -> int:
    return get_analyzer().sentence_count(text)


def polysyllab_count(text: str, language: str = "en_us") -> int:
    return get_analyzer().polysyllab_count(text, language)


def avg_sentence_length(text: str) -> float:
    return get_analyzer().avg_sentence_length(text)


def avg_syllables_per_word(text: str, language: str = "en_us") -> float:
    return get_analyzer().avg_syllables_per_word(text, language)


def avg_letter_per_word(text: str) -> float:
    return get_analyzer().avg_letter_per_word(text)


def avg_sentence_per_word(text: str) -> float:
    return get_analyzer().avg_sentence_per_word(text)


def difficult_words(
    text: str,
    language: str = "en_us",
    return_words: bool = False
) -> Union[int, Set[str]]:
    return get_analyzer().difficult_words(text, language, return_words)


def difficult_words_list(text: str, language: str = "en_us") -> List[str]:
    return get_analyzer().difficult_words_list(text, language)


# =============================================================================
# READABILITY FORMULAS
# =============================================================================

def flesch_reading_ease(text: str, language: str = "en_us") -> float:
    return get_analyzer().flesch_reading_ease(text, language)


def flesch_kincaid_grade(text: str, language: str = "en_us") -> float:
    return get_analyzer().flesch_kincaid_grade(text, language)


def smog_index(text: str, language: str = "en_us") -> float:
    return get_analyzer().smog_index(text, language)


def coleman_liau_index(text: str, language: str = "en_us") -> float:
    return get_analyzer().coleman_liau_index(text, language)


def automated_readability_index(text: str, language: str = "en_us") -> float:
    return get_analyzer().automated_readability_index(text, language)


def linsear_write_formula(text: str, language: str = "en_us") -> float:
    return get_analyzer().linsear_write_formula(text, language)


def dale_chall_readability_score(text: str, language: str = "en_us") -> float:
    return get_analyzer().dale_chall_readability_score(text, language)


def gunning_fog(text: str, language: str = "en_us") -> float:
    return get_analyzer().gunning_fog(text, language)


def lix(text: str, language: str = "en_us") -> float:
    return get_analyzer().lix(text, language)


def forcast(text: str, language: str = "en_us") -> int:
    return get_analyzer().forcast(text, language)


def powers_sumner_kearl(text: str, language: str = "en_us") -> float:
    return get_analyzer().powers_sumner_kearl(text, language)


def spache(text: str, language: str = "en_us") -> float:
    return get_analyzer().spache(text, language)


def text_standard(
    text: str,
    float_output: bool = False,
    language: str = "en_us"
) -> Union[str, float]:
    return get_analyzer().text_standard(text, float_output, language)
