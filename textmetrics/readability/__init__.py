"""
Readability Metrics
===================
Basic statistics, difficult words, readability formulas and the consensus
grade level, plus a report layer that runs them all.

Modules:
- basic_stats: char/word/sentence/syllable counts and averages
- difficult_words: words outside the easy-word list
- formulas: Flesch, SMOG, Coleman-Liau, ARI, Linsear Write, Dale-Chall,
  Gunning Fog, LIX, FORCAST, Powers-Sumner-Kearl, SPACHE
- consensus: text_standard
- analyzer: TextAnalyzer facade
- enhanced: ReadabilityReport and ReadabilityCalculator
"""

from .analyzer import TextAnalyzer
from .enhanced import ReadabilityCalculator, ReadabilityReport

__version__ = "1.0.0"

__all__ = [
    'TextAnalyzer',
    'ReadabilityCalculator',
    'ReadabilityReport',
    'get_calculator',
    'reset_calculator',
    'get_status',
    'analyze',
    'get_recommendations',
]

# Lazy shared instance
_calculator = None


def get_calculator() -> ReadabilityCalculator:
    """Get the shared ReadabilityCalculator (built on the package default analyzer)."""
    global _calculator
    if _calculator is None:
        from .. import get_analyzer
        _calculator = ReadabilityCalculator(get_analyzer())
    return _calculator


def reset_calculator():
    """Drop the shared calculator (for testing)."""
    global _calculator
    _calculator = None


def get_status() -> dict:
    """Get readability integration status."""
    return get_calculator().get_status()


def analyze(text: str, language: str = "en_us") -> ReadabilityReport:
    """
    Analyze text readability.

    Args:
        text: Text to analyze
        language: Dictionary and hyphenation language

    Returns:
        ReadabilityReport with all metrics
    """
    return get_calculator().analyze(text, language)


def get_recommendations(text: str, language: str = "en_us") -> list:
    """
    Get readability improvement recommendations.

    Args:
        text: Text to analyze
        language: Dictionary and hyphenation language

    Returns:
        List of recommendation strings
    """
    calculator = get_calculator()
    report = calculator.analyze(text, language)
    return calculator.get_recommendations(report)
