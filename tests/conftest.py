"""
Shared fixtures for the textmetrics test suite.

Run all tests: python3 -m pytest tests/ -v
"""

from pathlib import Path
from typing import Dict, List, Optional, Tuple

import pytest

import textmetrics
from textmetrics import config
from textmetrics.dictionaries import DictionaryCache
from textmetrics.readability import TextAnalyzer, reset_calculator


LONG_TEXT = (
    'Playing ... games has always been thought to be '
    'important to the development of well-balanced and '
    'creative children; however, what part, if any, '
    'they should play in the lives of adults has never '
    'been researched that deeply. I believe that '
    'playing games is every bit as important for adults '
    'as for children. Not only is taking time out to '
    'play games with our children and other adults '
    'valuable to building interpersonal relationships '
    'but is also a wonderful way to release built up '
    "tension.\n"
    "There's nothing my husband enjoys more after a "
    'hard day of work than to come home and play a game '
    'of Chess with someone. This enables him to unwind '
    "from the day's activities and to discuss the highs "
    'and lows of the day in a non-threatening, kick back '
    'environment. One of my most memorable wedding '
    'gifts, a Backgammon set, was received by a close '
    'friend. I asked him why in the world he had given '
    'us such a gift. He replied that he felt that an '
    'important aspect of marriage was for a couple to '
    'never quit playing games together. Over the years, '
    'as I have come to purchase and play, with other '
    'couples & coworkers, many games like: Monopoly, '
    'Chutes & Ladders, Mastermind, Dweebs, Geeks, & '
    'Weirdos, etc. I can reflect on the integral part '
    'they have played in our weekends and our '
    '"shut-off the T.V. and do something more '
    'stimulating" weeks. They have enriched my life and '
    'made it more interesting. Sadly, many adults '
    'forget that games even exist and have put them '
    'away in the cupboards, forgotten until the '
    "grandchildren come over.\n"
    'All too often, adults get so caught up in working '
    'to pay the bills and keeping up with the '
    "\"Joneses'\" that they neglect to harness the fun "
    'in life; the fun that can be the reward of '
    'enjoying a relaxing game with another person. It '
    'has been said that "man is that he might have '
    'joy" but all too often we skate through life '
    'without much of it. Playing games allows us to: '
    'relax, learn something new and stimulating, '
    'interact with people on a different more '
    'comfortable level, and to enjoy non-threatening '
    'competition. For these reasons, adults should '
    'place a higher priority on playing games in their '
    'lives'
)

# Three sentences, 16 words, 25 syllables under FAKE_RENDERINGS
SHORT_TEXT = (
    "The cat sat on the mat. "
    "The comprehensive analysis is elaborate. "
    "This is a simple table."
)

FAKE_RENDERINGS = {
    "beautiful": "beau-ti-ful",
    "hello": "hel-lo",
    "comprehensive": "com-pre-hen-sive",
    "analysis": "anal-y-sis",
    "elaborate": "elab-o-rate",
    "simple": "sim-ple",
    "table": "ta-ble",
}

EASY_WORDS = ["a", "cat", "is", "mat", "on", "sat", "simple", "test", "the", "this"]


class FakeHyphenator:
    """
    Deterministic stand-in for Hyphenator.

    Surrounding punctuation is ignored for the lookup; unknown words have a
    single syllable.
    """

    def __init__(self, renderings: Optional[Dict[str, str]] = None):
        self.renderings = dict(FAKE_RENDERINGS if renderings is None else renderings)
        self.calls: List[Tuple[str, str]] = []

    def hyphenate(self, word: str, language: str = "en_us") -> str:
        self.calls.append((word, language))
        core = word.strip(".,;:!?\"'()")
        return self.renderings.get(core, core)


@pytest.fixture(autouse=True)
def isolated_state():
    """Fresh configuration and no shared analyzer for every test."""
    config.reset_config()
    textmetrics.reset_analyzer()
    yield
    config.reset_config()
    textmetrics.reset_analyzer()
    reset_calculator()


@pytest.fixture
def long_text() -> str:
    """The canonical ~1750-character sample about games and adults."""
    return LONG_TEXT


@pytest.fixture
def short_text() -> str:
    return SHORT_TEXT


@pytest.fixture
def dictionary_dir(tmp_path) -> Path:
    """Directory with a small en_us easy-word list."""
    path = tmp_path / "dictionaries"
    path.mkdir()
    (path / "en_us.txt").write_text("\n".join(EASY_WORDS) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def fake_hyphenator() -> FakeHyphenator:
    return FakeHyphenator()


@pytest.fixture
def analyzer(dictionary_dir, fake_hyphenator) -> TextAnalyzer:
    """Analyzer with a fake hyphenator and the small word list."""
    return TextAnalyzer(
        dictionaries=DictionaryCache(dictionary_dir),
        hyphenator=fake_hyphenator,
    )


@pytest.fixture
def real_analyzer() -> TextAnalyzer:
    """Analyzer on the bundled dictionaries and pyphen."""
    return TextAnalyzer()
