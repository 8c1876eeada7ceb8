"""
Hyphenation Adapter
===================
Syllable segmentation through pyphen's Liang hyphenation patterns.

A word's rendering has ``-`` at every break point; its syllable count is the
number of breaks plus one. Hyphens already present in the word count as
breaks too.

Requires: pip install pyphen
"""

import threading
from typing import Dict, List, Optional

import pyphen

from .base import IntegrationBase
from .config import get_config
from .config_logging import get_logger, UnsupportedLanguageError

__version__ = "1.0.0"

HYPHEN = "-"

logger = get_logger(__name__)


class Hyphenator(IntegrationBase):
    """
    Per-language cache of pyphen dictionaries.

    Args:
        left: Minimum characters before the first break (default 1; 0 lets
            pyphen break before the first letter)
        right: Minimum characters after the last break
    """

    INTEGRATION_NAME = "Pyphen"
    INTEGRATION_VERSION = "1.0.0"

    def __init__(self, left: Optional[int] = None, right: Optional[int] = None):
        super().__init__()
        settings = get_config().hyphenation
        self.left = settings.left if left is None else left
        self.right = settings.right if right is None else right
        self._dictionaries: Dict[str, pyphen.Pyphen] = {}
        self._lock = threading.Lock()
        self._available = True

    def _dictionary(self, language: str) -> pyphen.Pyphen:
        with self._lock:
            dic = self._dictionaries.get(language)
            if dic is None:
                resolved = pyphen.language_fallback(language) if language else None
                if resolved is None:
                    raise UnsupportedLanguageError(language)
                dic = pyphen.Pyphen(lang=resolved, left=self.left, right=self.right)
                self._dictionaries[language] = dic
                logger.debug("Hyphenation patterns loaded", language=language, patterns=resolved)
            return dic

    def hyphenate(self, word: str, language: str = "en_us") -> str:
        """
        Render a word with a hyphen at every break point.

        Raises:
            UnsupportedLanguageError: no patterns exist for the language
        """
        return self._dictionary(language).inserted(word, hyphen=HYPHEN)

    def syllables(self, word: str, language: str = "en_us") -> int:
        """Breaks in the rendering plus one."""
        return self.hyphenate(word, language).count(HYPHEN) + 1

    def clear(self):
        with self._lock:
            self._dictionaries.clear()

    @property
    def languages(self) -> List[str]:
        with self._lock:
            return list(self._dictionaries)

    def supported_languages(self) -> List[str]:
        return sorted(pyphen.LANGUAGES)

    def get_status(self):
        status = super().get_status()
        status['left'] = self.left
        status['right'] = self.right
        return status
