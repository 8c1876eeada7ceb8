"""
Easy-Word Dictionaries
======================
Per-language sets of familiar words, loaded from ``<path>/<language>.txt``
(one word per line) and cached for the lifetime of the cache object.

The cache is an ordinary object: build one per test or per service, or share
the package default through textmetrics.get_analyzer().
"""

import threading
from pathlib import Path
from typing import Dict, FrozenSet, List, Optional, Union

from ..base import IntegrationBase
from ..config import get_config
from ..config_logging import get_logger, DictionaryNotFoundError

__version__ = "1.0.0"

BUNDLED_PATH = Path(__file__).parent / "data"

logger = get_logger(__name__)


class DictionaryCache(IntegrationBase):
    """
    Load-once-per-language cache of easy-word sets.

    Population of a language happens under a lock, so concurrent first
    access loads the file once; cached sets are frozen and safe to share
    between threads.
    """

    INTEGRATION_NAME = "Dictionaries"
    INTEGRATION_VERSION = "1.0.0"

    def __init__(self, path: Optional[Union[str, Path]] = None):
        super().__init__()
        if path is None:
            path = get_config().dictionary.path or BUNDLED_PATH
        self._path = Path(path)
        self._cache: Dict[str, FrozenSet[str]] = {}
        self._lock = threading.Lock()
        self._available = self._path.is_dir()
        if not self._available:
            self._error = f"Dictionary directory not found: {self._path}"

    @property
    def path(self) -> Path:
        """Directory holding the ``<language>.txt`` word lists."""
        return self._path

    @path.setter
    def path(self, value: Union[str, Path]):
        with self._lock:
            self._path = Path(value)
            self._cache.clear()
        self._available = self._path.is_dir()
        self._error = None if self._available else f"Dictionary directory not found: {self._path}"
        logger.info("Dictionary path changed", path=str(self._path))

    def load(self, language: str) -> FrozenSet[str]:
        """
        Get the easy-word set for a language.

        Args:
            language: Language code, e.g. 'en_us'

        Returns:
            Frozen set of easy words

        Raises:
            DictionaryNotFoundError: no word list exists for the language
        """
        with self._lock:
            words = self._cache.get(language)
            if words is not None:
                logger.debug("Dictionary cache hit", language=language)
                return words

            words = self._read(language)
            self._cache[language] = words
            return words

    def _read(self, language: str) -> FrozenSet[str]:
        dictionary_file = self._path / f"{language}.txt"
        if not language or not dictionary_file.is_file():
            logger.warning("Dictionary not found", language=language, path=str(dictionary_file))
            raise DictionaryNotFoundError(language, str(dictionary_file))

        with open(dictionary_file, 'r', encoding='utf-8') as f:
            words = frozenset(line.rstrip('\r\n') for line in f if line.strip())

        logger.info("Dictionary loaded", language=language, words=len(words),
                    path=str(dictionary_file))
        return words

    def clear(self):
        """Drop every cached dictionary."""
        with self._lock:
            self._cache.clear()
        logger.info("Dictionary cache cleared")

    @property
    def languages(self) -> List[str]:
        """Cached language codes, in load order."""
        with self._lock:
            return list(self._cache)

    def supported_languages(self) -> List[str]:
        """Language codes with a word list under the current path."""
        if not self._path.is_dir():
            return []
        return sorted(p.stem for p in self._path.glob("*.txt"))

    def get_status(self):
        status = super().get_status()
        status['path'] = str(self._path)
        return status
