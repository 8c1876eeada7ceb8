"""
Integration Base Classes
========================
Common interface for the collaborators the readability core depends on
(easy-word dictionaries, hyphenation patterns).
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, List, Optional

__version__ = "1.0.0"


class IntegrationBase(ABC):
    """
    Abstract base class for resource-backed collaborators.

    Subclasses cache per-language resources and report their state through
    get_status().
    """

    INTEGRATION_NAME: str = "Integration"
    INTEGRATION_VERSION: str = "1.0.0"

    def __init__(self):
        self._available = False
        self._error: Optional[str] = None

    @property
    def is_available(self) -> bool:
        """Check if the integration is available and working."""
        return self._available

    @property
    def error(self) -> Optional[str]:
        """Get initialization error if any."""
        return self._error

    @property
    @abstractmethod
    def languages(self) -> List[str]:
        """Languages currently held in the cache."""

    @abstractmethod
    def supported_languages(self) -> List[str]:
        """Languages this integration can load."""

    @abstractmethod
    def clear(self):
        """Drop every cached resource."""

    @property
    def size(self) -> int:
        """Number of cached languages."""
        return len(self.languages)

    def __len__(self) -> int:
        return self.size

    def __contains__(self, language: object) -> bool:
        return language in self.languages

    def get_status(self) -> Dict[str, Any]:
        """Get detailed status of the integration."""
        return {
            'name': self.INTEGRATION_NAME,
            'version': self.INTEGRATION_VERSION,
            'available': self.is_available,
            'error': self._error,
            'cached_languages': list(self.languages),
            'cache_size': self.size,
        }
