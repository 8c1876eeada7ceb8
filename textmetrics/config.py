"""
textmetrics Configuration Module
================================
Centralized configuration for the text metrics engine and its collaborators.

Configuration can be set via:
1. Environment variables (TEXTMETRICS_DICTIONARY_PATH=/srv/dictionaries)
2. Config file (textmetrics_config.json, or the file named by TEXTMETRICS_CONFIG)
3. Direct API calls (config.set('dictionary.path', '/srv/dictionaries'))

All settings have sensible defaults; the bundled dictionaries and the
hyphenation patterns shipped with pyphen need no network access.
"""

import os
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional
from dataclasses import dataclass, field, asdict

__version__ = "1.0.0"

logger = logging.getLogger(__name__)

# Default configuration path
CONFIG_FILE = Path(__file__).parent.parent / "textmetrics_config.json"
CONFIG_ENV_VAR = "TEXTMETRICS_CONFIG"


@dataclass
class DictionaryConfig:
    """Easy-word dictionary configuration."""
    path: Optional[str] = None  # None = bundled dictionaries


@dataclass
class HyphenationConfig:
    """Hyphenation (syllable segmentation) configuration."""
    left: int = 1   # Minimum characters before the first break (0 allows a leading break)
    right: int = 1  # Minimum characters after the last break (0 allows a trailing break)


@dataclass
class ReadabilityConfig:
    """Readability report configuration."""
    target_grade_level: int = 12  # Flag documents above this
    min_flesch_ease: float = 40
    max_difficult_word_pct: float = 15
    max_sentence_length: float = 25
    words_per_minute: int = 200
    max_reported_difficult_words: int = 20


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "WARNING"
    format: str = "text"  # Options: text, json
    to_console: bool = True
    to_file: bool = False
    log_dir: Optional[str] = None


@dataclass
class TextMetricsConfig:
    """Master configuration."""
    dictionary: DictionaryConfig = field(default_factory=DictionaryConfig)
    hyphenation: HyphenationConfig = field(default_factory=HyphenationConfig)
    readability: ReadabilityConfig = field(default_factory=ReadabilityConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Global configuration instance
_config: Optional[TextMetricsConfig] = None


def get_config() -> TextMetricsConfig:
    """Get the global configuration."""
    global _config
    if _config is None:
        _config = _load_config()
    return _config


def _config_file() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else CONFIG_FILE


def _load_config() -> TextMetricsConfig:
    """Load configuration from file and environment."""
    config = TextMetricsConfig()

    config_file = _config_file()
    if config_file.exists():
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                file_config = json.load(f)
            _apply_dict_to_config(config, file_config)
        except (json.JSONDecodeError, IOError) as e:
            logger.warning("Could not load config file %s: %s", config_file, e)

    # Override with environment variables
    _apply_env_to_config(config)

    return config


def _apply_dict_to_config(config: TextMetricsConfig, data: Dict[str, Any]):
    """Apply dictionary values to config object."""
    for section_name, section_data in data.items():
        if hasattr(config, section_name) and isinstance(section_data, dict):
            section = getattr(config, section_name)
            for key, value in section_data.items():
                if hasattr(section, key):
                    setattr(section, key, value)


def _apply_env_to_config(config: TextMetricsConfig):
    """Apply environment variables to config."""
    env_mappings = {
        'TEXTMETRICS_DICTIONARY_PATH': ('dictionary', 'path', str),
        'TEXTMETRICS_HYPHEN_LEFT': ('hyphenation', 'left', int),
        'TEXTMETRICS_HYPHEN_RIGHT': ('hyphenation', 'right', int),
        'TEXTMETRICS_TARGET_GRADE': ('readability', 'target_grade_level', int),
        'TEXTMETRICS_WORDS_PER_MINUTE': ('readability', 'words_per_minute', int),
        'TEXTMETRICS_LOG_LEVEL': ('logging', 'level', str),
        'TEXTMETRICS_LOG_FORMAT': ('logging', 'format', str),
        'TEXTMETRICS_LOG_TO_FILE': ('logging', 'to_file', _parse_bool),
    }

    for env_var, (section, key, converter) in env_mappings.items():
        value = os.environ.get(env_var)
        if value is not None:
            try:
                section_obj = getattr(config, section)
                setattr(section_obj, key, converter(value))
            except (ValueError, AttributeError) as e:
                logger.warning("Invalid env var %s=%s: %s", env_var, value, e)


def _parse_bool(value: str) -> bool:
    """Parse boolean from string."""
    return value.lower() in ('true', '1', 'yes', 'on')


def get(key: str, default: Any = None) -> Any:
    """
    Get a configuration value by dot-notation key.

    Example: get('hyphenation.left') -> 1
    """
    config = get_config()
    parts = key.split('.')

    obj = config
    for part in parts:
        if hasattr(obj, part):
            obj = getattr(obj, part)
        else:
            return default

    return obj


def set(key: str, value: Any):
    """
    Set a configuration value by dot-notation key.

    Example: set('hyphenation.left', 2)
    """
    config = get_config()
    parts = key.split('.')

    if len(parts) < 2:
        raise ValueError(f"Key must be in format 'section.key': {key}")

    section_name = parts[0]
    attr_name = parts[1]

    if hasattr(config, section_name):
        section = getattr(config, section_name)
        if hasattr(section, attr_name):
            setattr(section, attr_name, value)
        else:
            raise ValueError(f"Unknown config key: {attr_name}")
    else:
        raise ValueError(f"Unknown config section: {section_name}")


def save_config(path: Optional[Path] = None):
    """Save current configuration to file."""
    config = get_config()
    path = path or _config_file()

    with open(path, 'w', encoding='utf-8') as f:
        json.dump(asdict(config), f, indent=2)


def reset_config():
    """Reset configuration to defaults."""
    global _config
    _config = TextMetricsConfig()
