"""
Tests for the Easy-Word Dictionary Cache
========================================
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from textmetrics import DictionaryNotFoundError
from textmetrics.config import set as set_config
from textmetrics.dictionaries import BUNDLED_PATH, DictionaryCache


class TestLoad:
    """Tests for DictionaryCache.load."""

    def test_loads_words(self, dictionary_dir):
        words = DictionaryCache(dictionary_dir).load("en_us")
        assert "the" in words
        assert "simple" in words
        assert len(words) == 10

    def test_second_load_is_cached(self, dictionary_dir):
        cache = DictionaryCache(dictionary_dir)
        assert cache.load("en_us") is cache.load("en_us")

    def test_blank_lines_and_crlf(self, tmp_path):
        (tmp_path / "xx.txt").write_bytes(b"the\r\nand\r\n\r\ncat\n\n")
        assert DictionaryCache(tmp_path).load("xx") == {"the", "and", "cat"}

    def test_missing_language(self, dictionary_dir):
        cache = DictionaryCache(dictionary_dir)
        with pytest.raises(DictionaryNotFoundError) as excinfo:
            cache.load("fr")
        assert excinfo.value.code == "DICTIONARY_NOT_FOUND"
        assert excinfo.value.details["language"] == "fr"
        assert "fr" not in cache

    def test_empty_language(self, dictionary_dir):
        with pytest.raises(DictionaryNotFoundError):
            DictionaryCache(dictionary_dir).load("")

    def test_concurrent_first_access_reads_once(self, dictionary_dir, monkeypatch):
        cache = DictionaryCache(dictionary_dir)
        reads = []
        original = cache._read

        def counting_read(language):
            reads.append(language)
            return original(language)

        monkeypatch.setattr(cache, "_read", counting_read)

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(cache.load, ["en_us"] * 32))

        assert reads == ["en_us"]
        assert all(result is results[0] for result in results)


class TestCacheManagement:
    """Tests for clear, languages, size and the path property."""

    def test_languages_and_size(self, dictionary_dir):
        cache = DictionaryCache(dictionary_dir)
        assert cache.size == 0
        cache.load("en_us")
        assert cache.languages == ["en_us"]
        assert cache.size == 1
        assert len(cache) == 1
        assert "en_us" in cache

    def test_clear(self, dictionary_dir):
        cache = DictionaryCache(dictionary_dir)
        cache.load("en_us")
        cache.clear()
        assert cache.size == 0
        assert "en_us" not in cache

    def test_path_change_clears_cache(self, dictionary_dir, tmp_path):
        other = tmp_path / "other"
        other.mkdir()
        (other / "en_us.txt").write_text("word\n", encoding="utf-8")

        cache = DictionaryCache(dictionary_dir)
        cache.load("en_us")
        cache.path = other

        assert cache.size == 0
        assert cache.path == other
        assert cache.load("en_us") == {"word"}

    def test_supported_languages(self, dictionary_dir):
        (dictionary_dir / "de_de.txt").write_text("der\n", encoding="utf-8")
        assert DictionaryCache(dictionary_dir).supported_languages() == ["de_de", "en_us"]

    def test_missing_directory(self, tmp_path):
        cache = DictionaryCache(tmp_path / "nowhere")
        assert cache.is_available is False
        assert "not found" in cache.error
        assert cache.supported_languages() == []

    def test_status(self, dictionary_dir):
        cache = DictionaryCache(dictionary_dir)
        cache.load("en_us")
        status = cache.get_status()
        assert status["name"] == "Dictionaries"
        assert status["available"] is True
        assert status["cached_languages"] == ["en_us"]
        assert status["cache_size"] == 1
        assert status["path"] == str(dictionary_dir)


class TestDefaults:
    """Tests for the bundled and configured dictionary paths."""

    def test_bundled_path(self):
        cache = DictionaryCache()
        assert cache.path == BUNDLED_PATH
        assert cache.supported_languages() == ["en_us"]

    def test_bundled_english(self):
        words = DictionaryCache().load("en_us")
        assert {"the", "and", "is", "was", "school"} <= words
        assert len(words) > 2000

    def test_configured_path(self, dictionary_dir):
        set_config("dictionary.path", str(dictionary_dir))
        assert DictionaryCache().path == dictionary_dir
