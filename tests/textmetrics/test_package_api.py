"""
Tests for the package-level API
===============================
Free functions running on the shared default analyzer.
"""

import pytest

import textmetrics
from textmetrics import readability
from textmetrics.readability import TextAnalyzer


@pytest.fixture
def default_analyzer(monkeypatch, analyzer) -> TextAnalyzer:
    """Install the fake-backed analyzer as the package default."""
    monkeypatch.setattr(textmetrics, "_analyzer", analyzer)
    return analyzer


class TestSharedAnalyzer:
    """Tests for get_analyzer and reset_analyzer."""

    def test_lazy_singleton(self):
        assert textmetrics.get_analyzer() is textmetrics.get_analyzer()

    def test_reset(self):
        first = textmetrics.get_analyzer()
        textmetrics.reset_analyzer()
        assert textmetrics.get_analyzer() is not first

    def test_status(self):
        status = textmetrics.get_status()
        assert status["version"] == textmetrics.__version__
        assert status["dictionaries"]["name"] == "Dictionaries"
        assert status["hyphenation"]["name"] == "Pyphen"

    def test_exports(self):
        for name in textmetrics.__all__:
            assert hasattr(textmetrics, name), name


class TestFreeFunctions:
    """Every free function delegates to the default analyzer."""

    def test_counts(self, default_analyzer, short_text):
        assert textmetrics.char_count(short_text) == 73
        assert textmetrics.char_count(short_text, ignore_spaces=False) == 88
        assert textmetrics.lexicon_count(short_text) == 16
        assert textmetrics.sentence_count(short_text) == 3
        assert textmetrics.syllable_count(short_text) == 25
        assert textmetrics.polysyllab_count(short_text) == 3

    def test_averages(self, default_analyzer, short_text):
        assert textmetrics.avg_sentence_length(short_text) == 5.3
        assert textmetrics.avg_syllables_per_word(short_text) == 1.6
        assert textmetrics.avg_letter_per_word(short_text) == 4.56
        assert textmetrics.avg_sentence_per_word(short_text) == 0.19

    def test_difficult_words(self, default_analyzer, short_text):
        assert textmetrics.difficult_words(short_text) == 4
        assert textmetrics.difficult_words(short_text, return_words=True) == {
            "analysis", "comprehensive", "elaborate", "table"
        }
        assert textmetrics.difficult_words_list(short_text)[0] == "analysis"

    def test_formulas(self, default_analyzer, short_text):
        assert textmetrics.flesch_reading_ease(short_text) == 66.1
        assert textmetrics.flesch_kincaid_grade(short_text) == 5.4
        assert textmetrics.smog_index(short_text) == 8.8
        assert textmetrics.coleman_liau_index(short_text) == 5.39
        assert textmetrics.automated_readability_index(short_text) == 2.7
        assert textmetrics.linsear_write_formula(short_text) == pytest.approx(8 / 3)
        assert textmetrics.dale_chall_readability_score(short_text) == 7.85
        assert textmetrics.gunning_fog(short_text) == 14.12
        assert textmetrics.lix(short_text) == 24.05
        assert textmetrics.forcast(short_text) == 19
        assert textmetrics.powers_sumner_kearl(short_text) == -0.65
        assert textmetrics.spache(short_text) == 1.59

    def test_text_standard(self, default_analyzer, short_text):
        assert textmetrics.text_standard(short_text) == "2th and 3th grade"
        assert textmetrics.text_standard(short_text, float_output=True) == 3.0

    def test_missing_dictionary(self, default_analyzer, short_text):
        with pytest.raises(textmetrics.DictionaryNotFoundError):
            textmetrics.difficult_words(short_text, language="fr")


class TestDictionaryHelpers:
    """Tests for the dictionary helpers."""

    def test_load_and_clear(self, default_analyzer):
        assert "cat" in textmetrics.load_dictionary("en_us")
        assert "en_us" in default_analyzer.dictionaries
        textmetrics.clear_dictionary_cache()
        assert default_analyzer.dictionaries.size == 0

    def test_path(self, default_analyzer, dictionary_dir, tmp_path):
        assert textmetrics.get_dictionary_path() == dictionary_dir

        (tmp_path / "de_de.txt").write_text("der\nund\n", encoding="utf-8")
        textmetrics.set_dictionary_path(tmp_path)

        assert textmetrics.get_dictionary_path() == tmp_path
        assert textmetrics.supported_languages() == ["de_de"]
        assert textmetrics.load_dictionary("de_de") == {"der", "und"}

    def test_bundled_languages(self):
        assert textmetrics.supported_languages() == ["en_us"]


class TestReadabilityModule:
    """Tests for the readability package helpers."""

    def test_calculator_uses_default_analyzer(self, default_analyzer):
        readability.reset_calculator()
        assert readability.get_calculator().analyzer is default_analyzer

    def test_analyze(self, default_analyzer, short_text):
        readability.reset_calculator()
        report = readability.analyze(short_text)
        assert report.text_standard == "2th and 3th grade"

    def test_recommendations(self, default_analyzer, short_text):
        readability.reset_calculator()
        recommendations = readability.get_recommendations(short_text)
        assert recommendations[-1].startswith("Consider defining or simplifying")

    def test_status(self):
        status = readability.get_status()
        assert status["available"] is True
        assert "dictionaries" in status


class TestLongText:
    """The long sample on the real default analyzer."""

    def test_hyphenation_free_values(self, long_text):
        assert textmetrics.char_count(long_text) == 1750
        assert textmetrics.char_count(long_text, ignore_spaces=False) == 2123
        assert textmetrics.lexicon_count(long_text) == 372
        assert textmetrics.lexicon_count(long_text, remove_punctuation=False) == 376
        assert textmetrics.sentence_count(long_text) == 16
        assert textmetrics.avg_sentence_length(long_text) == 23.3

    def test_report(self, long_text):
        report = readability.analyze(long_text)
        assert report.lexicon_count == 372
        assert report.reading_time_minutes == 1.9
        assert report.flesch_reading_ease == 56.29
        assert report.text_standard == "10th and 11th grade"
        assert report.difficult_word_count == 58
        assert report.difficult_word_count >= len(report.difficult_words)
