"""
Readability Formulas
====================
Published readability formulas over the basic statistics.

Each formula rounds its result to the precision its authors report. Only
SMOG, ARI, Dale-Chall and Gunning Fog recover from a zero denominator
(returning 0.0); LIX and SPACHE raise ZeroDivisionError on text without
words.

Score ranges for Flesch Reading Ease:
- 90-100: Very Easy
- 80-89: Easy
- 70-79: Fairly Easy
- 60-69: Standard
- 50-59: Fairly Difficult
- 30-49: Difficult
- 0-29: Very Difficult
"""

import math

from .basic_stats import ensure_text, round_half_up

LINSEAR_WORD_LIMIT = 101
FORCAST_WORD_LIMIT = 150
LONG_WORD_LENGTH = 6


class ReadabilityFormulasMixin:
    """Formula library; builds on BasicStatsMixin and DifficultWordsMixin."""

    def flesch_reading_ease(self, text: str, language: str = "en_us") -> float:
        sentence_length = self.avg_sentence_length(text)
        syllables_per_word = self.avg_syllables_per_word(text, language)
        flesch = 206.835 - (1.015 * sentence_length) - (84.6 * syllables_per_word)
        return round_half_up(flesch, 2)

    def flesch_kincaid_grade(self, text: str, language: str = "en_us") -> float:
        sentence_length = self.avg_sentence_length(text)
        syllables_per_word = self.avg_syllables_per_word(text, language)
        grade = (0.39 * sentence_length) + (11.8 * syllables_per_word) - 15.59
        return round_half_up(grade, 1)

    def smog_index(self, text: str, language: str = "en_us") -> float:
        """SMOG grade; 0.0 for texts shorter than three sentences."""
        sentences = self.sentence_count(text)
        if sentences < 3:
            return 0.0
        try:
            polysyllab = self.polysyllab_count(text, language)
            smog = (1.043 * math.sqrt((30.0 * polysyllab) / sentences)) + 3.1291
            return round_half_up(smog, 1)
        except ZeroDivisionError:
            return 0.0

    def coleman_liau_index(self, text: str, language: str = "en_us") -> float:
        """Coleman-Liau grade. Character based, so language is not used."""
        letters = round_half_up(self.avg_letter_per_word(text) * 100, 2)
        sentences = round_half_up(self.avg_sentence_per_word(text) * 100, 2)
        coleman = (0.0588 * letters) - (0.296 * sentences) - 15.8
        return round_half_up(coleman, 2)

    def automated_readability_index(self, text: str, language: str = "en_us") -> float:
        """Automated Readability Index. Character based, so language is not used."""
        chars = self.char_count(text)
        words = self.lexicon_count(text)
        sentences = self.sentence_count(text)
        try:
            a = chars / words
            b = words / sentences
        except ZeroDivisionError:
            return 0.0
        return round_half_up((4.71 * a) + (0.5 * b) - 21.43, 1)

    def linsear_write_formula(self, text: str, language: str = "en_us") -> float:
        """Linsear Write over the first 101 words; not rounded."""
        ensure_text(text)
        easy_word = 0
        difficult_word = 0
        words = text.split()[:LINSEAR_WORD_LIMIT]

        for word in words:
            if self.syllable_count(word, language) < 3:
                easy_word += 1
            else:
                difficult_word += 1

        number = (easy_word + difficult_word * 3) / self.sentence_count(" ".join(words))
        if number <= 20:
            number -= 2
        return number / 2

    def dale_chall_readability_score(self, text: str, language: str = "en_us") -> float:
        word_count = self.lexicon_count(text)
        try:
            count = word_count - self.difficult_words(text, language)
            per = (100.0 * count) / word_count
        except ZeroDivisionError:
            return 0.0

        difficult_words_percentage = 100 - per
        score = (0.1579 * difficult_words_percentage) + (0.0496 * self.avg_sentence_length(text))
        if difficult_words_percentage > 5:
            score += 3.6365
        return round_half_up(score, 2)

    def gunning_fog(self, text: str, language: str = "en_us") -> float:
        try:
            per_diff_words = (100.0 * self.difficult_words(text, language)) / self.lexicon_count(text) + 5
        except ZeroDivisionError:
            return 0.0
        grade = 0.4 * (self.avg_sentence_length(text) + per_diff_words)
        return round_half_up(grade, 2)

    def lix(self, text: str, language: str = "en_us") -> float:
        """
        LIX: sentence length plus the percentage of words longer than six
        characters. Length is not language dependent.

        Raises:
            ZeroDivisionError: text has no words
        """
        ensure_text(text)
        words = text.split()
        long_words = sum(1 for word in words if len(word) > LONG_WORD_LENGTH)
        per_long_words = (100.0 * long_words) / len(words)
        return round_half_up(self.avg_sentence_length(text) + per_long_words, 2)

    def forcast(self, text: str, language: str = "en_us") -> int:
        """FORCAST grade from single-syllable words among the first 150."""
        ensure_text(text)
        words = text.split()[:FORCAST_WORD_LIMIT]
        single_syllable = sum(1 for word in words if self.syllable_count(word, language) == 1)
        return 20 - (single_syllable // 10)

    def powers_sumner_kearl(self, text: str, language: str = "en_us") -> float:
        grade = (0.0778 * self.avg_sentence_length(text)) \
            + (0.0455 * self.syllable_count(text, language)) - 2.2029
        return round_half_up(grade, 2)

    def spache(self, text: str, language: str = "en_us") -> float:
        """
        SPACHE grade. The unfamiliar-word ratio is an integer quotient.

        Raises:
            ZeroDivisionError: text has no words
        """
        ensure_text(text)
        words = len(text.split())
        unfamiliar_words = self.difficult_words(text, language) // words
        grade = (0.141 * self.avg_sentence_length(text)) + (0.086 * unfamiliar_words) + 0.839
        return round_half_up(grade, 2)
