"""
Readability Report
==================
Runs every metric over a text and interprets the result.

Features:
- All formulas: Flesch, Flesch-Kincaid, SMOG, Coleman-Liau, ARI, Linsear
  Write, Dale-Chall, Gunning Fog, LIX, FORCAST, Powers-Sumner-Kearl, SPACHE
- Consensus grade (text_standard)
- Difficult word identification
- Reading time estimation
- Grade level interpretation
- Improvement recommendations
"""

from typing import List, Dict, Any, Optional
from dataclasses import dataclass, field, asdict

from ..config import get_config, ReadabilityConfig
from ..config_logging import get_logger
from .analyzer import TextAnalyzer
from .basic_stats import ensure_text, round_half_up
from .consensus import format_grade

logger = get_logger(__name__)


@dataclass
class ReadabilityReport:
    """Comprehensive readability analysis result."""

    language: str = "en_us"

    # Grade-level and ease formulas
    flesch_reading_ease: float = 0.0
    flesch_kincaid_grade: float = 0.0
    smog_index: float = 0.0
    coleman_liau_index: float = 0.0
    automated_readability_index: float = 0.0
    linsear_write_formula: float = 0.0
    dale_chall_readability_score: float = 0.0
    gunning_fog: float = 0.0
    lix: float = 0.0
    forcast: int = 0
    powers_sumner_kearl: float = 0.0
    spache: float = 0.0

    # Summary
    consensus_grade: float = 0.0
    text_standard: str = ""
    reading_time_minutes: float = 0.0

    # Counts
    char_count: int = 0
    lexicon_count: int = 0
    sentence_count: int = 0
    syllable_count: int = 0
    polysyllab_count: int = 0
    difficult_word_count: int = 0
    difficult_words: List[str] = field(default_factory=list)

    # Interpretation
    grade_level: str = ""
    difficulty_rating: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API responses."""
        return asdict(self)


class ReadabilityCalculator:
    """
    Full readability report on top of a TextAnalyzer.

    Args:
        analyzer: Analyzer to use (default: a new one with its own caches)
        settings: Report thresholds (default: the configured readability section)
    """

    # Grade level descriptions
    GRADE_LEVELS = {
        (0, 6): "Elementary (Grade 1-5)",
        (6, 9): "Middle School (Grade 6-8)",
        (9, 13): "High School (Grade 9-12)",
        (13, 15): "College",
        (15, 17): "College Graduate",
        (17, 100): "Professional/Academic"
    }

    # Flesch Reading Ease interpretations
    DIFFICULTY_RATINGS = {
        (90, 1000): "Very Easy",
        (80, 90): "Easy",
        (70, 80): "Fairly Easy",
        (60, 70): "Standard",
        (50, 60): "Fairly Difficult",
        (30, 50): "Difficult",
        (-1000, 30): "Very Difficult"
    }

    def __init__(
        self,
        analyzer: Optional[TextAnalyzer] = None,
        settings: Optional[ReadabilityConfig] = None
    ):
        self.analyzer = analyzer if analyzer is not None else TextAnalyzer()
        self.settings = settings or get_config().readability

    def get_status(self) -> Dict[str, Any]:
        """Status of both collaborators."""
        return {
            'available': True,
            'dictionaries': self.analyzer.dictionaries.get_status(),
            'hyphenation': self.analyzer.hyphenator.get_status(),
        }

    def analyze(self, text: str, language: str = "en_us") -> ReadabilityReport:
        """
        Perform comprehensive readability analysis.

        Args:
            text: Text to analyze
            language: Dictionary and hyphenation language

        Returns:
            ReadabilityReport with all metrics (all zero for blank text)
        """
        ensure_text(text)
        if not text.strip():
            return ReadabilityReport(language=language)

        a = self.analyzer
        with logger.log_operation("readability_analysis", language=language, chars=len(text)):
            lexicon_count = a.lexicon_count(text)
            difficult = a.difficult_words_list(text, language)
            consensus = a.text_standard(text, float_output=True, language=language)
            flesch_ease = a.flesch_reading_ease(text, language)

            report = ReadabilityReport(
                language=language,
                flesch_reading_ease=flesch_ease,
                flesch_kincaid_grade=a.flesch_kincaid_grade(text, language),
                smog_index=a.smog_index(text, language),
                coleman_liau_index=a.coleman_liau_index(text),
                automated_readability_index=a.automated_readability_index(text),
                linsear_write_formula=round_half_up(a.linsear_write_formula(text, language), 2),
                dale_chall_readability_score=a.dale_chall_readability_score(text, language),
                gunning_fog=a.gunning_fog(text, language),
                lix=a.lix(text),
                forcast=a.forcast(text, language),
                powers_sumner_kearl=a.powers_sumner_kearl(text, language),
                spache=a.spache(text, language),
                consensus_grade=consensus,
                text_standard=format_grade(int(consensus)),
                reading_time_minutes=round_half_up(lexicon_count / self.settings.words_per_minute, 1),
                char_count=a.char_count(text),
                lexicon_count=lexicon_count,
                sentence_count=a.sentence_count(text),
                syllable_count=a.syllable_count(text, language),
                polysyllab_count=a.polysyllab_count(text, language),
                difficult_word_count=len(difficult),
                difficult_words=difficult[:self.settings.max_reported_difficult_words],
                grade_level=self._get_grade_level(consensus),
                difficulty_rating=self._get_difficulty(flesch_ease),
            )
        return report

    def _get_grade_level(self, grade: float) -> str:
        """Convert numeric grade to description."""
        for (low, high), level in self.GRADE_LEVELS.items():
            if low <= grade < high:
                return level
        return "Unknown"

    def _get_difficulty(self, flesch_score: float) -> str:
        """Convert Flesch score to difficulty rating."""
        for (low, high), rating in self.DIFFICULTY_RATINGS.items():
            if low <= flesch_score < high:
                return rating
        return "Unknown"

    def get_recommendations(self, report: ReadabilityReport) -> List[str]:
        """
        Generate readability improvement recommendations.

        Args:
            report: ReadabilityReport from analyze()

        Returns:
            List of recommendation strings
        """
        recommendations = []
        targets = self.settings

        if report.consensus_grade > 16:
            recommendations.append(
                f"Grade level ({report.consensus_grade}) is very high. "
                "Consider simplifying for broader audience."
            )
        elif report.consensus_grade > targets.target_grade_level:
            recommendations.append(
                f"Grade level ({report.consensus_grade}) exceeds target "
                f"({targets.target_grade_level}). Consider simpler vocabulary."
            )

        if report.lexicon_count > 0:
            if report.flesch_reading_ease < 30:
                recommendations.append(
                    f"Flesch Reading Ease ({report.flesch_reading_ease}) indicates "
                    "very difficult text. Shorten sentences and use simpler words."
                )
            elif report.flesch_reading_ease < targets.min_flesch_ease:
                recommendations.append(
                    f"Flesch Reading Ease ({report.flesch_reading_ease}) is below "
                    f"target ({targets.min_flesch_ease}). Consider simplification."
                )

            difficult_pct = (report.difficult_word_count / report.lexicon_count) * 100
            if difficult_pct > targets.max_difficult_word_pct:
                recommendations.append(
                    f"Difficult word percentage ({difficult_pct:.1f}%) is high. "
                    "Consider defining technical terms or using simpler alternatives."
                )

        if report.sentence_count > 0:
            avg_sentence_length = report.lexicon_count / report.sentence_count
            if avg_sentence_length > targets.max_sentence_length:
                recommendations.append(
                    f"Average sentence length ({avg_sentence_length:.1f} words) "
                    f"exceeds target ({targets.max_sentence_length}). "
                    "Break long sentences into shorter ones."
                )

        if report.difficult_words:
            sample = report.difficult_words[:5]
            recommendations.append(
                f"Consider defining or simplifying these words: {', '.join(sample)}"
            )

        if not recommendations:
            recommendations.append("Readability is within the configured targets.")

        return recommendations

    def get_summary(self, report: ReadabilityReport) -> str:
        """One-line summary of a report."""
        return (
            f"Grade Level: {report.grade_level} ({report.text_standard}), "
            f"Difficulty: {report.difficulty_rating}, "
            f"Reading Time: {report.reading_time_minutes} min"
        )

    def compare_metrics(self, report: ReadabilityReport) -> Dict[str, str]:
        """
        Side-by-side view of the grade-level metrics.

        Returns:
            Dict of metric names to formatted values
        """
        return {
            'Flesch-Kincaid': f"Grade {report.flesch_kincaid_grade}",
            'Gunning Fog': f"Grade {report.gunning_fog}",
            'Dale-Chall': f"{report.dale_chall_readability_score} "
                          f"({self.dale_chall_grade(report.dale_chall_readability_score)})",
            'SMOG Index': f"Grade {report.smog_index}",
            'Linsear Write': f"Grade {report.linsear_write_formula}",
            'Coleman-Liau': f"Grade {report.coleman_liau_index}",
            'ARI': f"Grade {report.automated_readability_index}",
            'FORCAST': f"Grade {report.forcast}",
            'Powers-Sumner-Kearl': f"Grade {report.powers_sumner_kearl}",
            'SPACHE': f"Grade {report.spache}",
            'LIX': f"{report.lix}",
            'Consensus': report.text_standard,
        }

    @staticmethod
    def dale_chall_grade(score: float) -> str:
        """Convert Dale-Chall score to grade level."""
        if score <= 4.9:
            return "Grade 4 and below"
        elif score <= 5.9:
            return "Grade 5-6"
        elif score <= 6.9:
            return "Grade 7-8"
        elif score <= 7.9:
            return "Grade 9-10"
        elif score <= 8.9:
            return "Grade 11-12"
        elif score <= 9.9:
            return "Grade 13-15 (College)"
        else:
            return "Grade 16 and above"
