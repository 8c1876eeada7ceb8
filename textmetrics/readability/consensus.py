"""
Consensus grade level.

Every grade-level formula contributes its rounded value and its ceiling to a
candidate list, Flesch Reading Ease contributes a bucketed grade, and the
most frequent candidate wins. Among equally frequent candidates the lowest
grade wins.
"""

import math
from collections import Counter
from typing import Iterable, List, Tuple, Union

from .basic_stats import round_half_up

# [low, high) score ranges of Flesch Reading Ease and the grades they map to
FLESCH_EASE_GRADES: Tuple[Tuple[float, float, Tuple[int, ...]], ...] = (
    (90, 100, (5,)),
    (80, 90, (6,)),
    (70, 80, (7,)),
    (60, 70, (8, 9)),
    (50, 60, (10,)),
    (40, 50, (11,)),
    (30, 40, (12,)),
)
FLESCH_EASE_DEFAULT_GRADES = (13,)


def flesch_ease_grades(score: float) -> Tuple[int, ...]:
    """Grade bucket for a Flesch Reading Ease score."""
    for low, high, grades in FLESCH_EASE_GRADES:
        if low <= score < high:
            return grades
    return FLESCH_EASE_DEFAULT_GRADES


def grade_bounds(score: float) -> Tuple[int, int]:
    """Score rounded half away from zero, and its ceiling."""
    return int(round_half_up(score)), math.ceil(score)


def most_common_grade(grades: Iterable[int]) -> int:
    """Mode of the candidates; ties go to the lowest grade."""
    tally = Counter(grades)
    if not tally:
        raise ValueError("no grade candidates")
    top = max(tally.values())
    return min(grade for grade, count in tally.items() if count == top)


def format_grade(grade: int) -> str:
    return f"{grade - 1}th and {grade}th grade"


class ConsensusMixin:
    """Builds on ReadabilityFormulasMixin."""

    def grade_candidates(self, text: str, language: str = "en_us") -> List[int]:
        """Candidate grades in formula order: FK, Flesch ease, then the rest."""
        candidates: List[int] = []
        candidates.extend(grade_bounds(self.flesch_kincaid_grade(text, language)))
        candidates.extend(flesch_ease_grades(self.flesch_reading_ease(text, language)))

        scores = (
            self.smog_index(text, language),
            self.coleman_liau_index(text, language),
            self.automated_readability_index(text, language),
            self.dale_chall_readability_score(text, language),
            self.linsear_write_formula(text, language),
            self.gunning_fog(text, language),
        )
        for score in scores:
            candidates.extend(grade_bounds(score))
        return candidates

    def text_standard(
        self,
        text: str,
        float_output: bool = False,
        language: str = "en_us"
    ) -> Union[str, float]:
        """
        Consensus grade level.

        Returns:
            The winning grade as a float when float_output is set, otherwise
            a description such as "10th and 11th grade"
        """
        grade = most_common_grade(self.grade_candidates(text, language))
        if float_output:
            return float(grade)
        return format_grade(grade)
