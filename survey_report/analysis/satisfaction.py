"""Satisfaction and dissatisfaction scoring.

Two separate accumulators are kept: one over positive answers and one over
negative answers. Neutral or unrecognised answers feed neither, so the two
percentages are independent and need not add up to 100.
"""

from __future__ import annotations

import math
from typing import Dict, Mapping, Sequence

from survey_report.analysis.classifier import STAR_TEXT_RE
from survey_report.analysis.models import QuestionColumn, SatisfactionMetrics

LIKERT_SCORES: Dict[str, int] = {
    "Very Satisfied": 100,
    "Satisfied": 75,
    "Neutral": 50,
    "Dissatisfied": 25,
    "Very Dissatisfied": 0,
}

_POSITIVE_LABELS = frozenset({"Very Satisfied", "Satisfied"})
_NEGATIVE_LABELS = frozenset({"Dissatisfied", "Very Dissatisfied"})

# Star counts at or above this value are satisfied
STAR_SATISFIED_MIN = 3
STAR_SCALE = 5


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


class _Accumulator:
    __slots__ = ("total", "count")

    def __init__(self) -> None:
        self.total = 0.0
        self.count = 0

    def add(self, value: float) -> None:
        self.total += value
        self.count += 1

    def percentage(self) -> int:
        if not self.count:
            return 0
        return round_half_up(self.total / self.count)


def score(
    responses: Sequence[Mapping[str, str]],
    columns: Sequence[QuestionColumn],
) -> SatisfactionMetrics:
    """Compute satisfaction metrics over every answered question in *responses*.

    An answer only counts when the same record carries non-empty text for
    the paired question.
    """
    satisfied = _Accumulator()
    dissatisfied = _Accumulator()

    for response in responses:
        for col in columns:
            answer = response.get(col.answer_key)
            if not answer or not response.get(col.text_key):
                continue

            match = STAR_TEXT_RE.search(answer)
            if match:
                stars = int(match.group(1))
                if stars >= STAR_SATISFIED_MIN:
                    satisfied.add(stars / STAR_SCALE * 100)
                else:
                    dissatisfied.add((STAR_SCALE - stars) / STAR_SCALE * 100)
                continue

            label = answer.strip()
            if label in _POSITIVE_LABELS:
                satisfied.add(LIKERT_SCORES[label])
            elif label in _NEGATIVE_LABELS:
                dissatisfied.add(100 - LIKERT_SCORES[label])

    return SatisfactionMetrics(
        satisfaction_pct=satisfied.percentage(),
        dissatisfaction_pct=dissatisfied.percentage(),
    )
