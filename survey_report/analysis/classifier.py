"""Heuristic question-type classification.

The classifier looks at the *first* non-empty answer collected for a
question (scan order) and falls back to a majority vote over all answers.
Classification is therefore a pure function of ``(first_answer,
all_answers)``; permuting the input rows can change the outcome.
"""

from __future__ import annotations

import logging
import re
from typing import FrozenSet, Optional, Sequence

from survey_report.analysis.models import QuestionType

logger = logging.getLogger(__name__)

SINGLE_STAR_RE = re.compile(r"^[1-5]$")
STAR_TEXT_RE = re.compile(r"(\d+)\s*stars?", re.IGNORECASE)

MCQ_VOCABULARY: FrozenSet[str] = frozenset(
    {
        # satisfaction
        "Very Satisfied",
        "Satisfied",
        "Neutral",
        "Dissatisfied",
        "Very Dissatisfied",
        # quality
        "Excellent",
        "Good",
        "Average",
        "Poor",
        "Very Poor",
        # agreement
        "Strongly Agree",
        "Agree",
        "Disagree",
        "Strongly Disagree",
        # frequency
        "Always",
        "Often",
        "Sometimes",
        "Rarely",
        "Never",
        "Yes",
        "No",
        "Maybe",
        "Continue",
        "Discontinue",
        "Modify",
        "NA",
    }
)

# Share of answers that must come from the vocabulary for a majority vote
MCQ_MAJORITY = 0.5


def is_single_star(value: str) -> bool:
    """Return *True* for a bare ``1``..``5`` digit (surrounding whitespace ignored)."""
    return bool(SINGLE_STAR_RE.match(value.strip()))


def first_answer(answers: Sequence[str]) -> Optional[str]:
    """Return the first non-empty entry of *answers*, or *None*."""
    for answer in answers:
        if answer:
            return answer
    return None


def classify(
    first: Optional[str], all_answers: Sequence[str] = ()
) -> QuestionType:
    """Infer the :class:`QuestionType` of a question.

    Rules are tried in order, first match wins:

    1. no first answer → ``Text``
    2. a bare 1-5 digit or ``<n> star(s)`` text → ``StarRating``
    3. contains a comma → ``Checkbox``
    4. exact vocabulary term → ``MCQ``
    5. more than half of the answers are vocabulary terms → ``MCQ``
    6. otherwise ``Text``
    """
    if not first:
        return QuestionType.TEXT

    if is_single_star(first) or STAR_TEXT_RE.search(first):
        return QuestionType.STAR_RATING

    if "," in first:
        return QuestionType.CHECKBOX

    if first.strip() in MCQ_VOCABULARY:
        return QuestionType.MCQ

    candidates = [a for a in all_answers if a]
    if candidates:
        hits = sum(1 for a in candidates if a.strip() in MCQ_VOCABULARY)
        if hits > len(candidates) * MCQ_MAJORITY:
            logger.debug("Majority vote %d/%d → MCQ", hits, len(candidates))
            return QuestionType.MCQ

    return QuestionType.TEXT


def classify_answers(answers: Sequence[str]) -> QuestionType:
    """Classify from the collected raw answers of one question."""
    return classify(first_answer(answers), answers)
