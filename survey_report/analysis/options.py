"""Derive the canonical option list of a question from its raw answers."""

from __future__ import annotations

from typing import List, Sequence, Set, Tuple

from survey_report.analysis.catalog import is_answered
from survey_report.analysis.models import QuestionType

STAR_OPTIONS: Tuple[str, ...] = ("1", "2", "3", "4", "5")


def split_selections(answer: str) -> List[str]:
    """Split a checkbox answer on commas, trimming tokens and dropping empties."""
    return [token.strip() for token in answer.split(",") if token.strip()]


def extract_options(answers: Sequence[str], qtype: QuestionType) -> Tuple[str, ...]:
    """Return the sorted option set for *qtype*.

    Star ratings always offer ``1``..``5``; free text has no options. For
    MCQ and checkbox questions the result depends only on the answers'
    content, never on their order.
    """
    if qtype is QuestionType.STAR_RATING:
        return STAR_OPTIONS

    if qtype is QuestionType.MCQ:
        return tuple(sorted({a for a in answers if is_answered(a)}))

    if qtype is QuestionType.CHECKBOX:
        options: Set[str] = set()
        for answer in answers:
            if is_answered(answer):
                options.update(split_selections(answer))
        return tuple(sorted(options))

    return ()
