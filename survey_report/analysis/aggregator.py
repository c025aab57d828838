"""Tally option counts per question and department."""

from __future__ import annotations

import logging
from collections import Counter
from typing import Iterable, Mapping, Sequence

from survey_report.analysis.catalog import is_answered
from survey_report.analysis.classifier import is_single_star
from survey_report.analysis.models import QuestionColumn, QuestionType, Tally
from survey_report.analysis.options import split_selections

logger = logging.getLogger(__name__)


def tally(
    responses: Sequence[Mapping[str, str]],
    column: QuestionColumn,
    qtype: QuestionType,
) -> Tally:
    """Count how often each option was chosen for *column* in *responses*.

    A respondent adds one to ``response_count`` when they gave a usable
    answer. Star values other than a bare ``1``..``5`` are dropped without
    being counted anywhere.
    """
    counts: Counter[str] = Counter()
    response_count = 0

    for response in responses:
        answer = response.get(column.answer_key)
        if not is_answered(answer):
            continue

        if qtype is QuestionType.STAR_RATING:
            value = answer.strip()
            if not is_single_star(value):
                logger.debug(
                    "Dropping star value %r for question %s", answer, column.id
                )
                continue
            counts[value] += 1
        elif qtype is QuestionType.CHECKBOX:
            selections = split_selections(answer)
            if not selections:
                continue
            for option in selections:
                counts[option] += 1
        else:
            counts[answer] += 1

        response_count += 1

    return Tally.from_counts(dict(counts), response_count)


def sum_tallies(tallies: Iterable[Tally]) -> Tally:
    """Return the element-wise sum of *tallies*."""
    total = Tally()
    for item in tallies:
        total = total + item
    return total
