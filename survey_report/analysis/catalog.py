"""Discover question/answer column pairs and collect raw answers."""

from __future__ import annotations

import logging
import re
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from survey_report.analysis.models import (
    MISSING_DEPARTMENT,
    NO_ANSWER,
    QuestionCatalog,
    QuestionColumn,
)

logger = logging.getLogger(__name__)

Record = Mapping[str, str]

_QUESTION_KEY_RE = re.compile(r"^\s*Question\s+(\d+)\s*$")

DEPARTMENT_KEY = "Department"


def is_answered(value: Optional[str]) -> bool:
    """Return *True* unless *value* is blank or the ``No answer`` placeholder."""
    return bool(value) and value != NO_ANSWER


def department_of(record: Record) -> str:
    """Return the department key for *record*, or the missing-department bucket."""
    dept = record.get(DEPARTMENT_KEY)
    if dept is None or not str(dept).strip():
        return MISSING_DEPARTMENT
    return dept


def discover_departments(records: Sequence[Record]) -> Tuple[str, ...]:
    """Return department keys in first-seen order."""
    seen = set()
    ordered: List[str] = []
    for record in records:
        dept = department_of(record)
        if dept not in seen:
            seen.add(dept)
            ordered.append(dept)
    return tuple(ordered)


def discover_columns(records: Sequence[Record]) -> Tuple[QuestionColumn, ...]:
    """Return every ``Question <n>`` column pair in first-seen order.

    Records are scanned in input order and keys in record order. Columns
    whose name does not match ``Question <n>`` are ignored.
    """
    seen = set()
    columns: List[QuestionColumn] = []
    for record in records:
        for key in record:
            match = _QUESTION_KEY_RE.match(key)
            if not match:
                continue
            qid = match.group(1)
            if qid in seen:
                continue
            seen.add(qid)
            columns.append(
                QuestionColumn(id=qid, text_key=key, answer_key=f"Answer {qid}")
            )
    return tuple(columns)


def build_catalog(
    records: Sequence[Record],
    columns: Optional[Sequence[QuestionColumn]] = None,
) -> QuestionCatalog:
    """Build the question catalog from *records*.

    A question enters the catalog the first time it is seen with non-blank
    text; later texts for the same id are ignored. Answers are collected only
    from records that carry the question text, skipping blanks and
    ``No answer``.
    """
    if columns is None:
        columns = discover_columns(records)

    texts: Dict[str, str] = {}
    answers: Dict[str, List[str]] = {}

    for record in records:
        for col in columns:
            text = record.get(col.text_key)
            if not text or not text.strip():
                continue
            if col.id not in texts:
                texts[col.id] = text
                answers[col.id] = []
            elif texts[col.id] != text:
                logger.debug(
                    "Ignoring differing text for question %s: %r", col.id, text
                )
            answer = record.get(col.answer_key)
            if is_answered(answer):
                answers[col.id].append(answer)

    # Catalog order follows first observation with text, not column discovery.
    catalogued = [col for col in columns if col.id in texts]
    order = {qid: idx for idx, qid in enumerate(texts)}
    catalogued.sort(key=lambda col: order[col.id])

    return QuestionCatalog(
        columns=tuple(catalogued),
        texts=MappingProxyType(dict(texts)),
        answers=MappingProxyType({qid: tuple(vals) for qid, vals in answers.items()}),
    )
