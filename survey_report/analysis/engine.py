"""Assemble the full :class:`AnalysisResult` from flat survey records."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, List, Mapping, Sequence, Tuple

from survey_report.analysis.aggregator import sum_tallies, tally
from survey_report.analysis.catalog import (
    build_catalog,
    department_of,
    discover_columns,
    discover_departments,
)
from survey_report.analysis.classifier import classify_answers
from survey_report.analysis.models import (
    AnalysisResult,
    DepartmentStats,
    Overview,
    QuestionAnalysis,
    QuestionStats,
    QuestionType,
    SatisfactionMetrics,
)
from survey_report.analysis.options import extract_options
from survey_report.analysis.satisfaction import score
from survey_report.exceptions import EmptyInputError

logger = logging.getLogger(__name__)

NO_DEPARTMENT_FLAGGED = "None"


def _group_by_department(
    records: Sequence[Mapping[str, str]], departments: Sequence[str]
) -> Dict[str, List[Mapping[str, str]]]:
    groups: Dict[str, List[Mapping[str, str]]] = {dept: [] for dept in departments}
    for record in records:
        groups[department_of(record)].append(record)
    return groups


def _most_dissatisfied(
    metrics: Mapping[str, SatisfactionMetrics]
) -> Tuple[str, int]:
    """Return the department with the strictly highest dissatisfaction.

    *metrics* must iterate in department discovery order so that ties go to
    the earliest department. ``"None"`` is returned when every rate is zero.
    """
    worst, worst_rate = "", 0
    for dept, m in metrics.items():
        if m.dissatisfaction_pct > worst_rate:
            worst, worst_rate = dept, m.dissatisfaction_pct
    return worst or NO_DEPARTMENT_FLAGGED, worst_rate


def analyze(records: Sequence[Mapping[str, str]]) -> AnalysisResult:
    """Analyse *records* and return the nested result tree.

    The function is read-only and deterministic: identical input always
    yields an identical result.

    Raises
    ------
    EmptyInputError
        If *records* is empty.
    """
    if not records:
        raise EmptyInputError("No survey responses to analyse")

    columns = discover_columns(records)
    catalog = build_catalog(records, columns)
    departments = discover_departments(records)
    groups = _group_by_department(records, departments)

    types: Dict[str, QuestionType] = {}
    options: Dict[str, Tuple[str, ...]] = {}
    for qid in catalog.question_ids:
        answers = catalog.answers[qid]
        types[qid] = classify_answers(answers)
        options[qid] = extract_options(answers, types[qid])
        logger.debug("Question %s classified as %s", qid, types[qid].value)

    overall = score(records, columns)
    dept_metrics = {dept: score(groups[dept], columns) for dept in departments}
    worst_dept, worst_rate = _most_dissatisfied(dept_metrics)

    department_stats: Dict[str, DepartmentStats] = {}
    for dept in departments:
        dept_records = groups[dept]
        per_question = {
            qid: QuestionStats(
                question=catalog.texts[qid],
                type=types[qid],
                tally=tally(dept_records, catalog.column(qid), types[qid]),
                all_options=options[qid],
            )
            for qid in catalog.question_ids
        }
        department_stats[dept] = DepartmentStats(
            question_analysis=MappingProxyType(per_question),
            response_count=len(dept_records),
        )

    question_analysis: Dict[str, QuestionAnalysis] = {}
    for qid in catalog.question_ids:
        by_dept = {
            dept: department_stats[dept].question_analysis[qid] for dept in departments
        }
        question_analysis[qid] = QuestionAnalysis(
            question=catalog.texts[qid],
            type=types[qid],
            department_responses=MappingProxyType(by_dept),
            total_responses=sum_tallies(s.tally for s in by_dept.values()).response_count,
            all_options=options[qid],
        )

    overview = Overview(
        number_of_departments=len(departments),
        average_satisfaction=overall.satisfaction_pct,
        average_dissatisfaction=overall.dissatisfaction_pct,
        department_with_highest_dissatisfaction=worst_dept,
        highest_dissatisfaction_rate=worst_rate,
        total_questions=len(catalog),
        total_responses=len(records),
    )

    logger.info(
        "Analysed %d responses: %d departments, %d questions",
        len(records),
        len(departments),
        len(catalog),
    )

    return AnalysisResult(
        overview=overview,
        department_stats=MappingProxyType(department_stats),
        question_analysis=MappingProxyType(question_analysis),
    )
