"""Context dataclasses for rendering survey reports.

This module defines `ReportContext`, a typed container that holds all
values expected by the Jinja2 template located in
`survey_report/reporting/templates/report.md.j2`.

Keeping *context building* apart from *template rendering* lets the
per-question summaries (average star rating, positive-response rate, ...)
be unit-tested without touching template strings.
"""
from __future__ import annotations

import os
from dataclasses import asdict, dataclass, field
from datetime import datetime as _dt
from datetime import timezone as _tz
from typing import Any, Dict, List, Mapping

from survey_report.analysis.models import AnalysisResult, QuestionAnalysis, QuestionType
from survey_report.reporting import config
from survey_report.reporting.insights import department_label, generate_insights

__all__ = [
    "OptionRow",
    "DepartmentBlock",
    "QuestionBlock",
    "ReportContext",
    "build_report_context",
]

# MCQ options counted towards the positive-response rate (substring match)
POSITIVE_OPTIONS = (
    "Very Satisfied",
    "Satisfied",
    "Excellent",
    "Good",
    "Strongly Agree",
    "Agree",
    "Always",
    "Often",
    "Yes",
    "Continue",
)


@dataclass(slots=True)
class OptionRow:
    label: str
    count: int


@dataclass(slots=True)
class DepartmentBlock:
    """One department's answers to one question."""

    department: str
    rows: List[OptionRow] = field(default_factory=list)
    summary: str = ""
    text_responses: List[str] = field(default_factory=list)
    more_responses: int = 0


@dataclass(slots=True)
class QuestionBlock:
    index: int
    question: str
    type: str
    total_responses: int
    departments: List[DepartmentBlock] = field(default_factory=list)


@dataclass(slots=True)
class ReportContext:
    """Container with all fields used by the report template."""

    date: str  # ISO-8601 date string (UTC)
    overview: Dict[str, Any]
    department_with_highest_dissatisfaction: str
    questions: List[QuestionBlock] = field(default_factory=list)
    findings: List[str] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)
    version: str = "1"

    def to_dict(self) -> Dict[str, Any]:  # noqa: D401 – simple helper
        """Return a *plain* ``dict`` (recursively) for Jinja rendering."""
        return asdict(self)

    __call__ = to_dict


# ---------------------------------------------------------------------------
# Per-type helpers
# ---------------------------------------------------------------------------
def _option_rows(counts: Mapping[str, int], options) -> List[OptionRow]:
    return [OptionRow(label=opt, count=counts.get(opt, 0)) for opt in options]


def _star_label(option: str) -> str:
    return f"{option} Star{'s' if int(option) > 1 else ''}"


def average_rating(counts: Mapping[str, int]) -> str:
    """Return the weighted mean star rating formatted to one decimal."""
    total = sum(counts.values())
    if not total:
        return "0.0"
    weighted = sum(int(stars) * count for stars, count in counts.items())
    return f"{weighted / total:.1f}"


def positive_rate(counts: Mapping[str, int]) -> float:
    """Return the share (0-100) of MCQ answers containing a positive label."""
    total = sum(counts.values())
    if not total:
        return 0.0
    positive = sum(
        count
        for option, count in counts.items()
        if any(label in option for label in POSITIVE_OPTIONS)
    )
    return positive / total * 100


def truncate(text: str, limit: int = config.TEXT_TRUNCATE) -> str:
    return text if len(text) <= limit else text[:limit] + "..."


def _department_block(dept: str, qa: QuestionAnalysis) -> DepartmentBlock:
    stats = qa.department_responses[dept]
    counts = stats.responses
    block = DepartmentBlock(department=department_label(dept))
    total = sum(counts.values())

    if qa.type is QuestionType.STAR_RATING:
        block.rows = [
            OptionRow(label=_star_label(opt), count=counts.get(opt, 0))
            for opt in qa.all_options
        ]
        block.summary = (
            f"Average Rating: {average_rating(counts)}/5.0 ({total} total responses)"
        )
    elif qa.type is QuestionType.MCQ:
        block.rows = _option_rows(counts, qa.all_options)
        rate = positive_rate(counts)
        if total and rate:
            block.summary = (
                f"Positive Response Rate: {rate:.1f}% ({total} total responses)"
            )
        else:
            block.summary = f"Total Responses: {total}"
    elif qa.type is QuestionType.CHECKBOX:
        block.rows = _option_rows(counts, qa.all_options)
        block.summary = f"Total Selections: {total}"
    else:
        distinct = list(counts)
        block.text_responses = [
            truncate(answer) for answer in distinct[: config.MAX_TEXT_RESPONSES]
        ]
        block.more_responses = max(0, len(distinct) - config.MAX_TEXT_RESPONSES)

    return block


# ---------------------------------------------------------------------------
# Conversion helper
# ---------------------------------------------------------------------------
def build_report_context(result: AnalysisResult) -> ReportContext:
    """Convert an :class:`AnalysisResult` into :class:`ReportContext`.

    The function is *pure* – it reads *result* and never mutates it.
    """
    questions: List[QuestionBlock] = []
    for index, qa in enumerate(result.question_analysis.values(), start=1):
        questions.append(
            QuestionBlock(
                index=index,
                question=qa.question,
                type=qa.type.value,
                total_responses=qa.total_responses,
                departments=[
                    _department_block(dept, qa) for dept in qa.department_responses
                ],
            )
        )

    insights = generate_insights(result)
    worst = result.overview.department_with_highest_dissatisfaction

    return ReportContext(
        date=_dt.now(tz=_tz.utc).strftime("%Y-%m-%d"),
        overview=result.overview.to_dict(),
        department_with_highest_dissatisfaction=department_label(worst),
        questions=questions,
        findings=insights.findings,
        recommendations=insights.recommendations,
        version=os.getenv("REPORT_VERSION", "0.1"),
    )
