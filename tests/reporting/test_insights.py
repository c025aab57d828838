"""Unit tests for rule-based report insights."""
from __future__ import annotations

import pytest

from survey_report.analysis.engine import analyze
from survey_report.reporting.insights import generate_insights


def _analysis(*moods, dept="Ops"):
    return analyze(
        [{"Department": dept, "Question 1": "Mood", "Answer 1": m} for m in moods]
    )


@pytest.mark.parametrize(
    "moods, expected",
    [
        (["Very Satisfied"], "excellent"),
        (["Satisfied"], "moderate"),
        (["Neutral"], "below expectations"),
    ],
)
def test_satisfaction_band(moods, expected):
    insights = generate_insights(_analysis(*moods))
    assert expected in insights.findings[0]


def test_worst_department_called_out():
    insights = generate_insights(_analysis("Dissatisfied", dept="Legal"))

    assert "Legal department shows the highest dissatisfaction rate." in insights.findings
    assert insights.recommendations[0] == "Focus improvement initiatives on Legal department."
    assert len(insights.recommendations) == 4


def test_no_worst_department():
    insights = generate_insights(_analysis("Satisfied"))

    assert insights.findings[-1] == "Analysis covers 1 questions across 1 departments."
    assert len(insights.recommendations) == 3
