"""Rule-based findings and recommendations for the report."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from survey_report.analysis.engine import NO_DEPARTMENT_FLAGGED
from survey_report.analysis.models import MISSING_DEPARTMENT, AnalysisResult
from survey_report.reporting import config

_GENERAL_RECOMMENDATIONS = (
    "Conduct follow-up surveys to track improvement progress.",
    "Implement department-specific action plans based on feedback.",
    "Regular monitoring of satisfaction metrics is recommended.",
)


def department_label(dept: str) -> str:
    """Return the display name for department key *dept*."""
    if dept == MISSING_DEPARTMENT:
        return config.MISSING_DEPARTMENT_LABEL
    return dept


@dataclass(slots=True)
class Insights:
    findings: List[str] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)


def generate_insights(result: AnalysisResult) -> Insights:
    """Derive headline findings and recommendations from *result*."""
    overview = result.overview
    insights = Insights()

    satisfaction = overview.average_satisfaction
    if satisfaction > config.EXCELLENT_THRESHOLD:
        insights.findings.append(
            "Overall satisfaction levels are excellent across the organization."
        )
    elif satisfaction > config.MODERATE_THRESHOLD:
        insights.findings.append(
            "Satisfaction levels are moderate with room for improvement."
        )
    else:
        insights.findings.append(
            "Satisfaction levels are below expectations and require immediate attention."
        )

    worst = overview.department_with_highest_dissatisfaction
    if worst != NO_DEPARTMENT_FLAGGED:
        worst = department_label(worst)
        insights.findings.append(
            f"{worst} department shows the highest dissatisfaction rate."
        )
        insights.recommendations.append(
            f"Focus improvement initiatives on {worst} department."
        )

    insights.findings.append(
        f"Analysis covers {overview.total_questions} questions across "
        f"{overview.number_of_departments} departments."
    )
    insights.recommendations.extend(_GENERAL_RECOMMENDATIONS)
    return insights
