"""Data structures shared by the survey analysis pipeline.

Every structure here is built once per analysis run and never mutated
afterwards. ``to_dict`` helpers emit the camelCase tree consumed by the
report renderer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple

__all__ = [
    "MISSING_DEPARTMENT",
    "NO_ANSWER",
    "QuestionType",
    "QuestionColumn",
    "QuestionCatalog",
    "Tally",
    "SatisfactionMetrics",
    "QuestionStats",
    "DepartmentStats",
    "QuestionAnalysis",
    "Overview",
    "AnalysisResult",
]

# Bucket key for responses without a ``Department`` value. Reports show
# ``config.MISSING_DEPARTMENT_LABEL`` instead of this key.
MISSING_DEPARTMENT = "<no department>"

# Literal placeholder some survey exports write for a skipped question
NO_ANSWER = "No answer"


class QuestionType(str, Enum):
    """Kinds of question the classifier can infer from raw answers."""

    STAR_RATING = "StarRating"
    CHECKBOX = "Checkbox"
    MCQ = "MCQ"
    TEXT = "Text"


@dataclass(frozen=True, slots=True)
class QuestionColumn:
    """A ``Question <n>`` / ``Answer <n>`` column pair discovered in the input."""

    id: str
    text_key: str
    answer_key: str


@dataclass(frozen=True, slots=True)
class QuestionCatalog:
    """Ordered question texts and the raw answers collected for each id."""

    columns: Tuple[QuestionColumn, ...]
    texts: Mapping[str, str]
    answers: Mapping[str, Tuple[str, ...]]

    @property
    def question_ids(self) -> Tuple[str, ...]:
        return tuple(self.texts)

    def column(self, question_id: str) -> QuestionColumn:
        """Return the column descriptor for *question_id*."""
        for col in self.columns:
            if col.id == question_id:
                return col
        raise KeyError(question_id)

    def __len__(self) -> int:
        return len(self.texts)


@dataclass(frozen=True, slots=True)
class Tally:
    """Option counts for one question within one group of responses.

    For checkbox questions the sum of ``counts`` may exceed
    ``response_count`` because one respondent selects several options.
    """

    counts: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))
    response_count: int = 0

    @classmethod
    def from_counts(cls, counts: Dict[str, int], response_count: int) -> "Tally":
        return cls(counts=MappingProxyType(dict(counts)), response_count=response_count)

    def __add__(self, other: "Tally") -> "Tally":
        merged: Dict[str, int] = dict(self.counts)
        for option, count in other.counts.items():
            merged[option] = merged.get(option, 0) + count
        return Tally.from_counts(merged, self.response_count + other.response_count)


@dataclass(frozen=True, slots=True)
class SatisfactionMetrics:
    """Two independent 0-100 percentages; they need not sum to 100."""

    satisfaction_pct: int = 0
    dissatisfaction_pct: int = 0


@dataclass(frozen=True, slots=True)
class QuestionStats:
    """A question's tally within one department."""

    question: str
    type: QuestionType
    tally: Tally
    all_options: Tuple[str, ...]

    @property
    def responses(self) -> Mapping[str, int]:
        return self.tally.counts

    @property
    def response_count(self) -> int:
        return self.tally.response_count

    def to_dict(self) -> Dict[str, Any]:
        return {
            "question": self.question,
            "type": self.type.value,
            "responses": dict(self.tally.counts),
            "responseCount": self.tally.response_count,
            "allOptions": list(self.all_options),
        }


@dataclass(frozen=True, slots=True)
class DepartmentStats:
    """All question tallies for a single department."""

    question_analysis: Mapping[str, QuestionStats]
    response_count: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "questionAnalysis": {
                qid: stats.to_dict() for qid, stats in self.question_analysis.items()
            },
            "responseCount": self.response_count,
        }


@dataclass(frozen=True, slots=True)
class QuestionAnalysis:
    """Cross-department view of one question."""

    question: str
    type: QuestionType
    department_responses: Mapping[str, QuestionStats]
    total_responses: int
    all_options: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "question": self.question,
            "type": self.type.value,
            "departmentResponses": {
                dept: stats.to_dict()
                for dept, stats in self.department_responses.items()
            },
            "totalResponses": self.total_responses,
            "allOptions": list(self.all_options),
        }


@dataclass(frozen=True, slots=True)
class Overview:
    """Organisation-wide headline numbers."""

    number_of_departments: int
    average_satisfaction: int
    average_dissatisfaction: int
    department_with_highest_dissatisfaction: str
    highest_dissatisfaction_rate: int
    total_questions: int
    total_responses: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "numberOfDepartments": self.number_of_departments,
            "averageSatisfaction": f"{self.average_satisfaction}%",
            "averageDissatisfaction": f"{self.average_dissatisfaction}%",
            "departmentWithHighestDissatisfaction": self.department_with_highest_dissatisfaction,
            "highestDissatisfactionRate": self.highest_dissatisfaction_rate,
            "totalQuestions": self.total_questions,
            "totalResponses": self.total_responses,
        }


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """Aggregate root handed to the report renderer."""

    overview: Overview
    department_stats: Mapping[str, DepartmentStats]
    question_analysis: Mapping[str, QuestionAnalysis]

    def to_dict(self) -> Dict[str, Any]:  # noqa: D401 – simple helper
        """Return a *plain* nested ``dict`` (camelCase keys)."""
        return {
            "overview": self.overview.to_dict(),
            "departmentStats": {
                dept: stats.to_dict() for dept, stats in self.department_stats.items()
            },
            "questionAnalysis": {
                qid: qa.to_dict() for qid, qa in self.question_analysis.items()
            },
        }

    # Alias for convenience (e.g. template kwargs)
    __call__ = to_dict
