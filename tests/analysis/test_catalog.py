"""Unit tests for column discovery and the question catalog."""
from __future__ import annotations

from survey_report.analysis.catalog import (
    build_catalog,
    department_of,
    discover_columns,
    discover_departments,
)
from survey_report.analysis.models import MISSING_DEPARTMENT


def _records():
    return [
        {
            "Department": "Sales",
            "Question 2": "Rate us",
            "Answer 2": "4",
            "Question 10": "Comments",
            "Answer 10": "No answer",
        },
        {
            "Department": "IT",
            "Question 2": "Rate us",
            "Answer 2": "",
            "Question 10": "Comments",
            "Answer 10": "Fine",
            "Question 7": "   ",
            "Answer 7": "ignored",
        },
    ]


def test_discover_columns_in_first_seen_order():
    columns = discover_columns(_records())
    assert [c.id for c in columns] == ["2", "10", "7"]
    assert columns[0].text_key == "Question 2"
    assert columns[0].answer_key == "Answer 2"


def test_discover_columns_ignores_other_keys():
    columns = discover_columns([{"Questionnaire": "x", "Question": "y", "Answer 1": "z"}])
    assert columns == ()


def test_catalog_texts_and_answers():
    catalog = build_catalog(_records())

    assert catalog.question_ids == ("2", "10")
    assert catalog.texts["2"] == "Rate us"
    assert catalog.answers["2"] == ("4",)
    assert catalog.answers["10"] == ("Fine",)


def test_blank_question_text_is_excluded():
    catalog = build_catalog(_records())
    assert "7" not in catalog.texts
    assert len(catalog) == 2


def test_first_text_wins():
    records = [
        {"Question 1": "Original", "Answer 1": "a"},
        {"Question 1": "Changed", "Answer 1": "b"},
    ]
    catalog = build_catalog(records)
    assert catalog.texts["1"] == "Original"
    assert catalog.answers["1"] == ("a", "b")


def test_question_without_answers_still_catalogued():
    catalog = build_catalog([{"Question 1": "Anything?", "Answer 1": ""}])
    assert catalog.answers["1"] == ()


def test_missing_department_uses_sentinel():
    assert department_of({}) == MISSING_DEPARTMENT
    assert department_of({"Department": "  "}) == MISSING_DEPARTMENT
    assert department_of({"Department": "HR"}) == "HR"


def test_departments_in_first_seen_order():
    records = [{"Department": "B"}, {"Department": "A"}, {}, {"Department": "B"}]
    assert discover_departments(records) == ("B", "A", MISSING_DEPARTMENT)
