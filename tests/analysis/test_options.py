"""Unit tests for option extraction."""
from __future__ import annotations

from survey_report.analysis.models import QuestionType
from survey_report.analysis.options import extract_options, split_selections


def test_star_options_are_fixed():
    assert extract_options(["5", "5"], QuestionType.STAR_RATING) == (
        "1",
        "2",
        "3",
        "4",
        "5",
    )
    assert extract_options([], QuestionType.STAR_RATING) == ("1", "2", "3", "4", "5")


def test_mcq_options_sorted_and_distinct():
    answers = ["No", "Yes", "No answer", "", "Maybe", "Yes"]
    assert extract_options(answers, QuestionType.MCQ) == ("Maybe", "No", "Yes")


def test_mcq_options_ignore_answer_order():
    answers = ["Agree", "Disagree", "Neutral"]
    assert extract_options(answers, QuestionType.MCQ) == extract_options(
        list(reversed(answers)), QuestionType.MCQ
    )


def test_mcq_sort_is_code_point_order():
    assert extract_options(["b", "B", "a"], QuestionType.MCQ) == ("B", "a", "b")


def test_checkbox_options_split_and_trimmed():
    answers = ["Email, Slack", "Slack,Phone", "No answer"]
    assert extract_options(answers, QuestionType.CHECKBOX) == ("Email", "Phone", "Slack")


def test_text_has_no_options():
    assert extract_options(["anything"], QuestionType.TEXT) == ()


def test_split_selections_drops_empty_tokens():
    assert split_selections("A, , B,") == ["A", "B"]
