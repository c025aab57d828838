"""Unit tests for per-department tallies."""
from __future__ import annotations

from survey_report.analysis.aggregator import sum_tallies, tally
from survey_report.analysis.models import QuestionColumn, QuestionType, Tally

COL = QuestionColumn(id="1", text_key="Question 1", answer_key="Answer 1")


def _responses(*answers):
    return [{"Question 1": "Q", "Answer 1": a} for a in answers]


def test_star_rating_counts_single_digits_only():
    result = tally(_responses("5", " 4", "4 stars", "6", "5"), COL, QuestionType.STAR_RATING)

    assert dict(result.counts) == {"5": 2, "4": 1}
    # malformed values neither count nor contribute to response_count
    assert result.response_count == 3


def test_checkbox_counts_each_option_once_per_respondent():
    result = tally(_responses("A, B", "B"), COL, QuestionType.CHECKBOX)

    assert dict(result.counts) == {"A": 1, "B": 2}
    assert result.response_count == 2


def test_mcq_counts_literal_answers():
    result = tally(_responses("Yes", "No", "Yes", "No answer", ""), COL, QuestionType.MCQ)

    assert dict(result.counts) == {"Yes": 2, "No": 1}
    assert result.response_count == 3


def test_text_counts_literal_answers():
    result = tally(_responses("Good", "Good", "Bad"), COL, QuestionType.TEXT)

    assert dict(result.counts) == {"Good": 2, "Bad": 1}
    assert result.response_count == 3


def test_missing_answer_column_is_skipped():
    result = tally([{"Department": "HR"}], COL, QuestionType.MCQ)
    assert dict(result.counts) == {}
    assert result.response_count == 0


def test_sum_tallies_merges_counts():
    a = Tally.from_counts({"Yes": 1}, 1)
    b = Tally.from_counts({"Yes": 2, "No": 1}, 3)

    total = sum_tallies([a, b])

    assert dict(total.counts) == {"Yes": 3, "No": 1}
    assert total.response_count == 4


def test_checkbox_answer_of_only_separators_is_not_counted():
    result = tally(_responses(",", " , ", "A"), COL, QuestionType.CHECKBOX)

    assert dict(result.counts) == {"A": 1}
    assert result.response_count == 1
