"""Unit tests for the CSV record source."""
from __future__ import annotations

import pytest

from survey_report.exceptions import EmptyInputError, RecordSourceError
from survey_report.sources import read_records


def test_reads_rows_as_strings(tmp_path):
    csv_file = tmp_path / "responses.csv"
    csv_file.write_text(
        "Department,Question 1,Answer 1,Question 2,Answer 2\n"
        "Sales,Rate us,4,Comments,\n"
        "IT,Rate us,NA,Comments,\"Fast, friendly\"\n",
        encoding="utf-8",
    )

    records = read_records(csv_file)

    assert records == [
        {
            "Department": "Sales",
            "Question 1": "Rate us",
            "Answer 1": "4",
            "Question 2": "Comments",
            "Answer 2": "",
        },
        {
            "Department": "IT",
            "Question 1": "Rate us",
            "Answer 1": "NA",
            "Question 2": "Comments",
            "Answer 2": "Fast, friendly",
        },
    ]


def test_missing_file_raises(tmp_path):
    with pytest.raises(RecordSourceError, match="not found"):
        read_records(tmp_path / "nope.csv")


def test_header_only_file_is_empty(tmp_path):
    csv_file = tmp_path / "responses.csv"
    csv_file.write_text("Department,Question 1,Answer 1\n", encoding="utf-8")

    with pytest.raises(EmptyInputError):
        read_records(csv_file)


def test_zero_byte_file_is_empty(tmp_path):
    csv_file = tmp_path / "responses.csv"
    csv_file.write_text("", encoding="utf-8")

    with pytest.raises(EmptyInputError):
        read_records(csv_file)
