"""Command-line bootstrap for the survey report generator.

Reads a survey CSV export, analyses it, and writes a markdown report (or
prints the analysis tree as JSON with ``--json``). Keeping the runtime
bootstrap here keeps the analysis modules free of side-effects on import.
"""
from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from survey_report.analysis.engine import analyze
from survey_report.exceptions import SurveyReportError
from survey_report.reporting.render import write_report
from survey_report.sources import read_records

logger = logging.getLogger("survey_report")

DEFAULT_REPORT_NAME = "survey_analysis.md"


def _configure_logging() -> None:
    logging_level = os.environ.get("SURVEY_LOG_LEVEL", "INFO")
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging_level,
    )


def default_output_path(csv_path: Path) -> Path:
    """Return ``<csv dir>/../reports/survey_analysis.md``."""
    return csv_path.resolve().parent.parent / "reports" / DEFAULT_REPORT_NAME


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="survey-report",
        description="Summarise survey responses per question and department.",
    )
    parser.add_argument(
        "csv_path",
        nargs="?",
        default=os.getenv("SURVEY_INPUT_CSV"),
        help="survey export (CSV); defaults to $SURVEY_INPUT_CSV",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=os.getenv("SURVEY_OUTPUT_PATH"),
        help="report destination; defaults to $SURVEY_OUTPUT_PATH or ../reports/",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="print the analysis tree as JSON instead of writing a report",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the generator and return the process exit status."""

    load_dotenv()
    _configure_logging()

    parser = _build_parser()
    args = parser.parse_args(argv)
    if not args.csv_path:
        parser.error("a CSV path is required (argument or SURVEY_INPUT_CSV)")

    csv_path = Path(args.csv_path)
    try:
        records = read_records(csv_path)
        result = analyze(records)
    except SurveyReportError as exc:
        logger.error("Analysis failed: %s", exc)
        return 1

    if args.json:
        json.dump(result.to_dict(), sys.stdout, indent=2, ensure_ascii=False)
        sys.stdout.write("\n")
        return 0

    out_path = Path(args.output) if args.output else default_output_path(csv_path)
    write_report(result, out_path)
    logger.info("Survey report ready: %s", out_path)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
