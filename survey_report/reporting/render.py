"""Render survey analysis reports using Jinja2 templates."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from jinja2 import Environment, FileSystemLoader

from survey_report.analysis.models import AnalysisResult
from survey_report.reporting.context import build_report_context

logger = logging.getLogger(__name__)

_TEMPLATE_DIR = Path(__file__).parent / "templates"

# Markdown templates don’t need HTML escaping – it breaks apostrophes etc.
_env = Environment(
    loader=FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=False,
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_report(result: AnalysisResult) -> str:
    """Render a markdown report from an :class:`AnalysisResult`."""

    context = build_report_context(result)

    template = _env.get_template("report.md.j2")
    return template.render(**context.to_dict())


def write_report(result: AnalysisResult, path: Union[str, Path]) -> Path:
    """Render *result* and write it to *path*, creating parent directories."""

    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    report_text = render_report(result)
    out_path.write_text(report_text, encoding="utf-8")
    logger.info("Report written to %s (len=%d)", out_path, len(report_text))
    return out_path
