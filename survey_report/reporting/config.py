"""Configuration constants for the reporting pipeline."""
from __future__ import annotations

import os

# Free-text answers listed per department before collapsing the rest
MAX_TEXT_RESPONSES: int = int(os.getenv("REPORT_MAX_TEXT_RESPONSES", "5"))

# Free-text answers longer than this are truncated with "..."
TEXT_TRUNCATE: int = int(os.getenv("REPORT_TEXT_TRUNCATE", "80"))

# Overall satisfaction (%) above which the organisation is rated excellent
EXCELLENT_THRESHOLD: int = int(os.getenv("REPORT_EXCELLENT_THRESHOLD", "80"))

# Overall satisfaction (%) above which the organisation is rated moderate
MODERATE_THRESHOLD: int = int(os.getenv("REPORT_MODERATE_THRESHOLD", "60"))

# Heading shown for responses that carried no department
MISSING_DEPARTMENT_LABEL: str = os.getenv(
    "REPORT_MISSING_DEPARTMENT_LABEL", "Unassigned"
)
