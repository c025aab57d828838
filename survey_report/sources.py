"""Read survey exports into flat string records."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Union

import pandas as pd

from survey_report.exceptions import EmptyInputError, RecordSourceError

logger = logging.getLogger(__name__)


def read_records(path: Union[str, Path]) -> List[Dict[str, str]]:
    """Return the rows of the CSV at *path* as ``{column: value}`` dicts.

    Every cell is read as text and blank cells stay ``""``; row order is
    preserved.

    Raises
    ------
    RecordSourceError
        If *path* does not exist.
    EmptyInputError
        If the file contains no data rows.
    """
    csv_path = Path(path)
    if not csv_path.is_file():
        raise RecordSourceError(f"CSV file not found at path: {csv_path}")

    try:
        df = pd.read_csv(csv_path, dtype=str, keep_default_na=False)
    except pd.errors.EmptyDataError as exc:
        raise EmptyInputError(f"CSV file is empty: {csv_path}") from exc

    if df.empty:
        raise EmptyInputError(f"CSV file is empty: {csv_path}")

    df.columns = [str(c).strip() for c in df.columns]
    records = df.to_dict(orient="records")
    logger.debug("Read %d records from %s", len(records), csv_path)
    return records
