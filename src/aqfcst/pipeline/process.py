"""Reduce a combined table to the latest forecast issuance."""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from aqfcst.pipeline.combine import read_text_csv

LOGGER = logging.getLogger("aqfcst.pipeline")

ISSUED_COLUMN = "idp_issueddate_iso"
VALID_COLUMN = "idp_validtime_iso"
SORT_COLUMNS = ["point_id", VALID_COLUMN]
PROCESSED_COLUMNS = [
    "point_id",
    "lat",
    "long",
    ISSUED_COLUMN,
    VALID_COLUMN,
    "value",
    "requested_on",
]


class ProcessingError(RuntimeError):
    """Raised when a combined table has no issuance to select."""


def processed_path(path: Path | str) -> Path:
    """Return ``path`` with ``_processed`` inserted before the suffix."""

    path = Path(path)
    return path.with_name(f"{path.stem}_processed{path.suffix}")


def process_csv_file(input_file: Path | str) -> Path:
    """
    Keep rows from the latest issuance with a valid time, sorted by point and valid time.

    The latest issuance is the string maximum of ``idp_issueddate_iso``. That only
    matches chronological order while every row carries the same UTC offset.
    """

    input_file = Path(input_file)
    try:
        df = read_text_csv(input_file)
    except pd.errors.EmptyDataError as exc:
        raise ProcessingError(f"{input_file} is empty; nothing to process") from exc
    LOGGER.debug("Contents of %s:\n%s", input_file, df)

    missing = [col for col in PROCESSED_COLUMNS if col not in df.columns]
    if missing:
        raise ProcessingError(f"{input_file} is missing columns: {', '.join(missing)}")

    issued = df[ISSUED_COLUMN].dropna()
    if issued.empty:
        raise ProcessingError(f"{input_file} has no {ISSUED_COLUMN} values to select from")
    latest = issued.max()

    result = df[df[ISSUED_COLUMN] == latest]
    result = result[result[VALID_COLUMN].notna()]
    result = result.sort_values(SORT_COLUMNS, kind="stable")[PROCESSED_COLUMNS]
    LOGGER.debug(
        "Filtered for latest issued date %s, sorted by %s:\n%s",
        latest,
        ", ".join(SORT_COLUMNS),
        result,
    )

    output_file = processed_path(input_file)
    result.to_csv(output_file, index=False)
    LOGGER.info("Processed file at %s (%d rows, issued %s)", output_file, len(result), latest)
    return output_file
