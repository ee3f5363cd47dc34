"""Combine per-point CSV files into a single table."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

import pandas as pd

LOGGER = logging.getLogger("aqfcst.pipeline")


def read_text_csv(path: Path | str) -> pd.DataFrame:
    """Read a CSV keeping every cell as text; empty cells become nulls."""

    return pd.read_csv(path, dtype=str, keep_default_na=False, na_values=[""])


def combine_csv_files(input_files: Sequence[Path | str], output_file: Path | str) -> Path:
    """
    Concatenate ``input_files`` in order under the header of the first file.
    """

    output_file = Path(output_file)
    LOGGER.info("Opening output file: %s", output_file)
    if not input_files:
        LOGGER.warning("No input files to combine; writing an empty %s", output_file)
        output_file.write_text("", encoding="utf-8")
        return output_file

    frames = [read_text_csv(path) for path in input_files]
    header = list(frames[0].columns)
    combined = pd.concat(frames, ignore_index=True, sort=False)
    combined.reindex(columns=header).to_csv(output_file, index=False)
    LOGGER.info("Combined %d files (%d rows) at %s", len(frames), len(combined), output_file)
    return output_file
