"""Pipeline helpers for flattening, combining, and processing identify results."""

from __future__ import annotations

from .combine import combine_csv_files
from .flatten import FLAT_COLUMNS, SchemaInvariantError, epoch_ms_to_local_iso, flatten
from .process import ProcessingError, process_csv_file, processed_path

__all__ = [
    "FLAT_COLUMNS",
    "ProcessingError",
    "SchemaInvariantError",
    "combine_csv_files",
    "epoch_ms_to_local_iso",
    "flatten",
    "process_csv_file",
    "processed_path",
]
