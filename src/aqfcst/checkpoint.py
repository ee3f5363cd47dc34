"""Per-point checkpoint files in a scratch directory."""

from __future__ import annotations

import logging
import os
from pathlib import Path
import re
from typing import Iterable, Mapping

import pandas as pd

from aqfcst.config import SCRATCH_DIRNAME
from aqfcst.models.point import Point
from aqfcst.pipeline.flatten import FLAT_COLUMNS

LOGGER = logging.getLogger("aqfcst.checkpoint")
CHECKPOINT_SUFFIX = "_output.csv"
PARTIAL_SUFFIX = ".part"

_WHITESPACE = re.compile(r"\s+")


def normalize_point_id(point_id: str) -> str:
    """Snake-case ``point_id``, keeping only alphanumerics and underscores."""

    cleaned = _WHITESPACE.sub("_", point_id)
    kept = "".join(ch for ch in cleaned if ch.isalnum() or ch == "_")
    return kept.lower().strip("_")


def checkpoint_name(index: int, point: Point) -> str:
    return f"{index}_{normalize_point_id(point.point_id)}{CHECKPOINT_SUFFIX}"


def scratch_dir_for(output_file: Path | str) -> Path:
    """Return the scratch directory that sits beside ``output_file``."""

    return Path(output_file).parent / SCRATCH_DIRNAME


class WorkDir:
    """Handle on a scratch directory holding per-point checkpoint CSVs."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"WorkDir({str(self.path)!r})"

    def ensure(self) -> Path:
        """
        Create the directory if needed. Failures are logged, not raised.
        """

        try:
            self.path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            LOGGER.error("Error creating scratch directory %s: %s", self.path, exc)
        else:
            LOGGER.info("Using scratch directory %s", self.path)
        return self.path

    def list_names(self) -> set[str]:
        """Return the names of files currently in the directory."""

        try:
            return {entry.name for entry in self.path.iterdir() if entry.is_file()}
        except OSError as exc:
            LOGGER.error("Error reading scratch directory %s: %s", self.path, exc)
            return set()

    def path_for(self, name: str) -> Path:
        return self.path / name

    def exists(self, name: str) -> bool:
        return self.path_for(name).is_file()

    def write(self, name: str, rows: Iterable[Mapping[str, object]]) -> Path:
        """
        Write ``rows`` under the flat header, replacing any existing file.

        The CSV lands under ``name`` only once it is complete; an interrupted
        write leaves at most a ``.part`` file, which never counts as a checkpoint.
        """

        path = self.path_for(name)
        partial = self.path_for(name + PARTIAL_SUFFIX)
        df = pd.DataFrame(list(rows), columns=list(FLAT_COLUMNS), dtype=object)
        try:
            df.to_csv(partial, index=False)
            os.replace(partial, path)
        except BaseException:
            partial.unlink(missing_ok=True)
            raise
        LOGGER.info("CSV written to %s", path)
        return path

    def delete(self, name: str) -> bool:
        path = self.path_for(name)
        try:
            path.unlink()
        except OSError as exc:
            LOGGER.warning("Error deleting file %s: %s", path, exc)
            return False
        LOGGER.debug("File %s successfully deleted", path)
        return True
