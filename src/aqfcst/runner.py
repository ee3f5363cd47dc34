"""Orchestrate point fetches, checkpoints, and exports for aqfcst."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import logging
from pathlib import Path
from typing import Mapping

from aqfcst.backends.arcgis_backend import ArcGISBackend
from aqfcst.backends.base import IdentifyBackend
from aqfcst.checkpoint import WorkDir, checkpoint_name, scratch_dir_for
from aqfcst.config import DEFAULT_URL
from aqfcst.models.point import Point, read_points
from aqfcst.pipeline import combine_csv_files, flatten, process_csv_file

LOGGER = logging.getLogger("aqfcst.runner")


class PointState(str, Enum):
    PENDING = "pending"
    SKIPPED = "skipped"
    FETCHING = "fetching"
    FETCHED = "fetched"
    FLATTENED = "flattened"
    WRITTEN = "written"
    DELETED = "deleted"


@dataclass
class PointTask:
    """A point, its checkpoint file, and how far it got in this run."""

    index: int
    point: Point
    name: str
    state: PointState = PointState.PENDING
    rows: int | None = None


class BatchRunner:
    """Execute a full fetch → combine → process → cleanup workflow."""

    def __init__(
        self,
        *,
        input_path: Path | str,
        output_path: Path | str,
        url: str = DEFAULT_URL,
        process: bool = False,
        backend: IdentifyBackend | None = None,
        work_dir: WorkDir | Path | str | None = None,
    ) -> None:
        self.input_path = Path(input_path)
        self.output_path = Path(output_path)
        self.url = url
        self.process = process
        self.backend = backend or ArcGISBackend()
        if work_dir is None:
            work_dir = scratch_dir_for(self.output_path)
        self.work_dir = work_dir if isinstance(work_dir, WorkDir) else WorkDir(work_dir)

    def run(self) -> Mapping[str, object]:
        """Fetch every point not already checkpointed, then combine and clean up."""

        points = read_points(self.input_path)
        tasks = [PointTask(index=i, point=p, name=checkpoint_name(i, p)) for i, p in enumerate(points)]

        self.work_dir.ensure()
        existing = self.work_dir.list_names()

        LOGGER.info("Requesting values from %s for %d points...", self.url, len(tasks))
        for task in tasks:
            if task.name in existing:
                task.state = PointState.SKIPPED
                LOGGER.info(
                    "Skipping %s (%s, %s) because %s already exists in %s",
                    task.point.point_id,
                    task.point.lat,
                    task.point.long,
                    task.name,
                    self.work_dir.path,
                )
                continue
            self._fetch(task)

        output = combine_csv_files([self.work_dir.path_for(t.name) for t in tasks], self.output_path)
        processed: Path | None = None
        try:
            if self.process:
                processed = process_csv_file(output)
        finally:
            self._cleanup(tasks)
        return {"output": output, "processed": processed, "tasks": tasks}

    def _fetch(self, task: PointTask) -> None:
        point = task.point
        LOGGER.info("Requesting values for %s (%s, %s)...", point.point_id, point.lat, point.long)
        task.state = PointState.FETCHING
        result = self.backend.identify(self.url, point)
        task.state = PointState.FETCHED
        rows = flatten(result)
        task.state = PointState.FLATTENED
        self.work_dir.write(task.name, rows)
        task.rows = len(rows)
        task.state = PointState.WRITTEN

    def _cleanup(self, tasks: list[PointTask]) -> None:
        deleted = 0
        for task in tasks:
            if self.work_dir.delete(task.name):
                task.state = PointState.DELETED
                deleted += 1
        LOGGER.info("Deleted %d of %d checkpoint files from %s", deleted, len(tasks), self.work_dir.path)
