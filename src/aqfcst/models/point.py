"""Input points and their service geometry."""

from __future__ import annotations

from dataclasses import dataclass
import json
import logging
from pathlib import Path

import pandas as pd

from aqfcst.config import WKID

LOGGER = logging.getLogger("aqfcst.models")
POINT_COLUMNS = ("point_id", "lat", "long")


class InputParseError(ValueError):
    """Raised when the input point file cannot be read into points."""


@dataclass(frozen=True)
class Point:
    point_id: str
    lat: float
    long: float

    def to_geometry(self) -> str:
        """
        Encode the point as an ArcGIS JSON point geometry in WGS84.
        """

        return json.dumps({"x": self.long, "y": self.lat, "spatialReference": {"wkid": WKID}})


def read_points(path: Path | str) -> list[Point]:
    """
    Load points from a CSV with a ``point_id,lat,long`` header, keeping file order.
    """

    path = Path(path)
    LOGGER.info("Opening input file: %s", path)
    try:
        df = pd.read_csv(path, dtype={"point_id": "string"}, skipinitialspace=True)
    except (pd.errors.ParserError, pd.errors.EmptyDataError, ValueError) as exc:
        raise InputParseError(f"Unable to parse {path}: {exc}") from exc

    missing = [name for name in POINT_COLUMNS if name not in df.columns]
    if missing:
        raise InputParseError(f"{path} is missing required columns: {', '.join(missing)}")

    points: list[Point] = []
    for row_number, row in enumerate(df[list(POINT_COLUMNS)].itertuples(index=False), start=2):
        point_id = row.point_id
        if pd.isna(point_id) or not str(point_id).strip():
            raise InputParseError(f"{path}:{row_number}: point_id is empty")
        try:
            lat = float(row.lat)
            long = float(row.long)
        except (TypeError, ValueError) as exc:
            raise InputParseError(f"{path}:{row_number}: invalid coordinate ({exc})") from exc
        if pd.isna(lat) or pd.isna(long):
            raise InputParseError(f"{path}:{row_number}: lat/long is empty")
        points.append(Point(point_id=str(point_id), lat=lat, long=long))
    return points
