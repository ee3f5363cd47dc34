"""Flatten identify responses into one row per raster slice."""

from __future__ import annotations

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

from aqfcst.config import LOCAL_TIMEZONE
from aqfcst.models.response import ATTRIBUTE_FIELDS, IdentifyResult

FlatRow = dict[str, object]

RESULT_COLUMNS = (
    "point_id",
    "lat",
    "long",
    "idp_issueddate_iso",
    "idp_validtime_iso",
    "value",
    "requested_on",
    "url",
)
FLAT_COLUMNS: tuple[str, ...] = RESULT_COLUMNS + ATTRIBUTE_FIELDS

_LOCAL_TZ = ZoneInfo(LOCAL_TIMEZONE)


class SchemaInvariantError(ValueError):
    """Pixel values and catalog features do not line up."""


def epoch_ms_to_local_iso(value: int | None) -> str | None:
    """
    Render epoch milliseconds as an offset-aware ISO-8601 string in the local zone.

    Sub-second precision is dropped.
    """

    if value is None:
        return None
    instant = datetime.fromtimestamp(value // 1000, tz=timezone.utc)
    return instant.astimezone(_LOCAL_TZ).isoformat()


def flatten(result: IdentifyResult) -> list[FlatRow]:
    """Return one row per slice, in the order the service listed them."""

    values = result.response.values
    attributes = result.response.attributes
    if len(values) != len(attributes):
        raise SchemaInvariantError(
            f"{result.point.point_id}: {len(values)} pixel values but {len(attributes)} catalog items"
        )

    rows: list[FlatRow] = []
    for value, attrs in zip(values, attributes):
        row: FlatRow = {
            "point_id": result.point.point_id,
            "lat": result.point.lat,
            "long": result.point.long,
            "idp_issueddate_iso": epoch_ms_to_local_iso(attrs.idp_issueddate),
            "idp_validtime_iso": epoch_ms_to_local_iso(attrs.idp_validtime),
            "value": value,
            "requested_on": result.requested_on,
            "url": result.url,
        }
        row.update(attrs.model_dump())
        rows.append(row)
    return rows
