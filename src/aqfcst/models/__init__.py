"""Point and identify-response data models."""

from __future__ import annotations

from .point import InputParseError, Point, read_points
from .response import ATTRIBUTE_FIELDS, IdentifyResult, RasterAttributes, RasterResponse

__all__ = [
    "ATTRIBUTE_FIELDS",
    "IdentifyResult",
    "InputParseError",
    "Point",
    "RasterAttributes",
    "RasterResponse",
    "read_points",
]
