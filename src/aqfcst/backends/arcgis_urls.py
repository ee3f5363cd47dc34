"""Helper utilities for constructing ArcGIS identify requests."""

from __future__ import annotations

import requests

from aqfcst.models.point import Point

IDENTIFY_OPTIONS = {
    "geometryType": "esriGeometryPoint",
    "returnGeometry": "false",
    "returnCatalogItems": "true",
    "returnPixelValues": "true",
    "processAsMultiDimensional": "false",
    "f": "json",
}


def build_identify_params(point: Point) -> dict[str, str]:
    """Return the identify query parameters for a point, geometry first."""

    params = {"geometry": point.to_geometry()}
    params.update(IDENTIFY_OPTIONS)
    return params


def build_identify_url(base_url: str, point: Point) -> str:
    """Return the fully encoded GET URL for an identify call."""

    request = requests.Request("GET", base_url, params=build_identify_params(point)).prepare()
    return request.url
