"""ArcGIS ImageServer implementation of :class:`IdentifyBackend`."""

from __future__ import annotations

from datetime import datetime
import logging
from zoneinfo import ZoneInfo

from pydantic import ValidationError
import requests

from aqfcst.backends.arcgis_urls import build_identify_params, build_identify_url
from aqfcst.backends.base import DeserializationError, HttpError, IdentifyBackend, NetworkError
from aqfcst.config import LOCAL_TIMEZONE, get_request_timeout
from aqfcst.models.point import Point
from aqfcst.models.response import IdentifyResult, RasterResponse

LOGGER = logging.getLogger("aqfcst.backends")


class ArcGISBackend(IdentifyBackend):
    """Identify backend that issues one blocking GET per point."""

    def __init__(self, timeout: float | None = None) -> None:
        self.timeout = timeout if timeout is not None else get_request_timeout()
        self.tz = ZoneInfo(LOCAL_TIMEZONE)

    def identify(self, base_url: str, point: Point) -> IdentifyResult:
        """
        Request pixel values and catalog attributes for a single point.
        """

        params = build_identify_params(point)
        LOGGER.debug("GET %s", build_identify_url(base_url, point))
        requested_on = datetime.now(self.tz).isoformat()
        try:
            resp = requests.get(base_url, params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            raise NetworkError(f"Request for {point.point_id} to {base_url} failed: {exc}") from exc

        try:
            resp.raise_for_status()
        except requests.HTTPError as exc:
            raise HttpError(
                f"{resp.status_code} from {resp.url} for {point.point_id}",
                status_code=resp.status_code,
            ) from exc

        try:
            payload = resp.json()
        except ValueError as exc:
            raise DeserializationError(f"Response for {point.point_id} is not JSON: {exc}") from exc
        _raise_for_error_envelope(payload, resp.url)

        try:
            body = RasterResponse.model_validate(payload)
        except ValidationError as exc:
            raise DeserializationError(f"Unexpected identify response for {point.point_id}: {exc}") from exc

        LOGGER.debug("Identify %s returned %d values", point.point_id, len(body.values))
        return IdentifyResult(point=point, requested_on=requested_on, url=resp.url, response=body)


def _raise_for_error_envelope(payload: object, url: str) -> None:
    """
    ArcGIS reports request errors as ``{"error": {...}}`` with an HTTP 200.
    """

    if not isinstance(payload, dict) or "error" not in payload:
        return
    error = payload.get("error") or {}
    if not isinstance(error, dict):
        error = {"message": str(error)}
    code = error.get("code")
    details = "; ".join(str(item) for item in error.get("details") or [])
    message = error.get("message", "unknown error")
    if details:
        message = f"{message} ({details})"
    raise HttpError(
        f"Service error {code} from {url}: {message}",
        status_code=code if isinstance(code, int) else None,
    )
