"""Shared configuration helpers for aqfcst."""

from __future__ import annotations

import logging
import os

DEFAULT_URL = os.environ.get(
    "AQFCST_URL",
    "https://mapservices.weather.noaa.gov/raster/rest/services/air_quality/ndgd_apm25_hr01_bc/ImageServer/identify",
)
DEFAULT_LOG_LEVEL = os.environ.get("AQFCST_LOG_LEVEL", "INFO").strip().upper()
LOG_FORMAT = "%(levelname)s:%(name)s:%(message)s"

LOCAL_TIMEZONE = "America/Los_Angeles"
SCRATCH_DIRNAME = "scratch"
WKID = 4326


def get_request_timeout() -> float | None:
    """Return the request timeout in seconds, or ``None`` for the transport default."""

    value = os.environ.get("AQFCST_REQUEST_TIMEOUT", "").strip()
    if not value:
        return None
    try:
        timeout = float(value)
    except ValueError:
        return None
    return timeout if timeout > 0 else None


def configure_logging(level: str | None = None) -> None:
    """Install the root handler used by the command line."""

    name = (level or DEFAULT_LOG_LEVEL).strip().upper()
    logging.basicConfig(level=getattr(logging, name, logging.INFO), format=LOG_FORMAT)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
