"""Backend implementations for identify requests."""

from __future__ import annotations

from .arcgis_backend import ArcGISBackend
from .base import BackendError, DeserializationError, HttpError, IdentifyBackend, NetworkError

__all__ = [
    "ArcGISBackend",
    "BackendError",
    "DeserializationError",
    "HttpError",
    "IdentifyBackend",
    "NetworkError",
]
