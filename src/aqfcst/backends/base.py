"""Core interfaces for identify backends."""

from __future__ import annotations

from abc import ABC, abstractmethod

from aqfcst.models.point import Point
from aqfcst.models.response import IdentifyResult


class BackendError(Exception):
    """Raised when a backend cannot satisfy a request."""


class NetworkError(BackendError):
    """The request never produced a response (connection failure, timeout)."""


class HttpError(BackendError):
    """The service answered with an error status or an error envelope."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class DeserializationError(BackendError):
    """The response body did not match the identify schema."""


class IdentifyBackend(ABC):
    """Abstract base class for point identify backends."""

    @abstractmethod
    def identify(self, base_url: str, point: Point) -> IdentifyResult:
        """Query pixel values at ``point`` and return the parsed result."""
