import os

import pytest

from aqfcst.backends.arcgis_backend import ArcGISBackend
from aqfcst.backends.base import BackendError
from aqfcst.config import DEFAULT_URL
from aqfcst.models.point import Point
from aqfcst.pipeline.flatten import flatten

POINT = Point("Seattle", lat=47.6062, long=-122.3321)


def _integration_enabled() -> bool:
    return os.environ.get("AQFCST_RUN_INTEGRATION", "").lower() in {"1", "true", "yes"}


def _require_integration():
    if not _integration_enabled():
        pytest.skip("Integration tests disabled; set AQFCST_RUN_INTEGRATION=1 to enable")


@pytest.mark.integration
def test_identify_returns_aligned_slices():
    _require_integration()

    try:
        result = ArcGISBackend(timeout=60).identify(DEFAULT_URL, POINT)
    except BackendError as exc:
        pytest.skip(f"Identify service unavailable: {exc}")

    rows = flatten(result)
    assert rows
    assert result.url.startswith(DEFAULT_URL)
    assert any(row["idp_issueddate_iso"] for row in rows)
