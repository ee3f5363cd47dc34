import pytest

ISSUED_MS = 1704096000000  # 2024-01-01T00:00:00-08:00
HOUR_MS = 3_600_000


def build_payload(values, issued_ms=ISSUED_MS, features=None):
    """Return an identify body shaped like the NOAA service's JSON."""

    if features is None:
        features = [
            {
                "attributes": {
                    "objectid": i + 1,
                    "name": f"slice_{i}",
                    "idp_issueddate": issued_ms,
                    "idp_validtime": issued_ms + (i + 1) * HOUR_MS,
                    "idp_fcst_hour": i + 1,
                    "productname": "ndgd_apm25_hr01_bc",
                    "zorder": None,
                    "unexpected_field": "ignored",
                }
            }
            for i in range(len(values))
        ]
    return {
        "objectId": 0,
        "name": "Pixel",
        "value": values[0] if values else "NoData",
        "location": {"x": -122.3, "y": 47.6, "spatialReference": {"wkid": 4326, "latestWkid": 4326}},
        "properties": {"Values": list(values)},
        "catalogItems": {"objectIdFieldName": "objectid", "features": features},
        "catalogItemVisibilities": [1] * len(features),
    }


@pytest.fixture
def payload_factory():
    return build_payload
