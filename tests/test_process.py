from pathlib import Path

import pandas as pd
import pytest

from aqfcst.pipeline.combine import combine_csv_files
from aqfcst.pipeline.process import PROCESSED_COLUMNS, ProcessingError, process_csv_file, processed_path

HEADER = "point_id,lat,long,idp_issueddate_iso,idp_validtime_iso,value,requested_on,url,objectid\n"
OLD = "2024-01-01T00:00:00-08:00"
NEW = "2024-01-02T00:00:00-08:00"
REQUESTED = "2024-01-02T06:00:00-08:00"


def _point_file(path: Path, point_id: str, rows: list[tuple[str, str, str]]) -> Path:
    lines = [
        f"{point_id},47.6,-122.3,{issued},{valid},{value},{REQUESTED},https://identify.test,1\n"
        for issued, valid, value in rows
    ]
    path.write_text(HEADER + "".join(lines))
    return path


def test_processed_path_inserts_suffix():
    assert processed_path("out/result.csv") == Path("out/result_processed.csv")
    assert processed_path(Path("/tmp/data.v1.csv")) == Path("/tmp/data.v1_processed.csv")


def test_process_keeps_latest_issuance_sorted(tmp_path):
    site_b = _point_file(
        tmp_path / "0_b.csv",
        "site_b",
        [
            (OLD, "2024-01-01T01:00:00-08:00", "1"),
            (NEW, "2024-01-02T02:00:00-08:00", "4"),
            (NEW, "2024-01-02T01:00:00-08:00", "3"),
            (NEW, "", "NoData"),
        ],
    )
    site_a = _point_file(
        tmp_path / "1_a.csv",
        "site_a",
        [
            (OLD, "2024-01-01T01:00:00-08:00", "2"),
            (NEW, "2024-01-02T01:00:00-08:00", "5"),
        ],
    )
    combined = combine_csv_files([site_b, site_a], tmp_path / "combined.csv")

    out = process_csv_file(combined)

    assert out == tmp_path / "combined_processed.csv"
    df = pd.read_csv(out, dtype=str)
    assert list(df.columns) == PROCESSED_COLUMNS
    assert (df["idp_issueddate_iso"] == NEW).all()
    assert df["idp_validtime_iso"].notna().all()
    assert df["point_id"].tolist() == ["site_a", "site_b", "site_b"]
    assert df["value"].tolist() == ["5", "3", "4"]
    assert "url" not in df.columns


def test_process_without_issued_dates_fails(tmp_path):
    path = _point_file(tmp_path / "combined.csv", "a", [("", "2024-01-01T01:00:00-08:00", "1")])
    with pytest.raises(ProcessingError):
        process_csv_file(path)
    assert not processed_path(path).exists()
    assert path.exists()


def test_process_requires_expected_columns(tmp_path):
    path = tmp_path / "combined.csv"
    path.write_text("point_id,value\na,1\n")
    with pytest.raises(ProcessingError, match="missing columns"):
        process_csv_file(path)


def test_process_empty_combined_file(tmp_path):
    path = tmp_path / "combined.csv"
    path.write_text("")
    with pytest.raises(ProcessingError, match="empty"):
        process_csv_file(path)
