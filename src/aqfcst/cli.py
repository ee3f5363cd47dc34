"""Command-line entry point for aqfcst."""

from __future__ import annotations

from datetime import timedelta
from pathlib import Path
import time

import click

from aqfcst.backends.arcgis_backend import ArcGISBackend
from aqfcst.backends.base import BackendError
from aqfcst.config import DEFAULT_LOG_LEVEL, DEFAULT_URL, configure_logging
from aqfcst.models.point import InputParseError
from aqfcst.pipeline import ProcessingError, SchemaInvariantError
from aqfcst.runner import BatchRunner

FATAL_ERRORS = (BackendError, InputParseError, SchemaInvariantError, ProcessingError, OSError, ValueError)


@click.command()
@click.argument("input_path", metavar="INPUT", type=click.Path(path_type=Path))
@click.argument("output_path", metavar="OUTPUT", type=click.Path(path_type=Path))
@click.option(
    "-u",
    "--url",
    default=DEFAULT_URL,
    show_default=True,
    help="URL of the ArcGIS image service identify endpoint.",
)
@click.option(
    "-p",
    "--process",
    is_flag=True,
    help="Also write OUTPUT with _processed before the extension, filtered to the latest issuance and sorted.",
)
@click.option("--log-level", default=DEFAULT_LOG_LEVEL, show_default=True, help="Logging level.")
def main(input_path: Path, output_path: Path, url: str, process: bool, log_level: str) -> None:
    """
    Get NOAA's Air Quality Forecast Guidance as a CSV.

    INPUT is a CSV with a point_id,lat,long header; OUTPUT is the combined CSV.
    """

    configure_logging(log_level)
    start = time.monotonic()
    runner = BatchRunner(
        input_path=input_path,
        output_path=output_path,
        url=url,
        process=process,
        backend=ArcGISBackend(),
    )
    try:
        runner.run()
    except FATAL_ERRORS as exc:
        click.echo(f"Application error: {exc}", err=True)
        raise SystemExit(1) from exc
    elapsed = timedelta(seconds=int(time.monotonic() - start))
    click.echo(f"Time taken: {elapsed}")
