"""Example runner that wires together the aqfcst modules."""

from __future__ import annotations

from pathlib import Path

from aqfcst.config import configure_logging
from aqfcst.runner import BatchRunner


def run_example() -> None:
    """
    Fetch forecast guidance for the sample points and print the processed summary.
    """

    configure_logging()
    here = Path(__file__).resolve().parent
    runner = BatchRunner(
        input_path=here / "points.csv",
        output_path=Path("data/aq_example/aq_fcst.csv"),
        process=True,
    )
    runner.output_path.parent.mkdir(parents=True, exist_ok=True)
    result = runner.run()
    print(result["processed"].read_text().splitlines()[:5])


if __name__ == "__main__":
    run_example()
