"""Command-line runner for the MRO cost projection.

Execution flow
--------------
1.  Load parameters JSON (optional) and apply command-line overrides.
2.  Validate through ``ProjectionRequest``.
3.  Run the projection.
4.  Print the narrative; write the series CSV if requested.

Usage
-----
    mro-simulator
    mro-simulator --params fleet.json --csv out/projection.csv
    mro-simulator --rates 12 4 1 --intervention --intervention-year 5
    mro-simulator --params fleet.json --dry-run -v
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from mro_simulator.api.narrative import generate_narrative
from mro_simulator.config.parameters import ProjectionRequest
from mro_simulator.engine.projection import project
from mro_simulator.output.frame import write_series_csv

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# CLI argument parsing
# ---------------------------------------------------------------------------


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    p = argparse.ArgumentParser(
        prog="mro-simulator",
        description="Fleet Degradation Simulator — MRO cost projection & re-forecasting",
    )
    p.add_argument("--params", metavar="PATH", default=None, help="Path to parameters JSON file.")
    p.add_argument("--csv", metavar="PATH", default=None, help="Write the yearly series to this CSV file.")
    p.add_argument("--initial-cost", type=float, default=None, metavar="USD", help="Initial annual cost.")
    p.add_argument("--limit", type=float, default=None, metavar="USD", help="Economic limit.")
    p.add_argument(
        "--rates",
        type=float,
        nargs=3,
        default=None,
        metavar=("P1", "P2", "P3"),
        help="Growth (%%) for years 1-6, 7-12 and 13+.",
    )
    p.add_argument(
        "--intervention",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Enable or disable the re-forecast curve.",
    )
    p.add_argument("--intervention-year", type=int, default=None, metavar="YEAR", help="Re-forecast year (1-24).")
    p.add_argument("--intervention-cost", type=float, default=None, metavar="USD", help="New actual cost.")
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Enable DEBUG logging.",
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        default=False,
        help="Validate inputs, then exit without running the projection.",
    )
    return p


def _overrides(args: argparse.Namespace) -> dict[str, Any]:
    """Collect the command-line fields that were actually given."""
    mapping = {
        "initial_cost": args.initial_cost,
        "economic_limit": args.limit,
        "growth_rates": args.rates,
        "intervention_enabled": args.intervention,
        "intervention_year": args.intervention_year,
        "intervention_cost": args.intervention_cost,
    }
    return {key: val for key, val in mapping.items() if val is not None}


def load_request(path: str | Path | None, overrides: dict[str, Any] | None = None) -> ProjectionRequest:
    """Read a parameters JSON file (if any), apply overrides and validate.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    ValueError
        If the file is not a JSON object.
    pydantic.ValidationError
        If any value is out of range or of the wrong type.
    """
    data: dict[str, Any] = {}
    if path is not None:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
        if not isinstance(raw, dict):
            raise ValueError(f"{path}: expected a JSON object, got {type(raw).__name__}")
        data.update(raw)
    data.update(overrides or {})
    return ProjectionRequest(**data)


# ---------------------------------------------------------------------------
# Runner
# ---------------------------------------------------------------------------


def run(args: argparse.Namespace) -> int:
    """Execute one projection from parsed arguments.

    Returns
    -------
    int
        Exit code (0 = success, 1 = error).
    """
    if args.params:
        logger.info("Loading parameters: %s", args.params)
    try:
        request = load_request(args.params, _overrides(args))
    except (OSError, ValueError, ValidationError) as exc:
        logger.error("Invalid parameters: %s", exc)
        return 1

    if args.dry_run:
        print("Dry run: parameters validated successfully.")
        return 0

    params = request.to_parameters()
    result = project(params)
    print(generate_narrative(params, result))

    if args.csv:
        try:
            write_series_csv(result, args.csv)
        except OSError as exc:
            logger.error("CSV write failed: %s", exc)
            return 1

    return 0


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and run the projection."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    sys.exit(run(args))


if __name__ == "__main__":
    main()
