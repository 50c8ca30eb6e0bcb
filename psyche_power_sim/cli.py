from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Sequence

from .application import SimulationApplication
from .catalog import DEFAULT_CATALOG, CatalogLookupError
from .config import configure_logging, get_results_dir
from .result_builder import ResultBuilder
from .simulation import ConfigurationError


def build_argument_parser() -> argparse.ArgumentParser:
    """
    Build the CLI argument parser used by entry points.

    Returns:
        Configured argparse.ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(description="16 Psyche spacecraft power system simulator")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable INFO logging (overrides PSYCHE_SIM_LOG_LEVEL)",
    )
    sub = parser.add_subparsers(dest="command")

    run = sub.add_parser("run", help="Run one simulation")
    source = run.add_mutually_exclusive_group()
    source.add_argument(
        "--preset",
        type=str,
        default=None,
        help="Preset id to start from (default: no-concentrator)",
    )
    source.add_argument(
        "--scenario-file",
        type=str,
        default=None,
        help="Path to a JSON file with the scenario definition",
    )
    run.add_argument("--duration", type=float, dest="duration_hours", help="Simulated hours")
    run.add_argument("--years", type=float, dest="years_in_operation", help="Years in operation")
    run.add_argument("--base-load", type=float, dest="base_load_w", help="Base load [W]")
    run.add_argument("--pv-area", type=float, dest="pv_area_m2", help="PV area [m²]")
    run.add_argument(
        "--concentrator-area",
        type=float,
        dest="concentrator_area_m2",
        help="Concentrator area [m²]",
    )
    run.add_argument(
        "--battery-capacity",
        type=float,
        dest="battery_capacity_wh",
        help="Battery capacity [Wh]",
    )
    run.add_argument(
        "--no-save",
        action="store_true",
        help="Do not write CSV/plots/summary to the results directory",
    )
    run.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help="Results directory (default: PSYCHE_SIM_RESULTS_DIR or ./results)",
    )
    run.add_argument(
        "--series",
        action="store_true",
        help="Include the full per-step series in the JSON output",
    )

    catalog = sub.add_parser("catalog", help="List catalog technologies")
    catalog.add_argument(
        "--type",
        choices=["all", "concentrator", "pv", "battery"],
        default="all",
        help="Filter by technology type",
    )

    sub.add_parser("presets", help="List mission presets")

    return parser


def _load_json_file(path: str | Path) -> dict[str, Any]:
    file_path = Path(path)
    if not file_path.exists():
        raise SystemExit(f"File not found: {file_path}")
    try:
        return json.loads(file_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid JSON file ({file_path}): {exc}") from exc


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, default=str, ensure_ascii=False))


OVERRIDE_ARGS = (
    "duration_hours",
    "years_in_operation",
    "base_load_w",
    "pv_area_m2",
    "concentrator_area_m2",
    "battery_capacity_wh",
)


def _run_command(args: argparse.Namespace) -> None:
    save_outputs = not args.no_save
    result_builder = None
    if save_outputs:
        output_root = Path(args.output_dir) if args.output_dir else get_results_dir()
        result_builder = ResultBuilder(output_root)

    app = SimulationApplication(save_outputs=save_outputs, result_builder=result_builder)
    overrides = {name: getattr(args, name) for name in OVERRIDE_ARGS}

    try:
        if args.scenario_file:
            summary = app.run_scenario(_load_json_file(args.scenario_file), overrides=overrides)
        else:
            summary = app.run_preset(args.preset or "no-concentrator", overrides=overrides)
    except (ConfigurationError, CatalogLookupError) as exc:
        raise SystemExit(f"Configuration error: {exc}") from exc

    if not args.series:
        summary.pop("series", None)
    _print_json(summary)


def main(argv: Sequence[str] | None = None) -> None:
    """
    CLI entry point for running simulations and browsing the catalog.

    Args:
        argv: Optional sequence of CLI args (defaults to sys.argv).
    """
    parser = build_argument_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    configure_logging(level=logging.INFO if args.verbose else None)

    if args.command == "run":
        _run_command(args)
        return

    if args.command == "catalog":
        payload = DEFAULT_CATALOG.to_dict()
        if args.type != "all":
            key = {
                "concentrator": "concentrators",
                "pv": "pv_cells",
                "battery": "batteries",
            }[args.type]
            payload = {key: payload[key]}
        _print_json(payload)
        return

    if args.command == "presets":
        _print_json([preset.to_dict() for preset in DEFAULT_CATALOG.presets])
        return

    parser.error(f"Unknown command: {args.command}")


if __name__ == "__main__":
    main()
