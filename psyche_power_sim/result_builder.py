from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

from .simulation import SimulationConfig, SimulationResult

logger = logging.getLogger(__name__)


def _slugify(value: str) -> str:
    """
    Convert a free-form string into a filesystem-safe slug.

    Args:
        value: Input string.

    Returns:
        Slug containing only alphanumeric characters, dash, or underscore.
    """
    return "".join(c if c.isalnum() or c in ("-", "_") else "_" for c in value.strip()).strip("_")


def _create_run_directory(scenario_name: str, output_root: Path) -> Path:
    """
    Create the timestamped directory for one simulation run.
    """
    timestamp = datetime.now().strftime("%y%m%d_%H%M%S")
    slug = _slugify(scenario_name) or "scenario"
    run_dir = output_root / f"{timestamp}_{slug}"
    run_dir.mkdir(parents=True, exist_ok=True)
    return run_dir


def _plot_power_balance(result: SimulationResult, save_path: Path) -> None:
    """
    Plot generated vs consumed power over the run.
    """
    fig, ax = plt.subplots(figsize=(10, 4.5))
    ax.plot(result.time, result.power_generated, color="#3b82f6", linewidth=1.5, label="Generated")
    ax.plot(
        result.time,
        result.power_consumed,
        color="#ef4444",
        linewidth=1.5,
        linestyle="--",
        label="Consumed",
    )
    ax.set_xlabel("Time [h]")
    ax.set_ylabel("Power [W]")
    ax.set_title("Power generation vs consumption")
    ax.grid(True, alpha=0.3)
    ax.legend(loc="best")
    fig.tight_layout()
    fig.savefig(save_path, dpi=150)
    plt.close(fig)


def _plot_battery_soc(result: SimulationResult, save_path: Path) -> None:
    """
    Plot the battery state of charge in percent.
    """
    soc_pct = result.battery_soc * 100.0
    fig, ax = plt.subplots(figsize=(10, 4.5))
    ax.fill_between(result.time, soc_pct, color="#10b981", alpha=0.3)
    ax.plot(result.time, soc_pct, color="#10b981", linewidth=1.5, label="SOC")
    ax.set_ylim(0, 100)
    ax.set_xlabel("Time [h]")
    ax.set_ylabel("SOC [%]")
    ax.set_title("Battery state of charge")
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(save_path, dpi=150)
    plt.close(fig)


def _plot_surface_temperature(result: SimulationResult, save_path: Path) -> None:
    fig, ax = plt.subplots(figsize=(10, 3.5))
    ax.plot(result.time, result.temperature, color="#f59e0b", linewidth=1.5)
    ax.set_xlabel("Time [h]")
    ax.set_ylabel("Temperature [K]")
    ax.set_title("Surface temperature")
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(save_path, dpi=150)
    plt.close(fig)


def _write_summary_txt(
    path: Path,
    scenario_name: str,
    result: SimulationResult,
    config: SimulationConfig,
) -> None:
    """
    Write the human-readable summary of a run.
    """
    m = result.metrics
    lines = []
    lines.append(f"Scenario: {scenario_name}")
    lines.append("")
    lines.append("== Configuration ==")
    if config.concentrator is not None:
        lines.append(
            f"Concentrator: {config.concentrator.name} ({config.concentrator_area_m2:.2f} m²)"
        )
    else:
        lines.append("Concentrator: none (direct PV)")
    lines.append(f"PV cells: {config.pv_cell.name} ({config.pv_area_m2:.2f} m²)")
    lines.append(f"Battery: {config.battery.name} ({config.battery_capacity_wh:.0f} Wh)")
    lines.append(f"Base load: {config.base_load_w:.1f} W")
    lines.append(f"Duration: {config.duration_hours:.1f} h ({result.n_steps} steps)")
    lines.append(f"Years in operation: {config.years_in_operation:g}")
    lines.append("")
    lines.append("== Metrics ==")
    lines.append(f"Average generated power: {m.avg_power_generated:.1f} W")
    lines.append(f"Peak generated power: {m.peak_power_generated:.1f} W")
    lines.append(f"Average consumed power: {m.avg_power_consumed:.1f} W")
    lines.append(f"Peak consumed power: {m.peak_power_consumed:.1f} W")
    lines.append(f"Energy balance: {m.energy_balance / 1000.0:.2f} kWh")
    lines.append(f"Minimum SOC: {m.min_soc:.1%}")
    lines.append(f"Final SOC: {m.final_soc:.1%}")
    lines.append(f"Health score: {m.system_health}/5")
    lines.append(f"System status: {'VIABLE' if m.viable else 'NON-VIABLE'}")
    path.write_text("\n".join(lines), encoding="utf-8")


class ResultBuilder:
    """
    Handle persistence of simulation deliverables on disk.
    """

    def __init__(self, output_root: str | Path = "results") -> None:
        """
        Args:
            output_root: Base directory for generated assets.
        """
        self.output_root = Path(output_root)

    def build_run(
        self,
        scenario_name: str,
        *,
        result: SimulationResult,
        config: SimulationConfig,
    ) -> Path:
        """
        Save series, charts and summary for a single run.

        Args:
            scenario_name: Name used for the output directory.
            result: SimulationResult to export.
            config: Configuration that produced the result.

        Returns:
            Path of the created run directory.
        """
        run_dir = _create_run_directory(scenario_name, self.output_root)

        result.to_dataframe().to_csv(run_dir / "timeseries.csv", index=False)
        _plot_power_balance(result, run_dir / "power_balance.png")
        _plot_battery_soc(result, run_dir / "battery_soc.png")
        _plot_surface_temperature(result, run_dir / "surface_temperature.png")
        _write_summary_txt(run_dir / "summary.txt", scenario_name, result, config)

        logger.info("Run outputs written to %s", run_dir)
        return run_dir
