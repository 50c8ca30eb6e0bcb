from __future__ import annotations

import json
from pathlib import Path

import pytest

from psyche_power_sim import cli


def _run(capsys, *argv: str):
    cli.main(list(argv))
    return json.loads(capsys.readouterr().out)


def test_run_preset_without_saving(capsys):
    """Run a short preset simulation and print the JSON summary."""
    summary = _run(capsys, "run", "--preset", "baseline", "--duration", "4.2", "--no-save")
    assert summary["scenario"] == "baseline"
    assert summary["output_dir"] is None
    assert "series" not in summary
    assert set(summary["metrics"]) >= {"energy_balance", "system_health", "viable"}


def test_run_with_series(capsys):
    summary = _run(capsys, "run", "--duration", "1", "--no-save", "--series")
    assert summary["scenario"] == "no-concentrator"
    assert len(summary["series"]["battery_soc"]) == 10


def test_run_writes_outputs(capsys, tmp_path: Path):
    summary = _run(capsys, "run", "--duration", "1", "--output-dir", str(tmp_path))
    output_dir = Path(summary["output_dir"])
    assert output_dir.parent == tmp_path
    assert (output_dir / "summary.txt").exists()


def test_run_scenario_file(capsys, tmp_path: Path, simple_scenario_data: dict):
    path = tmp_path / "scenario.json"
    path.write_text(json.dumps(simple_scenario_data), encoding="utf-8")
    summary = _run(capsys, "run", "--scenario-file", str(path), "--no-save")
    assert summary["scenario"] == "test_minimal"


def test_run_reports_configuration_errors(tmp_path: Path, simple_scenario_data: dict):
    simple_scenario_data.pop("battery")
    path = tmp_path / "no_battery.json"
    path.write_text(json.dumps(simple_scenario_data), encoding="utf-8")
    with pytest.raises(SystemExit, match="Configuration error: Cannot run simulation without battery"):
        cli.main(["run", "--scenario-file", str(path), "--no-save"])

    with pytest.raises(SystemExit, match="Configuration error"):
        cli.main(["run", "--preset", "unknown", "--no-save"])


def test_run_rejects_missing_or_invalid_file(tmp_path: Path):
    with pytest.raises(SystemExit, match="File not found"):
        cli.main(["run", "--scenario-file", str(tmp_path / "missing.json"), "--no-save"])
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    with pytest.raises(SystemExit, match="Invalid JSON file"):
        cli.main(["run", "--scenario-file", str(broken), "--no-save"])


def test_preset_and_scenario_file_are_exclusive(tmp_path: Path):
    with pytest.raises(SystemExit):
        cli.main(["run", "--preset", "baseline", "--scenario-file", str(tmp_path / "x.json")])


def test_catalog_listing(capsys):
    assert set(_run(capsys, "catalog")) == {"concentrators", "pv_cells", "batteries"}
    batteries = _run(capsys, "catalog", "--type", "battery")
    assert list(batteries) == ["batteries"]
    assert len(batteries["batteries"]) == 12


def test_presets_listing(capsys):
    presets = _run(capsys, "presets")
    assert [p["id"] for p in presets][-1] == "no-concentrator"
    assert presets[0]["parameters"]["concentrator_area_m2"] == 3.0


def test_no_command_prints_help(capsys):
    cli.main([])
    assert "usage" in capsys.readouterr().out


def test_run_reports_non_numeric_scenario_values(tmp_path: Path, simple_scenario_data: dict):
    simple_scenario_data["pv_area_m2"] = "eight"
    path = tmp_path / "bad_area.json"
    path.write_text(json.dumps(simple_scenario_data), encoding="utf-8")
    with pytest.raises(SystemExit, match="Configuration error: Invalid value for pv_area_m2"):
        cli.main(["run", "--scenario-file", str(path), "--no-save"])


@pytest.mark.parametrize("flag", ["--pv-area", "--concentrator-area"])
def test_run_rejects_negative_area_flags(flag: str):
    with pytest.raises(SystemExit, match="Configuration error"):
        cli.main(["run", "--preset", "baseline", flag, "-8", "--no-save"])
