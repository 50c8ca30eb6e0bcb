"""
Technology records for concentrators, photovoltaic cells and batteries.

These are read-only parameter records. Only a subset of the fields enters
the power model; the rest (mass, TRL, era, concentration ratio,
self-discharge) is carried as catalog metadata.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Literal

Era = Literal["historical", "current", "theoretical"]


@dataclass(frozen=True)
class ConcentratorTechnology:
    """
    Solar concentrator optics.

    Attributes:
        name: Unique catalog name.
        concentration_ratio: Geometric concentration (informative only; the
            optical throughput is fully described by ``efficiency``).
        efficiency: Optical efficiency (0-1).
        mass_per_m2: Areal mass (kg/m²).
        trl: Technology readiness level (1-9).
        era: ``historical``, ``current`` or ``theoretical``.
    """
    name: str
    concentration_ratio: float
    efficiency: float
    mass_per_m2: float
    trl: int
    era: Era

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class PVTechnology:
    """
    Photovoltaic cell technology.

    Attributes:
        name: Unique catalog name.
        efficiency: Beginning-of-life conversion efficiency (0-1).
        temp_coefficient: Fractional efficiency change per Kelvin relative
            to the 298 K reference (negative for all real cells).
        degradation_rate: Fractional efficiency loss per year (0-1),
            compounded over the years in operation.
        mass_per_m2: Areal mass (kg/m²).
        trl: Technology readiness level (1-9).
        era: ``historical``, ``current`` or ``theoretical``.
    """
    name: str
    efficiency: float
    temp_coefficient: float
    degradation_rate: float
    mass_per_m2: float
    trl: int
    era: Era

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class BatteryTechnology:
    """
    Secondary battery chemistry.

    Attributes:
        name: Unique catalog name.
        energy_density: Specific energy (Wh/kg).
        cycle_life: Rated full cycles to end of life.
        charge_efficiency: Fraction of surplus energy stored (0-1).
        discharge_efficiency: Fraction of stored energy delivered (0-1).
        self_discharge_rate: Monthly self-discharge fraction (not modeled).
        mass_per_wh: Mass per stored watt-hour (kg/Wh).
        trl: Technology readiness level (1-9).
        era: ``historical``, ``current`` or ``theoretical``.
    """
    name: str
    energy_density: float
    cycle_life: int
    charge_efficiency: float
    discharge_efficiency: float
    self_discharge_rate: float
    mass_per_wh: float
    trl: int
    era: Era

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
