"""
Static technology catalog and mission presets.

The tables below are read-only. Records are looked up by exact name match
through :class:`TechnologyCatalog`; a miss raises
:class:`CatalogLookupError` before any simulation configuration is built.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, Optional, Sequence, Tuple, TypeVar

from .simulation.technologies import BatteryTechnology, ConcentratorTechnology, PVTechnology

CONCENTRATORS: Tuple[ConcentratorTechnology, ...] = (
    ConcentratorTechnology("Parabolic Dish Concentrator", 20, 0.82, 3.5, 9, "current"),
    ConcentratorTechnology("Linear Fresnel Reflector", 15, 0.85, 2.8, 7, "current"),
    ConcentratorTechnology("Compound Parabolic Concentrator (CPC)", 10, 0.88, 2.2, 8, "current"),
    ConcentratorTechnology("Parabolic Trough", 5, 0.75, 4.0, 9, "historical"),
    ConcentratorTechnology("Inflatable Fresnel Lens", 25, 0.78, 1.5, 5, "theoretical"),
    ConcentratorTechnology("Holographic Concentrator", 30, 0.75, 1.8, 3, "theoretical"),
    ConcentratorTechnology("Micro-Concentrator Array", 12, 0.80, 2.5, 6, "current"),
    ConcentratorTechnology("Reflective Film Concentrator", 8, 0.83, 2.0, 7, "current"),
    ConcentratorTechnology("Advanced Fresnel System", 18, 0.87, 2.6, 6, "current"),
)

PV_CELLS: Tuple[PVTechnology, ...] = (
    PVTechnology("Silicon (Si)", 0.15, -0.005, 0.015, 1.2, 9, "historical"),
    PVTechnology("Gallium Arsenide (GaAs)", 0.28, -0.004, 0.008, 0.8, 9, "current"),
    PVTechnology("Triple-junction GaAs (3J)", 0.32, -0.004, 0.005, 0.7, 9, "current"),
    PVTechnology("Quad-junction IMM", 0.34, -0.003, 0.003, 0.6, 8, "current"),
    PVTechnology("Perovskite", 0.25, -0.003, 0.012, 0.4, 5, "theoretical"),
    PVTechnology("Quantum Dot Cells", 0.45, -0.002, 0.004, 0.5, 5, "theoretical"),
    PVTechnology("CIGS (Copper Indium Gallium Selenide)", 0.22, -0.004, 0.010, 0.9, 8, "current"),
    PVTechnology("Organic Photovoltaics", 0.18, -0.003, 0.020, 0.3, 6, "theoretical"),
    PVTechnology("Tandem Silicon/Perovskite", 0.30, -0.003, 0.008, 0.8, 6, "theoretical"),
    PVTechnology("Advanced Multi-junction (5J+)", 0.38, -0.002, 0.003, 0.6, 7, "current"),
    PVTechnology("Concentrator PV (CPV) Cells", 0.40, -0.003, 0.004, 0.5, 7, "current"),
)

BATTERIES: Tuple[BatteryTechnology, ...] = (
    BatteryTechnology("Nickel-Cadmium (NiCd)", 50, 2000, 0.90, 0.95, 0.05, 0.020, 9, "historical"),
    BatteryTechnology("Nickel-Hydrogen (NiH2)", 60, 20000, 0.90, 0.95, 0.02, 0.017, 9, "current"),
    BatteryTechnology("Lithium-ion (NMC)", 220, 10000, 0.96, 0.97, 0.005, 0.0045, 9, "current"),
    BatteryTechnology("Lithium-ion (NCA)", 240, 8000, 0.95, 0.97, 0.005, 0.0042, 9, "current"),
    BatteryTechnology("Lithium-ion (LFP)", 150, 15000, 0.98, 0.99, 0.003, 0.0067, 9, "current"),
    BatteryTechnology("Lithium-Sulfur", 300, 5000, 0.93, 0.95, 0.010, 0.0033, 6, "theoretical"),
    BatteryTechnology("Solid-State Lithium", 400, 100000, 0.98, 0.99, 0.001, 0.0025, 6, "theoretical"),
    BatteryTechnology("Lithium-Air", 500, 3000, 0.85, 0.90, 0.015, 0.0020, 5, "theoretical"),
    BatteryTechnology("Sodium-ion", 120, 8000, 0.94, 0.96, 0.008, 0.0083, 7, "current"),
    BatteryTechnology("Aluminum-ion", 200, 50000, 0.92, 0.94, 0.012, 0.0050, 5, "theoretical"),
    BatteryTechnology("Flow Battery (Vanadium)", 40, 30000, 0.85, 0.90, 0.001, 0.025, 8, "current"),
    BatteryTechnology("Zinc-Bromine Flow", 65, 25000, 0.88, 0.92, 0.002, 0.015, 7, "current"),
)


@dataclass(frozen=True)
class PresetParameters:
    """Numeric parameters of a mission preset."""
    concentrator_area_m2: float
    pv_area_m2: float
    battery_capacity_wh: float
    base_load_w: float
    duration_hours: float
    years_in_operation: float


@dataclass(frozen=True)
class MissionPreset:
    """
    Named starting configuration referencing catalog entries by name.

    Attributes:
        id: Stable identifier (e.g. ``"baseline"``).
        name: Display name.
        description: One-line description of the mission profile.
        concentrator: Concentrator name, or None for a direct array.
        pv_cell: PV cell name.
        battery: Battery name.
        parameters: Areas, capacity, load, duration and mission age.
    """
    id: str
    name: str
    description: str
    concentrator: Optional[str]
    pv_cell: str
    battery: str
    parameters: PresetParameters

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


PRESETS: Tuple[MissionPreset, ...] = (
    MissionPreset(
        id="baseline",
        name="Baseline Mission",
        description="Balanced system for small spacecraft operations",
        concentrator="Linear Fresnel Reflector",
        pv_cell="Triple-junction GaAs (3J)",
        battery="Lithium-ion (NMC)",
        parameters=PresetParameters(3.0, 1.0, 8000, 100, 48, 0),
    ),
    MissionPreset(
        id="high-power",
        name="High-Power Science",
        description="High-power system for instrument-heavy missions",
        concentrator="Parabolic Dish Concentrator",
        pv_cell="Quad-junction IMM",
        battery="Lithium-ion (NCA)",
        parameters=PresetParameters(5.0, 1.5, 15000, 200, 48, 0),
    ),
    MissionPreset(
        id="minimal-mass",
        name="Minimal Mass",
        description="Lightweight system for mass-constrained missions",
        concentrator="Inflatable Fresnel Lens",
        pv_cell="Triple-junction GaAs (3J)",
        battery="Lithium-Sulfur",
        parameters=PresetParameters(2.0, 0.5, 5000, 75, 48, 0),
    ),
    MissionPreset(
        id="extended-life",
        name="Extended Life",
        description="Robust system optimized for long mission duration",
        concentrator="Compound Parabolic Concentrator (CPC)",
        pv_cell="Quad-junction IMM",
        battery="Nickel-Hydrogen (NiH2)",
        parameters=PresetParameters(4.0, 1.2, 12000, 120, 48, 0),
    ),
    MissionPreset(
        id="no-concentrator",
        name="No Concentrator",
        description="Direct PV array without concentration optics",
        concentrator=None,
        pv_cell="Quad-junction IMM",
        battery="Lithium-ion (NMC)",
        parameters=PresetParameters(0.0, 8.0, 10000, 100, 48, 0),
    ),
)


class CatalogLookupError(KeyError):
    """
    Raised when a catalog entry is not found by exact name.

    Attributes:
        kind: Catalog table searched (``concentrator``, ``pv_cell``,
            ``battery`` or ``preset``).
        name: Name that was looked up.
    """

    def __init__(self, kind: str, name: str) -> None:
        super().__init__(kind, name)
        self.kind = kind
        self.name = name

    def __str__(self) -> str:
        return f"Unknown {self.kind}: {self.name!r}"


T = TypeVar("T")


def _index_by(records: Iterable[T], attr: str) -> Dict[str, T]:
    index: Dict[str, T] = {}
    for record in records:
        key = getattr(record, attr)
        if key in index:
            raise ValueError(f"Duplicate catalog key: {key!r}")
        index[key] = record
    return index


class TechnologyCatalog:
    """
    Read-only lookup over technology tables and presets.

    The default instance wraps the built-in tables; tests and callers can
    build a catalog from their own records.
    """

    def __init__(
        self,
        concentrators: Sequence[ConcentratorTechnology] = CONCENTRATORS,
        pv_cells: Sequence[PVTechnology] = PV_CELLS,
        batteries: Sequence[BatteryTechnology] = BATTERIES,
        presets: Sequence[MissionPreset] = PRESETS,
    ) -> None:
        self._concentrators = _index_by(concentrators, "name")
        self._pv_cells = _index_by(pv_cells, "name")
        self._batteries = _index_by(batteries, "name")
        self._presets = _index_by(presets, "id")

    @property
    def concentrators(self) -> list[ConcentratorTechnology]:
        return list(self._concentrators.values())

    @property
    def pv_cells(self) -> list[PVTechnology]:
        return list(self._pv_cells.values())

    @property
    def batteries(self) -> list[BatteryTechnology]:
        return list(self._batteries.values())

    @property
    def presets(self) -> list[MissionPreset]:
        return list(self._presets.values())

    def get_concentrator(self, name: str) -> ConcentratorTechnology:
        try:
            return self._concentrators[name]
        except KeyError:
            raise CatalogLookupError("concentrator", name) from None

    def get_pv_cell(self, name: str) -> PVTechnology:
        try:
            return self._pv_cells[name]
        except KeyError:
            raise CatalogLookupError("pv_cell", name) from None

    def get_battery(self, name: str) -> BatteryTechnology:
        try:
            return self._batteries[name]
        except KeyError:
            raise CatalogLookupError("battery", name) from None

    def get_preset(self, preset_id: str) -> MissionPreset:
        try:
            return self._presets[preset_id]
        except KeyError:
            raise CatalogLookupError("preset", preset_id) from None

    def to_dict(self) -> Dict[str, list[Dict[str, Any]]]:
        return {
            "concentrators": [c.to_dict() for c in self.concentrators],
            "pv_cells": [p.to_dict() for p in self.pv_cells],
            "batteries": [b.to_dict() for b in self.batteries],
        }


DEFAULT_CATALOG = TechnologyCatalog()
