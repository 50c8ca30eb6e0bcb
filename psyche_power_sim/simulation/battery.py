"""
Battery state-of-charge integrator.

Contains :class:`BatteryIntegrator`, which advances the state of charge by
one time step from the net bus power, applying charge and discharge losses
asymmetrically and clamping the result to the charge-controller limits.
"""

from __future__ import annotations

from .technologies import BatteryTechnology

SOC_MIN = 0.15
SOC_MAX = 0.95


class BatteryIntegrator:
    """
    Forward-Euler state-of-charge update with protective clamping.

    Energy Flow:
        Surplus (net > 0):  ΔE = P_net × dt × η_charge
        Deficit (net ≤ 0):  ΔE = P_net × dt / η_discharge
        SoC' = clamp(SoC + ΔE / C, soc_min, soc_max)

    Charge losses shrink what reaches storage; discharge losses magnify what
    is drawn from it. Energy that would push the SoC past either limit is
    dropped: it is neither carried to later steps nor reported as spillage.

    Attributes:
        capacity_wh: Nameplate capacity (Wh). Must be strictly positive;
            the simulator validates this before building the integrator.
        charge_efficiency: Charging efficiency (0-1).
        discharge_efficiency: Discharging efficiency (0-1).
        dt_hours: Time step (hours).
        soc_min: Lower clamp (deep-discharge protection).
        soc_max: Upper clamp (overcharge protection).

    Example:
        ```python
        integrator = BatteryIntegrator(
            capacity_wh=10000.0,
            charge_efficiency=0.96,
            discharge_efficiency=0.97,
            dt_hours=0.1,
        )
        soc = integrator.step(0.80, net_power_w=-250.0)
        # 0.80 - (25 Wh / 0.97) / 10000 Wh ≈ 0.79742
        ```
    """

    def __init__(
        self,
        capacity_wh: float,
        charge_efficiency: float,
        discharge_efficiency: float,
        dt_hours: float,
        soc_min: float = SOC_MIN,
        soc_max: float = SOC_MAX,
    ) -> None:
        self.capacity_wh = capacity_wh
        self.charge_efficiency = charge_efficiency
        self.discharge_efficiency = discharge_efficiency
        self.dt_hours = dt_hours
        self.soc_min = soc_min
        self.soc_max = soc_max

    @classmethod
    def from_technology(
        cls,
        battery: BatteryTechnology,
        capacity_wh: float,
        dt_hours: float,
    ) -> "BatteryIntegrator":
        """
        Build an integrator from a catalog battery record.

        Args:
            battery: Battery technology supplying the efficiencies.
            capacity_wh: Installed capacity (Wh).
            dt_hours: Simulation time step (hours).
        """
        return cls(
            capacity_wh=capacity_wh,
            charge_efficiency=battery.charge_efficiency,
            discharge_efficiency=battery.discharge_efficiency,
            dt_hours=dt_hours,
        )

    def stored_energy_delta_wh(self, net_power_w: float) -> float:
        """
        Energy change seen by the cells over one step (Wh), after losses.
        """
        energy_wh = net_power_w * self.dt_hours
        if energy_wh > 0:
            return energy_wh * self.charge_efficiency
        return energy_wh / self.discharge_efficiency

    def step(self, soc: float, net_power_w: float) -> float:
        """
        Advance the state of charge by one time step.

        Args:
            soc: Current state of charge (fraction).
            net_power_w: Generation minus load (W).

        Returns:
            Next state of charge, within [soc_min, soc_max].
        """
        new_soc = soc + self.stored_energy_delta_wh(net_power_w) / self.capacity_wh
        return max(self.soc_min, min(self.soc_max, new_soc))
