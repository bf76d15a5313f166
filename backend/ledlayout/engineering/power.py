"""Power load estimate for a placed module count.

Catalog data arrives as plain numbers; choosing the module is the
caller's job.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

# Run length assumed when the module data gives none
DEFAULT_MODULES_PER_CIRCUIT = 100
# Supplies are sized to this fraction of their rating
DEFAULT_SUPPLY_LOADING = 0.8


@dataclass(frozen=True)
class ModuleSpec:
    watts_per_module: float
    voltage: float
    modules_per_foot: float
    max_run_length: int | None = None  # modules per circuit

    def __post_init__(self) -> None:
        if self.watts_per_module < 0:
            raise ValueError("watts_per_module must be >= 0")
        if self.voltage <= 0:
            raise ValueError("voltage must be positive")
        if self.modules_per_foot <= 0:
            raise ValueError("modules_per_foot must be positive")
        if self.max_run_length is not None and self.max_run_length <= 0:
            raise ValueError("max_run_length must be positive")


@dataclass(frozen=True)
class PowerAnalysis:
    total_watts: float
    total_amps: float
    modules_per_circuit: int
    circuits: int


def calculate_power_load(module_count: int, module: ModuleSpec) -> PowerAnalysis:
    total_watts = module_count * module.watts_per_module
    modules_per_circuit = module.max_run_length or DEFAULT_MODULES_PER_CIRCUIT
    circuits = math.ceil(module_count / modules_per_circuit) if module_count > 0 else 0
    return PowerAnalysis(
        total_watts=total_watts,
        total_amps=total_watts / module.voltage,
        modules_per_circuit=modules_per_circuit,
        circuits=circuits,
    )


def power_supplies_needed(
    total_watts: float,
    supply_max_watts: float,
    loading: float = DEFAULT_SUPPLY_LOADING,
) -> int:
    """Number of identical supplies to carry *total_watts* at *loading* of rating."""
    if supply_max_watts <= 0:
        raise ValueError("supply_max_watts must be positive")
    if not 0 < loading <= 1:
        raise ValueError("loading must be in (0, 1]")
    if total_watts <= 0:
        return 0
    return max(1, math.ceil(total_watts / (supply_max_watts * loading)))
