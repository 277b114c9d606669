"""
Stellar Legacy Simulation Package

Seeded automated games for balance analysis.

Modules:
- simulator: random-policy economy runs and batch aggregation
"""

from .simulator import (
    DEFAULT_ACTION_WEIGHTS,
    EconomySimulator,
    SimulationConfig,
    SimulationResult,
    run_batch
)

__all__ = [
    "DEFAULT_ACTION_WEIGHTS", "EconomySimulator", "SimulationConfig", "SimulationResult",
    "run_batch",
]
