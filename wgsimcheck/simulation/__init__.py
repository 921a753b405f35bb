"""
Synthetic read simulation with wgsim-style read names.
"""

from .read_simulator import SimulationConfig, ReadSimulator, introduce_substitution_errors

__all__ = [
    "SimulationConfig",
    "ReadSimulator",
    "introduce_substitution_errors",
]
