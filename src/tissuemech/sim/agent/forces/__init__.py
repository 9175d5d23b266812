"""Computation of forces for the agent-based models."""

from tissuemech.sim.agent.forces._base import Force, apply_forces
from tissuemech.sim.agent.forces._radial_pressure import (
    ConstantRadialPressure,
    PressureState,
)

__all__ = [
    "ConstantRadialPressure",
    "Force",
    "PressureState",
    "apply_forces",
]
