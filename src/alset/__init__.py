"""
Alset - A rule-based vehicle control loop simulation.

This package provides a deterministic planning/control loop with:
- Sensor and actuator models (speed, lanes, obstacles, light, rain)
- Ordered control policies for braking, acceleration, lights, wipers,
  lane changes and gear consistency
- Validated driver commands and environment overrides
- An immutable status display snapshot per tick
- Per-tick telemetry recording
"""

__version__ = "0.1.0"

from alset.config import LoopConfig
from alset.control.loop import ControlLoop
from alset.control.commands import (
    CommandKind,
    CommandQueue,
    CommandStatus,
    EnvironmentOverride,
    OverrideKind,
    VehicleCommand,
)
from alset.display.snapshot import DisplaySnapshot, LaneWarning
from alset.vehicle.state import VehicleState

__all__ = [
    "ControlLoop",
    "LoopConfig",
    "CommandKind",
    "CommandQueue",
    "CommandStatus",
    "EnvironmentOverride",
    "OverrideKind",
    "VehicleCommand",
    "DisplaySnapshot",
    "LaneWarning",
    "VehicleState",
    "__version__",
]
