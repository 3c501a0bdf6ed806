"""
Control module - Planning and control decision loop.

This module contains:
- ControlLoop: Tick orchestration
- Motion policies: brake, brake_to, accelerate_to
- Control policies: the ordered per-tick rules
- Commands: environment overrides, vehicle commands, acceptance rules
"""

from alset.control.loop import ControlLoop
from alset.control.motion import brake, brake_to, accelerate_to
from alset.control.policies import POLICY_ORDER
from alset.control.commands import (
    CommandKind,
    CommandQueue,
    CommandStatus,
    EnvironmentOverride,
    OverrideKind,
    VehicleCommand,
)

__all__ = [
    "ControlLoop",
    "brake",
    "brake_to",
    "accelerate_to",
    "POLICY_ORDER",
    "CommandKind",
    "CommandQueue",
    "CommandStatus",
    "EnvironmentOverride",
    "OverrideKind",
    "VehicleCommand",
]
