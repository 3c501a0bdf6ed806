"""
Vehicle module - Sensor and actuator models.

This module contains the state entities the control loop operates on:
- MotionState: Velocity
- RoadSensors: Lane width and line distances
- Navigation: Road class and lanes
- Perception: Light, rain, surrounding traffic
- Actuation: Cruise control, headlights, gear, signals, wipers
- VehicleState: Bundle of all of the above plus the pending intent
"""

from alset.vehicle.motion import MotionState
from alset.vehicle.road import RoadSensors
from alset.vehicle.navigation import Navigation, RoadClass
from alset.vehicle.perception import Perception, NOTHING_DETECTED
from alset.vehicle.actuation import Actuation, Gear, Headlight, TurnSignal
from alset.vehicle.state import VehicleState, PendingCommand, PendingKind

__all__ = [
    "MotionState",
    "RoadSensors",
    "Navigation",
    "RoadClass",
    "Perception",
    "NOTHING_DETECTED",
    "Actuation",
    "Gear",
    "Headlight",
    "TurnSignal",
    "VehicleState",
    "PendingCommand",
    "PendingKind",
]
