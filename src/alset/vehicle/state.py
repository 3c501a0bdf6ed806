"""
Vehicle state - The complete state bundle owned by one control loop.

Groups every entity the control policies read or mutate, plus the
in-progress brake/accelerate intent.
"""

from dataclasses import dataclass, field
from enum import Enum

from alset.vehicle.motion import MotionState, INITIAL_VELOCITY_MPH
from alset.vehicle.road import RoadSensors
from alset.vehicle.navigation import Navigation, RoadClass
from alset.vehicle.perception import Perception
from alset.vehicle.actuation import Actuation, Gear


class PendingKind(Enum):
    """Kind of in-progress speed intent."""
    NONE = "none"
    BRAKE_TO = "brake_to"
    ACCELERATE_TO = "accelerate_to"


@dataclass
class PendingCommand:
    """Speed target the vehicle keeps working toward across ticks."""
    kind: PendingKind = PendingKind.NONE
    target: float = 0.0  # mph
    
    @property
    def is_active(self) -> bool:
        return self.kind is not PendingKind.NONE
    
    def set(self, kind: PendingKind, target: float) -> None:
        self.kind = kind
        self.target = float(target)
    
    def clear(self) -> None:
        self.kind = PendingKind.NONE
        self.target = 0.0


def initial_navigation() -> Navigation:
    """Route the simulation starts on: lane 2 of a four lane highway."""
    return Navigation(RoadClass.HIGHWAY, lane_count=4, current_lane=2)


@dataclass
class VehicleState:
    """All mutable simulation state.
    
    Default values create a vehicle cruising at 60 mph in lane 2 of a
    four lane, marked highway.
    """
    motion: MotionState = field(
        default_factory=lambda: MotionState(INITIAL_VELOCITY_MPH)
    )
    road: RoadSensors = field(
        default_factory=lambda: RoadSensors(12.0, 3.0, 3.0, True)
    )
    navigation: Navigation = field(default_factory=initial_navigation)
    perception: Perception = field(default_factory=Perception)
    actuation: Actuation = field(
        default_factory=lambda: Actuation(cruise_control=True, gear=Gear.DRIVE)
    )
    pending: PendingCommand = field(default_factory=PendingCommand)
    
    @property
    def velocity(self) -> float:
        """Shortcut for the current velocity."""
        return self.motion.velocity
    
    @property
    def gear(self) -> Gear:
        """Shortcut for the selected gear."""
        return self.actuation.gear
    
    def get_state(self) -> dict:
        """Get complete vehicle state.
        
        Returns:
            Nested dictionary of every entity
        """
        return {
            "motion": self.motion.get_state(),
            "road": self.road.get_state(),
            "navigation": self.navigation.get_state(),
            "perception": self.perception.get_state(),
            "actuation": self.actuation.get_state(),
            "pending": {
                "kind": self.pending.kind.value,
                "target": self.pending.target,
            },
        }
