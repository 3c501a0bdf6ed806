"""
Display snapshot - Render-ready projection of the vehicle state.

The snapshot is recomputed wholesale from the state after every tick and
is never mutated by the control policies.
"""

from dataclasses import dataclass, asdict
from enum import Enum, IntEnum
from typing import Any, Dict
import numpy as np

from alset.config import LoopConfig
from alset.vehicle.actuation import Gear, Headlight, TurnSignal
from alset.vehicle.navigation import RoadClass
from alset.vehicle.state import VehicleState


class LaneWarning(IntEnum):
    """Lane warning shown beside the vehicle."""
    NONE = -1
    LEFT = 0
    RIGHT = 1


@dataclass(frozen=True)
class DisplaySnapshot:
    """Immutable status display record."""
    speed: int                  # mph, rounded half to even
    gear: Gear
    cruise_control: bool
    wipers: bool
    headlight: Headlight
    cars_in_front: bool
    cars_behind: bool
    cars_left: bool
    cars_right: bool
    lane_warning: LaneWarning
    lane: int
    lane_count: int
    left_turn: bool
    right_turn: bool
    rear_camera: bool
    road_class: RoadClass
    lane_width: float | None    # None when the road is unmarked
    
    def to_dict(self) -> Dict[str, Any]:
        """Get snapshot as plain values.
        
        Returns:
            Dictionary with enum members replaced by their names
        """
        data = asdict(self)
        for key, value in data.items():
            if isinstance(value, Enum):
                data[key] = value.name
        return data
    
    def to_observation(self) -> np.ndarray:
        """Get snapshot as a normalized observation vector.
        
        Returns:
            Numpy float32 array
        """
        return np.array([
            # Speed (normalized to ~100 mph)
            self.speed / 100.0,
            
            # Gear and lights (normalized to their highest value)
            int(self.gear) / int(Gear.DRIVE),
            int(self.headlight) / int(Headlight.HIGH),
            
            float(self.cruise_control),
            float(self.wipers),
            
            # Surrounding traffic
            float(self.cars_in_front),
            float(self.cars_behind),
            float(self.cars_left),
            float(self.cars_right),
            
            float(self.lane_warning),
            
            # Lane position (0 = leftmost, 1 = rightmost)
            (self.lane - 1) / max(self.lane_count - 1, 1),
            
            float(self.left_turn) - float(self.right_turn),
            float(self.rear_camera),
        ], dtype=np.float32)


def lane_departure_warning(state: VehicleState) -> LaneWarning:
    """Warn when the vehicle has crossed a lane line.
    
    Only applies while moving on a registered road with known line
    distances. Right takes precedence when both lines are crossed.
    """
    if not state.motion.is_moving or not state.navigation.is_registered:
        return LaneWarning.NONE
    
    warning = LaneWarning.NONE
    left = state.road.distance_from_left_line()
    right = state.road.distance_from_right_line()
    if left is not None and left <= 0:
        warning = LaneWarning.LEFT
    if right is not None and right <= 0:
        warning = LaneWarning.RIGHT
    return warning


def turn_warning(state: VehicleState, signal: TurnSignal) -> LaneWarning:
    """Warn when a turn signal points at an occupied side."""
    perception = state.perception
    if signal == TurnSignal.LEFT and perception.object_left:
        return LaneWarning.LEFT
    if signal == TurnSignal.RIGHT and perception.object_right:
        return LaneWarning.RIGHT
    return LaneWarning.NONE


def project(
    state: VehicleState,
    config: LoopConfig | None = None,
    blocked_signal: TurnSignal = TurnSignal.NONE,
) -> DisplaySnapshot:
    """Project the vehicle state into a display snapshot.
    
    Args:
        state: Current vehicle state
        config: Loop configuration with detection ranges
        blocked_signal: Signal consumed this tick without changing lanes
        
    Returns:
        New display snapshot
    """
    config = config or LoopConfig()
    actuation = state.actuation
    perception = state.perception
    navigation = state.navigation
    
    warning = lane_departure_warning(state)
    
    # Turn warning is evaluated last so it wins over lane departure
    signal = actuation.turn_signal
    if signal == TurnSignal.NONE:
        signal = blocked_signal
    signalled = turn_warning(state, signal)
    if signalled != LaneWarning.NONE:
        warning = signalled
    
    return DisplaySnapshot(
        speed=round(state.velocity),
        gear=actuation.gear,
        cruise_control=actuation.cruise_control,
        wipers=actuation.wipers,
        headlight=actuation.headlight,
        cars_in_front=perception.distance_front < config.front_detection_range,
        cars_behind=perception.distance_behind < config.rear_detection_range,
        cars_left=perception.object_left,
        cars_right=perception.object_right,
        lane_warning=warning,
        lane=navigation.current_lane,
        lane_count=navigation.lane_count,
        left_turn=actuation.turn_signal == TurnSignal.LEFT,
        right_turn=actuation.turn_signal == TurnSignal.RIGHT,
        rear_camera=actuation.gear == Gear.REVERSE and state.velocity <= 0,
        road_class=navigation.road_class,
        lane_width=state.road.get_lane_width(),
    )
