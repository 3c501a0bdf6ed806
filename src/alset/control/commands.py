"""
Commands - External input to the control loop.

Provides:
- EnvironmentOverride: sensor/road changes injected by the operator
- VehicleCommand: driver requests (brake, accelerate, gear, signal)
- Acceptance rules and the CommandStatus outcome taxonomy
- CommandQueue: one pending slot per input class between ticks
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple
import logging

from alset.config import LoopConfig
from alset.vehicle.actuation import Gear, TurnSignal
from alset.vehicle.perception import Perception
from alset.vehicle.road import MIN_LANE_WIDTH
from alset.vehicle.state import VehicleState, PendingKind, initial_navigation
from alset.vehicle.motion import INITIAL_VELOCITY_MPH

logger = logging.getLogger(__name__)

# Gears the driver can select
SELECTABLE_GEARS = (Gear.PARK, Gear.REVERSE, Gear.DRIVE)


class CommandStatus(Enum):
    """Outcome of applying an input."""
    ACCEPTED = "accepted"   # Applied as given
    CLAMPED = "clamped"     # Out-of-range value applied after clamping
    REJECTED = "rejected"   # Nothing was changed


class OverrideKind(Enum):
    """Environment changes the operator can inject."""
    FRONT_DISTANCE = "front_distance"
    BACK_DISTANCE = "back_distance"
    SIDE_OBJECT = "side_object"
    LIGHT_LEVEL = "light_level"
    RAIN = "rain"
    RESET = "reset"
    LANE_WIDTH = "lane_width"
    MARKED_ROAD = "marked_road"
    ROAD_CLASS = "road_class"
    LANE_COUNT = "lane_count"


class CommandKind(Enum):
    """Driver requests."""
    BRAKE_TO = "brake_to"
    ACCELERATE_TO = "accelerate_to"
    SET_GEAR = "set_gear"
    SET_TURN_SIGNAL = "set_turn_signal"
    RESET = "reset"


@dataclass(frozen=True)
class EnvironmentOverride:
    """A single change to the sensed environment."""
    kind: OverrideKind
    value: Any = None


@dataclass(frozen=True)
class VehicleCommand:
    """A single driver request."""
    kind: CommandKind
    value: Any = None


def apply_override(state: VehicleState, override: EnvironmentOverride) -> CommandStatus:
    """Apply an environment override to the vehicle state.
    
    Args:
        state: Vehicle state to mutate
        override: Override to apply
        
    Returns:
        Outcome of the override
    """
    kind = override.kind
    value = override.value
    perception = state.perception
    status = CommandStatus.ACCEPTED
    
    if kind is OverrideKind.RESET:
        state.perception = Perception()
    elif kind is OverrideKind.FRONT_DISTANCE:
        perception.distance_front = float(value)
    elif kind is OverrideKind.BACK_DISTANCE:
        perception.distance_behind = float(value)
    elif kind is OverrideKind.SIDE_OBJECT:
        perception.set_side_object(value)
    elif kind is OverrideKind.LIGHT_LEVEL:
        if not perception.set_light_level(value):
            status = CommandStatus.CLAMPED
    elif kind is OverrideKind.RAIN:
        perception.rain = bool(value)
    elif kind is OverrideKind.LANE_WIDTH:
        width = float(value)
        if not state.road.set_lane_width(width):
            status = CommandStatus.REJECTED
        elif width < MIN_LANE_WIDTH:
            status = CommandStatus.CLAMPED
    elif kind is OverrideKind.MARKED_ROAD:
        state.road.set_marked_road(value)
    elif kind is OverrideKind.ROAD_CLASS:
        state.navigation.set_road_class(value)
    elif kind is OverrideKind.LANE_COUNT:
        if not state.navigation.set_lane_count(value):
            status = CommandStatus.CLAMPED
    else:
        raise ValueError(f"Unknown override kind: {kind}")
    
    _log_outcome(override, status)
    return status


def check_vehicle_command(
    state: VehicleState,
    command: VehicleCommand,
    config: LoopConfig,
) -> Optional[str]:
    """Check a vehicle command against the current state.
    
    Args:
        state: Current vehicle state
        command: Command to check
        config: Loop configuration
        
    Returns:
        Rejection reason, or None if the command is acceptable
    """
    kind = command.kind
    gear = state.gear
    velocity = state.velocity
    
    if kind in (CommandKind.BRAKE_TO, CommandKind.ACCELERATE_TO):
        target = command.value
        if gear in (Gear.PARK, Gear.NEUTRAL):
            return f"cannot change speed in {gear.name}"
        if gear == Gear.DRIVE and target < 0:
            return "negative target speed in DRIVE"
        if gear == Gear.REVERSE and target > 0:
            return "positive target speed in REVERSE"
        if kind is CommandKind.BRAKE_TO:
            if gear == Gear.DRIVE and target > velocity:
                return f"brake target {target} above current speed {velocity:.1f}"
            if gear == Gear.REVERSE and target < velocity:
                return f"brake target {target} beyond current speed {velocity:.1f}"
        return None
    
    if kind is CommandKind.SET_GEAR:
        if abs(velocity) > config.gear_change_max_speed:
            return "can only change gear at low speeds"
        requested = _requested_gear(command.value)
        if requested is None:
            return f"unknown gear {command.value!r}"
        if requested not in SELECTABLE_GEARS:
            return f"{requested.name} cannot be selected"
        return None
    
    if kind is CommandKind.SET_TURN_SIGNAL:
        if _requested_signal(command.value) == TurnSignal.NONE:
            return "turn signal needs a direction"
        return None
    
    if kind is CommandKind.RESET:
        return None
    
    raise ValueError(f"Unknown command kind: {kind}")


def apply_vehicle_command(
    state: VehicleState,
    command: VehicleCommand,
    config: LoopConfig,
) -> CommandStatus:
    """Accept or reject a vehicle command and apply it when accepted.
    
    Brake and accelerate commands only set the pending intent; the control
    loop carries them out tick by tick.
    
    Args:
        state: Vehicle state to mutate
        command: Command to apply
        config: Loop configuration
        
    Returns:
        Outcome of the command
    """
    reason = check_vehicle_command(state, command, config)
    if reason is not None:
        logger.info(f"Rejected {command.kind.value}({command.value}): {reason}")
        return CommandStatus.REJECTED
    
    kind = command.kind
    if kind is CommandKind.BRAKE_TO:
        state.pending.set(PendingKind.BRAKE_TO, command.value)
    elif kind is CommandKind.ACCELERATE_TO:
        state.pending.set(PendingKind.ACCELERATE_TO, command.value)
    elif kind is CommandKind.SET_GEAR:
        gear = _requested_gear(command.value)
        if gear != state.gear:
            state.pending.clear()
        state.actuation.set_gear(gear)
    elif kind is CommandKind.SET_TURN_SIGNAL:
        state.actuation.signal(_requested_signal(command.value))
    elif kind is CommandKind.RESET:
        state.motion.velocity = INITIAL_VELOCITY_MPH
        state.navigation = initial_navigation()
    
    _log_outcome(command, CommandStatus.ACCEPTED)
    return CommandStatus.ACCEPTED


def _requested_gear(value: Any) -> Optional[Gear]:
    for gear in Gear:
        if value == gear:
            return gear
    return None


def _requested_signal(value: Any) -> TurnSignal:
    """Map a signal request to a direction by its sign."""
    if value < 0:
        return TurnSignal.LEFT
    if value > 0:
        return TurnSignal.RIGHT
    return TurnSignal.NONE


def _log_outcome(item: EnvironmentOverride | VehicleCommand, status: CommandStatus) -> None:
    if status is CommandStatus.ACCEPTED:
        logger.debug(f"Applied {item.kind.value}({item.value})")
    else:
        logger.info(f"{status.value.capitalize()} {item.kind.value}({item.value})")


class CommandQueue:
    """Input slots filled by the driver and drained at each tick boundary.
    
    Holds at most one environment override and one vehicle command. A
    second input of the same class before the next tick is refused.
    """
    
    def __init__(self):
        self._override: Optional[EnvironmentOverride] = None
        self._command: Optional[VehicleCommand] = None
    
    @property
    def is_empty(self) -> bool:
        return self._override is None and self._command is None
    
    def put_override(self, override: EnvironmentOverride) -> bool:
        """Queue an environment override.
        
        Returns:
            True if queued, False if an override is already waiting
        """
        if self._override is not None:
            return False
        self._override = override
        return True
    
    def put_command(self, command: VehicleCommand) -> bool:
        """Queue a vehicle command.
        
        Returns:
            True if queued, False if a command is already waiting
        """
        if self._command is not None:
            return False
        self._command = command
        return True
    
    def take(self) -> Tuple[Optional[EnvironmentOverride], Optional[VehicleCommand]]:
        """Remove and return the queued inputs."""
        items = (self._override, self._command)
        self._override = None
        self._command = None
        return items
