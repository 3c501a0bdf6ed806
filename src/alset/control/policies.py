"""
Control policies - The per-tick rules of the planning loop.

Each policy reads and mutates a VehicleState and returns None, or the turn
signal it consumed without acting on it. ``POLICY_ORDER`` lists them in the
order a tick applies them; later policies see the mutations of earlier ones.
"""

from alset.config import LoopConfig
from alset.control.motion import brake, brake_to, accelerate_to
from alset.vehicle.actuation import Gear, Headlight, TurnSignal
from alset.vehicle.state import VehicleState, PendingKind


def obstacle_braking(state: VehicleState, config: LoopConfig) -> None:
    """Brake for traffic in the direction of travel.
    
    Any braking here cancels a pending acceleration.
    """
    if not state.motion.is_moving:
        return
    
    perception = state.perception
    if state.actuation.moves_forward:
        gap = perception.distance_front
        for intensity, (low, high) in config.front_brake_bands.items():
            if low < gap <= high:
                brake(state, config, intensity)
                _cancel_acceleration(state)
                return
    elif state.gear == Gear.REVERSE:
        if 0 < perception.distance_behind < config.rear_detection_range:
            brake(state, config, config.reverse_brake_intensity)
            _cancel_acceleration(state)


def _cancel_acceleration(state: VehicleState) -> None:
    if state.pending.kind is PendingKind.ACCELERATE_TO:
        state.pending.clear()


def _target_reached(state: VehicleState, accelerating: bool) -> bool:
    velocity = state.velocity
    target = state.pending.target
    if state.gear == Gear.DRIVE:
        return velocity >= target if accelerating else velocity <= target
    if state.gear == Gear.REVERSE:
        return velocity <= target if accelerating else velocity >= target
    return False


def pending_acceleration(state: VehicleState, config: LoopConfig) -> None:
    """Advance an accelerate-to intent and clear it once reached."""
    if state.pending.kind is not PendingKind.ACCELERATE_TO:
        return
    accelerate_to(state, config, state.pending.target)
    if _target_reached(state, accelerating=True):
        state.pending.clear()


def pending_braking(state: VehicleState, config: LoopConfig) -> None:
    """Advance a brake-to intent and clear it once reached."""
    if state.pending.kind is not PendingKind.BRAKE_TO:
        return
    brake_to(state, config, state.pending.target)
    if _target_reached(state, accelerating=False):
        state.pending.clear()


def automatic_headlights(state: VehicleState, config: LoopConfig) -> None:
    """Headlights on in the dark or in rain, off in clear daylight."""
    perception = state.perception
    actuation = state.actuation
    dark = perception.light_level < config.headlight_light_threshold
    
    if (dark or perception.rain) and actuation.headlight == Headlight.OFF:
        actuation.set_headlight(Headlight.LOW)
    elif not dark and not perception.rain and actuation.headlight != Headlight.OFF:
        actuation.set_headlight(Headlight.OFF)


def automatic_lane_change(state: VehicleState, config: LoopConfig) -> TurnSignal | None:
    """Change lanes on a turn signal while cruising.
    
    The signal is consumed whether or not the lane change happened; a
    blocked request is not retried.
    
    Returns:
        The signal that was consumed without changing lanes, or None
    """
    actuation = state.actuation
    navigation = state.navigation
    perception = state.perception
    signal = actuation.turn_signal
    
    if not (
        state.motion.is_moving
        and actuation.cruise_control
        and navigation.lane_count > 1
    ):
        return None
    
    if signal == TurnSignal.NONE:
        return None
    
    actuation.turn_complete()
    lane = navigation.current_lane
    
    if signal == TurnSignal.LEFT:
        if not perception.object_left and lane > 1:
            navigation.set_current_lane(lane - 1)
            # The car on the right is now two lanes away
            perception.object_right = False
            return None
    else:
        if not perception.object_right and lane < navigation.lane_count:
            navigation.set_current_lane(lane + 1)
            perception.object_left = False
            return None
    
    return signal


def automatic_high_beams(state: VehicleState, config: LoopConfig) -> None:
    """Use high beams on dark, dry, open road at speed."""
    perception = state.perception
    actuation = state.actuation
    open_road = (
        perception.light_level < config.high_beam_light_threshold
        and state.velocity > config.high_beam_min_speed
        and not perception.rain
        and perception.distance_front >= config.front_detection_range
    )
    
    if open_road:
        if actuation.headlight == Headlight.LOW:
            actuation.set_headlight(Headlight.HIGH)
    elif actuation.headlight == Headlight.HIGH:
        actuation.set_headlight(Headlight.LOW)


def automatic_wipers(state: VehicleState, config: LoopConfig) -> None:
    state.actuation.wipers = state.perception.rain


def gear_consistency(state: VehicleState, config: LoopConfig) -> None:
    """Keep velocity and cruise control consistent with the selected gear.
    
    Neutral has no velocity rule of its own.
    """
    motion = state.motion
    actuation = state.actuation
    gear = actuation.gear
    
    if gear == Gear.PARK and motion.velocity != 0:
        motion.stop()
    elif gear == Gear.REVERSE and motion.velocity > 0:
        motion.stop()
    elif gear == Gear.DRIVE and motion.velocity < 0:
        motion.stop()
    
    if gear != Gear.DRIVE:
        actuation.stop_cruise_control()
    elif not actuation.cruise_control:
        actuation.start_cruise_control(motion, state.navigation)


POLICY_ORDER = (
    obstacle_braking,
    pending_acceleration,
    pending_braking,
    automatic_headlights,
    automatic_lane_change,
    automatic_high_beams,
    automatic_wipers,
    gear_consistency,
)
