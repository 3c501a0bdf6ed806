"""
Motion policies - Braking and acceleration.

Provides:
- Tiered braking with a stopping band
- Brake-to and accelerate-to steps toward a target speed
- Gap simulation: braking opens the gap ahead, accelerating closes it
"""

from alset.config import LoopConfig
from alset.vehicle.actuation import Gear
from alset.vehicle.state import VehicleState


def brake(state: VehicleState, config: LoopConfig, intensity: int) -> None:
    """Apply one tick of braking.
    
    Args:
        state: Vehicle state to mutate
        config: Loop configuration with brake tiers
        intensity: Brake tier (1 = light, 3 = hard)
    """
    if intensity not in config.brake_tiers:
        raise ValueError(f"Unknown brake intensity: {intensity}")
    
    factor, margin = config.brake_tiers[intensity]
    motion = state.motion
    band = config.stopping_band
    
    # Sampled before the decay is applied
    already_slow = motion.velocity < band
    motion.velocity *= factor
    
    if state.actuation.moves_forward or not already_slow:
        if motion.velocity < band:
            motion.stop()
        else:
            state.perception.distance_front += margin
    elif state.gear == Gear.REVERSE:
        if motion.velocity > -band:
            motion.stop()


def brake_to(state: VehicleState, config: LoopConfig, target: float) -> None:
    """Brake one tick toward a target speed.
    
    Snaps to the target once it has been crossed, and inside the stopping
    band whenever the vehicle has slowed into it.
    
    Args:
        state: Vehicle state to mutate
        config: Loop configuration
        target: Target velocity (mph, negative in reverse)
    """
    brake(state, config, config.brake_to_intensity)
    
    motion = state.motion
    gear = state.gear
    band = config.stopping_band
    
    if (gear == Gear.DRIVE and motion.velocity <= target) or (
        gear == Gear.REVERSE and motion.velocity >= target
    ):
        motion.velocity = target
    # Overlaps the check above; both are kept so the snapping matches exactly
    if gear == Gear.DRIVE and target < band and motion.velocity < band:
        motion.velocity = target
    if gear == Gear.REVERSE and target > -band and motion.velocity > -band:
        motion.velocity = target


def accelerate_to(state: VehicleState, config: LoopConfig, target: float) -> None:
    """Accelerate one tick toward a target speed.
    
    Args:
        state: Vehicle state to mutate
        config: Loop configuration
        target: Target velocity (mph, negative in reverse)
    """
    motion = state.motion
    perception = state.perception
    gear = state.gear
    launch = config.launch_floor * config.launch_boost
    
    if motion.velocity <= config.launch_floor and gear == Gear.DRIVE:
        motion.velocity = launch
    elif motion.velocity >= -config.launch_floor and gear == Gear.REVERSE:
        motion.velocity = -launch
    else:
        motion.velocity *= config.acceleration_factor
    
    if gear == Gear.DRIVE:
        perception.distance_front -= config.gap_change_per_tick
        perception.distance_behind += config.gap_change_per_tick
        if motion.velocity >= target:
            motion.velocity = target
    elif gear == Gear.REVERSE:
        perception.distance_front += config.gap_change_per_tick
        if motion.velocity <= target:
            motion.velocity = target
