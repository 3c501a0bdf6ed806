"""
Actuation - Vehicle control outputs.

Simulates:
- Cruise control engagement
- Headlight levels (off, low, high beams)
- Gear selector
- Turn signals
- Windshield wipers
"""

from dataclasses import dataclass
from enum import IntEnum

from alset.vehicle.motion import MotionState
from alset.vehicle.navigation import Navigation


class Gear(IntEnum):
    """Gear selector positions."""
    PARK = 0
    REVERSE = 1
    NEUTRAL = 2
    DRIVE = 3


class Headlight(IntEnum):
    """Headlight levels."""
    OFF = 0
    LOW = 1
    HIGH = 2


class TurnSignal(IntEnum):
    """Turn signal direction."""
    LEFT = -1
    NONE = 0
    RIGHT = 1


@dataclass
class Actuation:
    """Current actuator settings."""
    cruise_control: bool = False
    headlight: Headlight = Headlight.OFF
    gear: Gear = Gear.PARK
    turn_signal: TurnSignal = TurnSignal.NONE
    wipers: bool = False
    
    @property
    def moves_forward(self) -> bool:
        """Gears that roll the vehicle forward."""
        return self.gear in (Gear.DRIVE, Gear.NEUTRAL)
    
    def start_cruise_control(self, motion: MotionState, navigation: Navigation) -> bool:
        """Engage cruise control.
        
        Cruise control only engages on a highway while moving forward.
        
        Args:
            motion: Current motion state
            navigation: Current navigation state
            
        Returns:
            True if cruise control is active afterwards
        """
        if navigation.is_on_highway and motion.velocity > 0:
            self.cruise_control = True
        return self.cruise_control
    
    def stop_cruise_control(self) -> None:
        self.cruise_control = False
    
    def set_gear(self, gear: Gear) -> None:
        self.gear = Gear(gear)
    
    def set_headlight(self, level: int) -> None:
        """Set headlight level, anything above LOW selects high beams."""
        self.headlight = Headlight(min(max(int(level), 0), int(Headlight.HIGH)))
    
    def signal(self, direction: TurnSignal) -> None:
        self.turn_signal = TurnSignal(direction)
    
    def turn_complete(self) -> None:
        """Cancel the turn signal."""
        self.turn_signal = TurnSignal.NONE
    
    def get_state(self) -> dict:
        """Get actuator state.
        
        Returns:
            Dictionary of actuator settings
        """
        return {
            "cruise_control": self.cruise_control,
            "headlight": self.headlight.name,
            "gear": self.gear.name,
            "turn_signal": self.turn_signal.name,
            "wipers": self.wipers,
        }
