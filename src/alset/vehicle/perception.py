"""
Perception - Exterior sensors and cameras.

Tracks light level, rain, and the gaps to surrounding traffic. A distance
of ``NOTHING_DETECTED`` means no object is in range.
"""

from dataclasses import dataclass


NOTHING_DETECTED = float('inf')

# Ambient light level of a clear day
DEFAULT_LIGHT_LEVEL = 200.0


@dataclass
class Perception:
    """Current exterior sensor readings."""
    light_level: float = DEFAULT_LIGHT_LEVEL
    rain: bool = False
    distance_front: float = NOTHING_DETECTED   # Gap to the car ahead
    distance_behind: float = NOTHING_DETECTED  # Gap to the car behind
    object_left: bool = False
    object_right: bool = False
    
    def set_light_level(self, level: float) -> bool:
        """Set ambient light level.
        
        Args:
            level: Light level, negative values are clamped to 0
            
        Returns:
            True if applied as given, False if it had to be clamped
        """
        self.light_level = max(float(level), 0.0)
        return level >= 0
    
    def set_side_object(self, side: int) -> None:
        """Report an object beside the vehicle.
        
        Args:
            side: Negative for left, positive for right, 0 clears both sides
        """
        if side < 0:
            self.object_left = True
        elif side > 0:
            self.object_right = True
        else:
            self.object_left = False
            self.object_right = False
    
    def get_state(self) -> dict:
        """Get sensor state.
        
        Returns:
            Dictionary of sensor readings
        """
        return {
            "light_level": self.light_level,
            "rain": self.rain,
            "distance_front": self.distance_front,
            "distance_behind": self.distance_behind,
            "object_left": self.object_left,
            "object_right": self.object_right,
        }
