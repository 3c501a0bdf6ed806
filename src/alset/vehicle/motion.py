"""
Motion state - Longitudinal velocity of the vehicle.

The simulation has no positional physics: velocity is the only motion
quantity and it is changed exclusively by the motion policies and the
gear consistency check.
"""

from dataclasses import dataclass


# Velocity the vehicle is (re)started with (mph)
INITIAL_VELOCITY_MPH = 60.0


@dataclass
class MotionState:
    """Current vehicle velocity.
    
    Positive values move forward, negative values move in reverse.
    """
    velocity: float = 0.0  # mph
    
    @property
    def is_moving(self) -> bool:
        """Check if the vehicle has any velocity."""
        return self.velocity != 0
    
    def stop(self) -> None:
        """Bring the vehicle to a standstill."""
        self.velocity = 0.0
    
    def get_state(self) -> dict:
        """Get motion state.
        
        Returns:
            Dictionary with motion values
        """
        return {"velocity_mph": self.velocity}
