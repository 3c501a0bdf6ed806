"""
Control loop configuration.

All policy thresholds in one place. This module is an import-safe leaf:
it never imports from other project packages.
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple


@dataclass
class LoopConfig:
    """Configuration for the control loop and its policies."""
    # Obstacle detection ranges
    front_detection_range: float = 100.0   # Car ahead counts inside this gap
    rear_detection_range: float = 20.0     # Car behind counts inside this gap
    
    # Front gap bands mapped to brake intensity: (exclusive low, inclusive high)
    front_brake_bands: Dict[int, Tuple[float, float]] = field(default_factory=lambda: {
        1: (20.0, 100.0),
        2: (10.0, 20.0),
        3: (0.0, 10.0),
    })
    reverse_brake_intensity: int = 3
    
    # Brake tiers: intensity -> (velocity decay factor, front gap margin)
    brake_tiers: Dict[int, Tuple[float, float]] = field(default_factory=lambda: {
        1: (0.95, 10.0),
        2: (0.90, 15.0),
        3: (0.85, 20.0),
    })
    brake_to_intensity: int = 2
    stopping_band: float = 5.0             # Below this magnitude the car stops
    
    # Acceleration
    launch_floor: float = 10.0             # At or below this, jump-start
    launch_boost: float = 1.2
    acceleration_factor: float = 1.10
    gap_change_per_tick: float = 10.0
    
    # Lights
    headlight_light_threshold: float = 200.0
    high_beam_light_threshold: float = 50.0
    high_beam_min_speed: float = 25.0
    
    # Gear selector only moves at low speed
    gear_change_max_speed: float = 5.0
    
    # Telemetry
    enable_telemetry: bool = True
    telemetry_buffer_size: int = 10000
    
    def __post_init__(self):
        """Validate configuration."""
        for intensity, (factor, margin) in self.brake_tiers.items():
            if not 0.0 < factor < 1.0:
                raise ValueError(
                    f"Brake tier {intensity} decay factor must be in (0, 1), got {factor}"
                )
            if margin < 0:
                raise ValueError(f"Brake tier {intensity} margin must be non-negative")
        
        for intensity in self.front_brake_bands:
            if intensity not in self.brake_tiers:
                raise ValueError(f"Front brake band uses unknown intensity {intensity}")
        
        for name in ("brake_to_intensity", "reverse_brake_intensity"):
            if getattr(self, name) not in self.brake_tiers:
                raise ValueError(f"{name} must be one of {sorted(self.brake_tiers)}")
        
        if self.acceleration_factor <= 1.0:
            raise ValueError("acceleration_factor must be greater than 1")
        
        if self.telemetry_buffer_size < 1:
            raise ValueError("telemetry_buffer_size must be positive")
