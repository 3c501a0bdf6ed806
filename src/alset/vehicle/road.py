"""
Road sensors - Lane scanners for lane width and line distances.

Lane geometry is only known on a marked road. On an unmarked road every
geometry query reports ``None`` ("unknown").
"""

from dataclasses import dataclass


# Narrowest lane the scanners will report (feet)
MIN_LANE_WIDTH = 7.0

# Vehicle body width used to derive line distances from the lane width (feet)
VEHICLE_WIDTH = 6.0


@dataclass
class RoadSensors:
    """Lane scanner readings.
    
    Default values describe an unconfigured scanner on an unmarked road.
    """
    lane_width: float = 8.0     # Total lane width
    right_line: float = 1.0     # Distance to the right lane line
    left_line: float = 1.0      # Distance to the left lane line
    marked_road: bool = False   # Lane lines are painted on the road
    
    def set_lane_width(self, width: float) -> bool:
        """Set the lane width and re-center the vehicle in it.
        
        Line distances are derived from the requested width, so a width
        narrower than the vehicle leaves negative distances (drift over
        the lines) even though the reported width is clamped.
        
        Args:
            width: Requested lane width
            
        Returns:
            True if applied, False on an unmarked road
        """
        if not self.marked_road:
            return False
        
        self.lane_width = max(width, MIN_LANE_WIDTH)
        self.right_line = (width - VEHICLE_WIDTH) / 2
        self.left_line = (width - VEHICLE_WIDTH) / 2
        return True
    
    def set_marked_road(self, marked: bool) -> None:
        """Set whether the current road has lane markings."""
        self.marked_road = bool(marked)
    
    def get_lane_width(self) -> float | None:
        """Lane width, or None when unknown."""
        return self.lane_width if self.marked_road else None
    
    def distance_from_left_line(self) -> float | None:
        """Distance to the left line, or None when unknown."""
        return self.left_line if self.marked_road else None
    
    def distance_from_right_line(self) -> float | None:
        """Distance to the right line, or None when unknown."""
        return self.right_line if self.marked_road else None
    
    def get_state(self) -> dict:
        """Get scanner state.
        
        Returns:
            Dictionary with lane geometry (None values when unknown)
        """
        return {
            "marked_road": self.marked_road,
            "lane_width": self.get_lane_width(),
            "left_line": self.distance_from_left_line(),
            "right_line": self.distance_from_right_line(),
        }
