"""
Navigation - GPS route classification and lane tracking.

Road class is a single enum so a route can never be both a highway and a
local road. The current lane is kept inside ``[1, lane_count]`` on every
mutation.
"""

from enum import Enum
import numpy as np


class RoadClass(Enum):
    """Classification of the current route."""
    HIGHWAY = "highway"
    LOCAL = "local"
    UNREGISTERED = "unregistered"


class Navigation:
    """GPS navigation state.
    
    Lanes are numbered from 1 (furthest left) to ``lane_count``.
    
    Usage:
        nav = Navigation(RoadClass.HIGHWAY, lane_count=4, current_lane=2)
        nav.set_lane_count(2)  # current lane is clamped to 2
    """
    
    def __init__(
        self,
        road_class: RoadClass = RoadClass.UNREGISTERED,
        lane_count: int = 1,
        current_lane: int = 1,
    ):
        """Initialize navigation state.
        
        Args:
            road_class: Classification of the current route
            lane_count: Number of lanes, clamped to at least 1
            current_lane: Current lane, clamped into range
        """
        self.road_class = road_class
        self._lane_count = max(int(lane_count), 1)
        self._current_lane = self._clamp_lane(current_lane)
    
    @property
    def lane_count(self) -> int:
        """Number of lanes on the current road."""
        return self._lane_count
    
    @property
    def current_lane(self) -> int:
        """Lane the vehicle is in (1 = furthest left)."""
        return self._current_lane
    
    @property
    def is_on_highway(self) -> bool:
        return self.road_class is RoadClass.HIGHWAY
    
    @property
    def is_on_local_road(self) -> bool:
        return self.road_class is RoadClass.LOCAL
    
    @property
    def is_registered(self) -> bool:
        """Check if the route is known to the map."""
        return self.road_class is not RoadClass.UNREGISTERED
    
    def _clamp_lane(self, lane: int) -> int:
        return int(np.clip(int(lane), 1, self._lane_count))
    
    def set_road_class(self, road_class: RoadClass) -> None:
        """Set the route classification."""
        self.road_class = RoadClass(road_class)
    
    def set_lane_count(self, count: int) -> bool:
        """Set the number of lanes.
        
        Args:
            count: Number of lanes
            
        Returns:
            True if applied as given, False if it had to be clamped
        """
        clamped = max(int(count), 1)
        self._lane_count = clamped
        self._current_lane = self._clamp_lane(self._current_lane)
        return clamped == count
    
    def set_current_lane(self, lane: int) -> bool:
        """Move to a lane.
        
        Args:
            lane: Target lane number
            
        Returns:
            True if applied as given, False if it had to be clamped
        """
        self._current_lane = self._clamp_lane(lane)
        return self._current_lane == lane
    
    def __repr__(self) -> str:
        return (
            f"Navigation(road_class={self.road_class}, "
            f"lane_count={self._lane_count}, current_lane={self._current_lane})"
        )
    
    def get_state(self) -> dict:
        """Get navigation state.
        
        Returns:
            Dictionary with route and lane values
        """
        return {
            "road_class": self.road_class.value,
            "lane_count": self._lane_count,
            "current_lane": self._current_lane,
        }
