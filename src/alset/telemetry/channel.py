"""
Telemetry channel - One recorded display value over time.

Provides:
- Bounded per-tick sample buffer
- Running statistics over the buffered samples
"""

from dataclasses import dataclass
from typing import List
import numpy as np


@dataclass
class ChannelConfig:
    """Configuration for a telemetry channel."""
    name: str = "unnamed"
    unit: str = ""
    precision: int = 2
    buffer_size: int = 10000


class TelemetryChannel:
    """Samples of a single snapshot value, indexed by tick."""
    
    def __init__(self, config: ChannelConfig | None = None, name: str = "channel"):
        """Initialize channel.
        
        Args:
            config: Channel configuration
            name: Channel name (used if config not provided)
        """
        self.config = config or ChannelConfig(name=name)
        
        self._ticks: List[int] = []
        self._values: List[float] = []
    
    @property
    def name(self) -> str:
        return self.config.name
    
    @property
    def count(self) -> int:
        """Number of buffered samples."""
        return len(self._values)
    
    @property
    def last_value(self) -> float:
        return self._values[-1] if self._values else 0.0
    
    @property
    def min_value(self) -> float:
        return float(np.min(self._values)) if self._values else 0.0
    
    @property
    def max_value(self) -> float:
        return float(np.max(self._values)) if self._values else 0.0
    
    @property
    def mean(self) -> float:
        return float(np.mean(self._values)) if self._values else 0.0
    
    def record(self, tick: int, value: float) -> None:
        """Record the value seen at a tick.
        
        Args:
            tick: Tick index
            value: Sample value
        """
        self._ticks.append(tick)
        self._values.append(float(value))
        
        # Drop the oldest samples beyond the buffer size
        overflow = len(self._values) - self.config.buffer_size
        if overflow > 0:
            del self._ticks[:overflow]
            del self._values[:overflow]
    
    def get_values(self) -> np.ndarray:
        return np.array(self._values)
    
    def get_ticks(self) -> np.ndarray:
        return np.array(self._ticks, dtype=np.int64)
    
    def get_last_n(self, n: int) -> np.ndarray:
        """Get the most recent N values."""
        return np.array(self._values[-n:]) if n > 0 else np.array([])
    
    def count_changes(self) -> int:
        """Number of ticks on which the value differed from the tick before."""
        if len(self._values) < 2:
            return 0
        return int(np.count_nonzero(np.diff(self._values)))
    
    def clear(self) -> None:
        self._ticks.clear()
        self._values.clear()
    
    def get_state(self) -> dict:
        """Get channel statistics.
        
        Returns:
            Dictionary with count and rounded statistics (None when empty)
        """
        empty = not self._values
        precision = self.config.precision
        return {
            "name": self.config.name,
            "unit": self.config.unit,
            "count": self.count,
            "min": None if empty else round(self.min_value, precision),
            "max": None if empty else round(self.max_value, precision),
            "mean": None if empty else round(self.mean, precision),
            "last": None if empty else round(self.last_value, precision),
        }
