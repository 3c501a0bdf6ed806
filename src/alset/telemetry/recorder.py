"""
Telemetry recorder - Records display snapshots tick by tick.

Each numeric or boolean snapshot field is stored in its own channel so a
run can be inspected after the fact (speed trace, lane history, how often
the high beams toggled).
"""

from dataclasses import dataclass
from typing import Dict, List, Any, Optional

from alset.telemetry.channel import TelemetryChannel, ChannelConfig
from alset.display.snapshot import DisplaySnapshot


# Snapshot fields recorded by default, with their units
STANDARD_CHANNELS = {
    "speed": "mph",
    "gear": "",
    "headlight": "",
    "lane": "",
    "lane_warning": "",
    "cruise_control": "",
    "wipers": "",
    "cars_in_front": "",
    "cars_behind": "",
    "rear_camera": "",
}


@dataclass
class RecorderConfig:
    """Recorder configuration."""
    channels: List[str] | None = None   # Snapshot fields to record (None = standard)
    buffer_size: int = 10000            # Per-channel buffer size
    
    def __post_init__(self):
        if self.channels is not None:
            numeric = set(DisplaySnapshot.__dataclass_fields__) - {"road_class"}
            unknown = set(self.channels) - numeric
            if unknown:
                raise ValueError(f"Not numeric snapshot fields: {sorted(unknown)}")


class TelemetryRecorder:
    """Records snapshot values into per-field channels.
    
    Usage:
        recorder = TelemetryRecorder()
        recorder.record(tick, snapshot)
        speeds = recorder.get_channel("speed").get_values()
    """
    
    def __init__(self, config: RecorderConfig | None = None):
        """Initialize recorder.
        
        Args:
            config: Recorder configuration
        """
        self.config = config or RecorderConfig()
        self._channels: Dict[str, TelemetryChannel] = {}
        
        names = self.config.channels or list(STANDARD_CHANNELS)
        for name in names:
            cfg = ChannelConfig(
                name=name,
                unit=STANDARD_CHANNELS.get(name, ""),
                buffer_size=self.config.buffer_size,
            )
            self._channels[name] = TelemetryChannel(cfg)
        
        self._samples: int = 0
    
    @property
    def channels(self) -> Dict[str, TelemetryChannel]:
        return self._channels
    
    @property
    def sample_count(self) -> int:
        """Number of snapshots recorded since the last clear."""
        return self._samples
    
    def get_channel(self, name: str) -> Optional[TelemetryChannel]:
        return self._channels.get(name)
    
    def record(self, tick: int, snapshot: DisplaySnapshot) -> None:
        """Record a snapshot.
        
        Args:
            tick: Tick index the snapshot belongs to
            snapshot: Snapshot to record
        """
        for name, channel in self._channels.items():
            value = getattr(snapshot, name)
            # Fields that may be unknown (lane width) are skipped for that tick
            if value is None:
                continue
            channel.record(tick, float(value))
        self._samples += 1
    
    def get_current_values(self) -> Dict[str, float]:
        return {name: ch.last_value for name, ch in self._channels.items()}
    
    def get_statistics(self) -> Dict[str, Dict[str, Any]]:
        return {name: ch.get_state() for name, ch in self._channels.items()}
    
    def clear(self) -> None:
        """Clear all recorded data."""
        for channel in self._channels.values():
            channel.clear()
        self._samples = 0
    
    def get_state(self) -> dict:
        """Get recorder state.
        
        Returns:
            Dictionary containing recorder state
        """
        return {
            "samples": self._samples,
            "channels": self.get_statistics(),
        }
