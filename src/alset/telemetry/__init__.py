"""
Telemetry module - Per-tick recording of the status display.

This module contains:
- TelemetryRecorder: Records snapshots into channels
- TelemetryChannel: Individual data channel
"""

from alset.telemetry.recorder import TelemetryRecorder, RecorderConfig
from alset.telemetry.channel import TelemetryChannel, ChannelConfig

__all__ = [
    "TelemetryRecorder",
    "RecorderConfig",
    "TelemetryChannel",
    "ChannelConfig",
]
