"""
Display module - Status display projection.

This module contains:
- DisplaySnapshot: Immutable render-ready status record
- LaneWarning: Lane warning values
- project: Builds a snapshot from the vehicle state
"""

from alset.display.snapshot import DisplaySnapshot, LaneWarning, project

__all__ = [
    "DisplaySnapshot",
    "LaneWarning",
    "project",
]
