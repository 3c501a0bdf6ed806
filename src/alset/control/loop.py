"""
Control loop - Tick orchestration of the planning system.

Provides:
- Input acceptance between ticks
- Ordered policy evaluation
- Display projection and snapshot listeners
- Telemetry collection
"""

from typing import Callable, List, Optional
import logging

from alset.config import LoopConfig
from alset.control.commands import (
    CommandQueue,
    CommandStatus,
    EnvironmentOverride,
    VehicleCommand,
    apply_override,
    apply_vehicle_command,
)
from alset.control import policies
from alset.display.snapshot import DisplaySnapshot, project
from alset.telemetry.recorder import TelemetryRecorder, RecorderConfig
from alset.vehicle.actuation import TurnSignal
from alset.vehicle.state import VehicleState

logger = logging.getLogger(__name__)


class ControlLoop:
    """Deterministic, single-threaded vehicle control loop.
    
    Owns the vehicle state exclusively. Each tick applies the queued
    input, runs the control policies in a fixed order and projects a new
    display snapshot.
    
    Usage:
        loop = ControlLoop()
        snapshot = loop.tick(command=VehicleCommand(CommandKind.BRAKE_TO, 40))
        while loop.state.pending.is_active:
            snapshot = loop.tick()
    """
    
    def __init__(
        self,
        config: LoopConfig | None = None,
        state: VehicleState | None = None,
    ):
        """Initialize the control loop.
        
        Args:
            config: Loop configuration. Uses defaults if None.
            state: Initial vehicle state. Uses the standard start if None.
        """
        self.config = config or LoopConfig()
        self._state = state or VehicleState()
        
        self._tick_count: int = 0
        self._listeners: List[Callable[[DisplaySnapshot], None]] = []
        
        self._telemetry: Optional[TelemetryRecorder] = None
        if self.config.enable_telemetry:
            self._telemetry = TelemetryRecorder(
                RecorderConfig(buffer_size=self.config.telemetry_buffer_size)
            )
        
        self._last_snapshot = project(self._state, self.config)
    
    @property
    def state(self) -> VehicleState:
        """Vehicle state owned by this loop."""
        return self._state
    
    @property
    def tick_count(self) -> int:
        """Number of ticks run since creation or reset."""
        return self._tick_count
    
    @property
    def last_snapshot(self) -> DisplaySnapshot:
        """Most recently projected snapshot."""
        return self._last_snapshot
    
    @property
    def telemetry(self) -> Optional[TelemetryRecorder]:
        """Telemetry recorder, None when telemetry is disabled."""
        return self._telemetry
    
    def add_listener(self, callback: Callable[[DisplaySnapshot], None]) -> None:
        """Add callback receiving every new snapshot.
        
        Args:
            callback: Function taking a DisplaySnapshot
        """
        self._listeners.append(callback)
    
    def apply_override(self, override: EnvironmentOverride) -> CommandStatus:
        """Apply an environment override immediately.
        
        Args:
            override: Override to apply
            
        Returns:
            Outcome of the override
        """
        return apply_override(self._state, override)
    
    def submit(self, command: VehicleCommand) -> CommandStatus:
        """Accept or reject a vehicle command immediately.
        
        Args:
            command: Command to apply
            
        Returns:
            Outcome of the command
        """
        return apply_vehicle_command(self._state, command, self.config)
    
    def snapshot(self) -> DisplaySnapshot:
        """Project the current state without running the policies.
        
        Returns:
            New display snapshot (also stored as last_snapshot)
        """
        self._last_snapshot = project(self._state, self.config)
        return self._last_snapshot
    
    def tick(
        self,
        override: EnvironmentOverride | None = None,
        command: VehicleCommand | None = None,
    ) -> DisplaySnapshot:
        """Run one tick of the control loop.
        
        Args:
            override: Environment override applied before the policies
            command: Vehicle command applied before the policies
            
        Returns:
            Display snapshot of the state after the tick
        """
        if override is not None:
            self.apply_override(override)
        if command is not None:
            self.submit(command)
        
        blocked_signal = TurnSignal.NONE
        for policy in policies.POLICY_ORDER:
            result = policy(self._state, self.config)
            if result is not None:
                blocked_signal = result
        
        if blocked_signal != TurnSignal.NONE:
            logger.info(f"Lane change {blocked_signal.name} blocked")
        
        self._tick_count += 1
        snapshot = project(self._state, self.config, blocked_signal)
        self._last_snapshot = snapshot
        
        if self._telemetry is not None:
            self._telemetry.record(self._tick_count, snapshot)
        
        for callback in self._listeners:
            callback(snapshot)
        
        return snapshot
    
    def step(self, queue: CommandQueue) -> DisplaySnapshot:
        """Drain a command queue and run one tick.
        
        Args:
            queue: Queue filled by the driver since the last tick
            
        Returns:
            Display snapshot after the tick
        """
        override, command = queue.take()
        return self.tick(override, command)
    
    def run(self, ticks: int, queue: CommandQueue | None = None) -> DisplaySnapshot:
        """Run several ticks.
        
        Args:
            ticks: Number of ticks to run
            queue: Optional queue drained before every tick
            
        Returns:
            Snapshot of the last tick (current snapshot if ticks is 0)
        """
        snapshot = self._last_snapshot
        for _ in range(ticks):
            snapshot = self.step(queue) if queue is not None else self.tick()
        return snapshot
    
    def reset(self) -> None:
        """Restore the standard starting state."""
        self._state = VehicleState()
        self._tick_count = 0
        if self._telemetry is not None:
            self._telemetry.clear()
        self._last_snapshot = project(self._state, self.config)
        logger.debug("Control loop reset")
    
    def get_state(self) -> dict:
        """Get complete loop state.
        
        Returns:
            Dictionary containing loop and vehicle state
        """
        return {
            "tick": self._tick_count,
            "vehicle": self._state.get_state(),
            "snapshot": self._last_snapshot.to_dict(),
            "telemetry": self._telemetry.get_state() if self._telemetry else None,
        }
