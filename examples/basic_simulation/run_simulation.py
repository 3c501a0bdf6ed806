#!/usr/bin/env python3
"""
Basic Simulation Example

This example demonstrates how to:
1. Create a control loop in its standard starting state
2. Queue environment overrides and vehicle commands between ticks
3. Follow the status display through a short scripted drive
4. Inspect the recorded telemetry

Run with: python run_simulation.py [--log-level DEBUG]
"""

import argparse
import logging
import sys

from alset import (
    ControlLoop,
    CommandKind,
    CommandQueue,
    EnvironmentOverride,
    OverrideKind,
    VehicleCommand,
)
from alset.vehicle import Gear, TurnSignal


# Scripted driver input: tick -> (override, command)
SCRIPT = {
    2: (EnvironmentOverride(OverrideKind.LIGHT_LEVEL, 30), None),
    4: (None, VehicleCommand(CommandKind.SET_TURN_SIGNAL, TurnSignal.RIGHT)),
    6: (EnvironmentOverride(OverrideKind.FRONT_DISTANCE, 60), None),
    8: (None, VehicleCommand(CommandKind.ACCELERATE_TO, 70)),
    12: (EnvironmentOverride(OverrideKind.RAIN, 1), None),
    15: (EnvironmentOverride(OverrideKind.RESET), VehicleCommand(CommandKind.BRAKE_TO, 0)),
    40: (None, VehicleCommand(CommandKind.SET_GEAR, Gear.PARK)),
}


def setup_logging(level: str) -> None:
    """Configure logging for the example run."""
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def main():
    parser = argparse.ArgumentParser(description="Scripted Alset drive")
    parser.add_argument("--ticks", type=int, default=45)
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args()
    setup_logging(args.log_level)
    
    print("=" * 60)
    print("Alset Control Loop Example")
    print("=" * 60)
    
    loop = ControlLoop()
    queue = CommandQueue()
    
    print("\n1. Starting state:")
    start = loop.snapshot()
    print(f"   {start.speed} mph, {start.gear.name}, lane {start.lane}/{start.lane_count}, "
          f"cruise {'on' if start.cruise_control else 'off'}")
    
    print(f"\n2. Running {args.ticks} ticks...")
    for tick in range(args.ticks):
        override, command = SCRIPT.get(tick, (None, None))
        if override is not None:
            queue.put_override(override)
        if command is not None:
            queue.put_command(command)
        
        snapshot = loop.step(queue)
        
        if override is not None or command is not None or tick % 5 == 0:
            print(f"   Tick {loop.tick_count:3d}: {snapshot.speed:3d} mph "
                  f"[{snapshot.gear.name[0]}] lane {snapshot.lane} "
                  f"lights {snapshot.headlight.name:<4} "
                  f"wipers {'on ' if snapshot.wipers else 'off'} "
                  f"front {'CAR' if snapshot.cars_in_front else '-  '} "
                  f"warning {snapshot.lane_warning.name}")
    
    print("\n3. Telemetry:")
    speed = loop.telemetry.get_channel("speed")
    print(f"   Speed: min {speed.min_value:.0f}, max {speed.max_value:.0f}, "
          f"mean {speed.mean:.1f} mph")
    lights = loop.telemetry.get_channel("headlight")
    print(f"   Headlight changes: {lights.count_changes()}")
    print(f"   Samples: {loop.telemetry.sample_count}")
    
    print("\n" + "=" * 60)
    print("Simulation complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
