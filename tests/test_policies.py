"""Tests for the ordered control policies."""

import pytest

from alset.config import LoopConfig
from alset.control import policies
from alset.vehicle import (
    MotionState,
    Navigation,
    RoadClass,
    Perception,
    Actuation,
    Gear,
    Headlight,
    TurnSignal,
    VehicleState,
    PendingKind,
)


def _state(
    velocity: float = 60.0,
    gear: Gear = Gear.DRIVE,
    cruise: bool = True,
    lanes: int = 3,
    lane: int = 2,
    headlight: Headlight = Headlight.OFF,
    signal: TurnSignal = TurnSignal.NONE,
    **perception,
) -> VehicleState:
    return VehicleState(
        motion=MotionState(velocity),
        navigation=Navigation(RoadClass.HIGHWAY, lanes, lane),
        perception=Perception(**perception),
        actuation=Actuation(
            cruise_control=cruise,
            headlight=headlight,
            gear=gear,
            turn_signal=signal,
        ),
    )


class TestPolicyOrder:
    """Test the fixed policy order."""
    
    def test_order(self):
        """Test braking runs first and gear consistency last."""
        assert policies.POLICY_ORDER[0] is policies.obstacle_braking
        assert policies.POLICY_ORDER[-1] is policies.gear_consistency
        assert len(policies.POLICY_ORDER) == 8

    def test_only_blocked_signal_is_reported(self):
        """Test policies report nothing except a blocked turn signal."""
        state = _state(signal=TurnSignal.RIGHT, object_right=True, rain=True)

        results = [policy(state, LoopConfig()) for policy in policies.POLICY_ORDER]

        assert [r for r in results if r is not None] == [TurnSignal.RIGHT]


class TestObstacleBraking:
    """Test braking for surrounding traffic."""
    
    def test_brake_bands(self):
        """Test the front gap selects the brake intensity."""
        config = LoopConfig()
        expected = {100.0: 57.0, 15.0: 54.0, 5.0: 51.0}
        
        for gap, velocity in expected.items():
            state = _state(distance_front=gap)
            policies.obstacle_braking(state, config)
            assert state.velocity == pytest.approx(velocity)
        
    def test_no_braking_beyond_range(self):
        """Test traffic beyond 100 is ignored."""
        state = _state(distance_front=100.5)
        
        policies.obstacle_braking(state, LoopConfig())
        
        assert state.velocity == 60.0
        
    def test_no_braking_when_stopped(self):
        """Test a stopped vehicle does not brake."""
        state = _state(velocity=0.0, distance_front=5.0)
        
        policies.obstacle_braking(state, LoopConfig())
        
        assert state.perception.distance_front == 5.0
        
    def test_braking_cancels_acceleration(self):
        """Test obstacle braking drops an acceleration intent."""
        state = _state(distance_front=50.0)
        state.pending.set(PendingKind.ACCELERATE_TO, 80)
        
        policies.obstacle_braking(state, LoopConfig())
        
        assert not state.pending.is_active
        
    def test_braking_keeps_brake_intent(self):
        """Test a brake intent survives obstacle braking."""
        state = _state(distance_front=50.0)
        state.pending.set(PendingKind.BRAKE_TO, 20)
        
        policies.obstacle_braking(state, LoopConfig())
        
        assert state.pending.kind is PendingKind.BRAKE_TO
        
    def test_reverse_brakes_for_car_behind(self):
        """Test reversing toward a close car brakes hard."""
        state = _state(velocity=-10.0, gear=Gear.REVERSE, cruise=False, distance_behind=10.0)
        
        policies.obstacle_braking(state, LoopConfig())
        
        assert state.velocity == pytest.approx(-8.5)
        
    def test_reverse_ignores_car_ahead(self):
        """Test the front gap does not matter in reverse."""
        state = _state(velocity=-10.0, gear=Gear.REVERSE, cruise=False, distance_front=5.0)
        
        policies.obstacle_braking(state, LoopConfig())
        
        assert state.velocity == -10.0


class TestPendingIntent:
    """Test the pending acceleration and braking steps."""
    
    def test_acceleration_clears_on_target(self):
        """Test the acceleration intent ends once the target is reached."""
        state = _state()
        state.pending.set(PendingKind.ACCELERATE_TO, 65)
        
        policies.pending_acceleration(state, LoopConfig())
        
        assert state.velocity == 65
        assert not state.pending.is_active
        
    def test_braking_continues_until_target(self):
        """Test the brake intent persists while above target."""
        state = _state()
        state.pending.set(PendingKind.BRAKE_TO, 40)
        
        policies.pending_braking(state, LoopConfig())
        
        assert state.velocity == pytest.approx(54.0)
        assert state.pending.kind is PendingKind.BRAKE_TO
        
    def test_policies_ignore_other_intent(self):
        """Test each pending step only handles its own kind."""
        state = _state()
        state.pending.set(PendingKind.BRAKE_TO, 40)
        
        policies.pending_acceleration(state, LoopConfig())
        
        assert state.velocity == 60.0


class TestHeadlights:
    """Test automatic headlights and high beams."""
    
    def test_dark_turns_headlights_on(self):
        """Test low light turns on low beams."""
        state = _state(light_level=150.0)
        
        policies.automatic_headlights(state, LoopConfig())
        
        assert state.actuation.headlight == Headlight.LOW
        
    def test_rain_turns_headlights_on(self):
        """Test rain turns on low beams in daylight."""
        state = _state(rain=True)
        
        policies.automatic_headlights(state, LoopConfig())
        
        assert state.actuation.headlight == Headlight.LOW
        
    def test_daylight_turns_headlights_off(self):
        """Test clear daylight turns off any headlights."""
        state = _state(headlight=Headlight.HIGH)
        
        policies.automatic_headlights(state, LoopConfig())
        
        assert state.actuation.headlight == Headlight.OFF
        
    def test_high_beams_on_open_dark_road(self):
        """Test low beams escalate on a dark, open road."""
        state = _state(velocity=40.0, headlight=Headlight.LOW, light_level=30.0, distance_front=150.0)
        
        policies.automatic_high_beams(state, LoopConfig())
        
        assert state.actuation.headlight == Headlight.HIGH
        
    def test_high_beams_need_low_beams(self):
        """Test high beams do not switch on from OFF."""
        state = _state(velocity=40.0, light_level=30.0)
        
        policies.automatic_high_beams(state, LoopConfig())
        
        assert state.actuation.headlight == Headlight.OFF
        
    def test_high_beams_revert(self):
        """Test high beams drop back as soon as a condition lapses."""
        config = LoopConfig()
        lapses = [
            dict(velocity=20.0, light_level=30.0),
            dict(velocity=40.0, light_level=30.0, rain=True),
            dict(velocity=40.0, light_level=30.0, distance_front=80.0),
            dict(velocity=40.0, light_level=60.0),
        ]
        
        for kwargs in lapses:
            state = _state(headlight=Headlight.HIGH, **kwargs)
            policies.automatic_high_beams(state, config)
            assert state.actuation.headlight == Headlight.LOW


class TestLaneChange:
    """Test automatic lane changes."""
    
    def test_left_lane_change(self):
        """Test a clear left lane change."""
        state = _state(signal=TurnSignal.LEFT, object_right=True)
        
        blocked = policies.automatic_lane_change(state, LoopConfig())
        
        assert blocked is None
        assert state.navigation.current_lane == 1
        assert state.actuation.turn_signal == TurnSignal.NONE
        assert not state.perception.object_right
        
    def test_right_lane_change(self):
        """Test a clear right lane change."""
        state = _state(signal=TurnSignal.RIGHT, object_left=True)
        
        policies.automatic_lane_change(state, LoopConfig())
        
        assert state.navigation.current_lane == 3
        assert not state.perception.object_left
        
    def test_blocked_lane_change_consumes_signal(self):
        """Test an occupied side blocks the change and drops the signal."""
        state = _state(velocity=30.0, signal=TurnSignal.LEFT, object_left=True)
        
        blocked = policies.automatic_lane_change(state, LoopConfig())
        
        assert blocked == TurnSignal.LEFT
        assert state.navigation.current_lane == 2
        assert state.actuation.turn_signal == TurnSignal.NONE
        
    def test_no_lane_past_the_edge(self):
        """Test the rightmost lane cannot move further right."""
        state = _state(lane=3, signal=TurnSignal.RIGHT)
        
        blocked = policies.automatic_lane_change(state, LoopConfig())
        
        assert blocked == TurnSignal.RIGHT
        assert state.navigation.current_lane == 3
        
    def test_signal_waits_without_cruise_control(self):
        """Test the signal stays on when lane changes are not automatic."""
        state = _state(cruise=False, signal=TurnSignal.LEFT)
        
        policies.automatic_lane_change(state, LoopConfig())
        
        assert state.navigation.current_lane == 2
        assert state.actuation.turn_signal == TurnSignal.LEFT
        
    def test_single_lane_road(self):
        """Test no lane change on a single lane road."""
        state = _state(lanes=1, lane=1, signal=TurnSignal.RIGHT)
        
        policies.automatic_lane_change(state, LoopConfig())
        
        assert state.navigation.current_lane == 1
        assert state.actuation.turn_signal == TurnSignal.RIGHT


class TestWipersAndGear:
    """Test wipers and gear consistency."""
    
    def test_wipers_follow_rain(self):
        """Test wipers mirror the rain sensor."""
        state = _state(rain=True)
        policies.automatic_wipers(state, LoopConfig())
        assert state.actuation.wipers
        
        state.perception.rain = False
        policies.automatic_wipers(state, LoopConfig())
        assert not state.actuation.wipers
        
    def test_park_stops_vehicle(self):
        """Test Park zeroes any velocity."""
        for velocity in (-30.0, -1.0, 0.5, 80.0):
            state = _state(velocity=velocity, gear=Gear.PARK)
            policies.gear_consistency(state, LoopConfig())
            assert state.velocity == 0
            assert not state.actuation.cruise_control
        
    def test_reverse_cannot_roll_forward(self):
        """Test Reverse zeroes forward velocity only."""
        state = _state(velocity=10.0, gear=Gear.REVERSE)
        policies.gear_consistency(state, LoopConfig())
        assert state.velocity == 0
        
        state = _state(velocity=-10.0, gear=Gear.REVERSE)
        policies.gear_consistency(state, LoopConfig())
        assert state.velocity == -10.0
        
    def test_drive_cannot_roll_backward(self):
        """Test Drive zeroes reverse velocity."""
        state = _state(velocity=-10.0, cruise=False)
        
        policies.gear_consistency(state, LoopConfig())
        
        assert state.velocity == 0
        assert not state.actuation.cruise_control
        
    def test_neutral_disables_cruise_control(self):
        """Test cruise control is off in Neutral."""
        state = _state(gear=Gear.NEUTRAL)
        
        policies.gear_consistency(state, LoopConfig())
        
        assert state.velocity == 60.0
        assert not state.actuation.cruise_control
        
    def test_drive_restarts_cruise_control(self):
        """Test cruise control re-engages in Drive on a highway."""
        state = _state(velocity=12.0, cruise=False)
        
        policies.gear_consistency(state, LoopConfig())
        
        assert state.actuation.cruise_control
