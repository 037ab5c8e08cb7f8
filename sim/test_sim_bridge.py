#!/usr/bin/env python3
"""
Tests for the fixed-timestep driver and input-edge dispatch.
"""

from __future__ import annotations

import unittest

from sim.entities import RunState
from sim.sim_bridge import InputEdge, SimBridge


def _quiet_bridge(seed: int = 1) -> SimBridge:
    bridge = SimBridge(random_seed=seed)
    state = bridge.state
    for car in state.traffic:
        car.active = False
        car.y = 10000.0
    state.criminal.y = 5000.0
    return bridge


class TimingTests(unittest.TestCase):
    def test_whole_ticks_and_carry(self) -> None:
        bridge = _quiet_bridge()
        self.assertEqual(bridge.advance(0.049), 3)
        self.assertEqual(bridge.state.tick_count, 3)
        self.assertEqual(len(bridge.last_events), 3)
        self.assertEqual(bridge.advance(0.01), 0)
        self.assertEqual(bridge.advance(0.006), 1)
        self.assertEqual(bridge.state.tick_count, 4)

    def test_catch_up_is_capped_and_backlog_dropped(self) -> None:
        bridge = _quiet_bridge()
        self.assertEqual(bridge.advance(1.0), 5)
        self.assertEqual(bridge.advance(0.0), 0)
        self.assertEqual(bridge.state.tick_count, 5)

    def test_negative_elapsed_is_ignored(self) -> None:
        bridge = _quiet_bridge()
        self.assertEqual(bridge.advance(-3.0), 0)
        self.assertEqual(bridge.state.tick_count, 0)

    def test_paused_bridge_does_not_advance_world(self) -> None:
        bridge = _quiet_bridge()
        bridge.handle(InputEdge.TOGGLE_PAUSE)
        bridge.advance(0.05)
        self.assertEqual(bridge.state.tick_count, 0)
        bridge.handle(InputEdge.TOGGLE_PAUSE)
        bridge.advance(0.02)
        self.assertEqual(bridge.state.tick_count, 1)


class InputEdgeTests(unittest.TestCase):
    def test_steering_edges(self) -> None:
        bridge = _quiet_bridge()
        police = bridge.state.police
        bridge.handle(InputEdge.LEFT_DOWN)
        self.assertTrue(police.left_pressed)
        bridge.handle(InputEdge.RIGHT_DOWN)
        self.assertTrue(police.right_pressed)
        bridge.handle(InputEdge.LEFT_UP)
        bridge.handle(InputEdge.RIGHT_UP)
        self.assertFalse(police.left_pressed or police.right_pressed)

    def test_siren_edge(self) -> None:
        bridge = _quiet_bridge()
        self.assertTrue(bridge.handle(InputEdge.TOGGLE_SIREN))
        self.assertFalse(bridge.snapshot().siren_on)

    def test_restart_edge(self) -> None:
        bridge = _quiet_bridge()
        bridge.state.police.x = bridge.state.policy.road_left
        bridge.advance(0.02)
        self.assertTrue(bridge.is_finished())
        bridge.state.score = 99
        bridge.handle(InputEdge.RESTART)
        self.assertFalse(bridge.is_finished())
        self.assertEqual(bridge.snapshot().score, 0)

    def test_quit_edge(self) -> None:
        bridge = _quiet_bridge()
        self.assertFalse(bridge.quit_requested)
        self.assertFalse(bridge.handle(InputEdge.QUIT))
        self.assertTrue(bridge.quit_requested)

    def test_unknown_edge_rejected(self) -> None:
        bridge = _quiet_bridge()
        with self.assertRaises(ValueError):
            bridge.handle("jump")


class PauseTests(unittest.TestCase):
    def test_set_paused_is_idempotent(self) -> None:
        bridge = _quiet_bridge()
        bridge.set_paused(True)
        bridge.set_paused(True)
        self.assertTrue(bridge.snapshot().paused)
        bridge.set_paused(False)
        self.assertIs(bridge.state.run_state, RunState.RUNNING)

    def test_set_paused_after_game_over(self) -> None:
        bridge = _quiet_bridge()
        bridge.state.police.x = bridge.state.policy.road_left
        bridge.advance(0.02)
        bridge.set_paused(True)
        self.assertIs(bridge.state.run_state, RunState.ENDED)


if __name__ == "__main__":
    unittest.main()
