#!/usr/bin/env python3
"""
Tests for traffic, criminal, marker and starfield generation.
"""

from __future__ import annotations

import random
import unittest

from sim.entities import CivilianCar, VehicleKind
from sim.game_policy import GamePolicy
from sim.spawner import (
    can_place_at,
    init_lane_markers,
    init_stars,
    random_civilian_template,
    spawn_civilian_at,
    spawn_criminal,
)
from sim.world import GameState

_SIZE_RANGES = {
    VehicleKind.CAR: ((30, 42), (45, 60), (1.6, 2.8)),
    VehicleKind.BUS: ((48, 62), (55, 70), (0.9, 1.5)),
    VehicleKind.BIKE: ((18, 24), (30, 42), (2.6, 3.6)),
}


class TemplateTests(unittest.TestCase):
    def test_sizes_and_speeds_within_kind_ranges(self) -> None:
        rng = random.Random(3)
        policy = GamePolicy()
        seen = set()
        for _ in range(600):
            car = random_civilian_template(rng, policy)
            seen.add(car.kind)
            (w_lo, w_hi), (h_lo, h_hi), (s_lo, s_hi) = _SIZE_RANGES[car.kind]
            self.assertTrue(w_lo <= car.width <= w_hi)
            self.assertTrue(h_lo <= car.height <= h_hi)
            self.assertEqual(car.width, int(car.width))
            self.assertEqual(car.height, int(car.height))
            self.assertTrue(s_lo <= car.speed <= s_hi)
            self.assertTrue(0 <= car.color < policy.traffic_color_count)
            self.assertTrue(car.active)
        self.assertEqual(seen, set(VehicleKind))


class CivilianSpawnTests(unittest.TestCase):
    def test_initial_pool_is_fully_active(self) -> None:
        state = GameState(seed=11)
        self.assertEqual(len(state.traffic), state.policy.traffic_pool_size)
        for car in state.traffic:
            self.assertTrue(car.active)
            self.assertTrue(0 <= car.lane < state.policy.lane_count)
            self.assertGreaterEqual(car.y, state.policy.height + state.policy.near_spawn_offset)

    def test_successful_spawn_is_clear_of_others(self) -> None:
        for seed in range(8):
            state = GameState(seed=seed)
            for idx in range(len(state.traffic)):
                placed = spawn_civilian_at(state, idx)
                car = state.traffic[idx]
                self.assertTrue(car.active)
                jitter = state.policy.spawn_lane_jitter
                self.assertLessEqual(abs(car.x - state.lane_x(car.lane)), jitter)
                if placed:
                    self.assertTrue(can_place_at(state, car.x, car.y, car.width, car.height, idx))

    def test_out_of_range_slot_is_ignored(self) -> None:
        state = GameState(seed=2)
        before = list(state.traffic)
        self.assertFalse(spawn_civilian_at(state, -1))
        self.assertFalse(spawn_civilian_at(state, len(state.traffic)))
        self.assertEqual(state.traffic, before)

    def test_blocked_arena_still_fills_slot(self) -> None:
        state = GameState(seed=4)
        crim = state.criminal
        crim.x, crim.y, crim.width, crim.height = 400.0, -1e7, 1e6, 1e8
        self.assertFalse(spawn_civilian_at(state, 0, tries=5))
        self.assertTrue(state.traffic[0].active)

    def test_can_place_ignores_inactive_slots(self) -> None:
        state = GameState(seed=6)
        state.traffic = [CivilianCar(x=400.0, y=700.0, width=40.0, height=50.0, active=False)]
        state.criminal.active = False
        self.assertTrue(can_place_at(state, 400.0, 700.0, 40.0, 50.0))
        state.traffic[0].active = True
        self.assertFalse(can_place_at(state, 400.0, 700.0, 40.0, 50.0))
        self.assertTrue(can_place_at(state, 400.0, 700.0, 40.0, 50.0, ignore_index=0))


class CriminalSpawnTests(unittest.TestCase):
    def test_spawn_ranges(self) -> None:
        state = GameState(seed=9)
        p = state.policy
        for _ in range(200):
            crim = spawn_criminal(state)
            self.assertIs(state.criminal, crim)
            self.assertTrue(p.road_left + 60.0 <= crim.base_x <= p.road_right - 60.0)
            self.assertEqual(crim.x, crim.base_x)
            self.assertTrue(p.height + 250.0 <= crim.y <= p.height + 500.0)
            self.assertTrue(2.4 <= crim.speed <= 2.8)
            self.assertTrue(0.0 <= crim.zigzag <= 3.14)
            self.assertEqual((crim.width, crim.height), (44.0, 66.0))
            self.assertTrue(crim.active)


class BackdropTests(unittest.TestCase):
    def test_lane_markers_cover_outer_lanes(self) -> None:
        policy = GamePolicy()
        markers = init_lane_markers(policy, (266.0, 400.0, 533.0))
        self.assertEqual(len(markers), 28)
        self.assertEqual({m.x for m in markers}, {266.0, 533.0})
        self.assertEqual(min(m.y for m in markers), -100.0)
        self.assertLess(max(m.y for m in markers), 800.0)

    def test_stars_inside_window(self) -> None:
        policy = GamePolicy()
        stars = init_stars(random.Random(5), policy)
        self.assertEqual(len(stars), policy.star_count)
        for sx, sy in stars:
            self.assertTrue(0 <= sx < policy.width)
            self.assertTrue(0 <= sy < policy.height)

    def test_seeded_generation_repeats(self) -> None:
        policy = GamePolicy()
        self.assertEqual(init_stars(random.Random(7), policy), init_stars(random.Random(7), policy))


if __name__ == "__main__":
    unittest.main()
