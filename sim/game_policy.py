#!/usr/bin/env python3
"""
sim/game_policy.py
==================
Tunable geometry, physics, spawning and scoring parameters for the
highway-patrol simulation.  Every constant lives in the frozen
:class:`GamePolicy` dataclass so that experiments and tests can swap
policies (``dataclasses.replace``) without touching code.

Also provides two stateless helpers:

* :func:`lane_centers`: x coordinate of every lane centre.
* :func:`min_lane_gap`: required vertical gap between same-lane neighbours.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class GamePolicy:
    """Immutable bag of every tunable simulation parameter.

    Groups: screen / road geometry, player physics, difficulty ramp,
    traffic pool, spawning, pursuit target, lane spacing, scoring.
    """

    # ── Screen / road geometry ────────────────────────────────────────────
    width: int = 800
    """Logical screen width (world units == pixels)."""

    height: int = 600
    """Logical screen height.  ``y = 0`` is the bottom edge, ``y`` grows upward."""

    road_left: float = 200.0
    road_right: float = 600.0

    lane_count: int = 3

    base_vehicle_w: float = 44.0
    base_vehicle_h: float = 66.0
    """Footprint shared by the police car and the criminal car."""

    # ── Fixed timestep ────────────────────────────────────────────────────
    tick_dt_s: float = 0.016
    """Nominal simulation step (16 ms)."""

    # ── Player physics ────────────────────────────────────────────────────
    player_start_y: float = 80.0

    player_accel: float = 1200.0
    """Horizontal acceleration while a direction is held (units/s²)."""

    player_damping: float = 6.0
    """Exponential damping rate applied when no single direction is held."""

    player_stop_threshold: float = 0.5
    """Speeds below this are snapped to exactly zero (anti-drift filter)."""

    # ── Difficulty ramp ───────────────────────────────────────────────────
    initial_max_vx: float = 250.0

    max_vx_ramp_per_frame: float = 2.5
    """Cap growth per 60 Hz frame; scaled by ``dt * 60`` each tick."""

    max_vx_ramp_ceiling: float = 650.0
    """The passive per-tick ramp never pushes the cap past this."""

    max_vx_ceiling: float = 850.0
    """Absolute ceiling for the cap, reachable only through catches."""

    catch_max_vx_bonus: float = 45.0

    game_speed_factor: float = 1.15
    game_speed_ceiling: float = 4.5

    catches_per_difficulty_step: int = 2

    # ── Traffic pool ──────────────────────────────────────────────────────
    traffic_pool_size: int = 7
    traffic_color_count: int = 5
    lane_convergence: float = 0.08
    """Fraction of the lane-centre offset removed per tick."""

    recycle_below_y: float = -350.0

    # ── Spawning ──────────────────────────────────────────────────────────
    spawn_tries: int = 50
    respawn_tries: int = 40
    spawn_margin: float = 10.0
    spawn_lane_jitter: float = 12.0

    near_spawn_offset: float = 30.0
    near_spawn_spread: float = 180.0
    near_spawn_step: float = 35.0
    """Even slots: ``height + offset + U(0, spread) + attempt * step``."""

    far_spawn_offset: float = 180.0
    far_spawn_spread: float = 400.0
    far_spawn_step: float = 55.0
    """Odd slots: same formula with the far band."""

    fallback_pushes: int = 80
    fallback_push_step: float = 65.0

    # ── Pursuit target ────────────────────────────────────────────────────
    target_road_inset: float = 60.0
    target_spawn_offset: float = 250.0
    target_spawn_spread: float = 250.0
    target_min_speed: float = 2.4
    target_speed_spread: float = 0.4
    target_max_phase: float = 3.14
    target_zigzag_rate: float = 0.10
    target_zigzag_amplitude: float = 20.0
    target_clamp_inset: float = 35.0
    target_lane_threshold: float = 70.0
    """Target counts as a lane occupant within this x distance of the centre."""

    # ── Lane spacing ──────────────────────────────────────────────────────
    lane_gap_height_factor: float = 0.85
    lane_gap_padding: float = 20.0

    # ── Lane markers / backdrop ───────────────────────────────────────────
    marker_spacing: int = 65
    marker_start_y: int = -100
    marker_extra_y: int = 200
    marker_speed: float = 3.5
    marker_recycle_below_y: float = -100.0
    marker_recycle_margin: float = 100.0
    marker_lanes: Tuple[int, ...] = (0, 2)

    star_count: int = 100
    star_road_clearance: int = 15
    star_shift: int = 180

    # ── Scoring ───────────────────────────────────────────────────────────
    score_interval_s: float = 0.8
    time_score: int = 1
    catch_score: int = 50
    recycle_score: int = 10

    siren_cycle: int = 30
    """Blink phase wraps at this many ticks; first half is red."""

    def __post_init__(self) -> None:
        if self.lane_count < 1:
            raise ValueError(f"lane_count must be >= 1, got {self.lane_count}")
        bad_lanes = [lane for lane in self.marker_lanes if not 0 <= lane < self.lane_count]
        if bad_lanes:
            raise ValueError(
                f"marker_lanes {bad_lanes} outside 0..{self.lane_count - 1}"
            )
        if self.traffic_pool_size < 0:
            raise ValueError(
                f"traffic_pool_size must be >= 0, got {self.traffic_pool_size}"
            )
        if self.road_right <= self.road_left:
            raise ValueError("road_right must be greater than road_left")
        if self.tick_dt_s <= 0.0 or self.score_interval_s <= 0.0:
            raise ValueError("tick_dt_s and score_interval_s must be positive")

    @property
    def road_width(self) -> float:
        return self.road_right - self.road_left


def lane_centers(policy: GamePolicy) -> Tuple[float, ...]:
    """Return the x coordinate of every lane centre, left to right."""
    segment = policy.road_width / float(policy.lane_count)
    return tuple(
        policy.road_left + segment * 0.5 + i * segment
        for i in range(policy.lane_count)
    )


def min_lane_gap(h_a: float, h_b: float, policy: GamePolicy) -> float:
    """Minimum vertical distance between two consecutive same-lane occupants."""
    return max(h_a, h_b) * policy.lane_gap_height_factor + policy.lane_gap_padding
