#!/usr/bin/env python3
"""
sim/world.py
============
Single owned game aggregate for the highway-patrol simulation.

:class:`GameState` holds the police car, the fixed traffic arena, the
criminal car, lane markers and every scalar (score, catches, game speed,
run state).  :meth:`GameState.step` advances one fixed tick; the order of
the sub-steps matters for tie-breaks and must not be rearranged:

1. passive difficulty ramp
2. police physics
3. road-edge terminal check
4. lane markers
5. traffic scroll + lane convergence
6. per-lane vertical de-overlap (single forward sweep)
7. traffic recycling
8. criminal car: zigzag, catch, difficulty step
9. siren blink
10. crash check
11. time-based score
"""

from __future__ import annotations

import logging
import math
import random
from typing import Any, List, Optional, Tuple

from sim.entities import (
    CivilianCar,
    CriminalCar,
    GameSnapshot,
    LaneMarker,
    PoliceCar,
    RunState,
    StepEvents,
    VehicleView,
)
from sim.game_policy import GamePolicy, lane_centers, min_lane_gap
from sim.spatial import collides
from sim import spawner

log = logging.getLogger("world")


class GameState:
    """Entity model plus the per-tick transition.

    Parameters
    ----------
    seed : int or None
        Random seed for reproducibility.
    policy : GamePolicy or None
        Tunable constants; uses defaults when *None*.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        policy: Optional[GamePolicy] = None,
    ) -> None:
        self.policy = policy or GamePolicy()
        self.rng = random.Random(seed)
        self.lane_centers: Tuple[float, ...] = lane_centers(self.policy)

        self.police: PoliceCar = self._new_police()
        self.traffic: List[CivilianCar] = []
        self.criminal: Optional[CriminalCar] = None
        self.markers: List[LaneMarker] = []
        self.stars: List[Tuple[int, int]] = []

        self.score: int = 0
        self.caught: int = 0
        self.game_speed: float = 1.0
        self.score_timer: float = 0.0
        self.run_state: RunState = RunState.RUNNING
        self.tick_count: int = 0

        self._init_game()

    # ── initialisation / reset ────────────────────────────────────────────

    def _new_police(self) -> PoliceCar:
        p = self.policy
        return PoliceCar(
            x=p.width / 2.0,
            y=p.player_start_y,
            width=p.base_vehicle_w,
            height=p.base_vehicle_h,
            max_vx=p.initial_max_vx,
        )

    def _init_game(self) -> None:
        p = self.policy
        self.markers = spawner.init_lane_markers(p, self.lane_centers)

        # Slots start inactive so each spawn only checks the ones already placed.
        self.criminal = None
        self.traffic = [CivilianCar() for _ in range(p.traffic_pool_size)]
        for idx in range(p.traffic_pool_size):
            spawner.spawn_civilian_at(self, idx, p.spawn_tries)

        self.police = self._new_police()
        spawner.spawn_criminal(self)
        self.stars = spawner.init_stars(self.rng, p)

        self.score = 0
        self.score_timer = 0.0
        self.caught = 0
        self.game_speed = 1.0
        self.run_state = RunState.RUNNING
        self.tick_count = 0

    def restart(self, seed: Optional[int] = None) -> None:
        """Reinitialise every entity, the score and the difficulty.

        With *seed* the random stream is reseeded; otherwise it continues.
        """
        if seed is not None:
            self.rng.seed(seed)
        self._init_game()
        log.info("game restarted")

    # ── queries ───────────────────────────────────────────────────────────

    def lane_x(self, lane: int) -> float:
        """Centre of *lane*, clamping out-of-range indices to the nearest lane."""
        lane = min(max(lane, 0), self.policy.lane_count - 1)
        return self.lane_centers[lane]

    @property
    def paused(self) -> bool:
        return self.run_state is RunState.PAUSED

    @property
    def ended(self) -> bool:
        return self.run_state is RunState.ENDED

    def snapshot(self) -> GameSnapshot:
        """Immutable per-frame view; traffic ordered back to front."""
        police = self.police
        crim = self.criminal
        active = [c for c in self.traffic if c.active]
        # stable: equal heights keep slot order
        active.sort(key=lambda c: c.y, reverse=True)
        return GameSnapshot(
            police=VehicleView(police.x, police.y, police.width, police.height, "police"),
            criminal=VehicleView(crim.x, crim.y, crim.width, crim.height, "criminal"),
            traffic=tuple(
                VehicleView(c.x, c.y, c.width, c.height, c.kind.name.lower(), c.color, c.lane)
                for c in active
            ),
            markers=tuple((m.x, m.y) for m in self.markers),
            stars=tuple(self.stars),
            score=self.score,
            caught=self.caught,
            game_speed=self.game_speed,
            max_vx=police.max_vx,
            siren_on=police.siren_on,
            siren_blink=police.siren_blink,
            paused=self.paused,
            ended=self.ended,
            lane_centers=self.lane_centers,
        )

    # ── input edges ───────────────────────────────────────────────────────

    def set_left(self, held: bool) -> None:
        # presses are ignored once the run is over; releases always apply
        if held and self.ended:
            return
        self.police.left_pressed = held

    def set_right(self, held: bool) -> None:
        if held and self.ended:
            return
        self.police.right_pressed = held

    def toggle_siren(self) -> None:
        self.police.siren_on = not self.police.siren_on

    def toggle_pause(self) -> None:
        if self.run_state is RunState.RUNNING:
            self.run_state = RunState.PAUSED
        elif self.run_state is RunState.PAUSED:
            self.run_state = RunState.RUNNING

    # ── tick ──────────────────────────────────────────────────────────────

    def step(self) -> StepEvents:
        """Advance the game by one fixed tick.  No-op while paused or ended."""
        events = StepEvents()
        if self.run_state is not RunState.RUNNING:
            return events

        dt = self.policy.tick_dt_s
        self.tick_count += 1

        self._ramp_difficulty(dt)
        self._move_police(dt)

        if self._police_off_road():
            events.left_road = True
            self._end_run("police car left the road")
            return events

        self._scroll_markers()
        self._move_traffic()
        self._resolve_lane_overlaps()
        events.recycled = self._recycle_traffic()
        self._update_criminal(events)

        police = self.police
        police.siren_blink = (police.siren_blink + 1) % self.policy.siren_cycle

        if self._police_crashed():
            events.crashed = True
            self._end_run("police car crashed into traffic")
            return events

        events.time_points = self._accrue_time_score(dt)

        if self.tick_count % 300 == 1:
            log.debug(
                "tick=%d score=%d caught=%d speed=%.2f max_vx=%.1f police_x=%.1f",
                self.tick_count, self.score, self.caught,
                self.game_speed, police.max_vx, police.x,
            )
        return events

    # ── sub-steps ─────────────────────────────────────────────────────────

    def _ramp_difficulty(self, dt: float) -> None:
        p = self.policy
        police = self.police
        ramped = min(police.max_vx + p.max_vx_ramp_per_frame * dt * 60.0, p.max_vx_ramp_ceiling)
        # catch bonuses may already sit above the ramp ceiling; never lower them
        police.max_vx = max(police.max_vx, ramped)

    def _move_police(self, dt: float) -> None:
        p = self.policy
        police = self.police
        steering = police.steering
        if steering < 0:
            police.vx = max(police.vx - p.player_accel * dt, -police.max_vx)
        elif steering > 0:
            police.vx = min(police.vx + p.player_accel * dt, police.max_vx)
        else:
            police.vx -= police.vx * p.player_damping * dt
            if abs(police.vx) < p.player_stop_threshold:
                police.vx = 0.0
        police.x += police.vx * dt

    def _police_off_road(self) -> bool:
        police = self.police
        half_w = police.width * 0.5
        return (police.x - half_w <= self.policy.road_left
                or police.x + half_w >= self.policy.road_right)

    def _scroll_markers(self) -> None:
        p = self.policy
        for marker in self.markers:
            marker.y -= p.marker_speed * self.game_speed
            if marker.y < p.marker_recycle_below_y:
                marker.y = p.height + p.marker_recycle_margin

    def _move_traffic(self) -> None:
        k = self.policy.lane_convergence
        for car in self.traffic:
            if not car.active:
                continue
            car.y -= car.speed * self.game_speed
            car.x += (self.lane_x(car.lane) - car.x) * k

    def _resolve_lane_overlaps(self) -> None:
        """Push same-lane occupants apart with one forward sweep per lane.

        Three or more vehicles that are all too close may still violate the
        gap afterwards; the next tick continues the work.
        """
        p = self.policy
        crim = self.criminal
        for lane in range(p.lane_count):
            items: List[Any] = [c for c in self.traffic if c.active and c.lane == lane]
            if crim is not None and crim.active:
                if abs(crim.x - self.lane_x(lane)) < p.target_lane_threshold:
                    items.append(crim)
            items.sort(key=lambda v: v.y)

            for prev, cur in zip(items, items[1:]):
                gap = min_lane_gap(prev.height, cur.height, p)
                if cur.y - prev.y < gap:
                    cur.y = prev.y + gap

    def _recycle_traffic(self) -> int:
        p = self.policy
        recycled = 0
        for idx, car in enumerate(self.traffic):
            if car.y < p.recycle_below_y:
                spawner.spawn_civilian_at(self, idx, p.respawn_tries)
                self.score += p.recycle_score
                recycled += 1
        return recycled

    def _update_criminal(self, events: StepEvents) -> None:
        p = self.policy
        crim = self.criminal
        if crim is None or not crim.active:
            return

        crim.y -= crim.speed * self.game_speed
        crim.zigzag += p.target_zigzag_rate * self.game_speed
        crim.x = crim.base_x + math.sin(crim.zigzag) * p.target_zigzag_amplitude
        crim.x = min(max(crim.x, p.road_left + p.target_clamp_inset), p.road_right - p.target_clamp_inset)

        if collides(self.police, crim):
            self.score += p.catch_score
            self.caught += 1
            events.caught = True
            log.info("criminal caught (total %d, score %d)", self.caught, self.score)
            if self.caught % p.catches_per_difficulty_step == 0:
                self._raise_difficulty()
                events.difficulty_raised = True
            spawner.spawn_criminal(self)
        elif crim.y < p.recycle_below_y:
            spawner.spawn_criminal(self)

    def _raise_difficulty(self) -> None:
        p = self.policy
        police = self.police
        police.max_vx = min(police.max_vx + p.catch_max_vx_bonus, p.max_vx_ceiling)
        self.game_speed = min(self.game_speed * p.game_speed_factor, p.game_speed_ceiling)
        log.debug("difficulty raised: max_vx=%.1f game_speed=%.3f", police.max_vx, self.game_speed)

    def _police_crashed(self) -> bool:
        return any(car.active and collides(self.police, car) for car in self.traffic)

    def _accrue_time_score(self, dt: float) -> int:
        p = self.policy
        self.score_timer += dt
        points = 0
        while self.score_timer >= p.score_interval_s:
            self.score_timer -= p.score_interval_s
            points += p.time_score
        self.score += points
        return points

    def _end_run(self, reason: str) -> None:
        self.run_state = RunState.ENDED
        log.info("game over: %s (score %d, caught %d)", reason, self.score, self.caught)


if __name__ == "__main__":
    state = GameState(seed=1)
    for _ in range(600):
        state.step()
    print(state.snapshot())
