#!/usr/bin/env python3
"""
sim/spawner.py
==============
Procedural generation of civilian traffic, the criminal car, lane
markers and the backdrop starfield.

Every draw goes through ``state.rng`` so a seeded :class:`~sim.world.GameState`
replays identically.  Placement is validated against the other active
entities with :func:`sim.spatial.rect_overlap`; when no clear spot is
found the vehicle is placed anyway (rare, visually harmless overlap)
rather than leaving the slot empty.
"""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

from sim.entities import CivilianCar, CriminalCar, LaneMarker, VehicleKind
from sim.game_policy import GamePolicy
from sim.spatial import rect_overlap

if TYPE_CHECKING:
    from sim.world import GameState

log = logging.getLogger("spawner")

# kind → ((w_min, w_max), (h_min, h_max), (speed_min, speed_max))
_KIND_SPECS: Dict[VehicleKind, Tuple[Tuple[int, int], Tuple[int, int], Tuple[float, float]]] = {
    VehicleKind.CAR:  ((30, 42), (45, 60), (1.6, 2.8)),
    VehicleKind.BUS:  ((48, 62), (55, 70), (0.9, 1.5)),
    VehicleKind.BIKE: ((18, 24), (30, 42), (2.6, 3.6)),
}
_KINDS: Tuple[VehicleKind, ...] = (VehicleKind.CAR, VehicleKind.BUS, VehicleKind.BIKE)


def random_civilian_template(rng: random.Random, policy: GamePolicy) -> CivilianCar:
    """Draw kind, colour, integer size and speed for a new civilian vehicle.

    Position and lane are left for :func:`spawn_civilian_at` to fill in.
    """
    kind = rng.choice(_KINDS)
    color = rng.randint(0, policy.traffic_color_count - 1)
    (w_lo, w_hi), (h_lo, h_hi), (s_lo, s_hi) = _KIND_SPECS[kind]
    return CivilianCar(
        width=float(rng.randint(w_lo, w_hi)),
        height=float(rng.randint(h_lo, h_hi)),
        speed=s_lo + rng.uniform(0.0, s_hi - s_lo),
        color=color,
        kind=kind,
        active=True,
    )


def can_place_at(
    state: "GameState",
    x: float,
    y: float,
    w: float,
    h: float,
    ignore_index: int = -1,
) -> bool:
    """True when a ``w`` x ``h`` box at ``(x, y)`` is clear of other traffic and the criminal."""
    margin = state.policy.spawn_margin
    for i, car in enumerate(state.traffic):
        if i == ignore_index or not car.active:
            continue
        if rect_overlap(x, y, w, h, car.x, car.y, car.width, car.height, margin):
            return False
    crim = state.criminal
    if crim is not None and crim.active:
        if rect_overlap(x, y, w, h, crim.x, crim.y, crim.width, crim.height, margin):
            return False
    return True


def _spawn_y(policy: GamePolicy, rng: random.Random, idx: int, attempt: int) -> float:
    """Even slots spawn in the near band, odd slots in the far band."""
    if idx % 2 == 0:
        return (policy.height + policy.near_spawn_offset
                + rng.uniform(0.0, policy.near_spawn_spread)
                + attempt * policy.near_spawn_step)
    return (policy.height + policy.far_spawn_offset
            + rng.uniform(0.0, policy.far_spawn_spread)
            + attempt * policy.far_spawn_step)


def spawn_civilian_at(state: "GameState", idx: int, tries: Optional[int] = None) -> bool:
    """(Re)fill traffic slot *idx* in place.

    Tries up to *tries* random lane / height candidates, then falls back to
    pushing the last candidate further up in fixed steps.

    Returns
    -------
    bool
        True if a clear spot was found, False if the vehicle was placed
        without a clearance guarantee.  An out-of-range *idx* is ignored
        and returns False.
    """
    if idx < 0 or idx >= len(state.traffic):
        return False

    policy = state.policy
    rng = state.rng
    if tries is None:
        tries = policy.spawn_tries

    car = random_civilian_template(rng, policy)
    placed = False
    attempt = 0
    while attempt < tries and not placed:
        lane = rng.randint(0, policy.lane_count - 1)
        car.lane = lane
        car.x = state.lane_x(lane) + rng.uniform(-policy.spawn_lane_jitter, policy.spawn_lane_jitter)
        car.y = _spawn_y(policy, rng, idx, attempt)
        placed = can_place_at(state, car.x, car.y, car.width, car.height, idx)
        attempt += 1

    if not placed:
        for _ in range(policy.fallback_pushes):
            car.y += policy.fallback_push_step
            if can_place_at(state, car.x, car.y, car.width, car.height, idx):
                placed = True
                break

    if not placed:
        log.debug("slot %d placed without clearance at (%.1f, %.1f)", idx, car.x, car.y)

    state.traffic[idx] = car
    return placed


def spawn_criminal(state: "GameState") -> CriminalCar:
    """Place a fresh criminal car far above the visible area."""
    policy = state.policy
    rng = state.rng
    x_left = policy.road_left + policy.target_road_inset
    x_range = policy.road_width - 2.0 * policy.target_road_inset
    base_x = x_left + rng.uniform(0.0, x_range)
    crim = CriminalCar(
        base_x=base_x,
        x=base_x,
        y=policy.height + policy.target_spawn_offset + rng.uniform(0.0, policy.target_spawn_spread),
        width=policy.base_vehicle_w,
        height=policy.base_vehicle_h,
        speed=policy.target_min_speed + rng.uniform(0.0, policy.target_speed_spread),
        zigzag=rng.uniform(0.0, policy.target_max_phase),
        active=True,
    )
    state.criminal = crim
    return crim


def init_lane_markers(policy: GamePolicy, centers: Tuple[float, ...]) -> List[LaneMarker]:
    markers: List[LaneMarker] = []
    for y in range(policy.marker_start_y, policy.height + policy.marker_extra_y, policy.marker_spacing):
        for lane in policy.marker_lanes:
            markers.append(LaneMarker(x=centers[lane], y=float(y)))
    return markers


def init_stars(rng: random.Random, policy: GamePolicy) -> List[Tuple[int, int]]:
    """Scatter backdrop stars, nudging any that land on the road outward."""
    stars: List[Tuple[int, int]] = []
    lo = int(policy.road_left) - policy.star_road_clearance
    hi = int(policy.road_right) + policy.star_road_clearance
    for _ in range(policy.star_count):
        sx = rng.randrange(policy.width)
        sy = rng.randrange(policy.height)
        if lo <= sx <= hi:
            sx = sx - policy.star_shift if sx < policy.width // 2 else sx + policy.star_shift
            if sx < 0:
                sx += policy.width
            if sx >= policy.width:
                sx -= policy.width
        stars.append((sx, sy))
    return stars
