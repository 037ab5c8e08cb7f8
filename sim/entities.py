#!/usr/bin/env python3
"""
sim/entities.py
===============
Mutable entity records owned by :class:`sim.world.GameState`, plus the
frozen snapshot types handed to the renderer once per frame.

Coordinates: ``x`` is the horizontal centre, ``y`` the bottom edge, with
``y`` growing upward (screen bottom is ``y = 0``).  The world scrolls
downward, so traffic ``y`` decreases every tick.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple


class VehicleKind(Enum):
    """Civilian vehicle class; each has its own size and speed ranges."""
    CAR = 0
    BUS = 1
    BIKE = 2


class RunState(Enum):
    RUNNING = "running"
    PAUSED = "paused"
    ENDED = "ended"


@dataclass
class PoliceCar:
    """The player vehicle.

    Attributes
    ----------
    vx : float
        Horizontal velocity (units/s).  There is no vertical motion.
    max_vx : float
        Velocity cap.  Only ever increases during a run.
    left_pressed, right_pressed : bool
        Held-key flags.  Both held at once cancel out.
    siren_on : bool
        Cosmetic siren toggle.
    siren_blink : int
        Blink phase, cyclic modulo ``GamePolicy.siren_cycle``.
    """

    x: float
    y: float
    width: float
    height: float
    max_vx: float
    vx: float = 0.0
    left_pressed: bool = False
    right_pressed: bool = False
    siren_on: bool = True
    siren_blink: int = 0

    @property
    def steering(self) -> int:
        """-1 for left, +1 for right, 0 when neither or both are held."""
        if self.left_pressed and not self.right_pressed:
            return -1
        if self.right_pressed and not self.left_pressed:
            return 1
        return 0


@dataclass
class CivilianCar:
    """One slot of the fixed traffic arena."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    speed: float = 0.0
    color: int = 0
    kind: VehicleKind = VehicleKind.CAR
    lane: int = 0
    active: bool = False


@dataclass
class CriminalCar:
    """The pursuit target: zigzags around ``base_x`` while scrolling down."""

    base_x: float
    x: float
    y: float
    width: float
    height: float
    speed: float
    zigzag: float = 0.0
    active: bool = True


@dataclass
class LaneMarker:
    x: float
    y: float


@dataclass
class StepEvents:
    """What happened during one :meth:`GameState.step` call."""
    caught: bool = False
    difficulty_raised: bool = False
    recycled: int = 0
    crashed: bool = False
    left_road: bool = False
    time_points: int = 0

    @property
    def ended(self) -> bool:
        return self.crashed or self.left_road


# ── Render snapshots ─────────────────────────────────────────────────────────

@dataclass(frozen=True)
class VehicleView:
    """Read-only view of any vehicle for one rendered frame."""
    x: float
    y: float
    width: float
    height: float
    kind: str
    color: int = 0
    lane: int = -1


@dataclass(frozen=True)
class GameSnapshot:
    """Everything the presentation layer may read for one frame."""
    police: VehicleView
    criminal: VehicleView
    traffic: Tuple[VehicleView, ...]
    markers: Tuple[Tuple[float, float], ...]
    stars: Tuple[Tuple[int, int], ...]
    score: int
    caught: int
    game_speed: float
    max_vx: float
    siren_on: bool
    siren_blink: int
    paused: bool
    ended: bool
    lane_centers: Tuple[float, ...] = field(default_factory=tuple)
