"""
sim/sim_bridge.py
=================
Fixed-timestep driver tying :class:`sim.world.GameState` to the render
loop.  Everything runs on the caller's thread: the UI feeds it input
edges and elapsed wall-clock time, the bridge runs as many 16 ms ticks as
that time covers, and the UI reads the resulting snapshot.

Public API consumed by :mod:`ui.pygame_view`
--------------------------------------------
* ``handle(edge)``            → ``bool`` (False once QUIT was received)
* ``advance(elapsed_s)``      → ``int`` ticks run
* ``snapshot()``              → :class:`~sim.entities.GameSnapshot`
* ``is_finished()``           → ``bool``
* ``reset()``                 → ``None``
* ``set_paused(bool)``        → ``None``
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional

from sim.entities import GameSnapshot, RunState, StepEvents
from sim.game_policy import GamePolicy
from sim.world import GameState

log = logging.getLogger("sim_bridge")


class InputEdge(Enum):
    """Discrete input events delivered by the presentation layer."""
    LEFT_DOWN = "left_down"
    LEFT_UP = "left_up"
    RIGHT_DOWN = "right_down"
    RIGHT_UP = "right_up"
    TOGGLE_SIREN = "toggle_siren"
    TOGGLE_PAUSE = "toggle_pause"
    RESTART = "restart"
    QUIT = "quit"


class SimBridge:
    """Accumulator-based fixed-step driver.

    Parameters
    ----------
    random_seed : int or None
        Seed for reproducibility.
    policy : GamePolicy or None
        Tunable constants.
    max_catch_up_ticks : int
        Upper bound on ticks run by one :meth:`advance` call; any backlog
        beyond that is dropped so a stalled frame cannot spiral.
    """

    def __init__(
        self,
        random_seed: Optional[int] = None,
        policy: Optional[GamePolicy] = None,
        max_catch_up_ticks: int = 5,
    ) -> None:
        self._state = GameState(seed=random_seed, policy=policy)
        self._accumulator = 0.0
        self._max_catch_up = max(1, int(max_catch_up_ticks))
        self._quit = False
        self.last_events: List[StepEvents] = []

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def tick_dt_s(self) -> float:
        return self._state.policy.tick_dt_s

    @property
    def quit_requested(self) -> bool:
        return self._quit

    # ── Input ─────────────────────────────────────────────────────────────────

    def handle(self, edge: InputEdge) -> bool:
        """Apply one input edge.  Returns False once the driver should stop."""
        state = self._state
        if edge is InputEdge.LEFT_DOWN:
            state.set_left(True)
        elif edge is InputEdge.LEFT_UP:
            state.set_left(False)
        elif edge is InputEdge.RIGHT_DOWN:
            state.set_right(True)
        elif edge is InputEdge.RIGHT_UP:
            state.set_right(False)
        elif edge is InputEdge.TOGGLE_SIREN:
            state.toggle_siren()
        elif edge is InputEdge.TOGGLE_PAUSE:
            state.toggle_pause()
            log.info("paused" if state.paused else "resumed")
        elif edge is InputEdge.RESTART:
            self.reset()
        elif edge is InputEdge.QUIT:
            self._quit = True
            log.info("quit requested")
        else:
            raise ValueError(f"unknown input edge: {edge!r}")
        return not self._quit

    # ── Timing ────────────────────────────────────────────────────────────────

    def advance(self, elapsed_s: float) -> int:
        """Consume *elapsed_s* of wall-clock time in whole fixed ticks.

        Leftover time below one tick is carried to the next call.
        """
        dt = self.tick_dt_s
        self._accumulator += max(0.0, float(elapsed_s))
        ticks = 0
        self.last_events = []
        while self._accumulator >= dt and ticks < self._max_catch_up:
            self._accumulator -= dt
            self.last_events.append(self._state.step())
            ticks += 1
        if self._accumulator >= dt:
            log.debug("dropping %.3f s of backlog", self._accumulator)
            self._accumulator = 0.0
        return ticks

    # ── Snapshot / lifecycle ──────────────────────────────────────────────────

    def snapshot(self) -> GameSnapshot:
        return self._state.snapshot()

    def is_finished(self) -> bool:
        """True once the run reached a terminal state."""
        return self._state.ended

    def reset(self) -> None:
        """Start a fresh run."""
        self._state.restart()
        self._accumulator = 0.0
        log.info("SimBridge reset")

    def set_paused(self, paused: bool) -> None:
        """Pause / unpause the simulation tick.  Has no effect once ended."""
        state = self._state
        if state.run_state is RunState.ENDED:
            return
        if paused != state.paused:
            state.toggle_pause()
