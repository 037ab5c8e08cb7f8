"""
sim: simulation core
====================

Modules
-------
raster
    Line / circle scan-conversion (DDA, Bresenham, midpoint, filled disk).
spatial
    Bottom-centre AABB overlap and collision predicates.
entities
    Entity records and frozen render snapshots.
game_policy
    :class:`GamePolicy` tunable constants and lane helpers.
spawner
    Traffic, criminal, marker and starfield generation.
world
    :class:`GameState` aggregate and the per-tick step.
sim_bridge
    :class:`SimBridge` fixed-timestep driver and input edges.
"""
