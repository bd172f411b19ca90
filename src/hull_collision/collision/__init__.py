# MIT License (see LICENSE)
"""
Narrow-phase collision detection subsystem.

This subpackage provides:
    - Simplex: GJK simplex / EPA polytope bookkeeping.
    - GJK: Support mapping and Voronoi-region simplex reduction.
    - EPA: Penetration vector and contact points.
    - Collision: Result record and depth ordering.
    - Convex: Driver for ConvexBody pairs.

Typical usage:
    from hull_collision.collision import GjkAlgorithm, Collision

    collision = Collision(body_a, body_b)
    if GjkAlgorithm().intersect(body_a.convex_hull(), body_b.convex_hull(), collision):
        depth = collision.penetration_depth
"""
from .algorithm import GjkAlgorithm, intersect
from .contact import Collision, CollisionCompareLess, EpaStatus, sort_collisions
from .convex import detect_collision, detect_collisions
from .epa import epa_penetration
from .gjk import furthest_point, gjk_intersect, support
from .simplex import Simplex

__all__ = [
    # Query
    "GjkAlgorithm",
    "intersect",
    # Result
    "Collision",
    "CollisionCompareLess",
    "EpaStatus",
    "sort_collisions",
    # Bodies
    "detect_collision",
    "detect_collisions",
    # Building blocks
    "Simplex",
    "support",
    "furthest_point",
    "gjk_intersect",
    "epa_penetration",
]
