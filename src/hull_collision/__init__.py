# MIT License (see LICENSE)
"""
hull_collision - Narrow-phase collision detection for convex polyhedra.

Tests pairs of convex hulls, given as world-space point clouds, for
intersection with the Gilbert-Johnson-Keerthi (GJK) algorithm and extracts
the penetration vector and contact points with the Expanding Polytope
Algorithm (EPA).

Main entry points:
    - GjkAlgorithm: Configured intersection query.
    - Collision: Result record filled by a query.
    - ConvexBody: Convex hull with a rigid transform.
    - GjkConfig: Iteration bounds and tolerances.

Submodules:
    - collision: Simplex, GJK, EPA and result types.
    - io: JSON configuration and body loading.

Example:
    from hull_collision import GjkAlgorithm, Collision, ConvexBody

    a = ConvexBody(cube, position=(0, 0, 0))
    b = ConvexBody(cube, position=(0.5, 0, 0))
    collision = Collision(a, b)
    if GjkAlgorithm().intersect(a.convex_hull(), b.convex_hull(), collision):
        print(collision.penetration_depth)
"""
from .collision import Collision, CollisionCompareLess, EpaStatus, GjkAlgorithm, detect_collision, sort_collisions
from .config import GjkConfig
from .errors import (
    DegenerateFaceError,
    HullCollisionError,
    SimplexError,
    SimplexSizeError,
    SimplexTooLargeError,
    SimplexTooSmallError,
    VertexNotFoundError,
)
from .types import ConvexBody, Edge, Face, SupportPoint

__all__ = [
    # Query
    "GjkAlgorithm",
    "GjkConfig",
    "detect_collision",
    # Results
    "Collision",
    "CollisionCompareLess",
    "EpaStatus",
    "sort_collisions",
    # Values
    "ConvexBody",
    "SupportPoint",
    "Edge",
    "Face",
    # Errors
    "HullCollisionError",
    "SimplexError",
    "SimplexSizeError",
    "SimplexTooSmallError",
    "SimplexTooLargeError",
    "VertexNotFoundError",
    "DegenerateFaceError",
]
