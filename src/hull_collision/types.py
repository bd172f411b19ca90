# MIT License (see LICENSE)
"""
Core type definitions for the narrow-phase collision core.

Defines the value types passed between the simplex, GJK and EPA:
- SupportPoint: a point of the Minkowski difference with its two sources.
- Edge: directed vertex-index pair used while extending the EPA polytope.
- Face: closest-triangle descriptor produced by Simplex.find_closest_face().

and ConvexBody, a convex hull with a rigid transform that callers can use to
produce the world-space point clouds the algorithm consumes.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Hashable

import numpy as np

from .util import f64


# =============================================================================
# Algorithm values
# =============================================================================

@dataclass(frozen=True, eq=False)
class SupportPoint:
    """
    A point on the boundary of the Minkowski difference A - B.

    Keeps the two hull vertices that produced it so that EPA can map a
    result on the Minkowski difference back onto each hull.

    Equality and hashing only consider the Minkowski coordinate: two support
    points built from different vertex pairs with the same difference are the
    same point for the purpose of polytope bookkeeping.

    Attributes:
        minkowski: from_hull_a - from_hull_b.
        from_hull_a: Furthest vertex of hull A along the search direction.
        from_hull_b: Furthest vertex of hull B against the search direction.
    """
    minkowski: np.ndarray
    from_hull_a: np.ndarray = field(default_factory=lambda: np.zeros(3, dtype=np.float64))
    from_hull_b: np.ndarray = field(default_factory=lambda: np.zeros(3, dtype=np.float64))

    def __post_init__(self) -> None:
        """Store all three points as float64 arrays."""
        object.__setattr__(self, "minkowski", f64(self.minkowski))
        object.__setattr__(self, "from_hull_a", f64(self.from_hull_a))
        object.__setattr__(self, "from_hull_b", f64(self.from_hull_b))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SupportPoint):
            return NotImplemented
        return bool(np.array_equal(self.minkowski, other.minkowski))

    def __hash__(self) -> int:
        return hash(tuple(float(x) for x in self.minkowski))

    def __repr__(self) -> str:
        return f"SupportPoint({self.minkowski.tolist()})"


@dataclass(frozen=True)
class Edge:
    """Directed edge between two polytope vertices, stored as indices."""
    a: int
    b: int

    def reversed(self) -> Edge:
        return Edge(self.b, self.a)


@dataclass(frozen=True, eq=False)
class Face:
    """
    Candidate closest triangle of the EPA polytope.

    Attributes:
        vertices: The three support points, in outward winding order.
        normal: Unit outward normal.
        distance: Distance from the origin to the triangle's plane (>= 0).
    """
    vertices: tuple[SupportPoint, SupportPoint, SupportPoint]
    normal: np.ndarray
    distance: float

    def __getitem__(self, i: int) -> SupportPoint:
        return self.vertices[i]


# =============================================================================
# Convex bodies
# =============================================================================

@dataclass
class ConvexBody:
    """
    A convex hull placed in the world by a rigid transform and a uniform scale.

    The collision core itself only needs world-space point clouds; this type
    is a convenience for callers and for the position-based normal heuristic
    (see Collision.unit_normal).

    Attributes:
        vertices: Hull vertices [N, 3] in local space.
        position: World position of the local origin.
        rotation: 3x3 rotation matrix (local to world).
        scale: Uniform scaling applied in local space.
        id: Optional caller-supplied stable identifier.
    """
    vertices: np.ndarray
    position: np.ndarray | tuple[float, float, float] = (0.0, 0.0, 0.0)
    rotation: np.ndarray | None = None
    scale: float = 1.0
    id: Hashable | None = None

    def __post_init__(self) -> None:
        """Validate the hull and convert everything to float64 arrays."""
        self.vertices = f64(self.vertices)
        if self.vertices.ndim != 2 or self.vertices.shape[1] != 3 or len(self.vertices) == 0:
            raise ValueError(f"Hull vertices must have shape (N, 3) with N >= 1, got {self.vertices.shape}")
        self.position = f64(self.position)
        if self.rotation is None:
            self.rotation = np.eye(3, dtype=np.float64)
        self.rotation = f64(self.rotation)
        if self.rotation.shape != (3, 3):
            raise ValueError(f"Rotation must be a 3x3 matrix, got {self.rotation.shape}")
        if self.scale <= 0:
            raise ValueError(f"Scale must be positive, got {self.scale}")

    def local_to_world(self, local_point: np.ndarray | tuple[float, float, float]) -> np.ndarray:
        """Transform a point from local body coordinates to world coordinates."""
        return self.rotation @ (self.scale * f64(local_point)) + self.position

    def convex_hull(self) -> np.ndarray:
        """
        World-space hull vertices [N, 3], in the same order as `vertices`.

        p_world = R * (s * p_local) + position
        """
        return (self.scale * self.vertices) @ self.rotation.T + self.position
